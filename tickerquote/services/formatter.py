"""Render matched quotes as the single output line."""

from decimal import Decimal

from tickerquote.core.config import MatchMode
from tickerquote.models.quote import Quote


def format_number(value: float) -> str:
    # shortest round-trip digits, positional (never exponent), no trailing ".0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_quote(quote: Quote, mode: MatchMode = MatchMode.STRICT) -> str:
    text = f"{quote.symbol} ${format_number(quote.price)}"
    if mode == MatchMode.SET and quote.change is not None:
        text += f" ({format_number(quote.change)})"
    return text


def format_quotes(quotes: list[Quote], mode: MatchMode = MatchMode.STRICT) -> str:
    return " ".join(format_quote(q, mode) for q in quotes).rstrip()
