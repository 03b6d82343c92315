"""Match a raw FMP /quote response against the tickers the user asked for.

Two policies are supported:

* ``strict``: every requested ticker must be present; quotes come back in the
  requested order and the first missing ticker aborts the whole match.
* ``set``: requested tickers are a set filter over the response; quotes keep
  the response order and missing tickers are silently dropped.
"""

import json
import logging
from collections.abc import Iterable

from pydantic import ValidationError

from tickerquote.core.config import MatchMode
from tickerquote.core.errors import QuoteParseError, TickerNotFoundError
from tickerquote.models.quote import Quote, QuoteList

logger = logging.getLogger(__name__)

FMP_ERROR_KEY = "Error Message"


def split_tickers(raw: str) -> list[str]:
    """Split the CLI ticker string on commas, as-is (no trimming, no upper-casing)."""
    return raw.split(",")


def _provider_error(body: str) -> str | None:
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if isinstance(payload, dict) and FMP_ERROR_KEY in payload:
        return str(payload[FMP_ERROR_KEY])
    return None


def parse_quotes(body: str) -> list[Quote]:
    """Validate the whole body as a list of quotes. Any bad element fails the lot."""
    try:
        return QuoteList.validate_json(body)
    except ValidationError as exc:
        message = _provider_error(body)
        if message:
            raise QuoteParseError(f"FMP returned an error: {message}") from exc
        first = exc.errors()[0]
        where = ".".join(str(p) for p in first["loc"]) or "response"
        raise QuoteParseError(
            f"Unexpected quote response ({where}: {first['msg']})"
        ) from exc


def match_strict(quotes: list[Quote], tickers: Iterable[str]) -> list[Quote]:
    # duplicate symbols in the response: last one wins
    by_symbol = {q.symbol: q for q in quotes}

    found: list[Quote] = []
    for ticker in tickers:
        quote = by_symbol.get(ticker)
        if quote is None:
            raise TickerNotFoundError(ticker)
        found.append(quote)
    return found


def match_set(quotes: list[Quote], tickers: Iterable[str]) -> list[Quote]:
    wanted = set(tickers)
    matched = [q for q in quotes if q.symbol in wanted]
    missing = wanted - {q.symbol for q in matched}
    if missing:
        logger.debug("Dropping tickers absent from response: %s", ", ".join(sorted(missing)))
    return matched


def match_quotes(
    body: str,
    tickers: Iterable[str],
    mode: MatchMode = MatchMode.STRICT,
) -> list[Quote]:
    """Parse ``body`` and select the quotes for ``tickers`` under ``mode``."""
    quotes = parse_quotes(body)
    logger.debug("Parsed %d quote(s) from response", len(quotes))

    match mode:
        case MatchMode.STRICT:
            return match_strict(quotes, tickers)
        case MatchMode.SET:
            return match_set(quotes, tickers)
    raise ValueError(f"Unknown match mode: {mode!r}")
