import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from tickerquote import __version__
from tickerquote.core.config import MatchMode, get_settings
from tickerquote.core.errors import QuoteError
from tickerquote.services.fmp import fetch_quotes_body
from tickerquote.services.formatter import format_quotes
from tickerquote.services.matcher import match_quotes, split_tickers

logger = logging.getLogger("tickerquote")

QUIET_LOGGERS = ("httpx", "httpcore")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tickerquote",
        description="Print live stock prices from Financial Modeling Prep.",
    )
    parser.add_argument(
        "-t",
        "--tickers",
        required=True,
        help="A comma-separated list of stock ticker symbols",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in MatchMode],
        default=None,
        help="strict: every ticker must be found, in order; "
        "set: print whichever tickers were found, with their change "
        "(default: QUOTE_MATCH_MODE or strict)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def run(tickers: str, mode: MatchMode | None = None) -> str:
    """Fetch, match and format quotes for ``tickers``; return the output line."""
    settings = get_settings()
    mode = mode or settings.QUOTE_MATCH_MODE

    body = await fetch_quotes_body(tickers, settings)
    quotes = match_quotes(body, split_tickers(tickers), mode)
    logger.info("Matched %d quote(s) in %s mode", len(quotes), mode.value)
    return format_quotes(quotes, mode)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else None
    if level is None:
        try:
            level = get_settings().LOG_LEVEL
        except QuoteError:
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # httpx logs the full request URL, which carries the API key
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    mode = MatchMode(args.mode) if args.mode else None
    try:
        line = asyncio.run(run(args.tickers, mode))
    except QuoteError as exc:
        logger.error("%s", exc)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
