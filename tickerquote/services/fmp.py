import logging

import httpx

from tickerquote.core.config import Settings
from tickerquote.core.errors import QuoteFetchError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10  # seconds


def build_quote_url(base_url: str, tickers: str) -> str:
    """FMP takes the comma-separated ticker list as a path segment."""
    return f"{base_url.rstrip('/')}/quote/{tickers}"


async def fetch_quotes_body(
    tickers: str,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Fetch the raw /quote response for the unsplit ``tickers`` string.

    Exactly one GET is issued. Non-2xx statuses are not raised on: the body is
    returned as-is and left for the matcher to reject. Only transport-level
    failures raise, as ``QuoteFetchError``.
    """
    url = build_quote_url(settings.FMP_BASE_URL, tickers)
    logger.debug("GET %s", url)

    try:
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT, transport=transport) as client:
            resp = await client.get(url, params={"apikey": settings.PMP_KEY})
    except httpx.TransportError as exc:
        raise QuoteFetchError(f"FMP quote request failed: {exc}") from exc

    if not resp.is_success:
        logger.warning("FMP quote request returned HTTP %s", resp.status_code)
    return resp.text
