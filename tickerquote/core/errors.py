"""Error taxonomy. Every error is fatal for the invocation."""


class QuoteError(Exception):
    """Base class for everything the CLI reports as a failure."""


class ConfigurationError(QuoteError):
    """A required setting is missing or invalid."""


class QuoteFetchError(QuoteError):
    """The quote request never produced a response (DNS, TLS, connect, timeout)."""


class QuoteParseError(QuoteError):
    """The response body is not a JSON array of quote objects."""


class TickerNotFoundError(QuoteError):
    def __init__(self, ticker: str) -> None:
        super().__init__(f"Ticker {ticker} not found in response")
        self.ticker = ticker
