"""tickerquote: print live FMP quotes for a list of ticker symbols."""

__version__ = "1.0.0"
