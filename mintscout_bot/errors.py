# errors.py


class InvalidAddress(ValueError):
    """User input does not decode to a Solana public key."""


class FetchUnavailable(Exception):
    """A best-effort upstream lookup produced nothing usable.

    Never leaves the fetcher that raised it; the fetcher turns it into None.
    """


class RpcUnavailable(FetchUnavailable):
    pass


class QuoteUnavailable(FetchUnavailable):
    pass


class MarketDataUnavailable(FetchUnavailable):
    pass
