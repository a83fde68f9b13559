"""Custom exceptions for the country-data fetcher."""

USER_FETCH_ERROR_MESSAGE = "Failed to fetch country data. Please try again."


class FetcherError(Exception):
    """Base exception for all fetcher errors."""

    pass


class FetchError(FetcherError):
    """The remote lookup could not be completed.

    ``str(exc)`` carries the diagnostic for logs. ``user_message`` is the
    generic text safe to show to an end user.
    """

    user_message = USER_FETCH_ERROR_MESSAGE


class FetchHTTPError(FetchError):
    """Request failed at the transport level or returned a 4xx/5xx status.

    ``status_code`` is 0 when no response was received.
    """

    def __init__(self, message: str, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class FetchTimeoutError(FetchError):
    """Request did not complete within the configured timeout."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class FetchResponseError(FetchError):
    """Response arrived but its body is not usable JSON country data."""

    pass


class InvalidSearchError(FetcherError, ValueError):
    """Unsupported search kind or blank search value."""

    pass


class FetcherConfigurationError(FetcherError):
    """Invalid fetcher configuration (timeout out of range, empty user agent)."""

    pass
