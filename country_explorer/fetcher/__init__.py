"""Fetchers for the remote country-data service.

Build one from configuration:
    from country_explorer.fetcher import get_fetcher
    fetcher = get_fetcher(app_config.http)
    documents = fetcher.fetch("country", "land")

Exception handling:
    from country_explorer.fetcher import FetchError
    try:
        documents = fetcher.fetch("region", "europe")
    except FetchError as e:
        show(e.user_message)
"""

from .base import BaseFetcher
from .exceptions import (
    USER_FETCH_ERROR_MESSAGE,
    FetcherConfigurationError,
    FetcherError,
    FetchError,
    FetchHTTPError,
    FetchResponseError,
    FetchTimeoutError,
    InvalidSearchError,
)
from .factory import get_fetcher
from .restcountries import RestCountriesFetcher

__all__ = [
    # Base and factory
    "BaseFetcher",
    "get_fetcher",
    # Implementations
    "RestCountriesFetcher",
    # Exceptions
    "FetcherError",
    "FetchError",
    "FetchHTTPError",
    "FetchTimeoutError",
    "FetchResponseError",
    "InvalidSearchError",
    "FetcherConfigurationError",
    "USER_FETCH_ERROR_MESSAGE",
]
