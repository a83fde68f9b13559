"""Factory function for building the country-data fetcher."""

import logging

from country_explorer.config.models import HttpConfig

from .base import BaseFetcher
from .exceptions import FetcherConfigurationError
from .restcountries import RestCountriesFetcher

logger = logging.getLogger(__name__)


def get_fetcher(http_config: HttpConfig) -> BaseFetcher:
    """Build a fetcher from the HTTP section of the app config.

    Raises:
        FetcherConfigurationError: If the configuration is rejected

    Example:
        >>> fetcher = get_fetcher(HttpConfig())
        >>> documents = fetcher.fetch("capital", "Paris")
    """
    logger.debug(
        "Creating fetcher instance",
        extra={
            "base_url": http_config.base_url,
            "timeout": http_config.timeout_seconds,
        },
    )

    try:
        return RestCountriesFetcher(
            base_url=http_config.base_url,
            timeout=http_config.timeout_seconds,
            user_agent=http_config.user_agent,
        )
    except FetcherConfigurationError:
        raise
    except Exception as e:
        raise FetcherConfigurationError(f"Failed to create fetcher: {e}") from e
