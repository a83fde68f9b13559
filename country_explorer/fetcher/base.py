"""Base fetcher class with the shared HTTP plumbing.

Subclasses decide which URLs to call; this module owns the session, the
timeout, and the mapping of requests failures onto the fetcher exceptions.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests

from country_explorer.domain.models import RawCountryDocument
from country_explorer.logging import get_logger

from .exceptions import (
    FetcherConfigurationError,
    FetchHTTPError,
    FetchResponseError,
    FetchTimeoutError,
)

logger = get_logger(__name__, component="fetcher")


class BaseFetcher(ABC):
    """Base class for country-data fetchers.

    Each instance may be shared across request threads: it keeps one
    requests.Session per thread, so connections are reused without two
    threads ever driving the same session.

    Attributes:
        base_url: API root without a trailing slash
        timeout: Per-request timeout in seconds
        user_agent: User-Agent header sent with every request
    """

    def __init__(self, base_url: str, timeout: int = 10, user_agent: str = "Global-Country-Explorer/1.0") -> None:
        """Initialize fetcher with configuration.

        Raises:
            FetcherConfigurationError: If timeout is outside 1-300 seconds,
                or base_url / user_agent is empty
        """
        if not 1 <= timeout <= 300:
            raise FetcherConfigurationError(
                f"Timeout must be between 1 and 300 seconds, got: {timeout}"
            )
        if not user_agent or not user_agent.strip():
            raise FetcherConfigurationError("user_agent cannot be empty")
        if not base_url or not base_url.strip():
            raise FetcherConfigurationError("base_url cannot be empty")

        self.base_url = base_url.strip().rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent.strip()
        self._local = threading.local()

    @abstractmethod
    def fetch(self, search_kind: str, search_value: str) -> List[RawCountryDocument]:
        """Return every raw document matching the search, or [] when nothing matches.

        Raises:
            FetchError: On timeout, transport failure or an unusable response
            InvalidSearchError: On an unknown search kind or blank value
        """

    @abstractmethod
    def fetch_one(self, exact_name: str) -> Optional[RawCountryDocument]:
        """Return the document whose name matches exactly, or None. Never raises."""

    @property
    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update({
                "Accept": "application/json",
                "User-Agent": self.user_agent,
            })
            self._local.session = session
        return session

    def _make_request(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        """Issue one GET and return the decoded JSON body.

        Args:
            url: Fully built URL
            params: Query parameters

        Returns:
            Decoded JSON (usually a list or dict)

        Raises:
            FetchHTTPError: On a 4xx/5xx status or a connection-level failure
            FetchTimeoutError: When the timeout elapses
            FetchResponseError: When the body is not valid JSON
        """
        logger.debug(
            f"HTTP GET {url}",
            extra={
                "event": "fetcher.request",
                "url": url,
                "params": params or {},
                "timeout": self.timeout,
            },
        )

        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(
                f"Request to {url} timed out after {self.timeout} seconds",
                extra={
                    "event": "fetcher.timeout",
                    "url": url,
                    "timeout": self.timeout,
                },
            )
            raise FetchTimeoutError(
                f"Request to {url} timed out after {self.timeout} seconds",
                url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(
                f"Request to {url} failed: {e}",
                extra={
                    "event": "fetcher.transport_error",
                    "error_type": type(e).__name__,
                    "url": url,
                },
            )
            raise FetchHTTPError(
                f"Request to {url} failed: {e}",
                status_code=0,
                url=url,
            ) from e

        if response.status_code >= 400:
            # 404 is the service's "no match" signal and is handled by the caller
            log_level = logging.INFO if response.status_code == 404 else logging.WARNING
            logger.log(
                log_level,
                f"HTTP {response.status_code} from {url}",
                extra={
                    "event": "fetcher.http_error",
                    "status_code": response.status_code,
                    "url": url,
                },
            )
            raise FetchHTTPError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                url=url,
            )

        if not response.content:
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                f"Failed to parse JSON response from {url}",
                extra={
                    "event": "fetcher.invalid_json",
                    "url": url,
                },
            )
            raise FetchResponseError(
                f"Failed to parse JSON response from {url}: {e}"
            ) from e

        logger.debug(
            "HTTP request succeeded",
            extra={
                "event": "fetcher.succeeded",
                "status_code": response.status_code,
                "url": url,
            },
        )
        return data

    def _as_documents(self, payload: Any, url: str) -> List[RawCountryDocument]:
        """Coerce a decoded body into a list of mapping documents.

        A single object becomes a one-element list; a null body or an empty
        object becomes []. Non-mapping items inside a list are dropped.

        Raises:
            FetchResponseError: If the body is a JSON scalar, falsy ones included
        """
        if payload is None:
            return []

        if isinstance(payload, dict):
            return [payload] if payload else []

        if not isinstance(payload, list):
            raise FetchResponseError(
                f"Expected JSON array or object from {url}, got {type(payload).__name__}"
            )

        documents = []
        for index, item in enumerate(payload):
            if isinstance(item, dict):
                documents.append(item)
            else:
                logger.warning(
                    "Skipping non-object entry in response",
                    extra={
                        "event": "fetcher.entry_skipped",
                        "url": url,
                        "index": index,
                        "entry_type": type(item).__name__,
                    },
                )
        return documents
