"""REST Countries fetcher implementation."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from urllib.parse import quote

from country_explorer.domain.models import RawCountryDocument, SearchKind
from country_explorer.logging import get_logger

from .base import BaseFetcher
from .exceptions import FetcherError, FetchHTTPError, InvalidSearchError

logger = get_logger(__name__, component="fetcher")


class RestCountriesFetcher(BaseFetcher):
    """Fetcher for the public REST Countries API.

    API Details:
        Endpoints: /name/{name}, /capital/{capital}, /region/{region}
        Method: GET
        Authentication: None (public)
        Response: JSON array of country objects; HTTP 404 when nothing matches
    """

    FETCHER_NAME = "restcountries"
    API_BASE_URL = "https://restcountries.com/v3.1"

    _PATHS = {
        SearchKind.COUNTRY: "name",
        SearchKind.CAPITAL: "capital",
        SearchKind.REGION: "region",
    }

    def __init__(self, base_url: str = API_BASE_URL, timeout: int = 10, user_agent: str = "Global-Country-Explorer/1.0") -> None:
        super().__init__(base_url=base_url, timeout=timeout, user_agent=user_agent)

    def build_request(self, search_kind: SearchKind | str, search_value: str) -> Tuple[str, Dict[str, str]]:
        """Return (url, query params) for a search.

        Country searches match names by substring; capital and region
        searches hit their own endpoints.

        Raises:
            InvalidSearchError: On an unknown kind or blank value
        """
        try:
            kind = SearchKind(search_kind)
        except ValueError as e:
            supported = ", ".join(k.value for k in SearchKind)
            raise InvalidSearchError(
                f"Unsupported search kind: {search_kind!r}. Supported kinds: {supported}"
            ) from e

        value = (search_value or "").strip()
        if not value:
            raise InvalidSearchError("Search value cannot be empty")

        url = f"{self.base_url}/{self._PATHS[kind]}/{quote(value, safe='')}"
        params = {"fullText": "false"} if kind is SearchKind.COUNTRY else {}
        return url, params

    def fetch(self, search_kind: SearchKind | str, search_value: str) -> List[RawCountryDocument]:
        """Fetch every country matching the search.

        Args:
            search_kind: country, capital or region
            search_value: Term to look up

        Returns:
            List of raw country documents, [] when the service reports no match

        Raises:
            FetchError: On timeout, transport failure, non-404 HTTP error or
                an unusable body
            InvalidSearchError: On an unknown kind or blank value
        """
        url, params = self.build_request(search_kind, search_value)

        logger.info(
            "Fetching countries",
            extra={
                "event": "fetcher.search.started",
                "fetcher": self.FETCHER_NAME,
                "search_kind": SearchKind(search_kind).value,
                "search_value": search_value,
            },
        )

        try:
            payload = self._make_request(url, params=params)
        except FetchHTTPError as e:
            if e.status_code == 404:
                logger.info(
                    "No countries matched",
                    extra={
                        "event": "fetcher.not_found",
                        "fetcher": self.FETCHER_NAME,
                        "url": url,
                    },
                )
                return []
            raise

        documents = self._as_documents(payload, url)

        logger.info(
            "Fetched countries",
            extra={
                "event": "fetcher.search.completed",
                "fetcher": self.FETCHER_NAME,
                "count": len(documents),
            },
        )
        return documents

    def fetch_one(self, exact_name: str) -> Optional[RawCountryDocument]:
        """Fetch the country whose name matches ``exact_name`` exactly.

        Every failure is logged and reported as None, so a broken detail
        lookup degrades to "not found" instead of an error page.
        """
        name = (exact_name or "").strip()
        if not name:
            logger.warning(
                "Empty country name for exact lookup",
                extra={"event": "fetcher.lookup.invalid", "fetcher": self.FETCHER_NAME},
            )
            return None

        url = f"{self.base_url}/name/{quote(name, safe='')}"

        try:
            payload = self._make_request(url, params={"fullText": "true"})
            documents = self._as_documents(payload, url)
        except FetchHTTPError as e:
            if e.status_code != 404:
                self._log_lookup_failure(name, e)
            return None
        except FetcherError as e:
            self._log_lookup_failure(name, e)
            return None

        if not documents:
            return None
        return documents[0]

    def _log_lookup_failure(self, name: str, error: FetcherError) -> None:
        logger.error(
            f"Exact country lookup failed: {error}",
            extra={
                "event": "fetcher.lookup.failed",
                "fetcher": self.FETCHER_NAME,
                "country_name": name,
                "error_type": type(error).__name__,
            },
        )
