"""Search orchestration: fetch raw documents, then normalize them."""

import time
from typing import Optional, Tuple

from country_explorer.domain.models import DisplayRecord, SearchKind
from country_explorer.fetcher.base import BaseFetcher
from country_explorer.fetcher.exceptions import FetchError
from country_explorer.logging import get_logger
from country_explorer.normalization.service import CountryNormalizer

from .models import MissingSearchTermError, SearchOutcome

logger = get_logger(__name__, component="lookup")

MISSING_TERM_MESSAGE = "Please fill at least one search field"
NO_RESULTS_TEMPLATE = 'No countries found for "{value}". Please check your spelling and try again.'


def resolve_search(
    country: Optional[str] = None,
    capital: Optional[str] = None,
    region: Optional[str] = None,
) -> Tuple[SearchKind, str]:
    """Pick the search to run from the three form fields.

    The first non-blank field wins, in the order country, capital, region.

    Raises:
        MissingSearchTermError: If every field is blank
    """
    for kind, raw in (
        (SearchKind.COUNTRY, country),
        (SearchKind.CAPITAL, capital),
        (SearchKind.REGION, region),
    ):
        value = (raw or "").strip()
        if value:
            return kind, value
    raise MissingSearchTermError(MISSING_TERM_MESSAGE)


class CountryLookupService:
    """
    Runs searches and detail lookups against one fetcher.

    The fetcher is the only fallible step; normalization cannot fail. Search
    failures come back as a SearchOutcome carrying a user-facing message,
    never as an exception.
    """

    def __init__(self, fetcher: BaseFetcher, normalizer: Optional[CountryNormalizer] = None):
        self.fetcher = fetcher
        self.normalizer = normalizer or CountryNormalizer()

    def search(self, kind: SearchKind, value: str) -> SearchOutcome:
        """
        Fetch and normalize every country matching ``value``.

        Returns:
            SearchOutcome with records, or with ``error`` set when the fetch
            failed or nothing matched
        """
        started = time.monotonic()
        outcome = SearchOutcome(kind=kind, value=value)

        try:
            documents = self.fetcher.fetch(kind, value)
        except FetchError as e:
            logger.error(
                f"Search failed: {e}",
                extra={
                    "event": "lookup.search.failed",
                    "search_kind": kind.value,
                    "search_value": value,
                    "error_type": type(e).__name__,
                },
            )
            outcome.error = e.user_message
            outcome.duration_seconds = time.monotonic() - started
            return outcome

        outcome.records = self.normalizer.normalize_many(documents)
        if not outcome.records:
            outcome.error = NO_RESULTS_TEMPLATE.format(value=value)
        outcome.duration_seconds = time.monotonic() - started

        logger.info(
            f"Search completed with {len(outcome.records)} result(s)",
            extra={
                "event": "lookup.search.completed",
                "search_kind": kind.value,
                "search_value": value,
                "count": len(outcome.records),
                "duration_seconds": round(outcome.duration_seconds, 3),
            },
        )
        return outcome

    def search_form(
        self,
        country: Optional[str] = None,
        capital: Optional[str] = None,
        region: Optional[str] = None,
    ) -> SearchOutcome:
        """Resolve the form fields to one search and run it."""
        try:
            kind, value = resolve_search(country, capital, region)
        except MissingSearchTermError as e:
            return SearchOutcome(error=str(e), searched=False)
        return self.search(kind, value)

    def view(self, name: str) -> Optional[DisplayRecord]:
        """Exact-name lookup for the detail view; None when absent or on failure."""
        document = self.fetcher.fetch_one(name)
        if document is None:
            logger.info(
                "Country not found for detail view",
                extra={"event": "lookup.view.not_found", "country_name": name},
            )
            return None
        return self.normalizer.normalize(document)
