"""Country lookup orchestration."""

from .models import MissingSearchTermError, SearchOutcome
from .service import MISSING_TERM_MESSAGE, NO_RESULTS_TEMPLATE, CountryLookupService, resolve_search

__all__ = [
    "CountryLookupService",
    "MissingSearchTermError",
    "SearchOutcome",
    "resolve_search",
    "MISSING_TERM_MESSAGE",
    "NO_RESULTS_TEMPLATE",
]
