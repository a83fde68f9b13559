"""Data models for search results."""

from dataclasses import dataclass, field
from typing import List, Optional

from country_explorer.domain.models import DisplayRecord, SearchKind


class MissingSearchTermError(ValueError):
    """None of the country, capital or region fields carried a term."""


@dataclass
class SearchOutcome:
    """
    Result of one search, ready for a template or the CLI.

    Attributes:
        kind: Search kind used, None if no search could be made
        value: Search term as submitted (stripped)
        records: Normalized records in the order the service returned them
        error: User-facing message when there is nothing to show
        searched: Whether a search was attempted (drives "no results" UI)
        duration_seconds: Wall time for fetch + normalize
    """

    kind: Optional[SearchKind] = None
    value: str = ""
    records: List[DisplayRecord] = field(default_factory=list)
    error: Optional[str] = None
    searched: bool = True
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.records)
