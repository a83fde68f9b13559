"""Domain models for the Global Country Explorer."""

from .models import NO_LAND_BORDERS, PLACEHOLDER, DisplayRecord, RawCountryDocument, SearchKind

__all__ = ["DisplayRecord", "RawCountryDocument", "SearchKind", "PLACEHOLDER", "NO_LAND_BORDERS"]
