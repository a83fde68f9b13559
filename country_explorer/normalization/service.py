"""Country normalization service: raw API documents to DisplayRecord.

The remote service is loosely typed. ``name`` may be a string or a mapping,
``capital`` a string or a list, and any field may be missing. Each output
field below is resolved by its own total rule, so normalization never raises:
whatever is absent or oddly shaped turns into the placeholder (or None for
the image URLs, or "No land borders" for borders).
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from country_explorer.domain.models import (
    NO_LAND_BORDERS,
    PLACEHOLDER,
    DisplayRecord,
    RawCountryDocument,
)
from country_explorer.logging import get_logger
from country_explorer.utils.formatting import (
    clean_text,
    format_grouped,
    format_plain_number,
    is_number,
    join_parts,
    join_texts,
)

logger = get_logger(__name__, component="normalization")

AREA_UNIT = " km²"


def _mapping(value: Any) -> Optional[Mapping[str, Any]]:
    return value if isinstance(value, Mapping) else None


def _name_mapping(doc: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    return _mapping(doc.get("name"))


def resolve_common_name(doc: Mapping[str, Any]) -> Optional[str]:
    """``name.common``, or ``name`` itself when the service sent a plain string."""
    raw_name = doc.get("name")
    if isinstance(raw_name, Mapping):
        return clean_text(raw_name.get("common"))
    return clean_text(raw_name)


def resolve_official_name(doc: Mapping[str, Any]) -> Optional[str]:
    name = _name_mapping(doc)
    return clean_text(name.get("official")) if name else None


def resolve_native_name(doc: Mapping[str, Any]) -> Optional[str]:
    """``common`` of the first entry in ``name.nativeName``."""
    name = _name_mapping(doc)
    native = _mapping(name.get("nativeName")) if name else None
    if not native:
        return None
    first_entry = _mapping(next(iter(native.values())))
    return clean_text(first_entry.get("common")) if first_entry else None


def resolve_capital(doc: Mapping[str, Any]) -> Optional[str]:
    capital = doc.get("capital")
    if isinstance(capital, (list, tuple)):
        return join_texts(capital)
    return clean_text(capital)


def resolve_area(doc: Mapping[str, Any]) -> Optional[str]:
    area = doc.get("area")
    # Zero means "unknown" in the service data
    if not is_number(area) or area == 0:
        return None
    return format_grouped(area) + AREA_UNIT


def resolve_population(doc: Mapping[str, Any]) -> Optional[str]:
    population = doc.get("population")
    if not is_number(population) or population == 0:
        return None
    return format_grouped(population)


def resolve_languages(doc: Mapping[str, Any]) -> Optional[str]:
    languages = _mapping(doc.get("languages"))
    if not languages:
        return None
    return join_parts(clean_text(language) for language in languages.values())


def resolve_currencies(doc: Mapping[str, Any]) -> Optional[str]:
    """Render each currency as ``"{name} ({symbol})"``; the code stands in for a missing name or symbol."""
    currencies = _mapping(doc.get("currencies"))
    if not currencies:
        return None

    rendered = []
    for code, details in currencies.items():
        code_text = clean_text(code)
        details = _mapping(details) or {}
        label = clean_text(details.get("name")) or code_text
        symbol = clean_text(details.get("symbol")) or code_text
        if label and symbol:
            rendered.append(f"{label} ({symbol})")
        elif label:
            rendered.append(label)
    return join_parts(rendered)


def resolve_borders(doc: Mapping[str, Any]) -> str:
    return join_texts(doc.get("borders")) or NO_LAND_BORDERS


def resolve_coordinates(doc: Mapping[str, Any]) -> Optional[str]:
    latlng = doc.get("latlng")
    if not isinstance(latlng, (list, tuple)) or len(latlng) < 2:
        return None
    lat, lng = format_plain_number(latlng[0]), format_plain_number(latlng[1])
    if lat is None or lng is None:
        return None
    return f"{lat}°, {lng}°"


def resolve_calling_code(doc: Mapping[str, Any]) -> Optional[str]:
    """``idd.root`` followed by the first suffix, if there is one."""
    idd = _mapping(doc.get("idd"))
    root = clean_text(idd.get("root")) if idd else None
    if root is None:
        return None

    suffixes = idd.get("suffixes")
    suffix = None
    if isinstance(suffixes, (list, tuple)) and suffixes:
        suffix = clean_text(suffixes[0])
    return root + (suffix or "")


def resolve_image(doc: Mapping[str, Any], field: str) -> Optional[str]:
    """Vector URL if present, else raster URL, else None."""
    images = _mapping(doc.get(field))
    if not images:
        return None
    return clean_text(images.get("svg")) or clean_text(images.get("png"))


class CountryNormalizer:
    """Turns raw REST Countries documents into DisplayRecords.

    Stateless; one instance can serve every request.
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger

    def normalize(self, doc: RawCountryDocument) -> DisplayRecord:
        """Normalize a single raw document.

        Never raises. A document that is not a mapping at all yields a record
        made entirely of placeholders.
        """
        if not isinstance(doc, Mapping):
            self.logger.warning(
                "Raw country document is not an object",
                extra={
                    "event": "normalization.record.malformed",
                    "document_type": type(doc).__name__,
                },
            )
            return DisplayRecord()

        record = DisplayRecord(
            name=self._text_or_placeholder(resolve_common_name(doc)),
            official_name=self._text_or_placeholder(resolve_official_name(doc)),
            capital=self._text_or_placeholder(resolve_capital(doc)),
            region=self._text_or_placeholder(clean_text(doc.get("region"))),
            subregion=self._text_or_placeholder(clean_text(doc.get("subregion"))),
            area=self._text_or_placeholder(resolve_area(doc)),
            population=self._text_or_placeholder(resolve_population(doc)),
            languages=self._text_or_placeholder(resolve_languages(doc)),
            currencies=self._text_or_placeholder(resolve_currencies(doc)),
            timezones=self._text_or_placeholder(join_texts(doc.get("timezones"))),
            borders=resolve_borders(doc),
            latlng=self._text_or_placeholder(resolve_coordinates(doc)),
            native_name=self._text_or_placeholder(resolve_native_name(doc)),
            top_level_domain=self._text_or_placeholder(join_texts(doc.get("tld"))),
            alpha3_code=self._text_or_placeholder(clean_text(doc.get("cca3"))),
            calling_codes=self._text_or_placeholder(resolve_calling_code(doc)),
            flag=resolve_image(doc, "flags"),
            coat_of_arms=resolve_image(doc, "coatOfArms"),
        )

        self.logger.debug(
            "Normalized country",
            extra={
                "event": "normalization.record.normalized",
                "country": record.name,
                "alpha3_code": record.alpha3_code,
            },
        )
        return record

    def normalize_many(self, docs: Iterable[RawCountryDocument]) -> List[DisplayRecord]:
        """Normalize documents in order; the output has one record per input."""
        return [self.normalize(doc) for doc in docs]

    @staticmethod
    def _text_or_placeholder(value: Optional[str]) -> str:
        return value if value else PLACEHOLDER


def normalize_country(doc: RawCountryDocument) -> DisplayRecord:
    """Module-level shortcut for CountryNormalizer().normalize(doc)."""
    return _default_normalizer.normalize(doc)


_default_normalizer = CountryNormalizer()
