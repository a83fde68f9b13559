"""Normalization layer converting raw country documents into display records.

This module provides:
- CountryNormalizer: service turning RawCountryDocument into DisplayRecord
- normalize_country: shortcut using a shared normalizer
- resolve_* functions: the per-field rules, usable on their own
"""

from .service import (
    CountryNormalizer,
    normalize_country,
    resolve_area,
    resolve_borders,
    resolve_calling_code,
    resolve_capital,
    resolve_common_name,
    resolve_coordinates,
    resolve_currencies,
    resolve_image,
    resolve_languages,
    resolve_native_name,
    resolve_official_name,
    resolve_population,
)

__all__ = [
    "CountryNormalizer",
    "normalize_country",
    "resolve_area",
    "resolve_borders",
    "resolve_calling_code",
    "resolve_capital",
    "resolve_common_name",
    "resolve_coordinates",
    "resolve_currencies",
    "resolve_image",
    "resolve_languages",
    "resolve_native_name",
    "resolve_official_name",
    "resolve_population",
]
