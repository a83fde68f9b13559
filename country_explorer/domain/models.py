"""Core domain models for country lookups.

- SearchKind: which remote lookup path a search uses
- RawCountryDocument: untyped country record as returned by the remote service
- DisplayRecord: flat, fully-populated record ready for rendering
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

PLACEHOLDER = "N/A"
NO_LAND_BORDERS = "No land borders"

# Documents come straight from JSON and are not validated; every field is
# optional and may have a different type from one record to the next.
RawCountryDocument = Dict[str, Any]


class SearchKind(str, Enum):
    """Supported search kinds."""

    COUNTRY = "country"
    CAPITAL = "capital"
    REGION = "region"


class DisplayRecord(BaseModel):
    """Normalized country record.

    Every textual field is either a non-empty string or the placeholder
    ``"N/A"``. ``borders`` uses its own sentinel ("No land borders") and the
    two image fields are URLs or None.
    """

    name: str = Field(PLACEHOLDER, description="Common name")
    official_name: str = Field(PLACEHOLDER, description="Official name")
    capital: str = Field(PLACEHOLDER, description="Capital(s), comma-joined")
    region: str = Field(PLACEHOLDER, description="Region")
    subregion: str = Field(PLACEHOLDER, description="Subregion")
    area: str = Field(PLACEHOLDER, description="Area with grouping and km² suffix")
    population: str = Field(PLACEHOLDER, description="Population with grouping")
    languages: str = Field(PLACEHOLDER, description="Language names, comma-joined")
    currencies: str = Field(PLACEHOLDER, description="'Name (symbol)' entries, comma-joined")
    timezones: str = Field(PLACEHOLDER, description="Timezones, comma-joined")
    borders: str = Field(NO_LAND_BORDERS, description="Bordering alpha-3 codes, comma-joined")
    latlng: str = Field(PLACEHOLDER, description="'lat°, lng°'")
    native_name: str = Field(PLACEHOLDER, description="First native common name")
    top_level_domain: str = Field(PLACEHOLDER, description="Top-level domains, comma-joined")
    alpha3_code: str = Field(PLACEHOLDER, description="ISO 3166-1 alpha-3 code")
    calling_codes: str = Field(PLACEHOLDER, description="International dialing prefix")
    flag: Optional[str] = Field(None, description="Flag image URL (svg preferred)")
    coat_of_arms: Optional[str] = Field(None, description="Coat-of-arms image URL (svg preferred)")

    @field_validator(
        "name", "official_name", "capital", "region", "subregion", "area",
        "population", "languages", "currencies", "timezones", "latlng",
        "native_name", "top_level_domain", "alpha3_code", "calling_codes",
    )
    @classmethod
    def blank_to_placeholder(cls, v: str) -> str:
        """A display field is never empty."""
        if not v or not v.strip():
            return PLACEHOLDER
        return v

    @field_validator("flag", "coat_of_arms")
    @classmethod
    def blank_url_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v

    def to_api_dict(self) -> Dict[str, Optional[str]]:
        """Return the record with the camelCase keys used by the JSON detail endpoint."""
        return {
            "name": self.name,
            "officialName": self.official_name,
            "capital": self.capital,
            "region": self.region,
            "subregion": self.subregion,
            "area": self.area,
            "population": self.population,
            "languages": self.languages,
            "currencies": self.currencies,
            "timezones": self.timezones,
            "borders": self.borders,
            "latlng": self.latlng,
            "nativeName": self.native_name,
            "topLevelDomain": self.top_level_domain,
            "alpha3Code": self.alpha3_code,
            "callingCodes": self.calling_codes,
            "flag": self.flag,
            "coatOfArms": self.coat_of_arms,
        }

    model_config = {
        "frozen": True,
        "json_schema_extra": {"example": {
            "name": "France",
            "official_name": "French Republic",
            "capital": "Paris",
            "region": "Europe",
            "subregion": "Western Europe",
            "area": "551,695 km²",
            "population": "67,391,582",
            "languages": "French",
            "currencies": "Euro (€)",
            "timezones": "UTC-10:00, UTC+01:00",
            "borders": "AND, BEL, DEU, ITA, LUX, MCO, ESP, CHE",
            "latlng": "46°, 2°",
            "native_name": "France",
            "top_level_domain": ".fr",
            "alpha3_code": "FRA",
            "calling_codes": "+33",
            "flag": "https://flagcdn.com/fr.svg",
            "coat_of_arms": "https://mainfacts.com/media/images/coats_of_arms/fr.svg",
        }},
    }
