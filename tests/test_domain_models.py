"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from country_explorer.domain.models import NO_LAND_BORDERS, PLACEHOLDER, DisplayRecord, SearchKind


class TestDisplayRecord:
    """Tests for DisplayRecord."""

    def test_defaults(self):
        """A bare record is all placeholders with no images."""
        record = DisplayRecord()

        assert record.name == PLACEHOLDER
        assert record.capital == PLACEHOLDER
        assert record.borders == NO_LAND_BORDERS
        assert record.flag is None
        assert record.coat_of_arms is None

    @pytest.mark.parametrize("value", ["", "   ", "\n"])
    def test_blank_text_becomes_placeholder(self, value):
        record = DisplayRecord(name=value, region=value, calling_codes=value)

        assert record.name == PLACEHOLDER
        assert record.region == PLACEHOLDER
        assert record.calling_codes == PLACEHOLDER

    def test_blank_url_becomes_none(self):
        record = DisplayRecord(flag="  ", coat_of_arms="")

        assert record.flag is None
        assert record.coat_of_arms is None

    def test_is_frozen(self):
        record = DisplayRecord(name="France")

        with pytest.raises(ValidationError):
            record.name = "Gaul"

    def test_to_api_dict_uses_camel_case(self):
        record = DisplayRecord(
            name="France",
            official_name="French Republic",
            native_name="France",
            top_level_domain=".fr",
            alpha3_code="FRA",
            calling_codes="+33",
            coat_of_arms="https://mainfacts.com/media/images/coats_of_arms/fr.svg",
        )

        api = record.to_api_dict()

        assert api["officialName"] == "French Republic"
        assert api["nativeName"] == "France"
        assert api["topLevelDomain"] == ".fr"
        assert api["alpha3Code"] == "FRA"
        assert api["callingCodes"] == "+33"
        assert api["coatOfArms"].endswith("fr.svg")
        assert api["flag"] is None
        assert api["borders"] == NO_LAND_BORDERS
        assert len(api) == 18

    def test_equal_records_compare_equal(self):
        assert DisplayRecord(name="Chad") == DisplayRecord(name="Chad")


class TestSearchKind:
    def test_values(self):
        assert [k.value for k in SearchKind] == ["country", "capital", "region"]

    def test_from_string(self):
        assert SearchKind("capital") is SearchKind.CAPITAL

    def test_unknown(self):
        with pytest.raises(ValueError):
            SearchKind("currency")
