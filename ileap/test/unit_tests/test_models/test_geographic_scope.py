"""
Tests for the geographic scope of a CarbonFootprint.

In memory the scope is a single variant; on the wire it is flattened into
at most one of the ``geography*`` properties.
"""
import pytest
from pydantic import ValidationError

from ileap.pydantic_models.enums import UNRegionOrSubregion
from ileap.pydantic_models.pact import (
    CarbonFootprint,
    CountryScope,
    GlobalScope,
    RegionalScope,
    SubdivisionScope,
)
from ileap.test.factory.pact import CarbonFootprintFactory

GEOGRAPHY_KEYS = {
    "geographyRegionOrSubregion",
    "geographyCountry",
    "geographyCountrySubdivision",
}


def wire_form(**overrides) -> dict:
    return CarbonFootprintFactory().model_dump(mode="json") | overrides


def test_global_scope_by_default():
    pcf = CarbonFootprintFactory()

    assert isinstance(pcf.geographic_scope, GlobalScope)
    wire = pcf.model_dump(mode="json")
    assert not GEOGRAPHY_KEYS & wire.keys()
    assert "geographicScope" not in wire


@pytest.mark.parametrize(
    "scope, key, value",
    [
        (
            RegionalScope(region=UNRegionOrSubregion.EUROPE),
            "geographyRegionOrSubregion",
            "Europe",
        ),
        (CountryScope(country="DE"), "geographyCountry", "DE"),
        (
            SubdivisionScope(subdivision="DE-BE"),
            "geographyCountrySubdivision",
            "DE-BE",
        ),
    ],
)
def test_scope_is_flattened_on_the_wire(scope, key, value):
    pcf = CarbonFootprintFactory(geographic_scope=scope)

    wire = pcf.model_dump(mode="json")

    assert wire[key] == value
    assert GEOGRAPHY_KEYS & wire.keys() == {key}
    assert "geographicScope" not in wire


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("geographyRegionOrSubregion", "Western Europe", RegionalScope),
        ("geographyCountry", "CH", CountryScope),
        ("geographyCountrySubdivision", "CH-BS", SubdivisionScope),
    ],
)
def test_scope_is_read_from_the_wire(key, value, expected):
    pcf = CarbonFootprint.model_validate(wire_form(**{key: value}))

    assert isinstance(pcf.geographic_scope, expected)
    assert pcf.model_dump(mode="json")[key] == value


def test_scope_round_trip():
    pcf = CarbonFootprintFactory(geographic_scope=CountryScope(country="FR"))

    parsed = CarbonFootprint.model_validate_json(pcf.model_dump_json())

    assert parsed == pcf


def test_several_geography_keys_are_rejected():
    data = wire_form(geographyCountry="DE", geographyCountrySubdivision="DE-BE")

    with pytest.raises(ValidationError) as exc_info:
        CarbonFootprint.model_validate(data)

    assert "at most one geography property" in str(exc_info.value)


def test_invalid_country_is_rejected():
    with pytest.raises(ValidationError):
        CarbonFootprint.model_validate(wire_form(geographyCountry="de"))


def test_unknown_region_is_rejected():
    with pytest.raises(ValidationError):
        CarbonFootprint.model_validate(wire_form(geographyRegionOrSubregion="Atlantis"))


def test_schema_allows_at_most_one_geography_key():
    schema = CarbonFootprint.model_json_schema()

    assert GEOGRAPHY_KEYS <= schema["properties"].keys()
    assert "geographicScope" not in schema["properties"]
    assert len(schema["not"]["anyOf"]) == 3
