import pytest

from txjurisdiction.config import settings
from txjurisdiction.directory import STATEWIDE_FALLBACK
from txjurisdiction.guesser import ContactGuesser
from txjurisdiction.jurisdiction import JurisdictionLookupError, decide, get_jurisdiction_by_coordinates
from txjurisdiction.schemas import CityContact, CountyContact

CITY_PRIMARY = settings.city_endpoints[0]
COUNTY_PRIMARY = settings.county_endpoints[0]


def _features(**attributes):
    return {"features": [{"attributes": attributes}]}


def test_houston_point_resolves_to_city_police(arcgis, fake_head):
    head = fake_head()
    client = arcgis({
        CITY_PRIMARY: _features(CITY_NM="Houston"),
        COUNTY_PRIMARY: _features(CNTY_NM="Harris"),
    })

    result = get_jurisdiction_by_coordinates(29.7604, -95.3698, client=client, guesser=ContactGuesser(cache_size=8))

    assert result.jurisdiction == "city"
    assert result.primary_agency.name == "Houston Police Department"
    assert result.primary_agency.type == "Police Department"
    assert result.primary_agency.phone == "(713) 884-3131"
    assert result.city.police_phone == result.primary_agency.phone
    assert result.county.name == "Harris County"
    assert result.coordinates.latitude == 29.7604
    assert head.calls == []


def test_unincorporated_jefferson_county_resolves_to_sheriff(arcgis):
    client = arcgis({COUNTY_PRIMARY: _features(CNTY_NM="Jefferson")})

    result = get_jurisdiction_by_coordinates(29.85, -94.2, client=client, guesser=ContactGuesser(cache_size=8))

    assert result.jurisdiction == "county"
    assert result.city is None
    assert result.primary_agency.name == "Jefferson County Sheriff's Office"
    assert result.primary_agency.phone == "(409) 835-8411"


def test_point_outside_every_county_uses_statewide_fallback(arcgis):
    result = get_jurisdiction_by_coordinates(35.0, -106.0, client=arcgis({}), guesser=ContactGuesser(cache_size=8))

    assert result.jurisdiction == "county"
    assert result.county == STATEWIDE_FALLBACK
    assert result.primary_agency.name == "Texas Sheriff's Office"
    assert result.primary_agency.phone == "(512) 463-2000"
    assert result.primary_agency.website == "https://www.dps.texas.gov"


def test_unknown_city_is_guessed_with_county_hint(arcgis, fake_head):
    fake_head()
    client = arcgis({
        CITY_PRIMARY: _features(CITY_NM="City of Nederland, TX", CNTY_NM="Jefferson"),
        COUNTY_PRIMARY: _features(CNTY_NM="Jefferson"),
    })

    result = get_jurisdiction_by_coordinates(29.97, -93.99, client=client, guesser=ContactGuesser(cache_size=8))

    assert result.jurisdiction == "city"
    assert result.city.name == "Nederland"
    assert result.city.county == "Jefferson County"
    assert result.primary_agency.name == "Nederland Police Department"
    assert result.primary_agency.phone == 'Search "Nederland Texas police department phone"'
    assert result.primary_agency.website == "https://www.cityofnederland.com"


def test_unknown_city_without_any_county_gets_unknown_label(arcgis, fake_head):
    fake_head()
    client = arcgis({CITY_PRIMARY: _features(CITY_NM="Nowhere")})

    result = get_jurisdiction_by_coordinates(31.0, -100.0, client=client, guesser=ContactGuesser(cache_size=8))

    assert result.city.county == "Unknown County"
    assert result.county == STATEWIDE_FALLBACK


def test_unexpected_failure_is_wrapped(arcgis, monkeypatch):
    def explode(*args, **kwargs):
        raise KeyError("boom")

    monkeypatch.setattr("txjurisdiction.jurisdiction.resolve_county", explode)

    with pytest.raises(JurisdictionLookupError, match="Failed to determine jurisdiction"):
        get_jurisdiction_by_coordinates(29.0, -95.0, client=arcgis({}), guesser=ContactGuesser(cache_size=8))


def test_decide_prefers_city_even_without_phone():
    county = CountyContact(name="Orange County")
    city = CityContact(name="Vidor", county="Orange County")

    result = decide(30.13, -94.01, city, county)

    assert result.jurisdiction == "city"
    assert result.primary_agency.name == "Vidor Police Department"
    assert result.primary_agency.phone is None
    assert result.county is county


def test_decide_without_city_uses_sheriff():
    result = decide(30.13, -94.01, None, CountyContact(name="Orange County"))
    assert result.jurisdiction == "county"
    assert result.primary_agency.name.endswith("Sheriff's Office")
    assert result.primary_agency.type == "Sheriff's Office"
