from __future__ import annotations

import logging

from .directory import STATEWIDE_FALLBACK, lookup_city
from .gis import PlaceKind, county_hint, resolve_county, resolve_place
from .guesser import ContactGuesser, guesser as default_guesser
from .schemas import AgencyInfo, CityContact, Coordinates, CountyContact, JurisdictionOut
from .services.arcgis_client import ArcGISClient

logger = logging.getLogger(__name__)

UNKNOWN_COUNTY = "Unknown County"


class JurisdictionLookupError(RuntimeError):
    pass


def decide(
    latitude: float,
    longitude: float,
    city: CityContact | None,
    county: CountyContact,
) -> JurisdictionOut:
    """A resolved city always wins; the county is attached either way."""
    coordinates = Coordinates(latitude=latitude, longitude=longitude)

    if city is not None:
        return JurisdictionOut(
            coordinates=coordinates,
            city=city,
            county=county,
            jurisdiction="city",
            primary_agency=AgencyInfo(
                name=f"{city.name} Police Department",
                type="Police Department",
                phone=city.police_phone,
                website=city.police_website,
            ),
        )

    return JurisdictionOut(
        coordinates=coordinates,
        county=county,
        jurisdiction="county",
        primary_agency=AgencyInfo(
            name=f"{county.name} Sheriff's Office",
            type="Sheriff's Office",
            phone=county.sheriff_phone,
            website=county.sheriff_website,
        ),
    )


def _city_county_label(hint: str | None, county: CountyContact) -> str:
    if hint:
        return hint
    if county is not STATEWIDE_FALLBACK:
        return county.name
    return UNKNOWN_COUNTY


def get_jurisdiction_by_coordinates(
    latitude: float,
    longitude: float,
    client: ArcGISClient | None = None,
    guesser: ContactGuesser | None = None,
) -> JurisdictionOut:
    guesser = guesser or default_guesser
    logger.info("jurisdiction lookup: %s, %s", latitude, longitude)

    try:
        city_match = resolve_place(latitude, longitude, PlaceKind.CITY, client=client)
        county = resolve_county(latitude, longitude, client=client)

        city = None
        if city_match is not None:
            city = lookup_city(city_match.name)
            if city is None:
                logger.info("city %s not in directory, guessing contact info", city_match.name)
                label = _city_county_label(county_hint(city_match), county)
                city = guesser.guess_contact(city_match.name, label)

        result = decide(latitude, longitude, city, county)
    except Exception as exc:
        logger.exception("error getting jurisdiction for %s, %s", latitude, longitude)
        raise JurisdictionLookupError("Failed to determine jurisdiction") from exc

    logger.info(
        "jurisdiction: %s (%s), county: %s",
        result.jurisdiction,
        result.primary_agency.name,
        county.name,
    )
    return result
