from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from txjurisdiction.config import settings
from txjurisdiction.directory import list_cities, list_counties
from txjurisdiction.guesser import ContactGuesser, guesser
from txjurisdiction.jurisdiction import JurisdictionLookupError, get_jurisdiction_by_coordinates
from txjurisdiction.schemas import CityContact, CityListOut, CountyListOut, JurisdictionOut
from txjurisdiction.services.arcgis_client import ArcGISClient

router = APIRouter()
client = ArcGISClient(user_agent=settings.user_agent, timeout=settings.request_timeout_seconds)
# ad-hoc guesses keep the caller's spelling, so they stay out of the lookup cache
contact_guesser = ContactGuesser()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/jurisdiction", response_model=JurisdictionOut)
def jurisdiction_for_point(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    try:
        return get_jurisdiction_by_coordinates(lat, lon, client=client, guesser=guesser)
    except JurisdictionLookupError:
        raise HTTPException(status_code=502, detail="failed_to_determine_jurisdiction")


@router.get("/directory/counties", response_model=CountyListOut)
def directory_counties():
    return CountyListOut(counties=list_counties())


@router.get("/directory/cities", response_model=CityListOut)
def directory_cities():
    return CityListOut(cities=list_cities())


@router.get("/contacts/guess", response_model=CityContact)
def guess_city_contact(
    city: str = Query(..., min_length=1),
    county: str = Query("Unknown County"),
):
    city = city.strip()
    if not city:
        raise HTTPException(status_code=400, detail="city_must_not_be_blank")
    return contact_guesser.guess_contact(city, county.strip() or "Unknown County")
