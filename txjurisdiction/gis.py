"""
Point -> city / county name resolution over ArcGIS feature services.

Each configured endpoint is one strategy. A strategy reports FOUND, NOT_FOUND or
TRANSIENT_ERROR; the resolver walks the endpoints in order and stops at the first
FOUND. Nothing here raises to the caller: exhausting every endpoint returns None.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

from .config import settings
from .directory import STATEWIDE_FALLBACK, lookup_county
from .schemas import CountyContact
from .services.arcgis_client import ArcGISClient
from .utils.text import normalize_text

logger = logging.getLogger(__name__)

CITY_NAME_FIELDS = [
    "CITY_NM", "NAME", "CITY_NAME", "City", "CITYNAME", "NAMELSAD",
    "NAME10", "GEONAME", "CITY_FIPS", "PLACE_NAME", "FULLNAME",
]
COUNTY_NAME_FIELDS = [
    "CNTY_NM", "NAME", "COUNTY_NAME", "County", "COUNTYNAME",
    "NAMELSAD", "NAME10", "GEONAME", "FULLNAME", "COUNTY_FIPS",
]
# county label carried on city boundary features
CITY_FEATURE_COUNTY_FIELDS = [
    "CNTY_NM", "COUNTY", "COUNTY_NAME", "County", "COUNTYNAME",
    "COUNTYFP", "CNTY_FIPS", "STATEFP",
]


class PlaceKind(str, Enum):
    CITY = "city"
    COUNTY = "county"


class EndpointStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True)
class EndpointOutcome:
    endpoint: str
    status: EndpointStatus
    name: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


@dataclass(frozen=True)
class PlaceMatch:
    kind: PlaceKind
    name: str
    endpoint: str
    attributes: dict[str, Any] = field(default_factory=dict)


def default_client() -> ArcGISClient:
    return ArcGISClient(user_agent=settings.user_agent, timeout=settings.request_timeout_seconds)


def first_attribute(attrs: dict[str, Any], fields: list[str]) -> str | None:
    """First alias holding a non-empty, non-numeric string. Bare FIPS codes are not names."""
    for name in fields:
        value = attrs.get(name)
        if not isinstance(value, str):
            continue
        value = normalize_text(value)
        if value and not value.isdigit():
            return value
    return None


def _strip_state_suffix(name: str) -> str:
    name = re.sub(r", TX$", "", name)
    return re.sub(r", Texas$", "", name)


def normalize_city_name(raw: str) -> str:
    """'City of Plano, TX' -> 'Plano'."""
    name = _strip_state_suffix(normalize_text(raw))
    name = re.sub(r"^City of ", "", name)
    if "port arthur" in name.lower():
        name = "Port Arthur"
    return name


def normalize_county_name(raw: str) -> str:
    """'Jefferson County, TX' / 'Jefferson' -> 'Jefferson County'."""
    name = _strip_state_suffix(normalize_text(raw))
    name = re.sub(r" County$", "", name)
    if "county" not in name.lower():
        name += " County"
    return name


def _normalize(kind: PlaceKind, raw: str) -> str:
    if kind is PlaceKind.CITY:
        return normalize_city_name(raw)
    return normalize_county_name(raw)


def _name_fields(kind: PlaceKind) -> list[str]:
    return CITY_NAME_FIELDS if kind is PlaceKind.CITY else COUNTY_NAME_FIELDS


def _endpoints(kind: PlaceKind) -> list[str]:
    return settings.city_endpoints if kind is PlaceKind.CITY else settings.county_endpoints


def query_endpoint(
    client: ArcGISClient,
    endpoint: str,
    latitude: float,
    longitude: float,
    kind: PlaceKind,
) -> EndpointOutcome:
    try:
        data = client.query_point(endpoint, latitude, longitude)
    except httpx.HTTPStatusError as exc:
        return EndpointOutcome(endpoint, EndpointStatus.TRANSIENT_ERROR, error=f"http_{exc.response.status_code}")
    except httpx.HTTPError as exc:
        return EndpointOutcome(endpoint, EndpointStatus.TRANSIENT_ERROR, error=f"transport: {exc}")
    except ValueError as exc:
        return EndpointOutcome(endpoint, EndpointStatus.TRANSIENT_ERROR, error=f"invalid_json: {exc}")

    if data.get("error"):
        err = data["error"]
        message = err.get("message") if isinstance(err, dict) else str(err)
        return EndpointOutcome(endpoint, EndpointStatus.TRANSIENT_ERROR, error=f"api_error: {message}")

    features = data.get("features") or []
    if not isinstance(features, list):
        return EndpointOutcome(endpoint, EndpointStatus.TRANSIENT_ERROR, error="malformed_response")
    if not features:
        return EndpointOutcome(endpoint, EndpointStatus.NOT_FOUND)

    # Overlapping or nested boundaries are not disambiguated: first feature wins.
    first = features[0] or {}
    if not isinstance(first, dict):
        return EndpointOutcome(endpoint, EndpointStatus.TRANSIENT_ERROR, error="malformed_response")
    attrs = first.get("attributes") or {}
    if not isinstance(attrs, dict):
        return EndpointOutcome(endpoint, EndpointStatus.TRANSIENT_ERROR, error="malformed_response")
    raw_name = first_attribute(attrs, _name_fields(kind))
    if not raw_name:
        return EndpointOutcome(endpoint, EndpointStatus.NOT_FOUND, attributes=attrs)

    return EndpointOutcome(endpoint, EndpointStatus.FOUND, name=_normalize(kind, raw_name), attributes=attrs)


def resolve_place(
    latitude: float,
    longitude: float,
    kind: PlaceKind,
    client: ArcGISClient | None = None,
) -> PlaceMatch | None:
    client = client or default_client()

    for index, endpoint in enumerate(_endpoints(kind), start=1):
        logger.debug("%s endpoint %d: %s", kind.value, index, endpoint)
        outcome = query_endpoint(client, endpoint, latitude, longitude, kind)

        if outcome.status is EndpointStatus.FOUND:
            logger.info("%s resolved via endpoint %d: %s", kind.value, index, outcome.name)
            return PlaceMatch(kind=kind, name=outcome.name, endpoint=endpoint, attributes=outcome.attributes)
        if outcome.status is EndpointStatus.TRANSIENT_ERROR:
            logger.warning("%s endpoint %d failed (%s), trying next", kind.value, index, outcome.error)
        else:
            logger.info("%s endpoint %d returned no match", kind.value, index)

    logger.info("no %s found at %s, %s", kind.value, latitude, longitude)
    return None


def county_hint(match: PlaceMatch | None) -> str | None:
    """County label from a city feature, if the provider carries one."""
    if match is None:
        return None
    raw = first_attribute(match.attributes, CITY_FEATURE_COUNTY_FIELDS)
    return normalize_county_name(raw) if raw else None


def resolve_county(
    latitude: float,
    longitude: float,
    client: ArcGISClient | None = None,
) -> CountyContact:
    match = resolve_place(latitude, longitude, PlaceKind.COUNTY, client=client)
    if match is None:
        logger.info("no county found, using statewide fallback")
        return STATEWIDE_FALLBACK

    known = lookup_county(match.name)
    if known:
        return known

    logger.info("county %s not in directory, returning name only", match.name)
    return CountyContact(name=match.name)
