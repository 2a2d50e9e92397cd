from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class ContactSource(str, Enum):
    DIRECTORY = "directory"
    OFFICIAL_WEBSITE = "official_website"
    COMMON_PATTERNS = "common_patterns"
    FALLBACK = "fallback"


class Confidence(str, Enum):
    EXACT = "exact"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CountyContact(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    sheriff_phone: Optional[str] = None
    sheriff_website: Optional[str] = None


class CityContact(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    county: str  # label only, e.g. "Harris County"
    police_phone: Optional[str] = None
    police_website: Optional[str] = None
    source: ContactSource = ContactSource.DIRECTORY
    confidence: Confidence = Confidence.EXACT


class AgencyInfo(BaseModel):
    name: str
    type: Literal["Police Department", "Sheriff's Office"]
    phone: Optional[str] = None
    website: Optional[str] = None


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class JurisdictionOut(BaseModel):
    coordinates: Coordinates
    city: Optional[CityContact] = None
    county: CountyContact
    jurisdiction: Literal["city", "county"]
    primary_agency: AgencyInfo


class CountyListOut(BaseModel):
    counties: List[CountyContact]


class CityListOut(BaseModel):
    cities: List[CityContact]
