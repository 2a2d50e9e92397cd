"""
Static contact directory for Texas sheriff's offices and municipal police
departments.

Counties are keyed by a slug of the county name without the "County" suffix
("fort_bend"), cities by their lowercased name ("port arthur"). Both tables are
read-only; guessed contacts for unknown cities live in the guesser's cache.
"""

from types import MappingProxyType

from .schemas import CityContact, CountyContact

STATEWIDE_FALLBACK = CountyContact(
    name="Texas",
    sheriff_phone="(512) 463-2000",
    sheriff_website="https://www.dps.texas.gov",
)

TEXAS_COUNTIES = MappingProxyType({
    "jefferson": CountyContact(
        name="Jefferson County",
        sheriff_phone="(409) 835-8411",
        sheriff_website="https://www.co.jefferson.tx.us/sheriff",
    ),
    "harris": CountyContact(
        name="Harris County",
        sheriff_phone="(713) 755-7628",
        sheriff_website="https://www.hcso.org",
    ),
    "dallas": CountyContact(
        name="Dallas County",
        sheriff_phone="(214) 749-8641",
        sheriff_website="https://www.dallascounty.org/departments/sheriff",
    ),
    "tarrant": CountyContact(
        name="Tarrant County",
        sheriff_phone="(817) 884-1213",
        sheriff_website="https://www.tarrantcounty.com/en/sheriff",
    ),
    "bexar": CountyContact(
        name="Bexar County",
        sheriff_phone="(210) 335-6000",
        sheriff_website="https://www.bexar.org/1250/Sheriffs-Office",
    ),
    "travis": CountyContact(
        name="Travis County",
        sheriff_phone="(512) 854-9770",
        sheriff_website="https://www.tcso.org",
    ),
    "collin": CountyContact(
        name="Collin County",
        sheriff_phone="(972) 547-5100",
        sheriff_website="https://www.collincountytx.gov/sheriff",
    ),
    "denton": CountyContact(
        name="Denton County",
        sheriff_phone="(940) 349-1600",
        sheriff_website="https://www.dentoncounty.gov/Departments/Sheriff",
    ),
    "fort_bend": CountyContact(
        name="Fort Bend County",
        sheriff_phone="(281) 341-4665",
        sheriff_website="https://www.fbcso.org",
    ),
    "williamson": CountyContact(
        name="Williamson County",
        sheriff_phone="(512) 943-1300",
        sheriff_website="https://www.wilco.org/Departments/Sheriff",
    ),
    "hidalgo": CountyContact(
        name="Hidalgo County",
        sheriff_phone="(956) 383-8114",
        sheriff_website="https://www.hidalgocounty.us/269/Sheriffs-Office",
    ),
})

TEXAS_CITIES = MappingProxyType({
    "port arthur": CityContact(
        name="Port Arthur",
        county="Jefferson County",
        police_phone="(409) 983-8600",
        police_website="https://www.portarthurtx.gov/departments/police",
    ),
    "houston": CityContact(
        name="Houston",
        county="Harris County",
        police_phone="(713) 884-3131",
        police_website="https://www.houstontx.gov/police",
    ),
    "san antonio": CityContact(
        name="San Antonio",
        county="Bexar County",
        police_phone="(210) 207-7273",
        police_website="https://www.sanantonio.gov/SAPD",
    ),
    "dallas": CityContact(
        name="Dallas",
        county="Dallas County",
        police_phone="(214) 671-4282",
        police_website="https://www.dallaspolice.net",
    ),
    "austin": CityContact(
        name="Austin",
        county="Travis County",
        police_phone="(512) 974-5000",
        police_website="https://www.austintexas.gov/department/police",
    ),
    "fort worth": CityContact(
        name="Fort Worth",
        county="Tarrant County",
        police_phone="(817) 392-4222",
        police_website="https://www.fortworthtexas.gov/departments/police",
    ),
    "el paso": CityContact(
        name="El Paso",
        county="El Paso County",
        police_phone="(915) 212-4400",
        police_website="https://www.elpasotexas.gov/police",
    ),
    "arlington": CityContact(
        name="Arlington",
        county="Tarrant County",
        police_phone="(817) 459-5700",
        police_website="https://www.arlingtontx.gov/city_hall/departments/police",
    ),
    "corpus christi": CityContact(
        name="Corpus Christi",
        county="Nueces County",
        police_phone="(361) 886-2600",
        police_website="https://www.cctexas.com/departments/police",
    ),
    "plano": CityContact(
        name="Plano",
        county="Collin County",
        police_phone="(972) 424-5678",
        police_website="https://www.plano.gov/1183/Police",
    ),
    "lubbock": CityContact(
        name="Lubbock",
        county="Lubbock County",
        police_phone="(806) 775-2865",
        police_website="https://www.mylubbock.us/departments/police",
    ),
    "beaumont": CityContact(
        name="Beaumont",
        county="Jefferson County",
        police_phone="(409) 832-1234",
        police_website="https://www.beaumonttexas.gov/departments/police",
    ),
})


def county_key(county_name: str) -> str:
    """'Fort Bend County' -> 'fort_bend'."""
    key = (county_name or "").strip().lower().replace(" county", "")
    return "_".join(key.split())


def city_key(city_name: str) -> str:
    return (city_name or "").strip().lower()


def lookup_county(county_name: str) -> CountyContact | None:
    return TEXAS_COUNTIES.get(county_key(county_name))


def lookup_city(city_name: str) -> CityContact | None:
    return TEXAS_CITIES.get(city_key(city_name))


def list_counties() -> list[CountyContact]:
    return sorted(TEXAS_COUNTIES.values(), key=lambda c: c.name)


def list_cities() -> list[CityContact]:
    return sorted(TEXAS_CITIES.values(), key=lambda c: c.name)
