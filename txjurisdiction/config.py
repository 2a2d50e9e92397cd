from pydantic_settings import BaseSettings, SettingsConfigDict

TXDOT_CITIES_URL = "https://services.arcgis.com/KTcxiTD9dsQw4r7Z/arcgis/rest/services/TxDOT_City_Boundaries/FeatureServer/0/query"
TXDOT_COUNTIES_URL = "https://services.arcgis.com/KTcxiTD9dsQw4r7Z/arcgis/rest/services/Texas_County_Boundaries_Detailed/FeatureServer/0/query"
FALLBACK_CITIES_URL = "https://maps.dot.state.tx.us/arcgis/rest/services/General/Cities/MapServer/0/query"
FALLBACK_COUNTIES_URL = "https://maps.dot.state.tx.us/arcgis/rest/services/Boundaries/MapServer/1/query"
CENSUS_PLACES_URL = "https://tigerweb.geo.census.gov/arcgis/rest/services/TIGERweb/Places_CouSub_ConCity_SubMCD/MapServer/0/query"
CENSUS_COUNTIES_URL = "https://tigerweb.geo.census.gov/arcgis/rest/services/TIGERweb/State_County/MapServer/1/query"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Tried in order; first endpoint that yields a usable name wins.
    city_endpoints: list[str] = [TXDOT_CITIES_URL, FALLBACK_CITIES_URL, CENSUS_PLACES_URL]
    county_endpoints: list[str] = [TXDOT_COUNTIES_URL, FALLBACK_COUNTIES_URL, CENSUS_COUNTIES_URL]

    user_agent: str = "Texas Law Enforcement Jurisdiction App"
    request_timeout_seconds: float = 15.0
    probe_timeout_seconds: float = 5.0

    guess_cache_size: int = 512
    scrape_police_phone: bool = False

    log_level: str = "INFO"


settings = Settings()
