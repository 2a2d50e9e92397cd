"""
Best-effort police contact lookup for cities missing from the static directory.

Existence probes are HEAD requests where any answer at all, including a 404 or a
parked-domain page, counts as "the site exists". Guessed websites are therefore
plausible, not verified.
"""

from __future__ import annotations

import logging
import threading
from urllib.parse import urlsplit

import requests
from bs4 import BeautifulSoup
from cachetools import LRUCache

from .config import settings
from .directory import lookup_city
from .schemas import CityContact, Confidence, ContactSource
from .utils.text import extract_phone_number, normalize_text, slugify

logger = logging.getLogger(__name__)

POLICE_PATHS = [
    "/police",
    "/departments/police",
    "/police-department",
    "/public-safety/police",
    "/services/police",
    "/government/departments/police",
]


def official_site_candidates(place_name: str) -> list[str]:
    slug = slugify(place_name)
    domains = [
        f"cityof{slug}.com",
        f"{slug}tx.gov",
        f"{slug}.tx.us",
        f"city{slug}.org",
        f"www.cityof{slug}.com",
    ]
    urls: list[str] = []
    for domain in domains:
        url = f"https://{domain}" if domain.startswith("www.") else f"https://www.{domain}"
        if url not in urls:
            urls.append(url)
    return urls


def common_gov_candidates(place_name: str) -> list[str]:
    slug = slugify(place_name)
    return [
        f"https://{slug}.tx.us",
        f"https://www.{slug}tx.gov",
        f"https://city{slug}.org",
        f"https://{slug}.org",
        f"https://www.cityof{slug}.net",
    ]


def likely_website(place_name: str) -> str:
    return f"https://www.cityof{slugify(place_name)}.com"


def fallback_phone(place_name: str) -> str:
    return f'Search "{place_name} Texas police department phone"'


class ContactGuesser:
    def __init__(
        self,
        cache_size: int | None = None,
        probe_timeout: float | None = None,
        scrape_phone: bool | None = None,
    ):
        if cache_size is None:
            cache_size = settings.guess_cache_size
        if probe_timeout is None:
            probe_timeout = settings.probe_timeout_seconds
        if cache_size < 0:
            raise ValueError("cache_size must be zero or positive")
        if probe_timeout <= 0:
            raise ValueError("probe_timeout must be positive")

        # maxsize 0 disables memoization
        self.cache: LRUCache = LRUCache(maxsize=cache_size)
        self._lock = threading.Lock()
        self.probe_timeout = probe_timeout
        self.scrape_phone = settings.scrape_police_phone if scrape_phone is None else scrape_phone

    def site_exists(self, url: str) -> bool:
        try:
            requests.head(
                url,
                timeout=self.probe_timeout,
                allow_redirects=False,
                headers={"Cache-Control": "no-cache", "User-Agent": settings.user_agent},
            )
        except requests.RequestException:
            return False
        return True

    def find_police_page(self, site: str) -> str | None:
        parts = urlsplit(site)
        origin = f"{parts.scheme}://{parts.netloc}"
        for path in POLICE_PATHS:
            url = f"{origin}{path}"
            if self.site_exists(url):
                logger.info("found potential police page: %s", url)
                return url
        return None

    def scrape_phone_number(self, url: str) -> str | None:
        try:
            response = requests.get(url, timeout=self.probe_timeout, headers={"User-Agent": settings.user_agent})
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.info("could not fetch %s for phone scraping: %s", url, exc)
            return None
        text = BeautifulSoup(response.text, "html.parser").get_text(" ")
        return extract_phone_number(normalize_text(text))

    def _probe_sites(
        self,
        place_name: str,
        county_name: str,
        candidates: list[str],
        source: ContactSource,
        confidence: Confidence,
    ) -> CityContact | None:
        for site in candidates:
            if not self.site_exists(site):
                continue
            logger.info("found potential city website: %s", site)
            website = self.find_police_page(site) or site
            phone = self.scrape_phone_number(website) if self.scrape_phone else None
            return CityContact(
                name=place_name,
                county=county_name,
                police_phone=phone,
                police_website=website,
                source=source,
                confidence=confidence,
            )
        return None

    def _search(self, place_name: str, county_name: str) -> CityContact:
        found = self._probe_sites(
            place_name, county_name, official_site_candidates(place_name),
            ContactSource.OFFICIAL_WEBSITE, Confidence.HIGH,
        )
        if found:
            return found

        found = self._probe_sites(
            place_name, county_name, common_gov_candidates(place_name),
            ContactSource.COMMON_PATTERNS, Confidence.MEDIUM,
        )
        if found:
            return found

        logger.info("no website found for %s, returning constructed fallback", place_name)
        return CityContact(
            name=place_name,
            county=county_name,
            police_phone=fallback_phone(place_name),
            police_website=likely_website(place_name),
            source=ContactSource.FALLBACK,
            confidence=Confidence.LOW,
        )

    def guess_contact(self, place_name: str, county_name: str) -> CityContact:
        known = lookup_city(place_name)
        if known:
            return known

        key = place_name.strip().lower()
        with self._lock:
            cached = self.cache.get(key)
        if cached is not None:
            logger.info("guess cache hit: %s", place_name)
            return cached

        result = self._search(place_name, county_name)
        if self.cache.maxsize:
            with self._lock:
                self.cache[key] = result
        return result

    def clear(self) -> None:
        with self._lock:
            self.cache.clear()


guesser = ContactGuesser()
