import html
import re

PHONE_PATTERNS = [
    re.compile(r"\((\d{3})\)\s*(\d{3})-(\d{4})"),
    re.compile(r"(\d{3})-(\d{3})-(\d{4})"),
    re.compile(r"(\d{3})\.(\d{3})\.(\d{4})"),
    re.compile(r"(\d{3})\s+(\d{3})\s+(\d{4})"),
    re.compile(r"1?[-.\s]?\(?(\d{3})\)?[-.\s]?(\d{3})[-.\s]?(\d{4})"),
]


def normalize_text(s: str) -> str:
    """
    Normalize text coming back from GIS attributes or scraped pages:
    - HTML entity unescape (&amp; -> &)
    - Collapse whitespace
    - Normalize curly quotes/dashes
    """
    if not s:
        return ""
    s = html.unescape(s)
    s = s.replace("\u00a0", " ")         # nbsp
    s = s.replace("\u2018", "'").replace("\u2019", "'")
    s = s.replace("\u201c", '"').replace("\u201d", '"')
    s = s.replace("\u2013", "-").replace("\u2014", "-")
    s = re.sub(r"\s+", " ", s).strip()
    return s


def slugify(name: str) -> str:
    """'Port Arthur' -> 'portarthur', 'St. Hedwig' -> 'sthedwig'."""
    slug = re.sub(r"\s+", "", (name or "").lower())
    return re.sub(r"[^a-z0-9]", "", slug)


def format_phone(digits: str) -> str | None:
    digits = re.sub(r"\D", "", digits or "")
    if len(digits) == 11 and digits[0] == "1":
        digits = digits[1:]
    if len(digits) != 10:
        return None
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def extract_phone_number(text: str) -> str | None:
    if not text:
        return None
    for pattern in PHONE_PATTERNS:
        m = pattern.search(text)
        if m:
            phone = format_phone(m.group(0))
            if phone:
                return phone
    return None
