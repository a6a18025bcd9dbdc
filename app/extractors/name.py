import re

from app.extractors.page import ParsedPage, first_match
from app.extractors.structured_data import record_types, text_value
from app.extractors.text import clean_text

_ORGANIZATION_TYPES = frozenset({"Organization", "MedicalOrganization", "MedicalBusiness"})
_META_NAME_PATTERNS = tuple(
    re.compile(rf"^{re.escape(name)}$", re.IGNORECASE)
    for name in ("og:site_name", "og:title", "twitter:title")
)
# Taglines usually follow the first "|" or "-" in a <title>
_TITLE_SEPARATOR_RE = re.compile(r"[|\-]")


def _from_structured_data(page: ParsedPage) -> str | None:
    named = [r for r in page.records if text_value(r.get("name"))]
    for record in named:
        if record_types(record) & _ORGANIZATION_TYPES:
            return text_value(record["name"])
    if named:
        return text_value(named[0]["name"])
    return None


def _from_meta_tags(page: ParsedPage) -> str | None:
    for pattern in _META_NAME_PATTERNS:
        for attr in ("property", "name"):
            tag = page.soup.find("meta", attrs={attr: pattern, "content": True})
            if tag and tag["content"].strip():
                return tag["content"].strip()
    return None


def _from_title(page: ParsedPage) -> str | None:
    title = page.soup.find("title")
    if title is None:
        return None
    return _TITLE_SEPARATOR_RE.split(title.get_text(), maxsplit=1)[0].strip() or None


def _from_heading(page: ParsedPage) -> str | None:
    h1 = page.soup.find("h1")
    if h1 is None:
        return None
    return clean_text(h1.decode_contents()) or None


def extract_name(page: ParsedPage) -> str:
    return first_match(
        page,
        (_from_structured_data, _from_meta_tags, _from_title, _from_heading),
    ) or ""
