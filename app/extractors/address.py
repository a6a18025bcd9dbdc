import re

from app.extractors.page import ParsedPage, first_match, scan
from app.extractors.structured_data import text_value
from app.extractors.text import clean_text

_LABEL_PATTERNS = (
    re.compile(r"direcci[óo]n[:\s]*([^<\n]{20,150})", re.IGNORECASE),
    re.compile(r"ubicaci[óo]n[:\s]*([^<\n]{20,150})", re.IGNORECASE),
    re.compile(
        r"d[óo]nde\s+(?:estamos|nos\s+encontramos)[:\s]*([^<\n]{20,150})",
        re.IGNORECASE,
    ),
)
# "Calle Mayor, 12 ..." / "C/ Alcalá 45, Madrid" / "Av. de América 3"
_STREET_RE = re.compile(
    r"\b(?:(?:calle|avenida|plaza)\s+|(?:c/|av\.|pl\.)\s*)[^<\n,]{5,80}?[,\s]+\d{1,5}[^<\n]{0,80}",
    re.IGNORECASE,
)

_POSTAL_ADDRESS_PARTS = ("streetAddress", "addressLocality", "postalCode")


def _accept(candidate: str) -> str | None:
    address = candidate.strip()
    if 20 < len(address) < 200:
        return address
    return None


def format_postal_address(address) -> str | None:
    """Render a JSON-LD address (string, PostalAddress object or list of either)."""
    if isinstance(address, list):
        for item in address:
            if formatted := format_postal_address(item):
                return formatted
        return None
    if isinstance(address, dict):
        parts = [text_value(address.get(key)) for key in _POSTAL_ADDRESS_PARTS]
        return ", ".join(p for p in parts if p) or None
    return text_value(address)


def _from_structured_data(page: ParsedPage) -> str | None:
    for record in page.records:
        if formatted := format_postal_address(record.get("address")):
            return formatted
    return None


def _from_labels(page: ParsedPage) -> str | None:
    for pattern in _LABEL_PATTERNS:
        if address := scan(pattern, page.text, _accept):
            return address
    return None


def _from_street_names(page: ParsedPage) -> str | None:
    return scan(_STREET_RE, page.text, _accept)


def _from_microdata(page: ParsedPage) -> str | None:
    tag = page.soup.find(attrs={"itemprop": "streetAddress"})
    if tag is None:
        return None
    return clean_text(tag.decode_contents()) or None


def extract_address(page: ParsedPage) -> str:
    return first_match(
        page,
        (_from_structured_data, _from_labels, _from_street_names, _from_microdata),
    ) or ""
