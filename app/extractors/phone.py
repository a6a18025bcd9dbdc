import re
from urllib.parse import unquote

from app.extractors.page import ParsedPage, first_match, scan
from app.extractors.structured_data import text_value

_PHONE_LABEL_RE = re.compile(
    r"tel[éeè]fono[:\s]*<?(?:a href=[\"']tel:)?([+\d][\d\s()-]{8,})",
    re.IGNORECASE,
)
_CONTACT_LABEL_RE = re.compile(r"contacto[:\s]*([+\d][\d\s()-]{9,})", re.IGNORECASE)
# Spanish mobile/landline numbers, with and without the +34 prefix
_INTERNATIONAL_RE = re.compile(
    r"(?<![\w+])(\+34[\s-]?[6789]\d{2}[\s-]?\d{2}[\s-]?\d{2}[\s-]?\d{2})\b"
)
_NATIONAL_RE = re.compile(r"\b([6789]\d{2}[\s-]?\d{2}[\s-]?\d{2}[\s-]?\d{2})\b")

_NON_PHONE_CHARS_RE = re.compile(r"[^+\d]")

_MIN_LENGTH = 9
_MAX_LENGTH = 15


def normalize_phone(raw: str) -> str | None:
    """Strip formatting and add the Spanish country code where it is implied.

    Returns None when the stripped value is not 9-15 characters long.
    """
    phone = _NON_PHONE_CHARS_RE.sub("", raw)
    if not _MIN_LENGTH <= len(phone) <= _MAX_LENGTH:
        return None
    if phone.startswith("34") and len(phone) == 11:
        return f"+{phone}"
    if not phone.startswith("+") and len(phone) == 9:
        return f"+34{phone}"
    return phone


def _contact_point_phones(contact_point) -> list[str]:
    points = contact_point if isinstance(contact_point, list) else [contact_point]
    return [
        phone
        for point in points
        if isinstance(point, dict) and (phone := text_value(point.get("telephone")))
    ]


def _from_structured_data(page: ParsedPage) -> str | None:
    for record in page.records:
        candidates = []
        if telephone := text_value(record.get("telephone")):
            candidates.append(telephone)
        candidates.extend(_contact_point_phones(record.get("contactPoint")))
        for candidate in candidates:
            if phone := normalize_phone(candidate):
                return phone
    return None


def _from_tel_links(page: ParsedPage) -> str | None:
    for a in page.soup.find_all("a", href=True):
        href = a["href"].strip()
        if href.lower().startswith("tel:"):
            if phone := normalize_phone(unquote(href[4:])):
                return phone
    return None


def _from_labels(page: ParsedPage) -> str | None:
    return (
        scan(_PHONE_LABEL_RE, page.html, normalize_phone)
        or scan(_CONTACT_LABEL_RE, page.html, normalize_phone)
    )


def _from_spanish_numbers(page: ParsedPage) -> str | None:
    return (
        scan(_INTERNATIONAL_RE, page.html, normalize_phone)
        or scan(_NATIONAL_RE, page.html, normalize_phone)
    )


def extract_phone(page: ParsedPage) -> str:
    return first_match(
        page,
        (_from_structured_data, _from_tel_links, _from_labels, _from_spanish_numbers),
    ) or ""
