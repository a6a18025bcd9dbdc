"""Medical specialties offered by a clinic.

Two sources are merged: a dictionary of Spanish specialty names searched
in the page text, and list items / labels in the markup that look like a
services or specialties section.
"""

import re

from app.extractors.page import ParsedPage
from app.extractors.text import clean_text

MAX_SPECIALTIES = 20

SPECIALTY_KEYWORDS = (
    "medicina general", "medicina familiar", "medicina interna",
    "odontología", "odontología general", "odontopediatría", "ortodoncia", "endodoncia",
    "pediatría", "neonatología",
    "dermatología", "dermatología estética",
    "cardiología",
    "traumatología", "ortopedia", "cirugía ortopédica",
    "ginecología", "obstetricia", "ginecología y obstetricia",
    "oftalmología",
    "psiquiatría",
    "neurología",
    "fisioterapia", "rehabilitación",
    "cirugía general", "cirugía plástica", "cirugía estética",
    "endocrinología", "nutrición", "dietología",
    "urología",
    "otorrinolaringología",
    "reumatología",
    "neumología",
    "gastroenterología",
    "psicología", "psicología clínica",
    "anestesiología",
    "radiología",
    "oncología",
    "nefrología",
    "hematología",
    "alergología",
    "geriatría",
    "podología",
)

_ACCENT_VARIANTS = {"á": "[áà]", "é": "[éè]", "í": "[íì]", "ó": "[óò]"}

_SECTION_PATTERNS = (
    # <h2>Especialidades</h2><p>Fisioterapia deportiva</p>
    re.compile(
        r"(?:especialidad(?:es)?|servicio(?:s)?)[:\s]*</[^>]+>\s*<[^>]*>([^<]{5,80})",
        re.IGNORECASE,
    ),
    re.compile(
        r"<(?:li|div)[^>]*class=[\"'][^\"']*(?:service|specialty|especialidad)[^\"']*[\"'][^>]*>([^<]{5,80})",
        re.IGNORECASE,
    ),
)


def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    body = "".join(_ACCENT_VARIANTS.get(c, re.escape(c)) for c in keyword)
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


_KEYWORD_PATTERNS = tuple((kw, _keyword_pattern(kw)) for kw in SPECIALTY_KEYWORDS)


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _from_keywords(text: str) -> list[str]:
    lowered = text.lower()
    return [kw for kw, pattern in _KEYWORD_PATTERNS if pattern.search(lowered)]


def _from_sections(html: str) -> list[str]:
    found: list[str] = []
    for pattern in _SECTION_PATTERNS:
        for match in pattern.finditer(html):
            specialty = clean_text(match.group(1))
            if 5 < len(specialty) < 80 and "http" not in specialty.lower():
                found.append(specialty)
    return found


def extract_specialties(page: ParsedPage) -> list[str]:
    """Keyword hits first, then markup hits; deduplicated case-insensitively."""
    specialties: dict[str, str] = {}
    for specialty in [*_from_keywords(page.text), *_from_sections(page.html)]:
        specialties.setdefault(specialty.casefold(), capitalize(specialty))
    return list(specialties.values())[:MAX_SPECIALTIES]
