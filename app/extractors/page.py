import re
from collections.abc import Callable, Iterable

from bs4 import BeautifulSoup

from app.extractors.structured_data import StructuredRecord, extract_json_ld
from app.extractors.text import clean_text


class ParsedPage:
    """Read-only views of one fetched document shared by the field extractors."""

    def __init__(self, html: str):
        self.html = html
        self.soup = BeautifulSoup(html, "html.parser")
        self.records: list[StructuredRecord] = extract_json_ld(self.soup)
        self.text = clean_text(html)


# A strategy returns the field value, or None when it finds nothing
Extractor = Callable[[ParsedPage], str | None]


def first_match(page: ParsedPage, extractors: Iterable[Extractor]) -> str | None:
    """Run extractors in priority order; the first non-empty result wins."""
    for extractor in extractors:
        value = extractor(page)
        if value:
            return value
    return None


def scan(
    pattern: re.Pattern[str],
    text: str,
    accept: Callable[[str], str | None],
) -> str | None:
    """Return the first match (group 1 if the pattern has one) that accept() keeps."""
    for match in pattern.finditer(text):
        candidate = match.group(1) if pattern.groups else match.group(0)
        value = accept(candidate)
        if value:
            return value
    return None
