"""JSON-LD (schema.org) blocks embedded in a page."""

import json
import logging
import re
from typing import Any

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_JSON_LD_TYPE_RE = re.compile(r"application/ld\+json", re.IGNORECASE)

StructuredRecord = dict[str, Any]


def _flatten(value: Any) -> list[StructuredRecord]:
    """Unwrap top-level lists and @graph containers into plain objects."""
    if isinstance(value, list):
        records: list[StructuredRecord] = []
        for item in value:
            records.extend(_flatten(item))
        return records
    if not isinstance(value, dict):
        return []
    graph = value.get("@graph")
    if isinstance(graph, list):
        return [value, *_flatten(graph)]
    return [value]


def extract_json_ld(soup: BeautifulSoup) -> list[StructuredRecord]:
    """Decode every <script type="application/ld+json"> block, in document order.

    Blocks that are not valid JSON are skipped.
    """
    records: list[StructuredRecord] = []
    for script in soup.find_all("script", attrs={"type": _JSON_LD_TYPE_RE}):
        raw = script.string if script.string is not None else script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            decoded = json.loads(raw)
        except ValueError:
            logger.debug("Skipping malformed JSON-LD block (%d chars)", len(raw))
            continue
        records.extend(_flatten(decoded))
    return records


def record_types(record: StructuredRecord) -> set[str]:
    """Return the declared @type tags; @type may be a string or a list."""
    declared = record.get("@type")
    if isinstance(declared, str):
        return {declared}
    if isinstance(declared, list):
        return {t for t in declared if isinstance(t, str)}
    return set()


def text_value(value: Any) -> str | None:
    """Stripped string value, or None for missing/empty/non-scalar values."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
