import re

from app.extractors.page import ParsedPage, first_match, scan

_LABEL_RE = re.compile(
    r"horarios?\s*(?:de\s+atenci[óo]n)?[:\s]*([^<]{30,300})",
    re.IGNORECASE,
)
_DAY_RANGE_RE = re.compile(
    r"(?:lunes|monday)[^<]{10,200}(?:viernes|domingo|friday|sunday)",
    re.IGNORECASE,
)
_TIME_RANGE_RE = re.compile(r"\d{1,2}:\d{2}[^<]{10,150}\d{1,2}:\d{2}")


def _accept(candidate: str) -> str | None:
    schedule = candidate.strip()
    if 20 < len(schedule) < 300:
        return schedule
    return None


def _from_label(page: ParsedPage) -> str | None:
    return scan(_LABEL_RE, page.text, _accept)


def _from_day_range(page: ParsedPage) -> str | None:
    return scan(_DAY_RANGE_RE, page.text, _accept)


def _from_time_range(page: ParsedPage) -> str | None:
    return scan(_TIME_RANGE_RE, page.text, _accept)


def extract_schedule(page: ParsedPage) -> str:
    return first_match(page, (_from_label, _from_day_range, _from_time_range)) or ""
