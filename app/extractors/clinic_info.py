import logging
from collections.abc import Callable
from typing import TypeVar

from app.extractors.address import extract_address
from app.extractors.name import extract_name
from app.extractors.page import ParsedPage
from app.extractors.phone import extract_phone
from app.extractors.schedule import extract_schedule
from app.extractors.specialties import extract_specialties
from app.schemas.clinic import ScrapedClinicInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _guarded(field: str, extractor: Callable[[ParsedPage], T], page: ParsedPage, default: T) -> T:
    try:
        return extractor(page)
    except Exception:
        logger.exception("Extractor for %s failed", field)
        return default


def extract_clinic_info(html: str) -> ScrapedClinicInfo:
    """Build a ScrapedClinicInfo from raw HTML. Missing fields stay empty; never raises."""
    try:
        page = ParsedPage(html)
    except Exception:
        logger.exception("Could not parse document (%d chars)", len(html))
        return ScrapedClinicInfo()

    info = ScrapedClinicInfo(
        name=_guarded("name", extract_name, page, ""),
        phone=_guarded("phone", extract_phone, page, ""),
        address=_guarded("address", extract_address, page, ""),
        specialties=_guarded("specialties", extract_specialties, page, []),
        schedule=_guarded("schedule", extract_schedule, page, ""),
    )
    logger.info(
        "Extracted clinic info: name=%s phone=%s address=%s specialties=%d schedule=%s",
        bool(info.name), bool(info.phone), bool(info.address),
        len(info.specialties), bool(info.schedule),
    )
    return info
