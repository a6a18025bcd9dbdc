from pydantic import BaseModel


class ScrapeRequest(BaseModel):
    website_url: str | None = None


class Doctor(BaseModel):
    name: str
    specialty: str


class OpeningHours(BaseModel):
    open: str
    close: str


class ScrapedClinicInfo(BaseModel):
    name: str = ""
    phone: str = ""  # digits, "+" prefixed when a country code is known
    address: str = ""
    specialties: list[str] = []
    schedule: str = ""
    # Reserved, never populated by the scraper
    doctors: list[Doctor] = []
    opening_hours: dict[str, OpeningHours] = {}
    additional_info: str = ""


class ScrapeResult(ScrapedClinicInfo):
    error: str | None = None
