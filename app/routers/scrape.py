from fastapi import APIRouter

from app.dependencies import ClinicScraperDep
from app.exceptions.custom import InvalidInputError
from app.schemas.clinic import ScrapeRequest, ScrapeResult

router = APIRouter()


@router.post(
    "/scrape-clinic",
    response_model=ScrapeResult,
    response_model_exclude_none=True,
)
async def scrape_clinic(
    service: ClinicScraperDep,
    request: ScrapeRequest | None = None,
) -> ScrapeResult:
    website_url = request.website_url if request else None
    if not website_url or not website_url.strip():
        raise InvalidInputError("website_url is required")
    return await service.scrape(website_url)
