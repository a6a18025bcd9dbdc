from typing import Annotated

from fastapi import Depends, Request

from app.services.clinic_scraper import ClinicScraperService


def get_clinic_scraper_service(request: Request) -> ClinicScraperService:
    return request.app.state.clinic_scraper_service


ClinicScraperDep = Annotated[ClinicScraperService, Depends(get_clinic_scraper_service)]
