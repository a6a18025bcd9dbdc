import logging
import sys
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.exceptions.custom import InvalidInputError
from app.exceptions.handlers import invalid_input_error_handler
from app.routers.scrape import router as scrape_router
from app.services.clinic_scraper import ClinicScraperService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.fetch_timeout) as client:
        app.state.clinic_scraper_service = ClinicScraperService(
            client,
            user_agent=settings.user_agent,
            accept_language=settings.accept_language,
            timeout=settings.fetch_timeout,
            max_body_bytes=settings.max_body_bytes,
        )

        yield


app = FastAPI(title="Clinic Scraper", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Client-Info", "Apikey"],
)

app.add_exception_handler(InvalidInputError, invalid_input_error_handler)

app.include_router(scrape_router)


def run() -> None:
    settings = Settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
