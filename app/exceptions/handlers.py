import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import InvalidInputError

logger = logging.getLogger(__name__)


async def invalid_input_error_handler(_request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning("Rejected scrape request: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"error": exc.message},
    )
