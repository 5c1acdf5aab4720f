import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import HeaderImageNotFoundError

logger = logging.getLogger(__name__)


async def header_image_not_found_handler(
    _request: Request, exc: HeaderImageNotFoundError
) -> JSONResponse:
    logger.warning("Header image unavailable: %s", exc.message)
    return JSONResponse(
        status_code=404,
        content={"detail": f"Header image not found: {exc.message}"},
    )
