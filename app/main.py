import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import HeaderImageNotFoundError
from app.exceptions.handlers import header_image_not_found_handler
from app.routers.hotel import health_router
from app.routers.hotel import router as hotel_router
from app.routers.screens import router as screens_router
from app.services.config_store import ConfigStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    app.state.settings = settings
    app.state.config_store = ConfigStore(settings.resources_dir)
    logger.info("Serving %s from %s", settings.config_resource, settings.resources_dir)

    yield


app = FastAPI(title="Hotel Showcase", lifespan=lifespan)

app.add_exception_handler(HeaderImageNotFoundError, header_image_not_found_handler)

app.include_router(screens_router)
app.include_router(hotel_router)
app.include_router(health_router)
