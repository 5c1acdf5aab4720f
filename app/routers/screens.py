import logging

from fastapi import APIRouter, Query
from fastapi.responses import FileResponse, HTMLResponse

from app.dependencies import ConfigStoreDep, SettingsDep
from app.exceptions.custom import HeaderImageNotFoundError
from app.mappers.flow_layout import layout_amenities
from app.mappers.screen_builder import (
    build_home_page,
    build_info_page,
    build_location_page,
)

logger = logging.getLogger(__name__)

router = APIRouter()

HEADER_IMAGE_NAMES = ("header.jpg", "header.jpeg", "header.png")


@router.get("/", response_class=HTMLResponse)
async def home(store: ConfigStoreDep, settings: SettingsDep) -> HTMLResponse:
    config = store.load(settings.config_resource)
    background = store.load_color(settings.config_resource, "backgroundColor")
    return HTMLResponse(build_home_page(config, background))


@router.get("/info", response_class=HTMLResponse)
async def info(
    store: ConfigStoreDep,
    settings: SettingsDep,
    width: float | None = Query(default=None, gt=0),
) -> HTMLResponse:
    config = store.load(settings.config_resource)
    viewport_width = width or settings.viewport_width
    rows = layout_amenities(config.amenities, viewport_width)
    logger.debug(
        "Laid out %d amenities in %d rows at width %s",
        len(config.amenities), len(rows), viewport_width,
    )
    return HTMLResponse(build_info_page(config, rows))


@router.get("/location", response_class=HTMLResponse)
async def location(store: ConfigStoreDep, settings: SettingsDep) -> HTMLResponse:
    data = store.load_location(settings.config_resource)
    return HTMLResponse(build_location_page(data))


@router.get("/images/header")
async def header_image(store: ConfigStoreDep) -> FileResponse:
    for name in HEADER_IMAGE_NAMES:
        path = store.resources_dir / name
        if path.is_file():
            return FileResponse(path)
    raise HeaderImageNotFoundError(f"no header image in {store.resources_dir}")
