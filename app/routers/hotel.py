from fastapi import APIRouter, Query

from app.dependencies import ConfigStoreDep, SettingsDep
from app.mappers.flow_layout import layout_amenities
from app.mappers.screen_builder import map_embed_url
from app.schemas.hotel import HotelConfig
from app.schemas.responses import (
    AmenityRowsResponse,
    HealthResponse,
    LocationResponse,
    ThemeResponse,
)

router = APIRouter(prefix="/api")


@router.get("/hotel", response_model=HotelConfig, response_model_by_alias=True)
async def get_hotel(store: ConfigStoreDep, settings: SettingsDep) -> HotelConfig:
    return store.load(settings.config_resource)


@router.get("/hotel/amenities", response_model=AmenityRowsResponse)
async def get_amenity_rows(
    store: ConfigStoreDep,
    settings: SettingsDep,
    width: float | None = Query(default=None, gt=0),
) -> AmenityRowsResponse:
    config = store.load(settings.config_resource)
    viewport_width = width or settings.viewport_width
    return AmenityRowsResponse(
        width=viewport_width,
        rows=layout_amenities(config.amenities, viewport_width),
    )


@router.get("/location", response_model=LocationResponse)
async def get_location(store: ConfigStoreDep, settings: SettingsDep) -> LocationResponse:
    data = store.load_location(settings.config_resource)
    return LocationResponse(
        latitude=data.latitude,
        longitude=data.longitude,
        marker_name=data.marker_name,
        marker_label=data.marker_label,
        map_url=map_embed_url(data),
    )


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(store: ConfigStoreDep, settings: SettingsDep) -> ThemeResponse:
    color = store.load_color(settings.config_resource, "backgroundColor")
    return ThemeResponse(red=color.red, green=color.green, blue=color.blue, hex=color.to_hex())


health_router = APIRouter()


@health_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")
