from pydantic import BaseModel


class AmenityRowsResponse(BaseModel):
    width: float
    rows: list[list[str]]


class LocationResponse(BaseModel):
    latitude: float
    longitude: float
    marker_name: str | None = None
    marker_label: str
    map_url: str


class ThemeResponse(BaseModel):
    red: float
    green: float
    blue: float
    hex: str


class HealthResponse(BaseModel):
    status: str
