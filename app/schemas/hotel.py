from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr

DEFAULT_MARKER_LABEL = "Default Marker"


class HotelConfig(BaseModel):
    """Everything the screens show about the hotel.

    Field aliases are the key names used in the configuration resource.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: StrictStr = Field(alias="hotelName")
    description: StrictStr = Field(alias="hotelDescription")
    amenities: tuple[StrictStr, ...]
    location_label: StrictStr = Field(alias="hotelLocation")
    latitude: StrictFloat
    longitude: StrictFloat
    marker_name: StrictStr | None = Field(default=None, alias="markerName")
    background_color_hex: StrictStr = Field(alias="backgroundColor")


class LocationData(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latitude: StrictFloat
    longitude: StrictFloat
    marker_name: StrictStr | None = Field(default=None, alias="markerName")

    @property
    def marker_label(self) -> str:
        return self.marker_name or DEFAULT_MARKER_LABEL


class Color(BaseModel):
    """An RGB color with channels normalized to 0.0-1.0."""

    model_config = ConfigDict(frozen=True)

    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)

    def to_hex(self) -> str:
        return "#" + "".join(
            f"{round(channel * 255):02X}" for channel in (self.red, self.green, self.blue)
        )

    def css(self) -> str:
        r, g, b = (round(c * 255) for c in (self.red, self.green, self.blue))
        return f"rgb({r}, {g}, {b})"
