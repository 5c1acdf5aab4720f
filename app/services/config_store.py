"""Best-effort access to the bundled hotel configuration resource.

Every public accessor returns a plain value. Each fallible step raises
``ConfigUnavailableError`` and the accessor collapses the first failure to a
fixed default, so callers never see an error.
"""

import json
import logging
import plistlib
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from app.exceptions.custom import ConfigUnavailableError
from app.schemas.hotel import Color, HotelConfig, LocationData

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "Config"
RESOURCE_EXTENSIONS = (".plist", ".json")

DEFAULT_HOTEL_NAME = "Default Hotel"
DEFAULT_DESCRIPTION = ""
DEFAULT_LOCATION_LABEL = "Unknown Location"
FALLBACK_LATITUDE = 47.51504562696981
FALLBACK_LONGITUDE = 19.077860508882107
FALLBACK_MARKER_NAME = "Fallback Location"
DEFAULT_BACKGROUND_HEX = "#007AFF"

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{1,6}")


def _parse_hex(hex_string: str) -> Color | None:
    sanitized = hex_string.strip().removeprefix("#")
    if not _HEX_DIGITS.fullmatch(sanitized):
        return None
    rgb = int(sanitized, 16)
    return Color(
        red=((rgb >> 16) & 0xFF) / 255,
        green=((rgb >> 8) & 0xFF) / 255,
        blue=(rgb & 0xFF) / 255,
    )


DEFAULT_COLOR = _parse_hex(DEFAULT_BACKGROUND_HEX)

FALLBACK_LOCATION = LocationData(
    latitude=FALLBACK_LATITUDE,
    longitude=FALLBACK_LONGITUDE,
    marker_name=FALLBACK_MARKER_NAME,
)

DEFAULT_HOTEL_CONFIG = HotelConfig(
    name=DEFAULT_HOTEL_NAME,
    description=DEFAULT_DESCRIPTION,
    amenities=(),
    location_label=DEFAULT_LOCATION_LABEL,
    latitude=FALLBACK_LOCATION.latitude,
    longitude=FALLBACK_LOCATION.longitude,
    marker_name=FALLBACK_LOCATION.marker_name,
    background_color_hex=DEFAULT_BACKGROUND_HEX,
)

# Only these decide whether the whole record falls back.
_HOTEL_KEYS = ("hotelName", "hotelDescription", "amenities", "hotelLocation")
_LOCATION_KEYS = ("latitude", "longitude", "markerName")
_BACKGROUND_KEY = "backgroundColor"


def hex_to_color(hex_string: str) -> Color:
    """Parse ``#RRGGBB`` (or fewer digits) into a Color; DEFAULT_COLOR if unparseable."""
    return _parse_hex(hex_string) or DEFAULT_COLOR


def _decode(raw: bytes, suffix: str) -> Any:
    if suffix == ".plist":
        return plistlib.loads(raw)
    return json.loads(raw)


def _pick(document: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    return {key: document[key] for key in keys if key in document}


def _location_from(document: dict[str, Any], resource_name: str) -> LocationData:
    try:
        return LocationData.model_validate(_pick(document, _LOCATION_KEYS))
    except ValidationError as exc:
        raise ConfigUnavailableError(
            f"Failed to decode location: {exc.error_count()} error(s)", resource_name
        ) from exc


class ConfigStore:
    def __init__(self, resources_dir: Path) -> None:
        self._resources_dir = Path(resources_dir)

    @property
    def resources_dir(self) -> Path:
        return self._resources_dir

    def _locate(self, resource_name: str) -> Path:
        for suffix in RESOURCE_EXTENSIONS:
            candidate = self._resources_dir / f"{resource_name}{suffix}"
            if candidate.is_file():
                return candidate
        raise ConfigUnavailableError(
            f"{resource_name} not found in {self._resources_dir}", resource_name
        )

    def _read_document(self, resource_name: str) -> dict[str, Any]:
        path = self._locate(resource_name)
        logger.debug("Found %s", path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConfigUnavailableError(f"Cannot read {path}: {exc}", resource_name) from exc
        logger.debug("Loaded %d bytes from %s", len(raw), path.name)

        try:
            document = _decode(raw, path.suffix)
        except Exception as exc:
            raise ConfigUnavailableError(f"Cannot decode {path.name}: {exc}", resource_name) from exc

        if not isinstance(document, dict):
            raise ConfigUnavailableError(
                f"{path.name} top level is {type(document).__name__}, expected a dictionary",
                resource_name,
            )
        return document

    def load(self, resource_name: str = DEFAULT_RESOURCE) -> HotelConfig:
        """Load the full hotel record, or DEFAULT_HOTEL_CONFIG on any failure.

        The four text keys are all-or-nothing. The map coordinate falls back to
        FALLBACK_LOCATION on its own and the background color to
        DEFAULT_BACKGROUND_HEX, neither collapsing the rest of the record.
        """
        try:
            document = self._read_document(resource_name)
            fields = _pick(document, _HOTEL_KEYS)
            missing = [key for key in _HOTEL_KEYS if key not in fields]
            if missing:
                raise ConfigUnavailableError(f"Missing keys: {', '.join(missing)}", resource_name)

            try:
                location = _location_from(document, resource_name)
            except ConfigUnavailableError as exc:
                logger.warning("Using fallback location in hotel config: %s", exc.message)
                location = FALLBACK_LOCATION

            background = document.get(_BACKGROUND_KEY)
            background_hex = (
                hex_to_color(background).to_hex()
                if isinstance(background, str)
                else DEFAULT_BACKGROUND_HEX
            )

            try:
                config = HotelConfig.model_validate({
                    **fields,
                    "latitude": location.latitude,
                    "longitude": location.longitude,
                    "markerName": location.marker_name,
                    _BACKGROUND_KEY: background_hex,
                })
            except ValidationError as exc:
                raise ConfigUnavailableError(
                    f"Invalid hotel fields: {exc.error_count()} error(s)", resource_name
                ) from exc
        except ConfigUnavailableError as exc:
            logger.warning("Using default hotel config: %s", exc.message)
            return DEFAULT_HOTEL_CONFIG

        logger.debug("Loaded hotel config for %s", config.name)
        return config

    def load_location(self, resource_name: str = DEFAULT_RESOURCE) -> LocationData:
        """Load the map coordinate and marker, or FALLBACK_LOCATION on any failure."""
        try:
            location = _location_from(self._read_document(resource_name), resource_name)
        except ConfigUnavailableError as exc:
            logger.warning("Using fallback location: %s", exc.message)
            return FALLBACK_LOCATION

        logger.debug("Decoded location %s", location)
        return location

    def load_color(self, resource_name: str, key: str) -> Color:
        """Load one hex color string by key, or DEFAULT_COLOR on any failure."""
        try:
            document = self._read_document(resource_name)
            value = document.get(key)
            if not isinstance(value, str):
                raise ConfigUnavailableError(f"{key} is not a string", resource_name)
        except ConfigUnavailableError as exc:
            logger.warning("Using default color: %s", exc.message)
            return DEFAULT_COLOR

        return hex_to_color(value)
