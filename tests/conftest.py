import plistlib

import httpx
import pytest
from httpx import ASGITransport

HOTEL_DOCUMENT = {
    "hotelName": "Danube Riverside Hotel",
    "hotelDescription": "Bright rooms by the river.",
    "amenities": ["Free WiFi", "Pool", "Gym", "Spa", "Rooftop Terrace", "Airport Shuttle"],
    "hotelLocation": "Budapest, Hungary",
    "latitude": 47.4979,
    "longitude": 19.0402,
    "markerName": "Riverside",
    "backgroundColor": "#1B3A4B",
}


def _write_plist(directory, document, name="Config"):
    path = directory / f"{name}.plist"
    path.write_bytes(plistlib.dumps(document))
    return path


@pytest.fixture
def hotel_document():
    return {**HOTEL_DOCUMENT, "amenities": list(HOTEL_DOCUMENT["amenities"])}


@pytest.fixture
def write_plist():
    return _write_plist


@pytest.fixture
def resources_dir(tmp_path, hotel_document):
    _write_plist(tmp_path, hotel_document)
    return tmp_path


@pytest.fixture
def mock_env(monkeypatch, resources_dir):
    monkeypatch.setenv("RESOURCES_DIR", str(resources_dir))
    monkeypatch.setenv("CONFIG_RESOURCE", "Config")
    monkeypatch.setenv("VIEWPORT_WIDTH", "390")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
