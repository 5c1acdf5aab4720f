from app.mappers.screen_builder import (
    build_home_page,
    build_info_page,
    build_location_page,
    format_flow_rows,
    map_embed_url,
)
from app.schemas.hotel import Color, HotelConfig, LocationData


def _config(**overrides) -> HotelConfig:
    fields = {
        "name": "Danube Riverside Hotel",
        "description": "Bright rooms by the river.",
        "amenities": ("Free WiFi", "Pool", "Gym"),
        "location_label": "Budapest, Hungary",
        "latitude": 47.5,
        "longitude": 19.0,
        "marker_name": "Riverside",
        "background_color_hex": "#1B3A4B",
    }
    fields.update(overrides)
    return HotelConfig(**fields)


def test_home_page_shows_name_location_and_background():
    html = build_home_page(_config(), Color(red=0.0, green=122 / 255, blue=1.0))

    assert "<title>Danube Riverside Hotel</title>" in html
    assert "Budapest, Hungary" in html
    assert "background-color: rgb(0, 122, 255)" in html
    assert '<a class="more-info" href="/info">More Info</a>' in html
    assert "url('/images/header')" in html


def test_home_page_marks_home_tab_active():
    html = build_home_page(_config(), Color(red=1.0, green=1.0, blue=1.0))

    assert '<a href="/" class="active">' in html
    assert '<a href="/location">' in html


def test_home_page_escapes_text():
    html = build_home_page(_config(name="<b>Tom & Jerry</b>"), Color(red=0, green=0, blue=0))

    assert "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;" in html
    assert "<b>Tom" not in html


def test_info_page_sections():
    rows = [["Free WiFi", "Pool"], ["Gym"]]

    html = build_info_page(_config(), rows)

    assert "Amenities" in html
    assert "Description" in html
    assert "Bright rooms by the river." in html
    assert "4.92" in html
    assert "(179 reviews)" in html
    assert '<a class="dismiss" href="/">Dismiss</a>' in html
    assert 'class="tabs"' not in html


def test_info_page_rating_override():
    html = build_info_page(_config(), [[]], rating=4.5, reviews=12)

    assert "4.50" in html
    assert "(12 reviews)" in html


def test_format_flow_rows_keeps_row_grouping():
    html = format_flow_rows([["Free WiFi", "Pool"], ["Gym"]])

    assert html.count('class="flow-row"') == 2
    assert html.count('class="chip"') == 3
    assert html.index("Pool") < html.index("Gym")


def test_format_flow_rows_empty():
    html = format_flow_rows([[]])

    assert html == '<div class="flow"><div class="flow-row"></div></div>'


def test_map_embed_url_centers_span():
    url = map_embed_url(LocationData(latitude=47.5, longitude=19.0))

    assert url.startswith("https://www.openstreetmap.org/export/embed.html?")
    assert "bbox=18.998000%2C47.498000%2C19.002000%2C47.502000" in url
    assert "marker=47.500000%2C19.000000" in url


def test_location_page_uses_marker_name():
    html = build_location_page(LocationData(latitude=47.5, longitude=19.0, marker_name="Riverside"))

    assert "Riverside" in html
    assert "<iframe" in html
    assert '<a href="/location" class="active">' in html


def test_location_page_default_marker_label():
    html = build_location_page(LocationData(latitude=47.5, longitude=19.0))

    assert "Default Marker" in html
