from html import escape
from urllib.parse import urlencode

from app.mappers.flow_layout import AMENITY_FONT_SIZE, AMENITY_SPACING, Row
from app.schemas.hotel import Color, HotelConfig, LocationData

HEADER_IMAGE_URL = "/images/header"
HEADER_CORNER_RADIUS = 30
DEFAULT_RATING = 4.92
DEFAULT_REVIEWS = 179
MAP_SPAN_DEGREES = 0.004

_PIN = "\U0001f4cd"
_STAR = "\u2b50"
_BUILDING = "\U0001f3e2"

_TABS = (
    ("Home", "/", "\U0001f3e0"),
    ("Location", "/location", "\U0001f4cc"),
)

_STYLE = f"""
body {{ margin: 0; font-family: -apple-system, "Helvetica Neue", Arial, sans-serif; }}
.screen {{ max-width: 430px; min-height: 100vh; margin: 0 auto; position: relative; }}
.header {{ height: 58vh; background: #ccc center / cover no-repeat;
  border-radius: 0 0 {HEADER_CORNER_RADIUS}px {HEADER_CORNER_RADIUS}px; }}
.header.card {{ height: 300px; }}
.title {{ font-size: 2rem; margin: 0.5rem 1rem 0.1rem; }}
.subtitle {{ font-size: 0.9rem; margin: 0.2rem 1rem; }}
.home .title, .home .subtitle {{ color: #fff; text-align: center; }}
.more-info {{ display: block; width: 30%; margin: 3rem auto; padding: 10px; font-size: 14px;
  text-align: center; background: #fff; color: #000; border-radius: 25px; text-decoration: none; }}
.section {{ font-weight: 600; margin: 1rem 1rem 0.3rem; }}
.flow {{ margin: 0 1rem 10px; display: flex; flex-direction: column; gap: {AMENITY_SPACING:g}px; }}
.flow-row {{ display: flex; gap: {AMENITY_SPACING:g}px; }}
.chip {{ font-size: {AMENITY_FONT_SIZE:g}px; white-space: nowrap; padding: 4px 8px;
  background: rgba(128, 128, 128, 0.2); border-radius: 10px; }}
.description {{ margin: 0 1rem 5px; }}
.dismiss {{ display: block; margin: 1rem; padding: 1rem; text-align: center; background: #007aff;
  color: #fff; border-radius: 10px; text-decoration: none; }}
.muted {{ color: #888; }}
.map {{ width: 100%; height: calc(100vh - 56px); border: 0; }}
.marker {{ position: absolute; top: 1rem; left: 50%; transform: translateX(-50%);
  background: #fff; padding: 4px 10px; border-radius: 10px; }}
.tabs {{ position: fixed; bottom: 0; left: 0; right: 0; display: flex; height: 56px;
  background: #f8f8f8; border-top: 1px solid #ddd; }}
.tabs a {{ flex: 1; text-align: center; padding-top: 8px; color: #888; text-decoration: none; }}
.tabs a.active {{ color: #007aff; }}
"""


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{escape(title)}</title><style>{_STYLE}</style></head>"
        f"<body>{body}</body></html>"
    )


def _tab_bar(active: str) -> str:
    links = []
    for label, href, icon in _TABS:
        css = ' class="active"' if label == active else ""
        links.append(f'<a href="{href}"{css}>{icon}<br>{label}</a>')
    return f'<nav class="tabs">{"".join(links)}</nav>'


def _header(extra_class: str = "") -> str:
    css = f"header {extra_class}".strip()
    return f"<div class=\"{css}\" style=\"background-image: url('{HEADER_IMAGE_URL}')\"></div>"


def format_flow_rows(rows: list[Row]) -> str:
    """Render packed amenity rows as chips, one flex line per row."""
    html_rows = []
    for row in rows:
        chips = "".join(f'<span class="chip">{escape(item)}</span>' for item in row)
        html_rows.append(f'<div class="flow-row">{chips}</div>')
    return f'<div class="flow">{"".join(html_rows)}</div>'


def build_home_page(config: HotelConfig, background: Color) -> str:
    body = (
        f'<main class="screen home" style="background-color: {background.css()}">'
        f"{_header()}"
        f'<h1 class="title">{escape(config.name)}</h1>'
        f'<p class="subtitle">{_PIN} {escape(config.location_label)}</p>'
        '<a class="more-info" href="/info">More Info</a>'
        "</main>"
        f"{_tab_bar('Home')}"
    )
    return _page(config.name, body)


def build_info_page(
    config: HotelConfig,
    amenity_rows: list[Row],
    rating: float = DEFAULT_RATING,
    reviews: int = DEFAULT_REVIEWS,
) -> str:
    body = (
        '<main class="screen info" style="background-color: #fff; padding-bottom: 150px">'
        f"{_header('card')}"
        f'<h1 class="title">{escape(config.name)}</h1>'
        f'<p class="subtitle">{_PIN} {escape(config.location_label)}</p>'
        f'<p class="subtitle">{_STAR} {rating:.2f} <span class="muted">({reviews} reviews)</span></p>'
        "<hr>"
        '<h2 class="section">Amenities</h2>'
        f"{format_flow_rows(amenity_rows)}"
        "<hr>"
        '<h2 class="section">Description</h2>'
        f'<p class="description">{escape(config.description)}</p>'
        '<a class="dismiss" href="/">Dismiss</a>'
        "</main>"
    )
    return _page(config.name, body)


def map_embed_url(location: LocationData, span: float = MAP_SPAN_DEGREES) -> str:
    """OpenStreetMap embed centered on the location, ``span`` degrees across."""
    half = span / 2
    bbox = ",".join(
        f"{value:.6f}"
        for value in (
            location.longitude - half,
            location.latitude - half,
            location.longitude + half,
            location.latitude + half,
        )
    )
    query = urlencode({
        "bbox": bbox,
        "layer": "mapnik",
        "marker": f"{location.latitude:.6f},{location.longitude:.6f}",
    })
    return f"https://www.openstreetmap.org/export/embed.html?{query}"


def build_location_page(location: LocationData) -> str:
    body = (
        '<main class="screen location">'
        f'<iframe class="map" title="Hotel location" src="{escape(map_embed_url(location))}"></iframe>'
        f'<div class="marker">{_BUILDING} {escape(location.marker_label)}</div>'
        "</main>"
        f"{_tab_bar('Location')}"
    )
    return _page(location.marker_label, body)
