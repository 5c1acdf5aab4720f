from collections.abc import Callable, Sequence

Row = list[str]

AMENITY_FONT_SIZE = 12.0
# 8pt horizontal inset on each side plus an 8pt margin
AMENITY_ITEM_PADDING = 24.0
AMENITY_SPACING = 5.0

# Advance widths as fractions of the em, for a proportional sans-serif face.
_GLYPH_WIDTHS: dict[str, float] = {
    **dict.fromkeys("iljI.,:;'|!", 0.25),
    **dict.fromkeys(" ()[]{}-/\\`", 0.33),
    **dict.fromkeys("frt\"", 0.35),
    **dict.fromkeys("abcdeghknopqsuvxyz0123456789$#?_", 0.55),
    **dict.fromkeys("ABCDEFGHJKLNOPQRSTUVXYZ&+=<>~", 0.67),
    **dict.fromkeys("mwMW%@", 0.88),
}
_DEFAULT_GLYPH_WIDTH = 0.6


def measure_text_width(text: str, font_size: float = AMENITY_FONT_SIZE) -> float:
    """Estimate the rendered width of a single line of text, in points."""
    return sum(_GLYPH_WIDTHS.get(c, _DEFAULT_GLYPH_WIDTH) for c in text) * font_size


def layout_rows(
    items: Sequence[str],
    max_width: float,
    item_padding: float,
    inter_item_spacing: float,
    measure_width: Callable[[str], float],
) -> list[Row]:
    """Greedily pack labels into rows no wider than ``max_width``.

    Labels keep their input order. A label too wide for any row still gets a
    row of its own. The last row is always returned, so empty input gives
    ``[[]]``.
    """
    rows: list[Row] = [[]]
    current_width = 0.0

    for item in items:
        item_width = measure_width(item) + item_padding

        if current_width + item_width + inter_item_spacing > max_width and rows[-1]:
            rows.append([item])
            current_width = item_width
        else:
            rows[-1].append(item)
            current_width += item_width + inter_item_spacing

    return rows


def layout_amenities(
    amenities: Sequence[str],
    viewport_width: float,
    measure_width: Callable[[str], float] = measure_text_width,
) -> list[Row]:
    """Rows of amenity chips as drawn on the info screen."""
    return layout_rows(
        amenities,
        max_width=viewport_width,
        item_padding=AMENITY_ITEM_PADDING,
        inter_item_spacing=AMENITY_SPACING,
        measure_width=measure_width,
    )
