"""
Layout Calculator - text anchor coordinates for a target surface.

Coordinates are text baselines: x is the alignment point (left edge, centre
or right edge of the line depending on `align`), y is the alphabetic
baseline. The same calculation serves the title/description pair and the
single-line location overlay; the location caller only uses x and y_title.
"""

from dataclasses import dataclass

from .anchors import parse_anchor

# Fraction of the surface kept clear around title/description blocks
PADDING_FRACTION = 0.05

# Gap between title and description baselines, on top of the desc font size
LINE_GAP = 10

# Font sizes as a fraction of surface width (80px / 40px at 1280)
TITLE_SIZE_FRACTION = 0.0625
DESC_SIZE_FRACTION = 0.03125


@dataclass(frozen=True)
class TextLayout:
    x: float
    y_title: float
    y_desc: float
    align: str


def font_sizes(surface_w: float):
    """Return (title_font_size, desc_font_size) for a surface width."""
    return surface_w * TITLE_SIZE_FRACTION, surface_w * DESC_SIZE_FRACTION


def text_layout(
    anchor,
    surface_w: float,
    surface_h: float,
    title_font_size: float,
    desc_font_size: float,
    is_location: bool = False,
) -> TextLayout:
    """
    Compute where a text block goes for one of the nine anchors.

    Top and middle blocks grow downwards (description below the title).
    Bottom blocks are pinned by the description baseline and the title sits
    above it, so the block never runs off the bottom edge.
    Location blocks get no padding at all.
    """
    anchor = parse_anchor(anchor)

    padding_x = 0 if is_location else surface_w * PADDING_FRACTION
    padding_y = 0 if is_location else surface_h * PADDING_FRACTION

    column = anchor.column
    if column == "left":
        x = padding_x
    elif column == "center":
        x = surface_w / 2
    else:  # right
        x = surface_w - padding_x

    row = anchor.row
    if row == "bottom":
        y_desc = surface_h - padding_y
        y_title = y_desc - desc_font_size - LINE_GAP
    else:
        if row == "top":
            y_title = padding_y + title_font_size
        else:  # middle
            y_title = surface_h / 2 - desc_font_size / 2
        y_desc = y_title + desc_font_size + LINE_GAP

    return TextLayout(x=x, y_title=y_title, y_desc=y_desc, align=column)


def location_layout(
    anchor,
    surface_w: float,
    surface_h: float,
    title_font_size: float,
    desc_font_size: float,
) -> TextLayout:
    """Shortcut for the zero-padding location block."""
    return text_layout(
        anchor, surface_w, surface_h, title_font_size, desc_font_size, is_location=True
    )

