"""
Renderer - projects a ThumbnailState onto a target surface.

The surface is an RGBA Pillow image owned by the caller. A render:
  1. Scales the cropped source region to fill the whole surface
  2. Draws title and description at the text anchor (title bold)
  3. Draws the location line at its own anchor, if there is one

Every text draw gets the same drop shadow. The shadow values are absolute
pixels on every surface size; only font sizes and padding follow the
surface width.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
from PIL import Image, ImageDraw, ImageFilter

from .crop import CropRegion
from .fonts import get_font
from .layout import font_sizes, location_layout, text_layout
from .state import ThumbnailState

TEXT_COLOR = (255, 255, 255, 255)

# rgba(0,0,0,0.8), blur 8, offset (2,2)
SHADOW_COLOR = (0, 0, 0, 204)
SHADOW_BLUR = 8
SHADOW_OFFSET = (2, 2)

# Pillow anchor codes: horizontal alignment + alphabetic baseline
_PIL_ANCHORS = {"left": "ls", "center": "ms", "right": "rs"}


@dataclass(frozen=True)
class TextDraw:
    """One fillText-style operation: `text` at baseline point (x, y)."""
    role: str
    text: str
    x: float
    y: float
    align: str
    font_family: str
    font_size: float
    bold: bool = False


def plan_text(
    state: ThumbnailState,
    surface_w: int,
    surface_h: int,
    title_font_size: float = None,
    desc_font_size: float = None,
) -> List[TextDraw]:
    """
    Text operations for a surface, in draw order.

    Title and description are always planned (an empty string still holds
    its slot). The location is planned only when it has content.
    """
    default_title, default_desc = font_sizes(surface_w)
    title_size = title_font_size if title_font_size is not None else default_title
    desc_size = desc_font_size if desc_font_size is not None else default_desc

    block = text_layout(state.title.anchor, surface_w, surface_h, title_size, desc_size)
    ops = [
        TextDraw("title", state.title.content, block.x, block.y_title, block.align,
                 state.title.font_family, title_size, bold=True),
        TextDraw("description", state.description.content, block.x, block.y_desc, block.align,
                 state.description.font_family, desc_size),
    ]

    if state.location.content:
        loc = location_layout(state.location.anchor, surface_w, surface_h, title_size, desc_size)
        ops.append(TextDraw("location", state.location.content, loc.x, loc.y_title, loc.align,
                            state.location.font_family, desc_size))
    return ops


def _clamp_box(rect: CropRegion, size: Tuple[int, int]) -> Tuple[float, float, float, float]:
    """Keep a float crop box inside the source; rounding can push it past the edge."""
    w, h = size
    x1, y1, x2, y2 = rect.as_box()
    return max(0.0, x1), max(0.0, y1), min(float(w), x2), min(float(h), y2)


def draw_background(surface: Image.Image, source: Image.Image, rect: CropRegion) -> None:
    """Scale the source region `rect` (natural pixels) onto the full surface."""
    box = _clamp_box(rect, source.size)
    region = source.resize(surface.size, Image.Resampling.BILINEAR, box=box)
    surface.alpha_composite(region)


def draw_text(surface: Image.Image, op: TextDraw) -> None:
    """Draw one text operation with the fixed drop shadow."""
    if not op.text:
        return

    font = get_font(op.font_family, op.font_size, op.bold)
    anchor = _PIL_ANCHORS[op.align]

    shadow = Image.new("RGBA", surface.size, (0, 0, 0, 0))
    ImageDraw.Draw(shadow).text(
        (op.x + SHADOW_OFFSET[0], op.y + SHADOW_OFFSET[1]), op.text,
        font=font, fill=SHADOW_COLOR, anchor=anchor,
    )
    # Canvas blur amount is twice the Gaussian standard deviation
    shadow = shadow.filter(ImageFilter.GaussianBlur(radius=SHADOW_BLUR / 2))
    surface.alpha_composite(shadow)

    txt_layer = Image.new("RGBA", surface.size, (0, 0, 0, 0))
    ImageDraw.Draw(txt_layer).text(
        (op.x, op.y), op.text, font=font, fill=TEXT_COLOR, anchor=anchor,
    )
    surface.alpha_composite(txt_layer)


def render(
    surface: Image.Image,
    state: ThumbnailState,
    title_font_size: float = None,
    desc_font_size: float = None,
    source_rect: Optional[CropRegion] = None,
) -> bool:
    """
    Render `state` onto `surface` in place.

    Returns False, leaving the surface untouched, when there is no image or
    the crop has zero area. Font sizes default to the width-relative sizes.
    """
    rect = source_rect if source_rect is not None else state.source_rect()
    if rect is None or rect.is_empty or not state.has_image:
        return False
    if surface.mode != "RGBA":
        raise ValueError(f"Surface must be RGBA, got {surface.mode}")

    draw_background(surface, state.image.pixels, rect)
    for op in plan_text(state, surface.width, surface.height, title_font_size, desc_font_size):
        draw_text(surface, op)
    return True
