"""
Thumbnail state - the single source of truth a render is projected from.

All types are immutable; edits produce a new ThumbnailState with
dataclasses.replace().
"""

import io
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple, Union
from PIL import Image

from .anchors import AnchorPosition, parse_anchor
from .crop import CropRegion, centered_crop, to_source_rect
from .fonts import validate_family


@dataclass(frozen=True)
class SourceImage:
    """Decoded source photo. `pixels` is an RGBA Pillow image."""
    pixels: Image.Image = field(repr=False, compare=False)
    name: str = ""

    @property
    def width(self) -> int:
        return self.pixels.width

    @property
    def height(self) -> int:
        return self.pixels.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.pixels.size


@dataclass(frozen=True)
class TextOverlay:
    content: str = ""
    font_family: str = "Chonburi"
    anchor: AnchorPosition = AnchorPosition.BOTTOM_LEFT


@dataclass(frozen=True)
class ThumbnailState:
    """
    Everything a render needs.

    `display_size` is the size the image is shown at in the crop widget;
    `crop` is expressed in that space. Title and description always share
    font and anchor; use `with_text_style` to change them together.
    """
    image: Optional[SourceImage] = None
    display_size: Optional[Tuple[float, float]] = None
    crop: CropRegion = CropRegion(0, 0, 0, 0)
    title: TextOverlay = TextOverlay()
    description: TextOverlay = TextOverlay()
    location: TextOverlay = TextOverlay(font_family="Poppins", anchor=AnchorPosition.TOP_CENTER)

    @property
    def has_image(self) -> bool:
        return self.image is not None

    @property
    def is_ready(self) -> bool:
        """True when an image is loaded and the crop has a non-zero area."""
        return self.has_image and not self.crop.is_empty

    def source_rect(self) -> Optional[CropRegion]:
        """The crop in natural image pixels, or None when not ready."""
        if not self.is_ready:
            return None
        return to_source_rect(self.crop, self.image.size, self.display_size or self.image.size)

    def with_text_style(self, font_family: str = None, anchor=None) -> "ThumbnailState":
        font_family = validate_family(font_family) if font_family else self.title.font_family
        anchor = parse_anchor(anchor) if anchor else self.title.anchor
        return replace(
            self,
            title=replace(self.title, font_family=font_family, anchor=anchor),
            description=replace(self.description, font_family=font_family, anchor=anchor),
        )

    def with_location_style(self, font_family: str = None, anchor=None) -> "ThumbnailState":
        font_family = validate_family(font_family) if font_family else self.location.font_family
        anchor = parse_anchor(anchor) if anchor else self.location.anchor
        return replace(self, location=replace(self.location, font_family=font_family, anchor=anchor))


def decode_image(source: Union[str, Path, bytes, Image.Image]) -> SourceImage:
    """
    Decode a path, raw file bytes or an already-open image.

    Decode errors (PIL.UnidentifiedImageError) are left to the caller.
    """
    if isinstance(source, Image.Image):
        return SourceImage(pixels=source.convert("RGBA"), name=getattr(source, "filename", "") or "")
    if isinstance(source, (bytes, bytearray)):
        with Image.open(io.BytesIO(source)) as img:
            return SourceImage(pixels=img.convert("RGBA"))

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")
    with Image.open(path) as img:
        return SourceImage(pixels=img.convert("RGBA"), name=path.name)


def state_for_image(
    image: SourceImage,
    display_size: Optional[Tuple[float, float]] = None,
    base: Optional[ThumbnailState] = None,
) -> ThumbnailState:
    """
    Fresh state for a newly loaded image with the centered initial crop.

    Text and styles carry over from `base` so edits made before the image
    finished loading are kept.
    """
    display_size = tuple(display_size) if display_size else image.size
    base = base or ThumbnailState()
    return replace(
        base,
        image=image,
        display_size=display_size,
        crop=centered_crop(*display_size),
    )
