"""
Crop Mapper - 16:9 crop rectangles and their mapping to source pixels.

A CropRegion lives in displayed-image coordinates (the size the image is
shown at in the crop widget). Rendering needs the same rectangle in the
image's natural pixel coordinates, which is what `to_source_rect` returns.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# Thumbnail aspect ratio (1280 / 720)
ASPECT = 16 / 9

# Initial crop covers this fraction of the limiting image dimension
INITIAL_COVERAGE = 0.9

ASPECT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class CropRegion:
    x: float
    y: float
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def aspect(self) -> float:
        return self.width / self.height if self.height else 0.0

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def as_box(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) box, the form Pillow expects."""
        return self.x, self.y, self.x + self.width, self.y + self.height


def has_aspect(crop: CropRegion, aspect: float = ASPECT, tolerance: float = ASPECT_TOLERANCE) -> bool:
    return not crop.is_empty and abs(crop.aspect - aspect) <= tolerance * aspect


def scale_factors(natural_size: Tuple[int, int], display_size: Tuple[float, float]) -> Tuple[float, float]:
    """(scale_x, scale_y) from displayed coordinates to natural pixels."""
    natural_w, natural_h = natural_size
    display_w, display_h = display_size
    if display_w <= 0 or display_h <= 0:
        raise ValueError(f"Display size must be positive, got {display_w}x{display_h}")
    return natural_w / display_w, natural_h / display_h


def to_source_rect(
    crop: CropRegion,
    natural_size: Tuple[int, int],
    display_size: Tuple[float, float],
) -> Optional[CropRegion]:
    """
    Map a displayed-coordinate crop to natural source pixels.

    Returns None for a zero-area crop: the crop is not ready yet and
    nothing should be rendered.
    """
    if crop.is_empty:
        return None
    scale_x, scale_y = scale_factors(natural_size, display_size)
    return CropRegion(
        x=crop.x * scale_x,
        y=crop.y * scale_y,
        width=crop.width * scale_x,
        height=crop.height * scale_y,
    )


def centered_crop(
    width: float,
    height: float,
    aspect: float = ASPECT,
    coverage: float = INITIAL_COVERAGE,
) -> CropRegion:
    """
    Largest centered crop of the given aspect covering at most `coverage`
    of the image.

    Starts from `coverage` of the width; when the matching height would
    exceed `coverage` of the image height, the height becomes the limit.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")

    crop_w = width * coverage
    crop_h = crop_w / aspect
    if crop_h > height * coverage:
        crop_h = height * coverage
        crop_w = crop_h * aspect

    return CropRegion(
        x=(width - crop_w) / 2,
        y=(height - crop_h) / 2,
        width=crop_w,
        height=crop_h,
    )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def clamp_crop(crop: CropRegion, bounds: Tuple[float, float], aspect: float = ASPECT) -> CropRegion:
    """
    Fit a crop inside (0, 0)-(bounds) without changing its aspect.

    An oversize crop shrinks around its centre first, then the position is
    clamped so the whole rectangle is inside the image.
    """
    bound_w, bound_h = bounds
    width, height = crop.width, crop.height
    if width > bound_w:
        width = bound_w
        height = width / aspect
    if height > bound_h:
        height = bound_h
        width = height * aspect

    cx, cy = crop.center
    x = _clamp(cx - width / 2, 0, bound_w - width)
    y = _clamp(cy - height / 2, 0, bound_h - height)
    return CropRegion(x=x, y=y, width=width, height=height)


def move_crop(crop: CropRegion, dx: float, dy: float, bounds: Tuple[float, float]) -> CropRegion:
    """Drag the crop by (dx, dy), stopping at the image edges."""
    bound_w, bound_h = bounds
    x = _clamp(crop.x + dx, 0, max(0.0, bound_w - crop.width))
    y = _clamp(crop.y + dy, 0, max(0.0, bound_h - crop.height))
    return CropRegion(x=x, y=y, width=crop.width, height=crop.height)


def resize_crop(
    crop: CropRegion,
    new_width: float,
    bounds: Tuple[float, float],
    aspect: float = ASPECT,
) -> CropRegion:
    """Resize around the current centre; the height follows the aspect."""
    if new_width <= 0:
        raise ValueError(f"Crop width must be positive, got {new_width}")
    cx, cy = crop.center
    new_height = new_width / aspect
    resized = CropRegion(
        x=cx - new_width / 2,
        y=cy - new_height / 2,
        width=new_width,
        height=new_height,
    )
    return clamp_crop(resized, bounds, aspect)
