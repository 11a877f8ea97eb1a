"""
Font registry - the fixed set of families offered for thumbnail text.

Fonts are Google Fonts; download the TrueType files into data/fonts/
(or THUMBNAIL_FONTS_DIR) using the Google file names:
  Chonburi-Regular.ttf, Roboto-Regular.ttf, Roboto-Bold.ttf,
  OpenSans-Regular.ttf, OpenSans-Bold.ttf, Montserrat-Regular.ttf,
  Montserrat-Bold.ttf, Poppins-Regular.ttf, Poppins-Bold.ttf,
  Lato-Regular.ttf, Lato-Bold.ttf
"""

import sys
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from PIL import ImageFont

from . import config

FONT_FAMILIES = [
    "Chonburi",
    "Roboto",
    "Open Sans",
    "Montserrat",
    "Poppins",
    "Lato",
]


def validate_family(family: str) -> str:
    """Return the canonical family name, case-insensitively."""
    for name in FONT_FAMILIES:
        if name.lower() == str(family).strip().lower():
            return name
    available = ", ".join(FONT_FAMILIES)
    raise ValueError(f"Unknown font '{family}'. Available: {available}")


def list_fonts() -> List[dict]:
    return [{"name": name, "value": name} for name in FONT_FAMILIES]


def _font_files(family: str, bold: bool) -> List[str]:
    stem = family.replace(" ", "")
    if bold:
        # Chonburi ships a single weight
        return [f"{stem}-Bold.ttf", f"{stem}-Regular.ttf"]
    return [f"{stem}-Regular.ttf", f"{stem}.ttf"]


def _find_font_path(family: str, bold: bool) -> Optional[Path]:
    candidates = _font_files(family, bold)
    for name in candidates:
        path = config.FONTS_DIR / name
        if path.exists():
            return path
    if sys.platform == "win32":
        for name in candidates:
            path = Path("C:/Windows/Fonts") / name
            if path.exists():
                return path
    return None


@lru_cache(maxsize=64)
def get_font(family: str, size: float, bold: bool = False) -> ImageFont.FreeTypeFont:
    """
    Load a family at a (possibly fractional) pixel size.

    Priority: fonts dir → Windows fonts → system lookup by file name →
    Pillow's bundled default font at the requested size.
    """
    family = validate_family(family)
    path = _find_font_path(family, bold)
    if path:
        return ImageFont.truetype(str(path), size)

    for name in _font_files(family, bold):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue

    weight = "bold" if bold else "regular"
    print(f"  WARNING: Font '{family}' ({weight}) not found in {config.FONTS_DIR}, using default")
    return ImageFont.load_default(size)
