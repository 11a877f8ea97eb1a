"""
Export Driver - renders the final 1280x720 thumbnail and encodes it as PNG.

Each export gets its own surface, so an export never sees a preview mid
re-render. Font sizes are pinned to 80/40, the width formula's values at
1280, so the export matches the preview up to scale.
"""

import io
from pathlib import Path
from typing import Optional
from PIL import Image

from .config import (
    DEFAULT_FILENAME, EXPORT_DESC_SIZE, EXPORT_TITLE_SIZE, OUTPUT_DIR,
    THUMB_HEIGHT, THUMB_WIDTH,
)
from .renderer import render
from .state import ThumbnailState


def render_export(state: ThumbnailState) -> Optional[Image.Image]:
    """Render onto a fresh 1280x720 surface. None when the state is not ready."""
    surface = Image.new("RGBA", (THUMB_WIDTH, THUMB_HEIGHT), (0, 0, 0, 0))
    if not render(surface, state, EXPORT_TITLE_SIZE, EXPORT_DESC_SIZE):
        return None
    return surface


def encode_png(surface: Image.Image) -> bytes:
    buf = io.BytesIO()
    surface.save(buf, "PNG")
    return buf.getvalue()


def export_png(state: ThumbnailState) -> Optional[bytes]:
    """PNG bytes of the final thumbnail, or None when there is nothing to render."""
    surface = render_export(state)
    if surface is None:
        return None
    return encode_png(surface)


def save_png(data: bytes, output_path: Path = None) -> Path:
    """Write exported bytes, defaulting to data/output/thumbnail.png."""
    if output_path is None:
        output_path = OUTPUT_DIR / DEFAULT_FILENAME
    output_path = Path(output_path)
    if output_path.is_dir():
        output_path = output_path / DEFAULT_FILENAME
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path


def export_thumbnail(state: ThumbnailState, output_path: Path = None) -> Optional[Path]:
    """Render, encode and save in one go. Returns the saved path."""
    data = export_png(state)
    if data is None:
        print("  Nothing to export: no image loaded or crop is empty")
        return None
    path = save_png(data, output_path)
    print(f"  Saved: {path.name} ({THUMB_WIDTH}x{THUMB_HEIGHT}, {len(data)} bytes)")
    return path
