"""
Thumbnail Generator - one-shot fancam thumbnail from the command line.

Pipeline:
  1. Load config defaults (data/thumbnail_config.json)
  2. Load the photo, crop defaults to the centered 16:9 region
  3. Apply text, fonts and positions
  4. Optionally write a preview at a given container width
  5. Export 1280x720 PNG
"""

from pathlib import Path
from typing import Optional, Sequence

from src.fancam_thumbnail.config import load_thumbnail_config, resolve_output_path
from src.fancam_thumbnail.crop import CropRegion
from src.fancam_thumbnail.export import export_thumbnail
from src.fancam_thumbnail.preview import PreviewDriver
from src.fancam_thumbnail.session import EditorSession


def generate_thumbnail(
    image_path: Path,
    title: str = "",
    description: str = "",
    location: str = "",
    font: Optional[str] = None,
    location_font: Optional[str] = None,
    position: Optional[str] = None,
    location_position: Optional[str] = None,
    crop: Optional[Sequence[float]] = None,
    preview_width: Optional[int] = None,
    output_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
) -> Optional[Path]:
    """
    Generate a thumbnail and return the saved path.

    `crop` is (x, y, width, height) in the photo's own pixels. Returns None
    when the crop has zero area (nothing is rendered).
    """
    print("=" * 50)
    print("FANCAM THUMBNAIL")
    print("=" * 50)

    thumb_cfg = load_thumbnail_config(config_path)
    session = EditorSession.from_config(thumb_cfg)

    session.load_image(image_path)
    if crop is not None:
        session.set_crop(CropRegion(*crop))

    if font:
        session.set_text_font(font)
    if position:
        session.set_text_position(position)
    if location_font:
        session.set_location_font(location_font)
    if location_position:
        session.set_location_position(location_position)

    session.set_title(title)
    session.set_description(description)
    session.set_location(location)

    state = session.state
    print(f"Title: {state.title.content}")
    print(f"Description: {state.description.content}")
    print(f"Location: {state.location.content or '(none)'}")
    print(f"Text: {state.title.font_family} @ {state.title.anchor.value}")
    print(f"Location: {state.location.font_family} @ {state.location.anchor.value}")
    c = state.crop
    print(f"Crop: ({c.x:.0f},{c.y:.0f}) {c.width:.0f}x{c.height:.0f}")

    if output_path is None:
        output_path = resolve_output_path(thumb_cfg)
    output_path = Path(output_path)

    if preview_width:
        preview = PreviewDriver(preview_width)
        if preview.refresh(state):
            preview_path = output_path.with_name(f"{output_path.stem}_preview.png")
            preview_path.parent.mkdir(parents=True, exist_ok=True)
            preview.save(preview_path)
            print(f"  Preview saved: {preview_path} ({preview.surface.width}x{preview.surface.height})")

    result = export_thumbnail(state, output_path)
    if result:
        print(f"\nThumbnail saved: {result}")
    print("=" * 50)
    return result
