#!/usr/bin/env python3
"""
Fancam Thumbnail - MCP Server
=============================
Model Context Protocol server exposing the thumbnail engine as tools.

Tools:
  - create_thumbnail: Crop a photo to 16:9, overlay text, save 1280x720 PNG
  - preview_thumbnail: Same composition rendered at a preview container width
  - list_fonts: Font families available for text
  - list_positions: The nine text anchor positions

Run: python mcp_server.py
"""

import json
import sys
from contextlib import redirect_stdout
from pathlib import Path
from typing import Any

# MCP SDK imports
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from src.fancam_thumbnail.anchors import AnchorPosition, list_positions
from src.fancam_thumbnail.config import OUTPUT_DIR, load_thumbnail_config, resolve_output_path
from src.fancam_thumbnail.crop import CropRegion
from src.fancam_thumbnail.export import export_thumbnail
from src.fancam_thumbnail.fonts import FONT_FAMILIES, list_fonts
from src.fancam_thumbnail.preview import PreviewDriver
from src.fancam_thumbnail.session import EditorSession

POSITIONS = [a.value for a in AnchorPosition]

# Shared input schema for the two render tools
COMPOSITION_PROPERTIES = {
    "image_path": {
        "type": "string",
        "description": "Absolute path to the source photo (any format Pillow reads).",
    },
    "title": {"type": "string", "description": "Title text, drawn bold."},
    "description": {"type": "string", "description": "Description text, drawn under the title."},
    "location": {
        "type": "string",
        "description": "Location text with its own position and font. Empty = no location.",
    },
    "font": {
        "type": "string",
        "enum": FONT_FAMILIES,
        "description": "Font for title and description.",
    },
    "location_font": {
        "type": "string",
        "enum": FONT_FAMILIES,
        "description": "Font for the location line.",
    },
    "position": {
        "type": "string",
        "enum": POSITIONS,
        "description": "Anchor for title and description (default bottom-left).",
    },
    "location_position": {
        "type": "string",
        "enum": POSITIONS,
        "description": "Anchor for the location line (default top-center).",
    },
    "crop": {
        "type": "array",
        "items": {"type": "number"},
        "minItems": 4,
        "maxItems": 4,
        "description": "[x, y, width, height] in image pixels, 16:9. Default: centered 90% crop.",
    },
}


def build_session(args: dict[str, Any]) -> EditorSession:
    """Apply tool arguments to a fresh session, in the order an editor would."""
    image_path = args.get("image_path", "")
    if not image_path:
        raise ValueError("image_path is required")

    session = EditorSession.from_config(load_thumbnail_config())
    session.load_image(Path(image_path))
    if args.get("crop"):
        session.set_crop(CropRegion(*args["crop"]))
    if args.get("font"):
        session.set_text_font(args["font"])
    if args.get("position"):
        session.set_text_position(args["position"])
    if args.get("location_font"):
        session.set_location_font(args["location_font"])
    if args.get("location_position"):
        session.set_location_position(args["location_position"])
    session.set_title(args.get("title", ""))
    session.set_description(args.get("description", ""))
    session.set_location(args.get("location", ""))
    return session


# ─── MCP Server ───────────────────────────────────────────────────────

app = Server("fancam-thumbnail")


@app.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(
            name="create_thumbnail",
            description=(
                "Create a 1280x720 PNG thumbnail: crop the photo to 16:9, then overlay "
                "title (bold), description and an optional location line, each with a "
                "soft drop shadow. Saved to data/output/thumbnail.png unless output_path is given."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    **COMPOSITION_PROPERTIES,
                    "output_path": {
                        "type": "string",
                        "description": "Where to save the PNG (default data/output/thumbnail.png)",
                    },
                },
                "required": ["image_path"],
            },
        ),
        Tool(
            name="preview_thumbnail",
            description=(
                "Render the same composition at a preview width (height = width * 9/16). "
                "Fonts and padding scale with the width; the shadow does not."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    **COMPOSITION_PROPERTIES,
                    "container_width": {
                        "type": "integer",
                        "description": "Preview width in pixels (default from config, 800)",
                    },
                },
                "required": ["image_path"],
            },
        ),
        Tool(
            name="list_fonts",
            description="List the font families available for thumbnail text.",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
        Tool(
            name="list_positions",
            description="List the nine text anchor positions (top-left ... bottom-right).",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    try:
        # stdout carries the MCP protocol; progress prints go to stderr
        with redirect_stdout(sys.stderr):
            result = await _handle_tool(name, arguments)
        return [TextContent(type="text", text=result)]
    except Exception as e:
        return [TextContent(type="text", text=f"ERROR: {str(e)}")]


async def _handle_tool(name: str, args: dict[str, Any]) -> str:

    # ── create_thumbnail ──────────────────────────────────────────
    if name == "create_thumbnail":
        session = build_session(args)
        output_path = args.get("output_path")
        if output_path:
            output_path = Path(output_path)
        else:
            output_path = resolve_output_path(load_thumbnail_config())

        saved = export_thumbnail(session.state, output_path)
        if saved is None:
            return "ERROR: Crop has zero width or height, nothing rendered"
        state = session.state
        return (
            f"Thumbnail created!\n"
            f"  Output: {saved}\n"
            f"  Size: 1280x720\n"
            f"  Text: {state.title.font_family} @ {state.title.anchor.value}\n"
            f"  Location: {state.location.content or '(none)'}"
        )

    # ── preview_thumbnail ─────────────────────────────────────────
    elif name == "preview_thumbnail":
        thumb_cfg = load_thumbnail_config()
        width = args.get("container_width") or thumb_cfg.get("preview", {}).get("container_width")

        session = build_session(args)
        preview = PreviewDriver(width)
        if not preview.refresh(session.state):
            return "ERROR: Crop has zero width or height, nothing rendered"

        OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        preview_path = OUTPUT_DIR / "preview.png"
        preview.save(preview_path)
        return (
            f"Preview rendered!\n"
            f"  Output: {preview_path}\n"
            f"  Size: {preview.surface.width}x{preview.surface.height}"
        )

    # ── list_fonts ────────────────────────────────────────────────
    elif name == "list_fonts":
        return json.dumps(list_fonts(), indent=2, ensure_ascii=False)

    # ── list_positions ────────────────────────────────────────────
    elif name == "list_positions":
        return json.dumps(list_positions(), indent=2, ensure_ascii=False)

    else:
        return f"ERROR: Unknown tool '{name}'"


# ─── Main ─────────────────────────────────────────────────────────────

async def main():
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


if __name__ == "__main__":
    import asyncio
    asyncio.run(main())
