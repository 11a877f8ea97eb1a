#!/usr/bin/env python3
"""
Generate a 1280x720 fancam thumbnail from a photo.

Usage:
    python generate_thumbnail.py --image photo.jpg --title "SEVENTEEN" --description "Fan meeting"
    python generate_thumbnail.py -i photo.jpg -t "Title" -l "Seoul" --location-position top-center
    python generate_thumbnail.py -i photo.jpg --crop 100 50 1600 900 --preview 800

Configuration: data/thumbnail_config.json
Fonts needed: Download from Google Fonts → data/fonts/
  - Chonburi-Regular.ttf
  - Poppins-Regular.ttf (and the other families you use)
"""

import argparse
from pathlib import Path

from src.fancam_thumbnail.anchors import AnchorPosition
from src.fancam_thumbnail.fonts import FONT_FAMILIES
from src.thumbnail_generator import generate_thumbnail

POSITIONS = [a.value for a in AnchorPosition]


def main():
    parser = argparse.ArgumentParser(
        description="Generate a fancam thumbnail (16:9 crop + text overlay)"
    )
    parser.add_argument(
        "--image", "-i",
        type=str,
        required=True,
        help="Path to source image"
    )
    parser.add_argument("--title", "-t", type=str, default="", help="Title text (bold)")
    parser.add_argument("--description", "-d", type=str, default="", help="Description text")
    parser.add_argument("--location", "-l", type=str, default="", help="Location text (omit for none)")
    parser.add_argument(
        "--font",
        choices=FONT_FAMILIES,
        default=None,
        help="Font for title and description (default: from config)"
    )
    parser.add_argument(
        "--location-font",
        choices=FONT_FAMILIES,
        default=None,
        help="Font for the location line (default: from config)"
    )
    parser.add_argument(
        "--position",
        choices=POSITIONS,
        default=None,
        help="Anchor for title and description (default: from config)"
    )
    parser.add_argument(
        "--location-position",
        choices=POSITIONS,
        default=None,
        help="Anchor for the location line (default: from config)"
    )
    parser.add_argument(
        "--crop",
        type=float,
        nargs=4,
        metavar=("X", "Y", "W", "H"),
        default=None,
        help="Crop rectangle in image pixels (default: centered 16:9, 90%%)"
    )
    parser.add_argument(
        "--preview",
        type=int,
        default=None,
        metavar="WIDTH",
        help="Also write a preview at this container width"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output path (default: data/output/thumbnail.png)"
    )

    args = parser.parse_args()

    generate_thumbnail(
        image_path=Path(args.image),
        title=args.title,
        description=args.description,
        location=args.location,
        font=args.font,
        location_font=args.location_font,
        position=args.position,
        location_position=args.location_position,
        crop=args.crop,
        preview_width=args.preview,
        output_path=Path(args.output) if args.output else None,
    )


if __name__ == "__main__":
    main()
