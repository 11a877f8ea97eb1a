"""
Configuration - paths and thumbnail defaults.

Defaults come from data/thumbnail_config.json (key "thumbnail"), merged
over the built-in values below. Two environment variables, optionally set
in a .env file at the project root, relocate things:

  THUMBNAIL_CONFIG     - alternate config file
  THUMBNAIL_FONTS_DIR  - alternate font directory
"""

import copy
import json
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).parent.parent.parent
DATA_DIR = BASE_DIR / "data"
OUTPUT_DIR = DATA_DIR / "output"

load_dotenv(BASE_DIR / ".env")

THUMBNAIL_CONFIG_PATH = Path(os.getenv("THUMBNAIL_CONFIG", str(DATA_DIR / "thumbnail_config.json")))
FONTS_DIR = Path(os.getenv("THUMBNAIL_FONTS_DIR", str(DATA_DIR / "fonts")))

# Export resolution (YouTube standard)
THUMB_WIDTH = 1280
THUMB_HEIGHT = 720

# Font sizes used for the export surface
EXPORT_TITLE_SIZE = 80
EXPORT_DESC_SIZE = 40

DEFAULT_FILENAME = "thumbnail.png"

DEFAULTS = {
    "thumbnail": {
        "font": "Chonburi",
        "location_font": "Poppins",
        "text_position": "bottom-left",
        "location_position": "top-center",
        "preview": {"container_width": 800},
        "output_path": f"data/output/{DEFAULT_FILENAME}",
    }
}


def deep_merge(base: dict, update: dict) -> None:
    """Deep merge update into base dict, modifying base in place."""
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value


def load_thumbnail_config(path: Path = None) -> dict:
    """
    Load the "thumbnail" section of the config file over the defaults.

    A missing file is not an error: the defaults are returned as-is.
    """
    path = Path(path) if path else THUMBNAIL_CONFIG_PATH
    config = copy.deepcopy(DEFAULTS)
    if path.exists():
        with open(path, "r", encoding="utf-8-sig") as f:
            deep_merge(config, json.load(f))
    return config["thumbnail"]


def resolve_output_path(thumb_cfg: dict) -> Path:
    """Configured export path, relative paths taken from the project root."""
    out = Path(thumb_cfg.get("output_path", f"data/output/{DEFAULT_FILENAME}"))
    return out if out.is_absolute() else BASE_DIR / out
