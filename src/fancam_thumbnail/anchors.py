"""
Anchor positions - the nine text placements on a thumbnail.

Each anchor is a row token (top, middle, bottom) joined to a column token
(left, center, right), e.g. "bottom-left".
"""

from enum import Enum
from typing import List


class AnchorPosition(str, Enum):
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    MIDDLE_LEFT = "middle-left"
    MIDDLE_CENTER = "middle-center"
    MIDDLE_RIGHT = "middle-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def row(self) -> str:
        return self.value.split("-")[0]

    @property
    def column(self) -> str:
        return self.value.split("-")[1]

    @property
    def label(self) -> str:
        """Human label, e.g. 'Bottom Left'."""
        return " ".join(part.capitalize() for part in self.value.split("-"))


def parse_anchor(value) -> AnchorPosition:
    """
    Accept an AnchorPosition or its name in any common spelling.

    "bottom-left", "bottom_left" and "Bottom Left" all map to BOTTOM_LEFT.
    """
    if isinstance(value, AnchorPosition):
        return value
    key = str(value).strip().lower().replace("_", "-").replace(" ", "-")
    try:
        return AnchorPosition(key)
    except ValueError:
        available = ", ".join(a.value for a in AnchorPosition)
        raise ValueError(f"Unknown position '{value}'. Available: {available}") from None


def list_positions() -> List[dict]:
    """All anchors as {value, label} dicts, in menu order."""
    return [{"value": a.value, "label": a.label} for a in AnchorPosition]
