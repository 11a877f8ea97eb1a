"""
Preview Driver - live, container-width render of the current state.

The preview surface is rebuilt from scratch on every state change; there
is no diffing. Attach it to an EditorSession to re-render on each edit.
"""

from typing import Optional
from PIL import Image

from .renderer import render
from .state import ThumbnailState

DEFAULT_CONTAINER_WIDTH = 800


def preview_size(container_width: int):
    """(width, height) of a 16:9 preview filling the container width."""
    return container_width, int(container_width * 9 / 16)


class PreviewDriver:
    """Owns the preview surface. Never shared with an export."""

    def __init__(self, container_width: int = DEFAULT_CONTAINER_WIDTH):
        self.container_width = container_width or DEFAULT_CONTAINER_WIDTH
        self.surface: Optional[Image.Image] = None
        self.render_count = 0

    def resize(self, container_width: int, state: ThumbnailState = None) -> None:
        """Container changed size; re-render when a state is given."""
        self.container_width = container_width or DEFAULT_CONTAINER_WIDTH
        if state is not None:
            self.refresh(state)

    def refresh(self, state: ThumbnailState) -> bool:
        """
        Clear the surface, size it to the container and render.

        The surface is always cleared; the render itself is skipped while no
        image is loaded or the crop is empty.
        """
        self.surface = Image.new("RGBA", preview_size(self.container_width), (0, 0, 0, 0))
        if not state.is_ready:
            return False
        drawn = render(self.surface, state)
        if drawn:
            self.render_count += 1
        return drawn

    def attach(self, session) -> "PreviewDriver":
        """Subscribe to a session so every mutation re-renders the preview."""
        session.subscribe(self.refresh)
        return self

    def save(self, path) -> None:
        if self.surface is None:
            raise ValueError("Nothing rendered yet")
        self.surface.save(str(path), "PNG")
