"""
Editor session - holds the current ThumbnailState and notifies listeners.

This is the seam a UI (or the CLI / MCP server) drives: every setter
replaces the state and synchronously calls each subscribed listener with
the new state, e.g. a PreviewDriver.
"""

from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from .crop import ASPECT, CropRegion, clamp_crop, has_aspect, move_crop, resize_crop
from .state import ThumbnailState, decode_image, state_for_image

# Hand-entered crops (CLI, MCP) may be off 16:9 by rounding
INPUT_ASPECT_TOLERANCE = 1e-2

Listener = Callable[[ThumbnailState], object]


class EditorSession:

    def __init__(self, state: ThumbnailState = None):
        self.state = state or ThumbnailState()
        self._listeners: List[Listener] = []

    @classmethod
    def from_config(cls, thumb_cfg: dict) -> "EditorSession":
        """Session whose fonts and positions start from the config defaults."""
        state = ThumbnailState()
        state = state.with_text_style(thumb_cfg.get("font"), thumb_cfg.get("text_position"))
        state = state.with_location_style(
            thumb_cfg.get("location_font"), thumb_cfg.get("location_position")
        )
        return cls(state)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _commit(self, state: ThumbnailState) -> ThumbnailState:
        self.state = state
        for listener in list(self._listeners):
            listener(state)
        return state

    # ── Image ─────────────────────────────────────────────────────────

    def load_image(self, source, display_size: Optional[Tuple[float, float]] = None) -> ThumbnailState:
        """Decode a new image and reset the crop to the centered default."""
        image = decode_image(source)
        print(f"  Image: {image.name or 'in-memory'} ({image.width}x{image.height})")
        return self._commit(state_for_image(image, display_size, base=self.state))

    def set_display_size(self, display_size: Tuple[float, float]) -> ThumbnailState:
        """The crop widget was resized; scale the crop along with it."""
        old_w, old_h = self.state.display_size or display_size
        new_w, new_h = display_size
        fx, fy = new_w / old_w, new_h / old_h
        crop = self.state.crop
        # height follows fx so the crop stays 16:9
        scaled = CropRegion(crop.x * fx, crop.y * fy, crop.width * fx, crop.height * fx)
        if not crop.is_empty:
            scaled = clamp_crop(scaled, display_size)
        return self._commit(replace(self.state, display_size=tuple(display_size), crop=scaled))

    # ── Crop ──────────────────────────────────────────────────────────

    def _bounds(self) -> Optional[Tuple[float, float]]:
        if self.state.display_size:
            return self.state.display_size
        if self.state.image:
            return self.state.image.size
        return None

    def set_crop(self, crop: CropRegion) -> ThumbnailState:
        """
        Replace the crop, pulled inside the displayed image.

        A zero-area crop is stored as-is ("not ready"). Any other crop must
        be 16:9 to within 1%, and is snapped to exactly 16:9; otherwise
        ValueError. With no image loaded the state is returned unchanged.
        """
        bounds = self._bounds()
        if bounds is None:
            return self.state
        if not crop.is_empty:
            if not has_aspect(crop, tolerance=INPUT_ASPECT_TOLERANCE):
                raise ValueError(f"Crop {crop.width}x{crop.height} is not 16:9")
            crop = clamp_crop(replace(crop, height=crop.width / ASPECT), bounds)
        return self._commit(replace(self.state, crop=crop))

    def move_crop(self, dx: float, dy: float) -> ThumbnailState:
        """Drag the crop. No-op (state unchanged, no listeners) before an image loads."""
        bounds = self._bounds()
        if bounds is None:
            return self.state
        return self._commit(replace(self.state, crop=move_crop(self.state.crop, dx, dy, bounds)))

    def resize_crop(self, width: float) -> ThumbnailState:
        """Resize around the centre. No-op before an image loads."""
        bounds = self._bounds()
        if bounds is None:
            return self.state
        return self._commit(replace(self.state, crop=resize_crop(self.state.crop, width, bounds)))

    # ── Text ──────────────────────────────────────────────────────────

    def set_title(self, text: str) -> ThumbnailState:
        return self._commit(replace(self.state, title=replace(self.state.title, content=text or "")))

    def set_description(self, text: str) -> ThumbnailState:
        return self._commit(
            replace(self.state, description=replace(self.state.description, content=text or ""))
        )

    def set_location(self, text: str) -> ThumbnailState:
        return self._commit(replace(self.state, location=replace(self.state.location, content=text or "")))

    def set_text_font(self, family: str) -> ThumbnailState:
        return self._commit(self.state.with_text_style(font_family=family))

    def set_text_position(self, anchor) -> ThumbnailState:
        return self._commit(self.state.with_text_style(anchor=anchor))

    def set_location_font(self, family: str) -> ThumbnailState:
        return self._commit(self.state.with_location_style(font_family=family))

    def set_location_position(self, anchor) -> ThumbnailState:
        return self._commit(self.state.with_location_style(anchor=anchor))
