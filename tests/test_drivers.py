import io
from dataclasses import replace

import numpy as np
from PIL import Image

from src.fancam_thumbnail.crop import CropRegion
from src.fancam_thumbnail.export import export_png, export_thumbnail, render_export, save_png
from src.fancam_thumbnail.preview import PreviewDriver, preview_size
from src.fancam_thumbnail.session import EditorSession
from src.fancam_thumbnail.state import ThumbnailState


def test_preview_size_is_16_9():
    assert preview_size(800) == (800, 450)
    assert preview_size(1280) == (1280, 720)
    assert preview_size(333) == (333, 187)


def test_preview_defaults_to_800():
    assert PreviewDriver(None).container_width == 800


def test_preview_clears_when_not_ready():
    preview = PreviewDriver(640)
    assert preview.refresh(ThumbnailState()) is False
    assert preview.surface.size == (640, 360)
    assert not np.asarray(preview.surface).any()
    assert preview.render_count == 0


def test_preview_zero_height_crop_leaves_cleared_surface(ready_state):
    preview = PreviewDriver(640)
    preview.refresh(ready_state)
    assert np.asarray(preview.surface).any()

    preview.refresh(replace(ready_state, crop=CropRegion(0, 0, 100, 0)))
    assert not np.asarray(preview.surface).any()
    assert preview.render_count == 1


def test_preview_rerenders_on_every_mutation(photo_bytes):
    session = EditorSession()
    preview = PreviewDriver(400).attach(session)

    session.set_title("before load")
    assert preview.render_count == 0

    session.load_image(photo_bytes)
    session.set_title("IVE")
    session.set_description("Music Bank")
    session.move_crop(10, 0)
    assert preview.render_count == 4
    assert preview.surface.size == (400, 225)


def test_preview_refreshes_only_through_refresh(ready_state):
    preview = PreviewDriver(320)
    assert not callable(preview)
    assert preview.refresh(ready_state)
    assert preview.render_count == 1


def test_preview_follows_container_resize(ready_state):
    preview = PreviewDriver(800)
    preview.refresh(ready_state)
    preview.resize(1024, ready_state)
    assert preview.surface.size == (1024, 576)


def test_export_png_is_1280x720(ready_state):
    data = export_png(ready_state)
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    with Image.open(io.BytesIO(data)) as img:
        assert img.size == (1280, 720)


def test_export_skips_unready_state():
    assert export_png(ThumbnailState()) is None
    assert export_thumbnail(ThumbnailState()) is None


def test_export_matches_preview_at_export_width(ready_state):
    preview = PreviewDriver(1280)
    preview.refresh(ready_state)
    export = render_export(ready_state)
    assert export.tobytes() == preview.surface.tobytes()


def test_each_export_gets_its_own_surface(ready_state):
    first = render_export(ready_state)
    second = render_export(ready_state)
    assert first is not second
    assert first.tobytes() == second.tobytes()


def test_save_png_default_name_in_directory(tmp_path, ready_state):
    path = save_png(export_png(ready_state), tmp_path)
    assert path == tmp_path / "thumbnail.png"
    assert path.read_bytes()[:4] == b"\x89PNG"


def test_export_thumbnail_writes_file(tmp_path, ready_state):
    path = export_thumbnail(ready_state, tmp_path / "out" / "thumb.png")
    assert path.exists()
    with Image.open(path) as img:
        assert img.size == (1280, 720)
