import json

import pytest

from src.fancam_thumbnail import config
from src.fancam_thumbnail.anchors import AnchorPosition
from src.fancam_thumbnail.crop import CropRegion, has_aspect
from src.fancam_thumbnail.fonts import get_font, list_fonts, validate_family
from src.fancam_thumbnail.session import EditorSession


def test_load_image_initialises_centered_crop(photo_bytes):
    session = EditorSession()
    state = session.load_image(photo_bytes)
    assert state.is_ready
    assert state.display_size == (2000, 1500)
    assert state.crop.width == pytest.approx(1800)
    assert has_aspect(state.crop)


def test_load_image_with_display_size(photo_bytes):
    session = EditorSession()
    state = session.load_image(photo_bytes, display_size=(1000, 750))
    assert state.crop.width == pytest.approx(900)
    rect = state.source_rect()
    assert rect.width == pytest.approx(1800)
    assert rect.x == pytest.approx(100)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        EditorSession().load_image(tmp_path / "nope.jpg")


def test_text_typed_before_load_is_kept(photo_bytes):
    session = EditorSession()
    session.set_title("NewJeans")
    session.set_location("Tokyo Dome")
    state = session.load_image(photo_bytes)
    assert state.title.content == "NewJeans"
    assert state.location.content == "Tokyo Dome"


def test_text_font_and_position_are_shared():
    session = EditorSession()
    session.set_text_font("montserrat")
    state = session.set_text_position("middle_center")
    assert state.title.font_family == state.description.font_family == "Montserrat"
    assert state.title.anchor is state.description.anchor is AnchorPosition.MIDDLE_CENTER
    assert state.location.font_family == "Poppins"


def test_location_style_is_independent():
    session = EditorSession()
    session.set_location_font("Lato")
    state = session.set_location_position("bottom-right")
    assert state.location.anchor is AnchorPosition.BOTTOM_RIGHT
    assert state.title.anchor is AnchorPosition.BOTTOM_LEFT
    assert state.title.font_family == "Chonburi"


def test_unknown_font_is_rejected():
    with pytest.raises(ValueError, match="Unknown font"):
        EditorSession().set_text_font("Comic Sans")


def test_listeners_called_once_per_mutation(photo_bytes):
    seen = []
    session = EditorSession()
    session.subscribe(seen.append)
    session.load_image(photo_bytes)
    session.set_title("a")
    session.set_title("ab")
    session.resize_crop(800)
    assert len(seen) == 4
    assert seen[-1] is session.state

    session.unsubscribe(seen.append)
    session.set_title("abc")
    assert len(seen) == 4


def test_crop_drags_keep_aspect(photo_bytes):
    session = EditorSession()
    session.load_image(photo_bytes)
    for dx, width in [(300, 1200), (-5000, 3000), (40, 90), (9999, 1999)]:
        session.move_crop(dx, -dx)
        state = session.resize_crop(width)
        assert has_aspect(state.crop)


def test_crop_edits_without_image_are_idle():
    seen = []
    session = EditorSession()
    session.subscribe(seen.append)
    before = session.state
    assert session.move_crop(1, 1) is before
    assert session.resize_crop(320) is before
    assert session.set_crop(CropRegion(0, 0, 160, 90)) is before
    assert seen == []


def test_set_crop_rejects_non_16_9(photo_bytes):
    session = EditorSession()
    session.load_image(photo_bytes)
    before = session.state.crop
    with pytest.raises(ValueError, match="not 16:9"):
        session.set_crop(CropRegion(-500, 1200, 4000, 900))
    assert session.state.crop == before


def test_set_crop_is_pulled_inside_image(photo_bytes):
    session = EditorSession()
    session.load_image(photo_bytes)
    state = session.set_crop(CropRegion(1500, 1200, 800, 450))
    crop = state.crop
    assert (crop.x, crop.y) == (pytest.approx(1200), pytest.approx(1050))
    assert (crop.width, crop.height) == (800, pytest.approx(450))

    # oversize crop shrinks to the image width
    state = session.set_crop(CropRegion(-100, -100, 3200, 1800))
    assert state.crop.width == pytest.approx(2000)
    assert state.crop.x == 0 and state.crop.y >= 0
    assert state.crop.y + state.crop.height <= 1500
    assert has_aspect(state.crop)


def test_set_crop_snaps_rounded_input_to_16_9(photo_bytes):
    session = EditorSession()
    session.load_image(photo_bytes)
    state = session.set_crop(CropRegion(0, 0, 1601, 900))
    assert has_aspect(state.crop)
    assert state.crop.width == 1601


def test_set_display_size_scales_crop(photo_bytes):
    session = EditorSession()
    session.load_image(photo_bytes, display_size=(1000, 750))
    before = session.state.source_rect()
    state = session.set_display_size((500, 375))
    assert state.crop.width == pytest.approx(450)
    assert state.source_rect().width == pytest.approx(before.width)


def test_zero_crop_is_not_ready(photo_bytes):
    session = EditorSession()
    session.load_image(photo_bytes)
    state = session.set_crop(CropRegion(0, 0, 0, 0))
    assert not state.is_ready
    assert state.source_rect() is None


def test_from_config_uses_defaults():
    session = EditorSession.from_config(config.load_thumbnail_config())
    state = session.state
    assert state.title.font_family == "Chonburi"
    assert state.title.anchor is AnchorPosition.BOTTOM_LEFT
    assert state.location.font_family == "Poppins"
    assert state.location.anchor is AnchorPosition.TOP_CENTER


def test_config_missing_file_gives_defaults(tmp_path):
    cfg = config.load_thumbnail_config(tmp_path / "missing.json")
    assert cfg["preview"]["container_width"] == 800
    assert cfg["text_position"] == "bottom-left"


def test_config_file_merges_over_defaults(tmp_path):
    path = tmp_path / "thumbnail_config.json"
    path.write_text(json.dumps({"thumbnail": {"font": "Lato", "preview": {"container_width": 640}}}))
    cfg = config.load_thumbnail_config(path)
    assert cfg["font"] == "Lato"
    assert cfg["preview"]["container_width"] == 640
    assert cfg["location_font"] == "Poppins"


def test_config_does_not_leak_between_loads(tmp_path):
    path = tmp_path / "thumbnail_config.json"
    path.write_text(json.dumps({"thumbnail": {"preview": {"container_width": 1}}}))
    config.load_thumbnail_config(path)
    assert config.load_thumbnail_config(tmp_path / "missing.json")["preview"]["container_width"] == 800


def test_fonts_list_and_validate():
    assert [f["name"] for f in list_fonts()] == [
        "Chonburi", "Roboto", "Open Sans", "Montserrat", "Poppins", "Lato",
    ]
    assert validate_family("open sans") == "Open Sans"


def test_missing_font_falls_back_at_requested_size():
    font = get_font("Chonburi", 40)
    assert font.size == 40
