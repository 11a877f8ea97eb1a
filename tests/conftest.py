import io
from dataclasses import replace

import pytest
from PIL import Image

from src.fancam_thumbnail.state import decode_image, state_for_image


@pytest.fixture
def photo():
    """2000x1500 photo: left half red, right half blue."""
    img = Image.new("RGB", (2000, 1500), (200, 30, 30))
    img.paste((30, 30, 200), (1000, 0, 2000, 1500))
    return img


@pytest.fixture
def photo_bytes(photo):
    buf = io.BytesIO()
    photo.save(buf, "PNG")
    return buf.getvalue()


@pytest.fixture
def solid_photo():
    return Image.new("RGB", (1920, 1080), (10, 120, 60))


@pytest.fixture
def ready_state(photo):
    """Loaded photo with the default centered crop and all three texts."""
    state = state_for_image(decode_image(photo))
    state = state.with_text_style("Roboto", "bottom-left")
    state = state.with_location_style("Poppins", "top-center")
    return replace(
        state,
        title=replace(state.title, content="AESPA"),
        description=replace(state.description, content="Fan meeting 2024"),
        location=replace(state.location, content="Seoul"),
    )
