import numpy as np
import pytest
from PIL import Image
from pyrsistent import pvector

from identicon.components import Point, Rect
from identicon.renderer import render, render_image
from identicon.state import ImageState
from tests.test_utils import (
    USERNAME_COLOR,
    decode_image,
    make_username_state,
    painted_mask,
)


def test_render_image_size_and_mode() -> None:
    image = render_image(make_username_state())
    assert image.size == (250, 250)
    assert image.mode == "RGBA"


def test_render_paints_only_mapped_tiles() -> None:
    state = make_username_state()
    mask = painted_mask(render_image(state))
    expected = np.zeros((250, 250), dtype=bool)
    for rect in state.pixel_map:
        x0, y0, x1, y1 = rect.as_box()
        expected[y0:y1, x0:x1] = True
    assert np.array_equal(mask, expected)


def test_render_uses_state_color() -> None:
    arr = np.array(render_image(make_username_state()))
    assert tuple(arr[0, 0]) == (*USERNAME_COLOR, 255)
    assert tuple(arr[175, 175]) == (*USERNAME_COLOR, 255)
    # index 5 (row 1, column 0) was filtered out
    assert arr[75, 25, 3] == 0


def test_render_tiles_do_not_bleed() -> None:
    state = ImageState(
        color=(10, 20, 30),
        pixel_map=pvector([Rect(Point(50, 50), Point(100, 100))]),
    )
    mask = painted_mask(render_image(state))
    assert mask[50:100, 50:100].all()
    assert not mask[100, 50:101].any()
    assert not mask[50:101, 100].any()
    assert int(mask.sum()) == 50 * 50


def test_render_empty_pixel_map_is_transparent() -> None:
    image = render_image(ImageState(color=(1, 2, 3)))
    assert not painted_mask(image).any()


def test_render_without_color_raises() -> None:
    with pytest.raises(ValueError):
        render_image(ImageState())


def test_render_returns_png_bytes() -> None:
    data = render(make_username_state())
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    image = decode_image(data)
    assert image.size == (250, 250)


def test_render_roundtrip_is_lossless() -> None:
    state = make_username_state()
    original = np.array(render_image(state))
    decoded = np.array(decode_image(render(state)))
    assert np.array_equal(original, decoded)


def test_render_is_deterministic() -> None:
    state = make_username_state()
    assert render(state) == render(state)


def test_render_image_is_pillow_image() -> None:
    assert isinstance(render_image(make_username_state()), Image.Image)
