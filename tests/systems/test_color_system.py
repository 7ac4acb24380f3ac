import pytest
from pyrsistent import pvector

from identicon.state import ImageState
from identicon.systems.color import color_system
from identicon.systems.hash import hash_system
from tests.test_utils import USERNAME_COLOR, USERNAME_HASH, make_username_state


def test_color_from_first_three_bytes() -> None:
    state = color_system(make_username_state("hash"))
    assert state.color == USERNAME_COLOR


def test_color_leaves_hash_untouched() -> None:
    state = color_system(make_username_state("hash"))
    assert list(state.hash_bytes) == USERNAME_HASH


@pytest.mark.parametrize("text", ["", "alice", "bob", "🙂"])
def test_color_equals_hash_prefix(text: str) -> None:
    state = color_system(hash_system(text))
    assert state.color == tuple(state.hash_bytes[:3])


def test_color_returns_new_state() -> None:
    before = make_username_state("hash")
    after = color_system(before)
    assert before.color is None
    assert after is not before


def test_color_without_hash_raises() -> None:
    with pytest.raises(ValueError):
        color_system(ImageState())


def test_color_with_short_hash_raises() -> None:
    with pytest.raises(ValueError):
        color_system(ImageState(hash_bytes=pvector([1, 2])))


def test_color_with_long_hash_raises() -> None:
    with pytest.raises(ValueError):
        color_system(ImageState(hash_bytes=pvector(range(17))))
