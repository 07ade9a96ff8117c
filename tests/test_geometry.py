import pytest

from avoider.geometry import Sprite, WorldBounds, centered_sprite
from avoider.session import new_session


@pytest.mark.parametrize(
    "px, py",
    [(100, 200), (200, 300), (100, 300), (200, 200), (150, 250)],
)
def test_edges_and_interior_count_as_inside(px, py):
    assert Sprite(100, 200, 100, 100).contains(px, py)


@pytest.mark.parametrize("px, py", [(99, 250), (201, 250), (150, 199), (150, 301)])
def test_outside(px, py):
    assert not Sprite(100, 200, 100, 100).contains(px, py)


def test_zero_size_sprite_never_overlaps():
    s = Sprite(10, 10)
    assert not s.contains(10, 10)
    assert not s.contains(11, 10)
    assert not Sprite(10, 10, 0, 50).contains(10, 20)
    assert not Sprite(10, 10, 50, 0).contains(20, 10)


def test_moved_and_at_return_new_values():
    s = Sprite(1, 2, 3, 4)
    assert s.moved(dx=5) == Sprite(6, 2, 3, 4)
    assert s.at(y=9) == Sprite(1, 9, 3, 4)
    assert s == Sprite(1, 2, 3, 4)


def test_cat_starts_in_the_middle():
    assert centered_sprite(WorldBounds(1500, 900), (120, 80)) == Sprite(750, 450, 120, 80)
    session = new_session(WorldBounds(1500, 900), (0, 0))
    assert (session.sprite.x, session.sprite.y) == (750, 450)
    assert (session.sprite.width, session.sprite.height) == (0, 0)
