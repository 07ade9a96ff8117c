import pytest

from avoider.evasion import EvasionEngine, EvasionPolicy
from avoider.geometry import PointerState, Sprite, WorldBounds
from avoider.session import Session

WORLD = WorldBounds(1500, 900)


def run(sprite, pointer, previous, engine=None, bounds=WORLD):
    engine = engine or EvasionEngine()
    session = Session(sprite=sprite, bounds=bounds)
    return engine.on_pointer_moved(
        session, PointerState(*pointer), PointerState(*previous)
    ).sprite


@pytest.fixture
def cat():
    return Sprite(700, 400, 100, 100)


# --------------------------------------------------------------------------
# idle
# --------------------------------------------------------------------------
def test_pointer_outside_never_moves_the_cat(cat):
    outside = [
        (x, y)
        for x in range(600, 901, 25)
        for y in range(300, 601, 25)
        if not (700 <= x <= 800 and 400 <= y <= 500)
    ]
    assert outside
    for pointer in outside:
        # previous positions that would trigger each hop if overlapping
        for previous in [(0, 0), (1000, 450), (750, 0), (750, 800)]:
            assert run(cat, pointer, previous) == cat


def test_idle_returns_same_session(cat):
    engine = EvasionEngine()
    session = Session(sprite=cat, bounds=WORLD)
    out = engine.on_pointer_moved(session, PointerState(10, 10), PointerState(0, 0))
    assert out.sprite is cat
    assert out.pointer == PointerState(10, 10)


def test_update_does_not_mutate_input(cat):
    session = Session(sprite=cat, bounds=WORLD)
    EvasionEngine().on_pointer_moved(session, PointerState(705, 450), PointerState(690, 450))
    assert session.sprite == Sprite(700, 400, 100, 100)


# --------------------------------------------------------------------------
# hops
# --------------------------------------------------------------------------
def test_approach_from_left_hops_right(cat):
    assert run(cat, (705, 450), (690, 450)) == Sprite(716, 400, 100, 100)


def test_approach_from_right_hops_left(cat):
    assert run(cat, (795, 450), (810, 450)) == Sprite(684, 400, 100, 100)


def test_approach_from_top_hops_down(cat):
    assert run(cat, (750, 405), (750, 390)) == Sprite(700, 416, 100, 100)


def test_approach_from_bottom_hops_up(cat):
    assert run(cat, (750, 495), (750, 510)) == Sprite(700, 384, 100, 100)


def test_edge_touch_counts_as_overlap(cat):
    assert run(cat, (700, 400), (690, 400)) == Sprite(716, 400, 100, 100)


@pytest.mark.parametrize("prev_y", [0, 390, 450, 510, 899])
def test_left_approach_moves_x_only(cat, prev_y):
    assert run(cat, (710, 450), (700, prev_y)) == Sprite(716, 400, 100, 100)


def test_pointer_appearing_inside_does_not_move(cat):
    assert run(cat, (750, 450), (750, 450)) == cat
    assert run(cat, (750, 450), (720, 480)) == cat


def test_horizontal_beats_vertical(cat):
    # left and top both hold
    assert run(cat, (705, 405), (690, 390)) == Sprite(716, 400, 100, 100)
    # right and bottom both hold
    assert run(cat, (795, 495), (810, 510)) == Sprite(684, 400, 100, 100)
    # left and bottom both hold
    assert run(cat, (705, 495), (600, 600)) == Sprite(716, 400, 100, 100)


def test_choose_hop_names(cat):
    engine = EvasionEngine()
    assert engine.choose_hop(cat, PointerState(690, 390)).name == "from_left"
    assert engine.choose_hop(cat, PointerState(810, 390)).name == "from_right"
    assert engine.choose_hop(cat, PointerState(750, 390)).name == "from_top"
    assert engine.choose_hop(cat, PointerState(750, 510)).name == "from_bottom"
    assert engine.choose_hop(cat, PointerState(750, 450)) is None


def test_custom_step(cat):
    engine = EvasionEngine(EvasionPolicy(step_size=5, edge_margin=0))
    assert run(cat, (705, 450), (690, 450), engine=engine) == Sprite(705, 400, 100, 100)


def test_zero_size_sprite_never_evades():
    s = Sprite(750, 450)
    assert not EvasionEngine.is_evading(s, PointerState(750, 450))
    assert run(s, (750, 450), (0, 0)) == s
    assert run(s, (751, 450), (0, 0)) == s


# --------------------------------------------------------------------------
# wrap
# --------------------------------------------------------------------------
def test_near_right_edge_hop_left_stays():
    s = Sprite(1499, 400, 100, 100)
    # only "from right" holds: 1600 > 1499 and 1600 >= 1599
    assert run(s, (1550, 450), (1600, 450)) == Sprite(1483, 400, 100, 100)


def test_hop_left_past_zero_wraps_to_right():
    s = Sprite(8, 400, 100, 100)
    assert run(s, (100, 450), (120, 450)) == Sprite(1500 - 100 - 20, 400, 100, 100)


def test_hop_right_past_edge_wraps_to_left():
    s = Sprite(1484, 400, 100, 100)
    assert run(s, (1490, 450), (1480, 450)) == Sprite(20, 400, 100, 100)


def test_hop_up_past_top_wraps_to_bottom():
    s = Sprite(700, -90, 100, 100)
    assert run(s, (750, 5), (750, 20)) == Sprite(700, 900 - 100 - 40, 100, 100)


def test_hop_down_past_bottom_wraps_to_top():
    s = Sprite(700, 795, 100, 100)
    assert run(s, (750, 800), (750, 790)) == Sprite(700, 20, 100, 100)


@pytest.mark.parametrize(
    "sprite",
    [
        Sprite(700, 400, 100, 100),
        Sprite(0, 0, 100, 100),
        Sprite(1497, 800, 100, 100),
        Sprite(20, -100, 100, 100),
        Sprite(1380, 760, 100, 100),
    ],
)
def test_wrap_is_idempotent_in_bounds(sprite):
    engine = EvasionEngine()
    once = engine.wrap(sprite, WORLD)
    assert once == sprite
    assert engine.wrap(once, WORLD) == sprite


def test_only_one_wrap_per_update():
    # off the left and off the bottom at once: only the x fix applies
    s = Sprite(-8, 811, 100, 100)
    assert EvasionEngine().wrap(s, WORLD) == Sprite(1380, 811, 100, 100)


def test_stale_right_edge_shadows_vertical_wrap():
    # The cat sits at x >= width - 2 from an earlier frame. A downward hop
    # pushes it past the bottom, but the horizontal wrap matches first, so
    # the cat jumps to the left side and stays below the bottom edge.
    s = Sprite(1498, 795, 100, 100)
    assert run(s, (1550, 800), (1550, 790)) == Sprite(20, 811, 100, 100)


def test_wrap_runs_even_without_a_hop():
    # pointer appears inside the box: no hop, but the stale x still wraps
    s = Sprite(1498, 400, 100, 100)
    assert run(s, (1550, 450), (1550, 450)) == Sprite(20, 400, 100, 100)


def test_no_wrap_while_idle():
    s = Sprite(1498, 400, 100, 100)
    assert run(s, (10, 10), (0, 0)) == s
