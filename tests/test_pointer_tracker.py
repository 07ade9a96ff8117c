from avoider.geometry import PointerState
from avoider.pointer_tracker import PointerTracker


def test_starts_at_origin():
    t = PointerTracker()
    assert t.current == PointerState(0, 0)
    assert t.previous == PointerState(0, 0)


def test_previous_lags_by_one_event():
    t = PointerTracker()
    assert t.on_move(10, 20) == (PointerState(10, 20), PointerState(0, 0))
    assert t.on_move(30, 40) == (PointerState(30, 40), PointerState(10, 20))
    assert t.previous == PointerState(10, 20)
    assert t.current == PointerState(30, 40)


def test_same_position_twice():
    t = PointerTracker()
    t.on_move(5, 5)
    current, previous = t.on_move(5, 5)
    assert current == previous == PointerState(5, 5)
