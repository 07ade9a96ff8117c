from __future__ import annotations

from avoider.geometry import PointerState


class PointerTracker:
    """Keeps the latest pointer position and the one before it.

    ``previous`` lags ``current`` by exactly one motion event, which is what
    the evasion rules use to guess the approach direction.
    """

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.current = PointerState(x, y)
        self.previous = PointerState(x, y)

    def on_move(self, x: int, y: int) -> tuple[PointerState, PointerState]:
        self.previous = self.current
        self.current = PointerState(int(x), int(y))
        return self.current, self.previous
