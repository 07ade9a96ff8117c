from __future__ import annotations

from typing import Callable, Dict, Protocol

from avoider.evasion import EvasionEngine
from avoider.follow import FollowEngine
from avoider.geometry import PointerState
from avoider.session import Session


class Strategy(Protocol):
    name: str

    def start(self, session: Session) -> Session: ...

    def update(self, session: Session) -> Session: ...

    def on_pointer_moved(
        self, session: Session, pointer: PointerState, previous: PointerState
    ) -> Session: ...


STRATEGIES: Dict[str, Callable[[], Strategy]] = {
    "evade": EvasionEngine,
    "follow": FollowEngine,
}


def make_strategy(mode: str) -> Strategy:
    try:
        factory = STRATEGIES[mode]
    except KeyError:
        raise ValueError(
            f"unknown mode {mode!r}, expected one of: {', '.join(sorted(STRATEGIES))}"
        ) from None
    return factory()
