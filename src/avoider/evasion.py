"""Evade mode: the cat hops away when the cursor lands on it.

Each motion event is handled from scratch. If the cursor is inside the cat's
box the cat is *evading* for this event, otherwise it is *idle*; nothing is
remembered between events.

While evading, two ordered rule chains run one after the other:

1. **hop** - guess where the cursor came from (using the position from the
   previous event) and move one step along a single axis away from it.
2. **wrap** - if the hop pushed the cat past a window edge, teleport it to
   the opposite side.

In both chains the first matching rule wins and the rest are skipped, so a
hop is never diagonal and at most one wrap is applied per event. Horizontal
rules sit before vertical ones in both chains. A consequence is that a cat
left sitting at ``x >= width - 2`` keeps re-triggering the horizontal wrap,
which shadows the vertical wrap checks for that event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from avoider.geometry import PointerState, Sprite, WorldBounds
from avoider.session import Session
from config import EDGE_MARGIN, STEP_SIZE


@dataclass(frozen=True)
class EvasionPolicy:
    step_size: int = STEP_SIZE
    edge_margin: int = EDGE_MARGIN


@dataclass(frozen=True)
class HopRule:
    name: str
    applies: Callable[[Sprite, PointerState], bool]
    # Direction of the hop, scaled by the policy step size
    dx: int = 0
    dy: int = 0


@dataclass(frozen=True)
class WrapRule:
    name: str
    applies: Callable[[Sprite, WorldBounds], bool]
    apply: Callable[[Sprite, WorldBounds, EvasionPolicy], Sprite]


HOP_RULES: Sequence[HopRule] = (
    HopRule("from_left", lambda s, prev: prev.x <= s.x, dx=+1),
    HopRule("from_right", lambda s, prev: prev.x >= s.right, dx=-1),
    HopRule("from_top", lambda s, prev: prev.y <= s.y, dy=+1),
    HopRule("from_bottom", lambda s, prev: prev.y >= s.bottom, dy=-1),
)

WRAP_RULES: Sequence[WrapRule] = (
    WrapRule(
        "off_left",
        lambda s, b: s.x < 0,
        lambda s, b, p: s.at(x=b.width - s.width - p.edge_margin),
    ),
    WrapRule(
        "off_right",
        lambda s, b: s.x >= b.width - 2,
        lambda s, b, p: s.at(x=p.edge_margin),
    ),
    WrapRule(
        "off_top",
        lambda s, b: s.bottom < 0,
        lambda s, b, p: s.at(y=b.height - s.height - 2 * p.edge_margin),
    ),
    WrapRule(
        "off_bottom",
        lambda s, b: s.bottom > b.height,
        lambda s, b, p: s.at(y=p.edge_margin),
    ),
)


class EvasionEngine:
    """Pure update function for evade mode.

    ``update`` never mutates its argument; it returns a new ``Session`` (or
    the same one when the cat stays put).
    """

    name = "evade"

    def __init__(
        self,
        policy: Optional[EvasionPolicy] = None,
        hop_rules: Sequence[HopRule] = HOP_RULES,
        wrap_rules: Sequence[WrapRule] = WRAP_RULES,
    ) -> None:
        self.policy = policy or EvasionPolicy()
        self.hop_rules = tuple(hop_rules)
        self.wrap_rules = tuple(wrap_rules)

    # ------------------------------------------------------------------
    @staticmethod
    def is_evading(sprite: Sprite, pointer: PointerState) -> bool:
        return sprite.contains(pointer.x, pointer.y)

    def choose_hop(self, sprite: Sprite, previous: PointerState) -> Optional[HopRule]:
        for rule in self.hop_rules:
            if rule.applies(sprite, previous):
                return rule
        # Cursor appeared inside the box without crossing an edge
        return None

    def hop(self, sprite: Sprite, previous: PointerState) -> Sprite:
        rule = self.choose_hop(sprite, previous)
        if rule is None:
            return sprite
        step = self.policy.step_size
        return sprite.moved(rule.dx * step, rule.dy * step)

    def choose_wrap(self, sprite: Sprite, bounds: WorldBounds) -> Optional[WrapRule]:
        for rule in self.wrap_rules:
            if rule.applies(sprite, bounds):
                return rule
        return None

    def wrap(self, sprite: Sprite, bounds: WorldBounds) -> Sprite:
        rule = self.choose_wrap(sprite, bounds)
        if rule is None:
            return sprite
        return rule.apply(sprite, bounds, self.policy)

    # ------------------------------------------------------------------
    def start(self, session: Session) -> Session:
        return session

    def update(self, session: Session) -> Session:
        sprite = session.sprite
        if not self.is_evading(sprite, session.pointer):
            return session
        moved = self.wrap(self.hop(sprite, session.previous), session.bounds)
        if moved == sprite:
            return session
        return session.with_sprite(moved)

    def on_pointer_moved(
        self, session: Session, pointer: PointerState, previous: PointerState
    ) -> Session:
        return self.update(session.with_pointer(pointer, previous))
