"""Cat behaviour package: re-export the public types for shorter imports.

    from avoider import EvasionEngine, PointerTracker, Session

Rendering and audio live in ``render``/``sound``; nothing in here touches
the display or the mixer, except ``CatScene`` which only reads pygame's
event constants.
"""

from .geometry import PointerState, Sprite, WorldBounds, centered_sprite
from .pointer_tracker import PointerTracker
from .session import Session, new_session
from .evasion import EvasionEngine, EvasionPolicy, HopRule, WrapRule, HOP_RULES, WRAP_RULES
from .follow import FollowEngine
from .strategies import STRATEGIES, Strategy, make_strategy
from .cat_scene import CatScene

__all__ = [
    "PointerState",
    "Sprite",
    "WorldBounds",
    "centered_sprite",
    "PointerTracker",
    "Session",
    "new_session",
    "EvasionEngine",
    "EvasionPolicy",
    "HopRule",
    "WrapRule",
    "HOP_RULES",
    "WRAP_RULES",
    "FollowEngine",
    "STRATEGIES",
    "Strategy",
    "make_strategy",
    "CatScene",
]
