"""Plain value types shared by the cat engines.

All of them are frozen dataclasses: an update never edits a value in place,
it returns a new one via ``dataclasses.replace``. Screen coordinates, origin
at the top-left corner of the window, y grows downwards.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class PointerState:
    x: int = 0
    y: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class WorldBounds:
    width: int
    height: int


@dataclass(frozen=True)
class Sprite:
    """Axis-aligned box for the cat image.

    ``width``/``height`` come from the loaded image and never change; a
    missing image gives a 0x0 sprite.
    """

    x: int
    y: int
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, px: int, py: int) -> bool:
        """Closed-interval hit test, edges count as inside.

        A sprite with no area (image failed to load) never overlaps.
        """
        if self.width <= 0 or self.height <= 0:
            return False
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def moved(self, dx: int = 0, dy: int = 0) -> Sprite:
        return replace(self, x=self.x + dx, y=self.y + dy)

    def at(self, x: Optional[int] = None, y: Optional[int] = None) -> Sprite:
        return replace(
            self,
            x=self.x if x is None else x,
            y=self.y if y is None else y,
        )


def centered_sprite(bounds: WorldBounds, size: tuple[int, int]) -> Sprite:
    """Cat placed with its top-left corner at the middle of the window."""
    w, h = size
    return Sprite(x=bounds.width // 2, y=bounds.height // 2, width=int(w), height=int(h))
