"""Session state handed to and returned from the engines' update functions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from avoider.geometry import PointerState, Sprite, WorldBounds, centered_sprite


@dataclass(frozen=True)
class Session:
    sprite: Sprite
    bounds: WorldBounds
    pointer: PointerState = field(default_factory=PointerState)
    previous: PointerState = field(default_factory=PointerState)

    def with_pointer(self, pointer: PointerState, previous: PointerState) -> Session:
        return replace(self, pointer=pointer, previous=previous)

    def with_sprite(self, sprite: Sprite) -> Session:
        return replace(self, sprite=sprite)


def new_session(bounds: WorldBounds, sprite_size: tuple[int, int]) -> Session:
    return Session(sprite=centered_sprite(bounds, sprite_size), bounds=bounds)
