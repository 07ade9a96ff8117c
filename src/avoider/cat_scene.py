"""The one and only scene: a cat in an empty window.

Routes raw pygame events to the pointer tracker, the active strategy and the
click sound. Rendering and audio are injected so the scene can be driven in
tests with plain ``pygame.event.Event`` objects and no display.
"""

from __future__ import annotations

from typing import Tuple

import pygame

from avoider.geometry import WorldBounds
from avoider.pointer_tracker import PointerTracker
from avoider.session import Session, new_session
from avoider.strategies import Strategy
from core.drawable import AudioCue, Drawable
from core.scene import Scene

# Left, middle, right; wheel "buttons" 4/5 are not clicks
CLICK_BUTTONS = (1, 2, 3)
# Window uncovered or restored; the back buffer must be redrawn
EXPOSE_EVENTS = (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED)


class CatScene(Scene):
    def __init__(
        self,
        strategy: Strategy,
        renderer: Drawable,
        audio: AudioCue,
        *,
        bounds: WorldBounds,
        sprite_size: Tuple[int, int] = (0, 0),
    ) -> None:
        super().__init__()
        self.strategy = strategy
        self.renderer = renderer
        self.audio = audio
        self.tracker = PointerTracker()
        self.session: Session = strategy.start(new_session(bounds, sprite_size))

    @property
    def sprite(self):
        return self.session.sprite

    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        if event.type == pygame.MOUSEMOTION:
            # Drags are ignored entirely: no move, no tracker update
            if any(getattr(event, "buttons", ())):
                return
            self.on_pointer_moved(*event.pos)
        elif event.type in EXPOSE_EVENTS:
            self.needs_redraw = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button in CLICK_BUTTONS:
            self.on_click()

    def on_pointer_moved(self, x: int, y: int) -> Session:
        current, previous = self.tracker.on_move(x, y)
        self.session = self.strategy.on_pointer_moved(self.session, current, previous)
        self.needs_redraw = True
        return self.session

    def on_click(self) -> None:
        # Fire and forget; a silent click never affects the cat
        self.audio.play_click_sound()

    # ------------------------------------------------------------------
    def render(self, *, text=None, fps: float = 0.0) -> None:
        self.renderer.draw(self.sprite.x, self.sprite.y)
        if text is not None:
            text.draw_text(self.hud_label(fps), 10, 10, key="hud")
        self.needs_redraw = False

    def hud_label(self, fps: float) -> str:
        return f"{self.strategy.name}  {fps:5.1f} fps"
