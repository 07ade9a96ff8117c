"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, GL state, and the main loop.
- Scene: owns the cat, its pointer tracking and click handling, and says
  when a repaint is needed.

The whole program is 2D: the projection is a fixed orthographic one with
the origin at the top-left corner and one unit per pixel.
"""

from __future__ import annotations

from typing import Optional

import pygame
from OpenGL.GL import (
    glEnable,
    glDisable,
    glClear,
    glClearColor,
    glBlendFunc,
    glMatrixMode,
    glLoadIdentity,
    glOrtho,
    glViewport,
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_SRC_ALPHA,
)

from config import *
from avoider import CatScene, WorldBounds, make_strategy
from render.sprite_renderer import SpriteRenderer
from sound.sound_utils import ClickSound, Sounds
from textures.resoucepath import CAT_TEXTURE_PATH
from textures.texture_utils import load_texture
from ui.text_renderer import TextRenderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        mode: str = DEFAULT_MODE,
        *,
        mute: bool = MUTE,
        show_hud: bool = SHOW_HUD,
    ):
        strategy = make_strategy(mode)
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        # No RESIZABLE flag: the world bounds are fixed for the session
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        try:
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame versions won't accept the vsync kwarg, or vsync
            # was requested but unavailable on this system/driver.
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # GL state
        glViewport(0, 0, WIDTH, HEIGHT)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, WIDTH, HEIGHT, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glClearColor(*BACKGROUND_COLOR)

        # Texture upload needs the GL context created above
        renderer = SpriteRenderer(load_texture(CAT_TEXTURE_PATH))
        if not renderer.drawable:
            print("[Engine] Cat image unavailable; running without a sprite")

        Sounds.muted = mute
        self.scene = CatScene(
            strategy,
            renderer,
            ClickSound(),
            bounds=WorldBounds(WIDTH, HEIGHT),
            sprite_size=renderer.size,
        )

        if strategy.name == "follow" and HIDE_CURSOR_IN_FOLLOW:
            pygame.mouse.set_visible(False)

        self.text: Optional[TextRenderer] = TextRenderer() if show_hud else None

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT)
        self.scene.render(text=self.text, fps=self.clock.get_fps())
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            self.clock.tick(FPS)
            running = self.handle_events()
            if not running:
                break
            if self.scene.should_render(hud=self.text is not None):
                self.render()
        pygame.quit()
