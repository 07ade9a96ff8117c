"""Screen-space textured quad for the cat.

Assumes the engine's orthographic projection (origin top-left, y down, one
unit per pixel), so ``draw(x, y)`` places the image's top-left corner at
pixel (x, y) like a plain blit would.
"""

from __future__ import annotations

from typing import Optional, Tuple

from OpenGL.GL import (
    glEnable,
    glDisable,
    glBindTexture,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    GL_TEXTURE_2D,
    GL_QUADS,
)
from textures.texture_utils import get_texture_size


class SpriteRenderer:
    def __init__(self, texture: Optional[int]) -> None:
        self.texture = texture
        self.size: Tuple[int, int] = get_texture_size(texture) or (0, 0)

    @property
    def drawable(self) -> bool:
        return bool(self.texture) and self.size != (0, 0)

    def draw(self, x: int, y: int) -> None:  # pragma: no cover - visual
        if not self.drawable:
            return
        w, h = self.size
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, self.texture)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y + h)
        glEnd()
        glDisable(GL_TEXTURE_2D)
