"""Simple text rendering for OpenGL with pygame fonts.

Draws single-line labels in screen space for the HUD. Each label is kept in
a keyed texture slot and only re-uploaded when its text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glEnable,
    glDisable,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_QUADS,
)


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: str | None = None


class TextRenderer:
    """2D text renderer for OpenGL using pygame.font.

    Expects the engine's top-left orthographic projection to be active.
    """

    def __init__(
        self,
        font: Optional[pygame.font.Font] = None,
        size: int = 24,
        color: Tuple[int, int, int, int] = (40, 40, 40, 255),
    ) -> None:
        self.font = font or pygame.font.Font(None, size)
        self.color = color
        self._slots: Dict[str, _TexSlot] = {}

    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:  # pragma: no cover - visual
        data = pygame.image.tostring(surf, "RGBA", False)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(
            GL_TEXTURE_2D,
            0,
            GL_RGBA,
            w,
            h,
            0,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
            data,
        )
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def draw_text(self, text: str, x: float, y: float, *, key: str) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw a label with its top-left corner at (x, y); returns (w, h)."""
        slot = self._slots.get(key)
        if slot is None:
            slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
            self._slots[key] = slot
        if slot.last_text != text:
            self._upload_surface(slot, self.font.render(text, True, self.color))
            slot.last_text = text

        w, h = slot.size
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, slot.id)
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
        return w, h
