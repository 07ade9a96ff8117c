"""Texture loading utilities for OpenGL.

This module keeps a tiny registry of texture sizes so other systems can
query width/height from a texture ID without tracking pygame surfaces.
"""

import os
import pygame
from typing import Optional, Tuple, Dict
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
)

from core.errors import AssetLoadError

_TEXTURE_SIZES: Dict[int, Tuple[int, int]] = {}


def get_texture_size(tex_id: Optional[int]) -> Optional[Tuple[int, int]]:
    """Return (width, height) for a loaded texture ID, if known."""
    if tex_id is None:
        return None
    return _TEXTURE_SIZES.get(int(tex_id))


def load_texture_strict(filename: str) -> int:
    """Load a texture from an image file, raising AssetLoadError on failure.

    Needs a current OpenGL context (call after pygame.display.set_mode).

    Parameters
    ----------
    filename : str
        Path to the image file

    Returns
    -------
    int
        OpenGL texture ID
    """
    if not os.path.exists(filename):
        raise AssetLoadError(filename, "no such file")
    try:
        surface = pygame.image.load(filename).convert_alpha()
    except pygame.error as e:
        raise AssetLoadError(filename, e) from e

    # Keep row 0 at the top; the sprite quad maps v=0 to the top edge
    texture_data = pygame.image.tostring(surface, "RGBA", False)
    width, height = surface.get_size()

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )

    # Nearest keeps the 1:1 pixel sprite crisp
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    _TEXTURE_SIZES[int(texture_id)] = (int(width), int(height))
    return int(texture_id)


def load_texture(filename: str) -> Optional[int]:
    """Like load_texture_strict but reports failures and returns None.

    A None texture draws nothing and has no size.
    """
    try:
        return load_texture_strict(filename)
    except AssetLoadError as e:
        print(f"[Textures] Error reading from image file: {e}")
        return None
