"""Sound loading and playback utilities for pygame.mixer.

Keep a tiny registry so the rest of the code can reference sounds by key
without juggling file paths or Sound objects.

Usage:

    from sound.sound_utils import Sounds

    Sounds.ensure_init()  # safe to call many times
    Sounds.load_optional("meow", "assets/sounds/cat.wav")
    Sounds.play("meow")

``load`` raises on failure; ``load_optional``, ``play`` and ``ClickSound``
report problems once and then quietly no-op so the game keeps running.
"""

from __future__ import annotations

from typing import Dict, Optional, Set
import os
import pygame
from config import MUTE
from core.errors import AssetLoadError, AudioDeviceUnavailable
from textures.resoucepath import CAT_SOUND_PATH


class Sounds:
    """Static manager for loading and playing short SFX.

    Notes
    -----
    - Initializes pygame.mixer lazily on first use.
    - Stores sounds by a string key (e.g., "meow").
    - `play()` grabs a free channel (stealing one if necessary) so repeated
      calls overlap instead of cutting each other off.
    """

    muted: bool = MUTE
    _inited: bool = False
    _failed_init: bool = False
    _sounds: Dict[str, pygame.mixer.Sound] = {}
    _missing_warned: Set[str] = set()

    @classmethod
    def ensure_init(
        cls,
        *,
        frequency: int = 44100,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> bool:
        """Initialize pygame.mixer if needed. Returns True on success.

        Safe to call multiple times; a failed init is not retried.
        """
        if cls._inited:
            return True
        if cls._failed_init:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(
                    frequency=frequency, size=size, channels=channels, buffer=buffer
                )
            cls._inited = pygame.mixer.get_init() is not None
        except pygame.error as e:  # pragma: no cover - environment dependent
            print(f"[Sounds] Mixer init failed: {e}")
            cls._inited = False
        if not cls._inited:
            cls._failed_init = True
        return cls._inited

    @classmethod
    def is_available(cls) -> bool:
        """Return True if audio playback should work."""
        return cls._inited and (pygame.mixer.get_init() is not None)

    @classmethod
    def load(cls, key: str, path: str) -> pygame.mixer.Sound:
        """Load a sound file and register it under `key`.

        Raises AssetLoadError if the file is missing or can't be decoded and
        AudioDeviceUnavailable if the mixer can't start.
        """
        if not os.path.exists(path):
            raise AssetLoadError(path, "no such file")
        if not cls.ensure_init():
            raise AudioDeviceUnavailable("pygame.mixer could not be initialized")
        try:
            snd = pygame.mixer.Sound(path)
        except pygame.error as e:  # pragma: no cover - file/codec dependent
            raise AssetLoadError(path, e) from e
        cls._sounds[key] = snd
        return snd

    @classmethod
    def load_optional(cls, key: str, path: str) -> Optional[pygame.mixer.Sound]:
        """Load sound if possible; otherwise print a note and return None."""
        try:
            return cls.load(key, path)
        except AssetLoadError as e:
            print(f"[Sounds] Error reading sound file for '{key}': {e}")
        except AudioDeviceUnavailable as e:
            print(f"[Sounds] Couldn't get audio line for '{key}': {e}")
        return None

    @classmethod
    def clear(cls) -> None:
        cls._sounds.clear()
        cls._missing_warned.clear()

    @classmethod
    def is_loaded(cls, key: str) -> bool:
        return key in cls._sounds

    @classmethod
    def play(cls, key: str) -> Optional[pygame.mixer.Channel]:
        """Play a registered sound by key on its own channel."""
        if cls.muted:
            return None
        if not cls.is_available():
            return None
        snd = cls._sounds.get(key)
        if snd is None:
            # Print only once per missing key to avoid spam.
            if key not in cls._missing_warned:
                print(f"[Sounds] Warning: sound '{key}' not loaded")
                cls._missing_warned.add(key)
            return None

        ch = pygame.mixer.find_channel(True)
        if ch is None:
            return None
        ch.play(snd)
        return ch


class ClickSound:
    """Meow on click.

    The clip is loaded on the first click. If that fails the reason is
    printed once and every later click is silent; the load is not retried.
    """

    def __init__(self, path: str = CAT_SOUND_PATH, key: str = "meow") -> None:
        self.path = path
        self.key = key
        self.failed = False

    def _ensure_loaded(self) -> bool:
        if Sounds.is_loaded(self.key):
            return True
        if self.failed:
            return False
        if Sounds.load_optional(self.key, self.path) is None:
            self.failed = True
            return False
        return True

    def play_click_sound(self) -> Optional[pygame.mixer.Channel]:
        if Sounds.muted or not self._ensure_loaded():
            return None
        return Sounds.play(self.key)


__all__ = ["Sounds", "ClickSound"]
