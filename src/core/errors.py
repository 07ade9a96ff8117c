"""Exceptions raised by the strict asset loaders.

Callers at the scene level catch these, report them and keep running in a
degraded mode (no cat drawn, silent clicks).
"""


class MouseAvoiderError(Exception):
    pass


class AssetLoadError(MouseAvoiderError):
    """An image or sound file is missing or could not be decoded."""

    def __init__(self, path: str, reason: object = None) -> None:
        self.path = path
        self.reason = reason
        msg = path if reason is None else f"{path}: {reason}"
        super().__init__(msg)


class AudioDeviceUnavailable(MouseAvoiderError):
    """pygame.mixer could not be initialised on this machine."""
