from typing import Protocol


class Drawable(Protocol):
    def draw(self, x: int, y: int) -> None: ...  # noqa: D401


class AudioCue(Protocol):
    def play_click_sound(self) -> object: ...  # noqa: D401
