from dataclasses import dataclass


@dataclass
class Scene:
    # Set when something visible changed; render() clears it
    needs_redraw: bool = True

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def should_render(self, *, hud: bool = False) -> bool:
        # The HUD's FPS counter changes every frame
        return self.needs_redraw or hud

    # Scenes own what gets drawn each frame; the engine clears and flips
    def render(self, *, text=None, fps: float = 0.0):  # pragma: no cover - visual
        self.needs_redraw = False
