WIDTH = 1500
HEIGHT = 900
WINDOW_TITLE = "Click To Meow!"
# Light grey, close to the classic Nimbus panel background
BACKGROUND_COLOR = (0.84, 0.85, 0.87, 1.0)
FPS = 60
VSYNC = False
MUTE = False
# Draw mode label and FPS in the top-left corner
SHOW_HUD = False
# "evade" hops away from the cursor, "follow" sticks to it
DEFAULT_MODE = "evade"
# Escape hop distance in pixels (one cursor width)
STEP_SIZE = 16
# Offset from the opposite edge when the cat wraps around
EDGE_MARGIN = 20
# Follow mode replaces the system cursor with the cat
HIDE_CURSOR_IN_FOLLOW = True
