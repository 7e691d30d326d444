"""
constants.py: Centralized configuration for the grid, timing and physics.
"""

# -------- Grid Config --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# Time synchronization
FRAME_DURATION = 75.0           # Physics tick threshold (ms)
RENDER_FPS = 60                 # Driver frame rate cap

# -------- Physics Config (grid rows / physics tick) --------
GRAVITY_STEP = 0.5
MAX_VELOCITY = 2.0              # Gravity stops accelerating at this speed
FLAP_VELOCITY = -2.5            # Instantaneous velocity after a flap

# -------- Player Config --------
PLAYER_START_X = 5              # Fixed player column
PLAYER_START_Y = 25

# -------- Obstacle Config --------
GAP_Y_MIN = 10
GAP_Y_MAX = 40                  # Exclusive
MAX_GAP_SIZE = 20               # Gap size at score 0
MIN_GAP_SIZE = 2

# -------- Colours --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
PLAYER_COLOR = (117, 47, 243)

# -------- Glyphs (CP437 codes) --------
PLAYER_GLYPH = 18               # Up-down arrow
OBSTACLE_GLYPH = ord('|')

# -------- Window Config --------
WINDOW_TITLE = "Flappy Grid"
CELL_WIDTH = 10                 # Pixels per cell
CELL_HEIGHT = 14

# Monospace fonts that carry the CP437 pictographs, tried in order
FONT_CANDIDATES = [
    "DejaVu Sans Mono",
    "Noto Sans Mono",
    "Consolas",
    "Menlo",
    "Segoe UI Symbol",
]
