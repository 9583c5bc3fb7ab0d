"""
constants.py: Grid geometry, physics tuning and palette for the simulation.
"""

from typing import Tuple

Color = Tuple[int, int, int]

# -------- Grid --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
FLOOR = 40                      # Ground row; player and static obstacles rest here
PLAYER_COLUMN = 10              # Fixed screen column the player is drawn in

# -------- Timing --------
FRAME_DURATION = 35.0           # ms between physics steps

# -------- Player physics (cells / step) --------
GRAVITY = 0.8
MAX_FALL_VELOCITY = 2.0
JUMP_VELOCITY = -4.0

# -------- Obstacles --------
OBSTACLE_BAND = 5               # Rows above the floor a moving obstacle may occupy
RETIRE_MARGIN = 5               # Cells behind the player before an obstacle is retired
SPAWN_THRESHOLD = 0.9           # Fraction of screen width that triggers a spawn
MIN_OBSTACLE_VELOCITY = -1.5
VELOCITY_PER_POINT = 0.02       # Upper velocity bound grows with score
MAX_TICK_TRAVEL = 11            # Lead lost per tick: player step plus a velocity-10 obstacle

# -------- Palette --------
BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)
ORANGE: Color = (255, 165, 0)
NAVY: Color = (0, 0, 128)
GREEN: Color = (0, 128, 0)

# -------- Glyphs --------
PLAYER_GLYPH = "@"
STATIC_GLYPH = "!"
MOVING_GLYPH = "*"
GROUND_GLYPH = "="
