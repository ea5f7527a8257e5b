"""
constants.py: Centralized configuration for the game world, physics and shell.
"""

# -------- Game World Config (cells) --------
SCREEN_WIDTH = 80               # Also the spawn distance ahead of the player
SCREEN_HEIGHT = 50
PLAYER_OFFSET = 10              # Screen column of the player; trailing prune margin
PLAYER_SPAWN_X = 5
PLAYER_SPAWN_Y = 25

# -------- Time Config (milliseconds) --------
FRAME_DURATION = 75.0           # One physics step per accumulator overflow
RENDER_FPS = 60

# -------- Physics Config (cells / step) --------
GRAVITY_STEP = 0.2
TERMINAL_VELOCITY = 2.0
FLAP_VELOCITY = -2.0

# -------- Obstacle Config --------
OBSTACLE_GAP_Y_RANGE = (10, 40)     # Upper bound exclusive
OBSTACLE_MAX_GAP = 20
OBSTACLE_MIN_GAP = 2

# -------- Powerup Config --------
POWERUP_Y_RANGE = (10, 60)          # Upper bound exclusive
COIN_VALUE_RANGE = (2, 7)           # Upper bound exclusive
POWERUP_SPAWN_ONE_IN = 10
POWERUP_REACH = 2                   # Vertical tolerance for pickup

# -------- Colors (RGB) --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
NAVY = (0, 0, 128)

# -------- Glyphs --------
PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"
GRAVITY_GLYPH = "*"
GAP_GLYPH = "↨"                # Code page 437 glyph 23
SLOW_GLYPH = ">"
UNKNOWN_COIN_GLYPH = "#"

# -------- Text --------
GAME_TITLE = "Flappy Dragon"

# -------- Shell Config --------
CELL_SIZE = 12                      # Pixels per glyph cell
