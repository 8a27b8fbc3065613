"""
constants.py: Centralized configuration for the board, entities and scoring.
"""

# -------- Window & Frame Config --------
SCREEN_WIDTH = 705
SCREEN_HEIGHT = 606
FIELD_WIDTH = SCREEN_WIDTH - 200    # Right 200px are reserved for the scoreboard
RENDER_FPS = 60
MAX_FRAME_DT = 0.1                  # Upper clamp for a single frame's dt (seconds)

# -------- Board Tiles --------
TILE_WIDTH = 101
TILE_HEIGHT = 83
NUM_ROWS = 6
NUM_COLS = 5
ROW_SPRITES = (
    "images/water-block.png",       # Top row is water
    "images/stone-block.png",
    "images/stone-block.png",
    "images/stone-block.png",
    "images/grass-block.png",
    "images/grass-block.png",
)

# -------- Sprites --------
PLAYER_SPRITE = "images/char-horn-girl.png"
ENEMY_SPRITE = "images/enemy-bug.png"
GEM_SPRITE = "images/gem-orange.png"
SPRITES = tuple(dict.fromkeys(ROW_SPRITES)) + (ENEMY_SPRITE, PLAYER_SPRITE, GEM_SPRITE)

# -------- Player Config --------
PLAYER_START_X = 202
PLAYER_START_Y = 400
PLAYER_WIDTH = 101
PLAYER_OFFSET_X = 10                # Gap between sprite edge and the drawn character
MOVE_HORIZONTAL = 100
MOVE_VERTICAL = 85
MIN_X = 2
MAX_X = 402
GOAL_Y = 60                         # Topmost lane; reaching it is a crossing

# -------- Enemy Config --------
ENEMY_WIDTH = 101
ENEMY_LANES = (60, 60, 145, 145, 230, 230)
ENEMY_RESET_X = FIELD_WIDTH         # Past this x an enemy respawns off-screen left
ENEMY_SPAWN_X_RANGE = (-500, -50)
ENEMY_SPEED_RANGE = (200, 400)      # Pixels per second

# -------- Gem Config --------
GEM_X_SLOTS = (2, 102, 202, 302, 402)
GEM_Y_SLOTS = (230, 145, 60)
GEM_HIDDEN_POS = (-100, -100)       # Collected gems wait here until regenerated

# -------- Scoring & Timer --------
GOAL_POINTS = 5
GEM_POINTS = 5
COLLISION_PENALTY = 5
TIMEOUT_PENALTY = 10
ROUND_TIME = 10.0                   # Seconds to reach the water
