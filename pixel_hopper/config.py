from __future__ import annotations

"""Game configuration constants for Pixel Hopper.

Distances are in pixels and velocities in pixels per tick; the simulation
advances one tick per displayed frame.
"""

# Game configuration
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 540
FPS = 60
GROUND_Y = SCREEN_HEIGHT - 58

# Physics
BASE_SPEED = 3.1  # px/tick scroll at difficulty 0
SPEED_RANGE = 2.2  # added at difficulty 1
BASE_GRAVITY = 0.45  # px/tick^2
GRAVITY_RANGE = 0.16
JUMP_VELOCITY = -11.4  # px/tick, negative is up
MOVE_SPEED = 4.0
MOVE_DAMPING = 0.75  # vx multiplier per tick when no direction is held
SUBSTEP_FLOOR = 2
SUBSTEP_SCALE = 2.0  # px of (|vy| + speed) covered per substep
FALL_MARGIN = 10  # game over once the player top passes SCREEN_HEIGHT + this

# Difficulty ramp
TIME_RAMP_TICKS = 3600  # one minute at 60 FPS
SCORE_RAMP = 4200
SCORE_PER_SPEED = 0.12  # score gained per px of scroll

# Player
PLAYER_X = 150
PLAYER_W = 26
PLAYER_H = 36

# Platforms
PLATFORM_HEIGHT = 58
MIN_PLATFORM_WIDTH = 80
MIN_PLATFORM_Y = 85
SPAWN_HORIZON = 220  # rightmost platform must start within this of the right edge
EVICT_MARGIN = 10
THIN_PLATFORM_FACTOR = 0.72
# Fixed opening layout: (x, y offset above ground, width)
INITIAL_PLATFORMS = (
    (0, 0, 320),
    (360, 30, 220),
    (650, 62, 220),
)

# Decorative stars
STAR_COUNT = 40
STAR_BAND = 0.55  # fraction of the screen height stars live in
STAR_PARALLAX = 0.15
STAR_RESPAWN_JITTER = 60
STAR_BIG_CHANCE = 0.3

# Best score persistence
STORAGE_KEY = "pixel_hopper_high_score"
SCORES_ENV_VAR = "PIXEL_HOPPER_SCORES"
DEFAULT_SCORES_PATH = "~/.pixel_hopper/scores.json"

# Palette (night-sky pixel art)
COL_SKY_TOP = (16, 20, 58)
COL_SKY_BOTTOM = (34, 44, 100)
COL_HILLS = (46, 60, 127)
COL_STAR = (87, 211, 255)
COL_PLATFORM = (67, 117, 58)
COL_PLATFORM_TOP = (102, 181, 82)
COL_PLATFORM_DOTS = (53, 90, 47)
COL_PLAYER = (255, 203, 77)
COL_PLAYER_EYES = (31, 43, 99)
COL_PLAYER_MOUTH = (255, 107, 130)
COL_DUST = (243, 245, 255)
COL_BANNER = (15, 19, 36)
COL_TEXT = (243, 245, 255)
COL_ACCENT = (255, 203, 77)
