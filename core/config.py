"""Centralized configuration constants."""

# Screen defaults
DEFAULT_SCREEN_WIDTH = 960
DEFAULT_SCREEN_HEIGHT = 540
CELL_PIXELS = 20

# Update rates
TARGET_RENDERING_FPS = 60
# Longest tick handed to the simulation; longer frames are clamped.
MAX_STEP = 0.05

# Level
FINISH_DELAY = 1

# Player movement (cells, seconds)
PLAYER_X_SPEED = 7.0
PLAYER_GRAVITY = 30.0
PLAYER_JUMP_SPEED = 17.0

# Headless defaults
DEFAULT_MAX_TIME = 300.0
