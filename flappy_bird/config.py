"""Game configuration constants for Flappy Bird."""

from __future__ import annotations

import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
ASSET_DIR = os.path.join(BASE_DIR, "assets")
# Optional sprite; the renderer draws a yellow box when it is absent.
BIRD_IMAGE = os.path.join(ASSET_DIR, "flappy-bird.png")

# Game configuration
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 600
FPS = 60
TITLE = "Flappy Bird"

# Physics (fixed per-tick step, not scaled by dt)
GRAVITY = 0.6  # px/tick^2
LIFT = -8.0  # px/tick

# Pipes
PIPE_GAP = 150
PIPE_WIDTH = 50
PIPE_SPEED = 2  # px/tick
PIPE_FREQUENCY = 90  # ticks between new pipes
PIPE_TOP_CLEARANCE = 50
PIPE_RESERVED = 100  # total px kept clear of the gap (top + bottom)

# Bird
BIRD_X = 80
BIRD_WIDTH = 34
BIRD_HEIGHT = 24

# Palette
COL_SKY_TOP = (255, 255, 255)
COL_SKY_BOTTOM = (214, 236, 250)
PIPE_COLOR = (0, 128, 0)
BIRD_FALLBACK_COLOR = (255, 255, 0)
TEXT_COLOR = (0, 0, 0)
OVERLAY_TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 128)

# Persistence
HIGHSCORE_KEY = "flappyBirdHighScore"
HIGHSCORE_FILE = os.environ.get(
    "FLAPPY_BIRD_HIGHSCORE_FILE",
    os.path.join(os.path.expanduser("~"), ".flappy_bird.json"),
)

LOG_LEVEL = os.environ.get("FLAPPY_BIRD_LOG_LEVEL", "INFO").upper()


def pipe_seed() -> int | None:
    """Optional RNG seed for pipe placement, read from FLAPPY_BIRD_SEED."""
    raw = os.environ.get("FLAPPY_BIRD_SEED")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None
