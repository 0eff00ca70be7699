"""Shared constants and utility helpers for Lanecross."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any
import json
import math
import random

from .errors import InvalidDirection

CANVAS_WIDTH = 505
CANVAS_HEIGHT = 606
HUD_HEIGHT = 110
FPS = 60
TIMER_INTERVAL_MS = 1000

BLOCK_HEIGHT = 80
STEP_Y = 80
STEP_X = 95

BUG_SPRITE = "images/enemy-bug.png"
BUG_WIDTH = 101
BUG_HEIGHT = 70
BUG_SLIDE_Y = 75
BUG_INSET_X = 20
BUG_TOLERANCE = 10
BUG_SPEEDS = (80, 100, 120)
BUG_LANES = (65, 145, 225)
MAX_BUGS = 3

PLAYER_START = (200, 400)
PLAYER_WIDTH = 75
PLAYER_HEIGHT = 80
PLAYER_SLIDE_X = 15
PLAYER_SLIDE_Y = 60
MAX_LIVES = 5
CHARACTERS = (
    "images/char-cat-girl.png",
    "images/char-boy.png",
    "images/char-horn-girl.png",
    "images/char-pink-girl.png",
    "images/char-princess-girl.png",
)

GEM_COLORS = ("Blue", "Green", "Orange")
GEM_WIDTH = 101
GEM_COLUMNS = 5
GEM_LANES = (25 + BLOCK_HEIGHT, 110 + BLOCK_HEIGHT, 190 + BLOCK_HEIGHT)
GEM_TOP = 40
GEM_BOTTOM = 80
GEM_RENDER_SIZE = (100, 100)
GEM_REWARD = 5
MAX_GEMS = 3

ROUND_SECONDS = 30

BG_COLOR = (0, 0, 0)
WATER_COLOR = (66, 135, 245)
STONE_COLOR = (140, 140, 140)
GRASS_COLOR = (96, 186, 78)
PANEL_COLOR = (24, 28, 40)
TEXT_COLOR = (235, 238, 245)
MUTED_COLOR = (120, 126, 140)
YELLOW = (255, 218, 68)
RED = (230, 60, 70)

DATA_DIR = Path(".lanecross")
SETTINGS_FILE = DATA_DIR / "settings.json"


class Direction(str, Enum):
    """Input symbols understood by the player."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def parse_direction(symbol: Any) -> Direction:
    """Map an input symbol onto a direction or raise InvalidDirection."""
    if isinstance(symbol, Direction):
        return symbol
    try:
        return Direction(symbol)
    except ValueError as exc:
        raise InvalidDirection(symbol) from exc


def generate_random(upper: int, offset: int = 0) -> int:
    """Return a uniform integer in ``[offset, offset + upper)``."""
    return math.floor(random.random() * upper + offset)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
