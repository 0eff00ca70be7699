"""Settings persistence and runtime configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Callable
import logging

from .utils import CHARACTERS, MAX_LIVES, ROUND_SECONDS, SETTINGS_FILE, clamp, load_json, save_json

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options."""

    fullscreen: bool = False
    dim_on_pause: bool = True


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    master_volume: float = 0.8
    sfx_volume: float = 0.8
    max_lives: int = MAX_LIVES
    round_seconds: int = ROUND_SECONDS
    character: str = CHARACTERS[0]
    log_level: str = "INFO"
    display: DisplaySettings = field(default_factory=DisplaySettings)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


def _number(raw: dict[str, Any], key: str, default: float, cast: Callable[[Any], float]) -> float:
    """Coerce a stored number, keeping the default for values of the wrong type."""
    try:
        return cast(raw.get(key, default))
    except (TypeError, ValueError, OverflowError):
        return default


def _flag(raw: dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    return value if isinstance(value, bool) else default


class SettingsManager:
    """Load, save, and mutate game settings."""

    def __init__(self, path: Path = SETTINGS_FILE) -> None:
        self.path = path
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(self.path, {})
        if not isinstance(raw, dict):
            raw = {}
        settings = GameSettings()

        settings.master_volume = clamp(_number(raw, "master_volume", settings.master_volume, float), 0.0, 1.0)
        settings.sfx_volume = clamp(_number(raw, "sfx_volume", settings.sfx_volume, float), 0.0, 1.0)
        settings.max_lives = int(clamp(_number(raw, "max_lives", settings.max_lives, int), 1, 9))
        settings.round_seconds = int(clamp(_number(raw, "round_seconds", settings.round_seconds, int), 5, 300))

        if raw.get("character") in CHARACTERS:
            settings.character = raw["character"]
        if str(raw.get("log_level", "")).upper() in LOG_LEVELS:
            settings.log_level = str(raw["log_level"]).upper()

        display = raw.get("display", {})
        if not isinstance(display, dict):
            display = {}
        settings.display.fullscreen = _flag(display, "fullscreen", settings.display.fullscreen)
        settings.display.dim_on_pause = _flag(display, "dim_on_pause", settings.display.dim_on_pause)
        return settings

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(self.path, asdict(self.settings))

    def cycle_character(self) -> str:
        """Switch to the next character sprite and persist settings."""
        idx = CHARACTERS.index(self.settings.character)
        self.settings.character = CHARACTERS[(idx + 1) % len(CHARACTERS)]
        self.save()
        return self.settings.character

    def adjust_volume(self, field_name: str, delta: float) -> None:
        """Adjust a volume setting and save."""
        value = float(getattr(self.settings, field_name))
        setattr(self.settings, field_name, clamp(value + delta, 0.0, 1.0))
        self.save()
