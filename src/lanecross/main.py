"""Executable entrypoint for Lanecross."""

from __future__ import annotations

from pathlib import Path
import logging

from .game import LanecrossGame
from .settings import SettingsManager


def main() -> None:
    """Configure logging and launch the game."""
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    root = Path(__file__).resolve().parents[2]
    LanecrossGame(root=root, settings_manager=settings_manager).run()


if __name__ == "__main__":
    main()
