"""Pytest configuration for headless pygame tests."""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingCanvas:
    """Stands in for the pygame canvas and remembers every blit request."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, float, float, tuple[int, int] | None]] = []

    def draw_sprite(self, sprite_id, x, y, size=None) -> None:
        self.calls.append((sprite_id, x, y, size))

    def sprites(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture(autouse=True)
def seeded_random() -> None:
    random.seed(1234)
