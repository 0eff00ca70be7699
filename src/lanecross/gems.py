"""Collectible gems and their all-or-nothing respawn rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator
import logging

from .render import Canvas
from .session import SessionState
from .utils import (
    GEM_COLORS,
    GEM_COLUMNS,
    GEM_LANES,
    GEM_RENDER_SIZE,
    GEM_WIDTH,
    MAX_GEMS,
    generate_random,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Gem:
    """A gem sitting on one of the 5 x 3 stone tiles."""

    color: str
    x: float
    y: float
    visible: bool = True

    @property
    def sprite(self) -> str:
        return f"images/Gem{self.color}.png"

    @classmethod
    def random(cls) -> Gem:
        gem = cls(color=GEM_COLORS[0], x=0, y=GEM_LANES[0])
        gem.randomize()
        return gem

    def randomize(self) -> None:
        """Move to a random tile, pick a random color and show the gem."""
        self.x = generate_random(GEM_COLUMNS) * GEM_WIDTH
        self.y = GEM_LANES[generate_random(len(GEM_LANES))]
        self.color = GEM_COLORS[generate_random(len(GEM_COLORS))]
        self.visible = True


@dataclass(slots=True)
class GemSet:
    """Fixed-size, ordered batch of gems that respawns as a whole."""

    members: list[Gem] = field(default_factory=list)

    def __iter__(self) -> Iterator[Gem]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, index: int) -> Gem:
        return self.members[index]

    def clear(self) -> None:
        self.members.clear()

    def populate(self, count: int = MAX_GEMS) -> None:
        """Replace the batch with ``count`` freshly randomized gems."""
        self.members = [Gem.random() for _ in range(count)]

    def refresh_if_exhausted(self) -> bool:
        """Respawn every gem once all of them have been taken.

        A partially collected batch is left alone.
        """
        if not self.members:
            return False
        if any(gem.visible for gem in self.members):
            return False
        for gem in self.members:
            gem.randomize()
        logger.debug("Gem batch respawned")
        return True

    def draw(self, canvas: Canvas, session: SessionState) -> None:
        if session.game_over:
            return
        for gem in self.members:
            if gem.visible:
                canvas.draw_sprite(gem.sprite, gem.x, gem.y, GEM_RENDER_SIZE)
