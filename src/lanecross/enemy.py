"""Bug obstacles crossing the stone lanes."""

from __future__ import annotations

from dataclasses import dataclass

from .render import Canvas
from .session import SessionState
from .utils import BUG_LANES, BUG_SPEEDS, BUG_SPRITE, CANVAS_WIDTH, generate_random


def random_lane() -> int:
    """Pick one of the three bug lanes uniformly."""
    return BUG_LANES[generate_random(len(BUG_LANES))]


@dataclass(slots=True)
class Enemy:
    """A bug moving left to right at a constant speed in px/s."""

    x: float
    y: float
    speed: float
    sprite: str = BUG_SPRITE

    @classmethod
    def spawn(cls) -> Enemy:
        """Create a bug at the left edge of a random lane with a random speed."""
        speed = BUG_SPEEDS[generate_random(len(BUG_SPEEDS))]
        return cls(x=0, y=random_lane(), speed=speed)

    def advance(self, dt: float, session: SessionState) -> None:
        """Move by ``speed * dt`` unless paused, wrapping to a new lane at the right edge."""
        if not session.paused:
            self.x += self.speed * dt
        if self.x >= CANVAS_WIDTH:
            self.x = 0
            self.y = random_lane()

    def draw(self, canvas: Canvas, session: SessionState) -> None:
        if session.game_over:
            return
        canvas.draw_sprite(self.sprite, self.x, self.y)
