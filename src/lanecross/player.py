"""The player character: grid movement, bug and gem collision checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence
import logging

from .collision import bug_box, gem_box, hits_bug, player_box, touches_gem
from .enemy import Enemy
from .errors import InvalidDirection
from .gems import Gem
from .render import Canvas
from .session import SessionState
from .utils import (
    BLOCK_HEIGHT,
    CANVAS_WIDTH,
    CHARACTERS,
    GEM_REWARD,
    MAX_LIVES,
    PLAYER_SLIDE_X,
    PLAYER_START,
    PLAYER_WIDTH,
    STEP_X,
    STEP_Y,
    Direction,
    parse_direction,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StepResult:
    """What the player ran into during one tick."""

    bug: Enemy | None = None
    gems: list[Gem] = field(default_factory=list)


@dataclass(slots=True)
class Player:
    """State and behavior of the character crossing the lanes.

    The object lives for the whole process; restarts only reset its state.
    """

    max_lives: int = MAX_LIVES
    start: tuple[int, int] = PLAYER_START
    sprite: str = CHARACTERS[0]

    x: float = field(init=False)
    y: float = field(init=False)
    lives: int = field(init=False)
    score: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.reset_session()

    def reset_position(self) -> None:
        self.x, self.y = self.start

    def reset_session(self) -> None:
        """Full lives, zero score, back to the start tile."""
        self.score = 0
        self.lives = self.max_lives
        self.reset_position()

    def advance(self, dt: float, enemies: Sequence[Enemy], gems: Sequence[Gem]) -> StepResult:
        """Check the player against the bugs and the visible gems.

        The player only moves on input, so ``dt`` is unused. At most one bug is
        reported per tick. Every overlapping visible gem is collected. Both
        checks use the position the player had when the tick started.
        """
        result = StepResult()
        box = player_box(self.x, self.y)

        for enemy in enemies:
            if hits_bug(box, bug_box(enemy.x, enemy.y)):
                result.bug = enemy
                break

        for gem in gems:
            if not gem.visible:
                continue
            if touches_gem(box, gem_box(gem.x, gem.y)):
                self.score += GEM_REWARD
                gem.visible = False
                result.gems.append(gem)
                logger.debug("Gem %s collected, score %d", gem.color, self.score)
        return result

    def draw(self, canvas: Canvas) -> None:
        # Drawn even after game over, unlike bugs and gems.
        canvas.draw_sprite(self.sprite, self.x, self.y)

    def handle_input(self, symbol: Any, session: SessionState) -> None:
        """Move one grid step in the given direction if the move stays on the board."""
        if session.paused:
            return
        try:
            direction = parse_direction(symbol)
        except InvalidDirection as exc:
            logger.debug("Ignoring input: %s", exc)
            return

        if direction == Direction.UP:
            candidate = self.y - STEP_Y
            if candidate >= BLOCK_HEIGHT:
                self.y = candidate
        elif direction == Direction.DOWN:
            # Clamped rather than rejected, unlike the other three directions.
            self.y = min(self.y + STEP_Y, self.start[1])
        elif direction == Direction.LEFT:
            candidate = self.x - STEP_X
            if candidate >= 0:
                self.x = candidate
        else:
            candidate = self.x + STEP_X
            if candidate + PLAYER_SLIDE_X + PLAYER_WIDTH <= CANVAS_WIDTH:
                self.x = candidate
