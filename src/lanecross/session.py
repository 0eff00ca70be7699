"""Session-wide state: mode flags, countdown, high score and collision response."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING
import logging

from .utils import ROUND_SECONDS

if TYPE_CHECKING:
    from .player import Player

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Coarse lifecycle state derived from the session flags."""

    IDLE = auto()
    RUNNING = auto()
    PAUSED = auto()
    OVER = auto()


class OverReason(str, Enum):
    """Why a session ended."""

    TIME_EXPIRED = "time_expired"
    LIVES_EXHAUSTED = "lives_exhausted"


@dataclass(slots=True)
class SessionState:
    """The single owning record of the session flags.

    Entities receive it by reference instead of reading module globals. Until
    the first start the session is idle, which also counts as paused.
    """

    round_seconds: int = ROUND_SECONDS
    started: bool = False
    paused: bool = True
    game_over: bool = False
    times_up: bool = False
    lives_up: bool = False
    timer: int = ROUND_SECONDS
    high_score: int = 0
    new_high_score: bool = False

    @property
    def mode(self) -> Mode:
        if not self.started:
            return Mode.IDLE
        if self.game_over:
            return Mode.OVER
        if self.paused:
            return Mode.PAUSED
        return Mode.RUNNING

    @property
    def over_reason(self) -> OverReason | None:
        if not self.game_over:
            return None
        if self.lives_up:
            return OverReason.LIVES_EXHAUSTED
        if self.times_up:
            return OverReason.TIME_EXPIRED
        return None

    def begin(self) -> None:
        """Reset the countdown and clear every terminal flag."""
        self.started = True
        self.timer = self.round_seconds
        self.paused = False
        self.game_over = False
        self.times_up = False
        self.lives_up = False
        self.new_high_score = False

    def toggle_pause(self) -> bool:
        """Flip the paused flag while a session is live and return it."""
        if self.mode not in (Mode.RUNNING, Mode.PAUSED):
            return self.paused
        self.paused = not self.paused
        logger.info("Session %s", "paused" if self.paused else "resumed")
        return self.paused

    def count_down(self) -> bool:
        """Consume one second of the countdown; return True when time just ran out."""
        if self.paused:
            return False
        self.timer = max(0, self.timer - 1)
        if self.timer > 0:
            return False
        self.expire_time()
        return True

    def expire_time(self) -> None:
        self.times_up = True
        self.paused = True
        self.game_over = True
        logger.info("Time is up")

    def exhaust_lives(self) -> None:
        self.paused = True
        self.game_over = True
        self.lives_up = True
        logger.info("No lives left")

    def record_score(self, score: int) -> bool:
        """Raise the high score if ``score`` beats it. The high score never decreases."""
        if score <= self.high_score:
            return False
        self.high_score = score
        self.new_high_score = True
        logger.info("New high score: %d", score)
        return True


def resolve_bug_collision(session: SessionState, player: Player) -> None:
    """Send the player home and take a life; end the session on the last one."""
    player.reset_position()
    if player.lives > 0:
        player.lives -= 1
    logger.debug("Bug hit, %d lives left", player.lives)
    if player.lives == 0:
        session.exhaust_lives()
        session.record_score(player.score)
