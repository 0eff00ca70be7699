"""Session lifecycle: start/restart, pause/resume, countdown and the per-frame update."""

from __future__ import annotations

from typing import Any
import logging

from .audio import AudioManager
from .enemy import Enemy
from .gems import GemSet
from .player import Player
from .render import Canvas
from .session import Mode, OverReason, SessionState, resolve_bug_collision
from .utils import CHARACTERS, MAX_BUGS, MAX_GEMS, MAX_LIVES, ROUND_SECONDS

logger = logging.getLogger(__name__)

START_LABELS = ("Start", "Restart")
PAUSE_LABEL = "Pause"
RESUME_LABEL = "Play"
PAUSED_ALPHA = 0.5


class SessionController:
    """Owns the session state and every entity, and mediates control events.

    The UI only observes this object: button enablement, labels and the
    dimming cue are all derived from the session flags.
    """

    def __init__(
        self,
        audio: AudioManager | None = None,
        max_lives: int = MAX_LIVES,
        round_seconds: int = ROUND_SECONDS,
        character: str = CHARACTERS[0],
    ) -> None:
        self.audio = audio
        self.session = SessionState(round_seconds=round_seconds, timer=round_seconds)
        self.player = Player(max_lives=max_lives, sprite=character)
        self.enemies: list[Enemy] = []
        self.gems = GemSet()
        self.start_label = START_LABELS[0]

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def over_reason(self) -> OverReason | None:
        return self.session.over_reason

    @property
    def start_enabled(self) -> bool:
        return self.mode in (Mode.IDLE, Mode.OVER)

    @property
    def pause_enabled(self) -> bool:
        return self.mode in (Mode.RUNNING, Mode.PAUSED)

    @property
    def pause_label(self) -> str:
        return RESUME_LABEL if self.mode == Mode.PAUSED else PAUSE_LABEL

    @property
    def canvas_alpha(self) -> float:
        return PAUSED_ALPHA if self.mode == Mode.PAUSED else 1.0

    @property
    def hearts(self) -> int:
        """Number of life indicators to show."""
        if self.mode == Mode.IDLE:
            return 0
        return self.player.lives

    def start_restart(self) -> None:
        """Begin a fresh session, rebuilding the bugs and gems from scratch."""
        self.session.begin()
        self.enemies.clear()
        self.gems.clear()
        self.enemies.extend(Enemy.spawn() for _ in range(MAX_BUGS))
        self.gems.populate(MAX_GEMS)
        self.player.reset_session()

        label = self.start_label
        self.start_label = START_LABELS[1] if label == START_LABELS[0] else START_LABELS[0]
        logger.info("%s: %d lives, %d seconds", label, self.player.lives, self.session.timer)

    def toggle_pause(self) -> bool:
        return self.session.toggle_pause()

    def tick_timer(self) -> None:
        """One-second countdown step."""
        if self.session.count_down():
            self.player.reset_position()
            self.session.record_score(self.player.score)

    def update(self, dt: float) -> None:
        """Advance every bug, then resolve player collisions, then respawn gems."""
        if self.mode == Mode.IDLE:
            return
        for enemy in self.enemies:
            enemy.advance(dt, self.session)

        if not self.session.game_over:
            result = self.player.advance(dt, self.enemies, self.gems)
            if result.bug is not None:
                resolve_bug_collision(self.session, self.player)
            for _ in result.gems:
                if self.audio is not None:
                    self.audio.play("gem")

        self.gems.refresh_if_exhausted()

    def render(self, canvas: Canvas) -> None:
        for enemy in self.enemies:
            enemy.draw(canvas, self.session)
        self.gems.draw(canvas, self.session)
        self.player.draw(canvas)

    def handle_input(self, symbol: Any) -> None:
        self.player.handle_input(symbol, self.session)
