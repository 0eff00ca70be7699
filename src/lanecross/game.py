"""pygame shell: window, event loop, background, HUD and control buttons."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

from .assets import AssetLibrary
from .audio import AudioManager
from .lifecycle import SessionController
from .render import Canvas
from .session import OverReason
from .settings import SettingsManager
from .utils import (
    BG_COLOR,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FPS,
    GRASS_COLOR,
    HUD_HEIGHT,
    MUTED_COLOR,
    PANEL_COLOR,
    RED,
    SETTINGS_FILE,
    STONE_COLOR,
    TEXT_COLOR,
    TIMER_INTERVAL_MS,
    WATER_COLOR,
    YELLOW,
    Direction,
)

logger = logging.getLogger(__name__)

TILE_WIDTH = 101
TILE_HEIGHT = 83
ROW_TILES = (
    ("images/water-block.png", WATER_COLOR),
    ("images/stone-block.png", STONE_COLOR),
    ("images/stone-block.png", STONE_COLOR),
    ("images/stone-block.png", STONE_COLOR),
    ("images/grass-block.png", GRASS_COLOR),
    ("images/grass-block.png", GRASS_COLOR),
)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class LanecrossGame:
    """Runs the session controller inside a pygame window."""

    def __init__(
        self,
        root: Path,
        settings_path: Path = SETTINGS_FILE,
        settings_manager: SettingsManager | None = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.root = root
        self.settings_manager = settings_manager or SettingsManager(settings_path)
        self.settings = self.settings_manager.settings

        flags = pygame.FULLSCREEN if self.settings.display.fullscreen else 0
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT + HUD_HEIGHT), flags)
        pygame.display.set_caption("Lanecross")
        self.clock = pygame.time.Clock()

        self.title_font = pygame.font.SysFont("arial", 30, bold=True)
        self.body_font = pygame.font.SysFont("arial", 20, bold=True)
        self.small_font = pygame.font.SysFont("arial", 15)

        self.board = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT), pygame.SRCALPHA)
        self.assets = AssetLibrary(root)
        self.canvas = Canvas(self.board, self.assets)

        self.audio = AudioManager(root)
        self.audio.load_assets()
        self.audio.set_volume(self.settings.master_volume, self.settings.sfx_volume)

        self.controller = SessionController(
            audio=self.audio,
            max_lives=self.settings.max_lives,
            round_seconds=self.settings.round_seconds,
            character=self.settings.character,
        )

        self.timer_accumulator_ms = 0.0

        panel_y = CANVAS_HEIGHT + HUD_HEIGHT - 46
        self.start_button = pygame.Rect(16, panel_y, 130, 34)
        self.pause_button = pygame.Rect(160, panel_y, 130, 34)

    def run(self) -> None:
        """Main event/update/render loop."""
        logger.debug("Frame loop at %d FPS", FPS)
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            running = self._handle_events()
            if not running:
                break
            self._advance_clock(dt_ms)
            self.controller.update(dt_ms / 1000.0)
            self._render()

        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYUP and event.key in KEY_DIRECTIONS:
                self.controller.handle_input(KEY_DIRECTIONS[event.key])
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self._handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)
        return True

    def _advance_clock(self, dt_ms: float) -> None:
        """Feed the one-second countdown from the frame clock."""
        self.timer_accumulator_ms += dt_ms
        while self.timer_accumulator_ms >= TIMER_INTERVAL_MS:
            self.timer_accumulator_ms -= TIMER_INTERVAL_MS
            self.controller.tick_timer()

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_RETURN:
            self._press_start()
        elif key in (pygame.K_p, pygame.K_SPACE):
            self._press_pause()
        elif key == pygame.K_c and self.controller.start_enabled:
            self.controller.player.sprite = self.settings_manager.cycle_character()
        elif key in (pygame.K_MINUS, pygame.K_EQUALS):
            delta = -0.1 if key == pygame.K_MINUS else 0.1
            self.settings_manager.adjust_volume("master_volume", delta)
            self.audio.set_volume(self.settings.master_volume, self.settings.sfx_volume)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        if self.start_button.collidepoint(pos):
            self._press_start()
        elif self.pause_button.collidepoint(pos):
            self._press_pause()

    def _press_start(self) -> None:
        if self.controller.start_enabled:
            self.timer_accumulator_ms = 0.0
            self.controller.start_restart()

    def _press_pause(self) -> None:
        if self.controller.pause_enabled:
            self.controller.toggle_pause()

    def _render(self) -> None:
        self.board.fill(BG_COLOR)
        self._render_background()
        self.controller.render(self.canvas)

        self.screen.fill(BG_COLOR)
        if self.settings.display.dim_on_pause:
            self.board.set_alpha(int(255 * self.controller.canvas_alpha))
        self.screen.blit(self.board, (0, 0))
        self.board.set_alpha(None)
        self._render_hud(self.screen)
        pygame.display.flip()

    def _render_background(self) -> None:
        for row, (sprite, color) in enumerate(ROW_TILES):
            top = 50 + row * TILE_HEIGHT if row else 0
            height = TILE_HEIGHT + (50 if row == 0 else 0)
            pygame.draw.rect(self.board, color, pygame.Rect(0, top, CANVAS_WIDTH, height))
            for col in range(CANVAS_WIDTH // TILE_WIDTH):
                self.canvas.draw_sprite(sprite, col * TILE_WIDTH, row * TILE_HEIGHT)

    def _render_hud(self, surface: pygame.Surface) -> None:
        controller = self.controller
        session = controller.session
        panel = pygame.Rect(0, CANVAS_HEIGHT, CANVAS_WIDTH, HUD_HEIGHT)
        pygame.draw.rect(surface, PANEL_COLOR, panel)

        score = self.body_font.render(f"Score: {controller.player.score}", True, TEXT_COLOR)
        timer = self.title_font.render(str(session.timer), True, YELLOW)
        surface.blit(score, (16, CANVAS_HEIGHT + 10))
        surface.blit(timer, (CANVAS_WIDTH // 2 - timer.get_width() // 2, CANVAS_HEIGHT + 6))

        for idx in range(controller.hearts):
            center = (CANVAS_WIDTH - 24 - idx * 26, CANVAS_HEIGHT + 24)
            pygame.draw.circle(surface, RED, center, 10)

        if session.high_score:
            high = self.small_font.render(f"High score: {session.high_score}", True, TEXT_COLOR)
            surface.blit(high, (16, CANVAS_HEIGHT + 38))
        if session.new_high_score:
            cue = self.small_font.render("New high score!", True, YELLOW)
            surface.blit(cue, (160, CANVAS_HEIGHT + 38))
        if session.game_over:
            reason = "Time's up" if controller.over_reason == OverReason.TIME_EXPIRED else "Out of lives"
            text = self.body_font.render(f"Game over: {reason}", True, YELLOW)
            surface.blit(text, (CANVAS_WIDTH // 2 - text.get_width() // 2, CANVAS_HEIGHT // 2))

        self._draw_button(surface, self.start_button, controller.start_label, controller.start_enabled)
        self._draw_button(surface, self.pause_button, controller.pause_label, controller.pause_enabled)

    def _draw_button(self, surface: pygame.Surface, rect: pygame.Rect, label: str, enabled: bool) -> None:
        color = TEXT_COLOR if enabled else MUTED_COLOR
        pygame.draw.rect(surface, color, rect, width=2, border_radius=6)
        text = self.body_font.render(label, True, color)
        surface.blit(text, (rect.centerx - text.get_width() // 2, rect.centery - text.get_height() // 2))
