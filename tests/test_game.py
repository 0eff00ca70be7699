from __future__ import annotations

from pathlib import Path

import pygame
import pytest

from lanecross.game import LanecrossGame
from lanecross.session import Mode
from lanecross.settings import SettingsManager
from lanecross.utils import save_json


@pytest.fixture
def game(tmp_path: Path):
    game = LanecrossGame(root=tmp_path, settings_path=tmp_path / "settings.json")
    yield game
    pygame.quit()


def test_enter_starts_and_p_pauses(game: LanecrossGame) -> None:
    game._handle_key(pygame.K_RETURN)
    assert game.controller.mode == Mode.RUNNING
    assert game.controller.start_label == "Restart"

    game._handle_key(pygame.K_RETURN)
    assert game.controller.start_label == "Restart"

    game._handle_key(pygame.K_p)
    assert game.controller.mode == Mode.PAUSED


def test_arrow_key_release_moves_player(game: LanecrossGame) -> None:
    game._handle_key(pygame.K_RETURN)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert game._handle_events() is True
    assert game.controller.player.x == 105


def test_frame_clock_drives_countdown(game: LanecrossGame) -> None:
    game._handle_key(pygame.K_RETURN)
    for _ in range(59):
        game._advance_clock(16.7)
    assert game.controller.session.timer == 30
    game._advance_clock(16.7)
    assert game.controller.session.timer == 29
    game._advance_clock(2000)
    assert game.controller.session.timer == 27


def test_buttons_respect_enablement(game: LanecrossGame) -> None:
    game._handle_click(game.pause_button.center)
    assert game.controller.mode == Mode.IDLE

    game._handle_click(game.start_button.center)
    assert game.controller.mode == Mode.RUNNING

    game._handle_click(game.pause_button.center)
    assert game.controller.mode == Mode.PAUSED


def test_render_without_assets(game: LanecrossGame) -> None:
    game._render()
    game._handle_key(pygame.K_RETURN)
    game.controller.update(0.1)
    game._render()
    game.controller.session.expire_time()
    game._render()
    assert "images/enemy-bug.png" in game.canvas.missing


def test_escape_quits(game: LanecrossGame) -> None:
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert game._handle_events() is False


def test_reuses_loaded_settings_manager(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    save_json(path, {"max_lives": 2})
    manager = SettingsManager(path)
    game = LanecrossGame(root=tmp_path, settings_manager=manager)
    try:
        assert game.settings_manager is manager
        assert game.settings is manager.settings
        assert game.controller.player.max_lives == 2
    finally:
        pygame.quit()
