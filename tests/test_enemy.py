from __future__ import annotations

import random

from lanecross.enemy import Enemy
from lanecross.session import SessionState
from lanecross.utils import BUG_LANES, BUG_SPEEDS, CANVAS_WIDTH


def _running() -> SessionState:
    session = SessionState()
    session.begin()
    return session


def test_spawn_starts_at_left_edge_of_a_lane() -> None:
    for _ in range(50):
        enemy = Enemy.spawn()
        assert enemy.x == 0
        assert enemy.y in BUG_LANES
        assert enemy.speed in BUG_SPEEDS


def test_advance_moves_by_speed_times_dt() -> None:
    enemy = Enemy(x=10, y=65, speed=100)
    enemy.advance(0.5, _running())
    assert enemy.x == 60
    assert enemy.y == 65


def test_advance_wraps_to_a_lane_at_right_edge() -> None:
    enemy = Enemy(x=500, y=65, speed=100)
    enemy.advance(0.05, _running())
    assert enemy.x == 0
    assert enemy.y in BUG_LANES


def test_x_stays_on_canvas_for_any_tick_sequence() -> None:
    session = _running()
    enemies = [Enemy.spawn() for _ in range(3)]
    for _ in range(2000):
        dt = random.uniform(0, 0.5)
        for enemy in enemies:
            enemy.advance(dt, session)
            assert 0 <= enemy.x < CANVAS_WIDTH
            assert enemy.y in BUG_LANES


def test_paused_session_freezes_bugs() -> None:
    session = _running()
    session.toggle_pause()
    enemy = Enemy(x=100, y=145, speed=120)
    enemy.advance(1.0, session)
    assert enemy.x == 100


def test_draw_is_skipped_after_game_over(canvas) -> None:
    session = _running()
    enemy = Enemy(x=12.5, y=225, speed=80)
    enemy.draw(canvas, session)
    assert canvas.calls == [("images/enemy-bug.png", 12.5, 225, None)]

    session.expire_time()
    enemy.draw(canvas, session)
    assert len(canvas.calls) == 1
