from __future__ import annotations

from lanecross.gems import Gem, GemSet
from lanecross.session import SessionState
from lanecross.utils import GEM_COLORS, GEM_LANES, GEM_WIDTH


def _batch() -> GemSet:
    return GemSet([Gem("Blue", 0, 105), Gem("Green", 101, 190), Gem("Orange", 202, 270)])


def test_populate_builds_visible_gems_on_tiles() -> None:
    gems = GemSet()
    gems.populate(3)
    assert len(gems) == 3
    for gem in gems:
        assert gem.visible
        assert gem.x in {col * GEM_WIDTH for col in range(5)}
        assert gem.y in GEM_LANES
        assert gem.color in GEM_COLORS


def test_partial_exhaustion_is_a_no_op() -> None:
    gems = _batch()
    gems[0].visible = False
    gems[1].visible = False
    before = [(gem.x, gem.y, gem.color, gem.visible) for gem in gems]

    assert gems.refresh_if_exhausted() is False
    assert [(gem.x, gem.y, gem.color, gem.visible) for gem in gems] == before


def test_full_exhaustion_respawns_whole_batch() -> None:
    gems = _batch()
    for gem in gems:
        gem.visible = False

    assert gems.refresh_if_exhausted() is True
    assert all(gem.visible for gem in gems)
    for gem in gems:
        assert gem.y in GEM_LANES
        assert gem.x % GEM_WIDTH == 0


def test_empty_batch_never_refreshes() -> None:
    assert GemSet().refresh_if_exhausted() is False


def test_sprite_follows_color() -> None:
    assert Gem("Green", 0, 105).sprite == "images/GemGreen.png"


def test_draw_only_visible_gems_at_render_size(canvas) -> None:
    session = SessionState()
    session.begin()
    gems = _batch()
    gems[1].visible = False

    gems.draw(canvas, session)
    assert canvas.calls == [
        ("images/GemBlue.png", 0, 105, (100, 100)),
        ("images/GemOrange.png", 202, 270, (100, 100)),
    ]


def test_draw_is_skipped_after_game_over(canvas) -> None:
    session = SessionState()
    session.begin()
    session.exhaust_lives()
    _batch().draw(canvas, session)
    assert canvas.calls == []
