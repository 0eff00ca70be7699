from __future__ import annotations

from lanecross.collision import Box, bug_box, gem_box, hits_bug, player_box, touches_gem


def test_boxes_apply_sprite_insets() -> None:
    assert player_box(200, 400) == Box(top=460, bottom=540, left=215, right=290)
    assert bug_box(0, 65) == Box(top=140, bottom=210, left=20, right=81)
    assert gem_box(101, 105) == Box(top=145, bottom=185, left=101, right=202)


def test_bug_in_same_lane_hits() -> None:
    assert hits_bug(player_box(200, 160), bug_box(200, 145))


def test_bug_tolerance_makes_vertical_touch_a_miss() -> None:
    player = player_box(200, 160)
    assert not hits_bug(player, bug_box(200, 85))
    assert hits_bug(player, bug_box(200, 86))


def test_bug_tolerance_horizontal_edge() -> None:
    player = player_box(200, 160)
    assert not hits_bug(player, bug_box(143, 145))
    assert hits_bug(player, bug_box(144, 145))


def test_bug_tolerance_is_forgiving_compared_to_raw_overlap() -> None:
    player = player_box(200, 160)
    bug = bug_box(138, 145)
    assert bug.right > player.left
    assert not hits_bug(player, bug)
    assert hits_bug(player, bug, tolerance=0)


def test_gem_touching_edge_counts() -> None:
    player = player_box(200, 160)
    assert touches_gem(player, gem_box(202, 140))
    assert not touches_gem(player, gem_box(202, 139))


def test_gem_in_another_column_is_missed() -> None:
    assert not touches_gem(player_box(200, 160), gem_box(101, 190))
