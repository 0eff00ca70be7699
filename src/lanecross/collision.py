"""Bounding boxes and overlap tests for bugs, gems and the player."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import (
    BUG_HEIGHT,
    BUG_INSET_X,
    BUG_SLIDE_Y,
    BUG_TOLERANCE,
    BUG_WIDTH,
    GEM_BOTTOM,
    GEM_TOP,
    GEM_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_SLIDE_X,
    PLAYER_SLIDE_Y,
    PLAYER_WIDTH,
)


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned rectangle in canvas coordinates."""

    top: float
    bottom: float
    left: float
    right: float


def player_box(x: float, y: float) -> Box:
    """Visible part of the character sprite."""
    return Box(
        top=y + PLAYER_SLIDE_Y,
        bottom=y + PLAYER_SLIDE_Y + PLAYER_HEIGHT,
        left=x + PLAYER_SLIDE_X,
        right=x + PLAYER_SLIDE_X + PLAYER_WIDTH,
    )


def bug_box(x: float, y: float) -> Box:
    """Visible part of the bug sprite."""
    return Box(
        top=y + BUG_SLIDE_Y,
        bottom=y + BUG_SLIDE_Y + BUG_HEIGHT,
        left=x + BUG_INSET_X,
        right=x + BUG_WIDTH - BUG_INSET_X,
    )


def gem_box(x: float, y: float) -> Box:
    """Gem hitbox; smaller than the 100x100 image it is drawn with."""
    return Box(top=y + GEM_TOP, bottom=y + GEM_BOTTOM, left=x, right=x + GEM_WIDTH)


def hits_bug(player: Box, bug: Box, tolerance: float = BUG_TOLERANCE) -> bool:
    """Return whether the player overlaps a bug once the bug box is shrunk by ``tolerance``.

    Edges that merely touch vertically do not count; horizontally they do.
    """
    return not (
        player.left > bug.right - tolerance
        or player.right < bug.left + tolerance
        or player.top >= bug.bottom - tolerance
        or player.bottom <= bug.top + tolerance
    )


def touches_gem(player: Box, gem: Box) -> bool:
    """Return whether the player overlaps a gem, touching edges included."""
    return not (
        player.left > gem.right
        or player.right < gem.left
        or player.top > gem.bottom
        or player.bottom < gem.top
    )
