"""Exceptions raised at the boundaries of the game core."""

from __future__ import annotations


class LanecrossError(Exception):
    """Base class for game errors."""


class InvalidDirection(LanecrossError, ValueError):
    """An input symbol that is not one of the four directions."""

    def __init__(self, symbol: object) -> None:
        super().__init__(f"unrecognised direction: {symbol!r}")
        self.symbol = symbol


class AssetMissing(LanecrossError, LookupError):
    """A sprite could not be found or decoded."""

    def __init__(self, sprite_id: str, reason: str = "not found") -> None:
        super().__init__(f"sprite {sprite_id!r}: {reason}")
        self.sprite_id = sprite_id
        self.reason = reason
