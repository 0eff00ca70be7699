"""Drawing surface the entities blit their sprites onto."""

from __future__ import annotations

import logging
import pygame

from .assets import AssetLibrary
from .errors import AssetMissing

logger = logging.getLogger(__name__)


class Canvas:
    """Blits sprites by id onto a pygame surface.

    Missing sprites are reported once and otherwise skipped so a broken asset
    never affects the game state.
    """

    def __init__(self, surface: pygame.Surface, assets: AssetLibrary) -> None:
        self.surface = surface
        self.assets = assets
        self.missing: set[str] = set()
        self._scaled: dict[tuple[str, tuple[int, int]], pygame.Surface] = {}

    def draw_sprite(self, sprite_id: str, x: float, y: float, size: tuple[int, int] | None = None) -> None:
        try:
            image = self.assets.get_image(sprite_id)
        except AssetMissing as exc:
            if sprite_id not in self.missing:
                self.missing.add(sprite_id)
                logger.warning("Skipping sprite: %s", exc)
            return
        if size is not None:
            key = (sprite_id, size)
            if key not in self._scaled:
                self._scaled[key] = pygame.transform.smoothscale(image, size)
            image = self._scaled[key]
        self.surface.blit(image, (round(x), round(y)))
