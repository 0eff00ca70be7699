"""Sprite loading with an in-memory cache."""

from __future__ import annotations

from pathlib import Path
import pygame

from .errors import AssetMissing


class AssetLibrary:
    """Loads sprite images relative to the asset root and caches them by id."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.images: dict[str, pygame.Surface] = {}

    def get_image(self, sprite_id: str) -> pygame.Surface:
        """Return the cached image for ``sprite_id``, loading it on first use."""
        cached = self.images.get(sprite_id)
        if cached is not None:
            return cached
        path = self.root / sprite_id
        if not path.exists():
            raise AssetMissing(sprite_id, f"no file at {path}")
        try:
            image = pygame.image.load(str(path))
        except pygame.error as exc:
            raise AssetMissing(sprite_id, str(exc)) from exc
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        self.images[sprite_id] = image
        return image
