"""Audio loading and playback wrappers."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

logger = logging.getLogger(__name__)


class AudioManager:
    """Loads and plays sound cues with graceful fallback when assets are absent."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.sound_enabled = False
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
            self.sound_enabled = True
        except pygame.error as exc:
            logger.info("Audio disabled: %s", exc)
            self.sound_enabled = False

    def load_assets(self) -> None:
        """Load available sound cues from the assets folder."""
        if not self.sound_enabled:
            return
        mapping = {
            "gem": self.root / "assets" / "sounds" / "gem.wav",
        }
        for key, path in mapping.items():
            if not path.exists():
                logger.debug("No sound file for %r at %s", key, path)
                continue
            try:
                self.sounds[key] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                logger.warning("Could not load sound %s: %s", path, exc)

    def set_volume(self, master: float, sfx: float) -> None:
        """Apply current volume settings."""
        if not self.sound_enabled:
            return
        for sound in self.sounds.values():
            sound.set_volume(master * sfx)

    def play(self, key: str) -> None:
        """Play a named sound cue."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(key)
        if sound:
            sound.play()
