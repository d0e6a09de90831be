"""Component that plays a WAV file through pygame's mixer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from spacegame.component import Component

if TYPE_CHECKING:
    from spacegame.node import Node

logger = logging.getLogger(__name__)


class SoundPlayerComponent(Component):
    """Plays the sound at ``wav_path``, loading it on first use."""

    def __init__(self, node: Node) -> None:
        super().__init__(node)
        self.wav_path: str | None = None
        self.playing = False
        self.loaded = False
        self._sound: pygame.mixer.Sound | None = None

    def play(self) -> None:
        """Start the sound from the beginning."""
        if not self.loaded and not self.preload_wav():
            logger.warning("Failed to load audio")
            return
        assert self._sound is not None
        self._sound.stop()
        self._sound.play()
        self.playing = True

    def stop(self) -> None:
        """Stop the sound if it has been loaded."""
        if not self.loaded or self._sound is None:
            return
        self._sound.stop()
        self.playing = False

    def preload_wav(self) -> bool:
        """Load the sound file, returning whether it is ready to play."""
        if self.wav_path is None:
            logger.warning("wav_path is not set")
            return False
        if not self.loaded:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init()
                self._sound = pygame.mixer.Sound(self.wav_path)
            except (pygame.error, OSError) as exc:
                logger.warning("Failed to load audio: %s", exc)
                return False
            self.loaded = True
        return True

    def on_attached(self) -> None:
        """Nothing is loaded until the sound is first needed."""

    def on_detached(self) -> None:
        """Stop and release the sound."""
        if self._sound is not None:
            self._sound.stop()
        self._sound = None
        self.loaded = False
        self.playing = False