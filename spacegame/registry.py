"""Registry of engine classes with stable serialisation ids."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from spacegame.component import Component
from spacegame.editor import EditorComponent
from spacegame.node import Node
from spacegame.particle_emitter import ParticleEmitterComponent
from spacegame.sound_player import SoundPlayerComponent
from spacegame.spaceship import Spaceship
from spacegame.vector_renderer import VectorRendererComponent

logger = logging.getLogger(__name__)

MAX_SERIALIZATION_ID = 0xFFFF

DEFAULT_COMPONENTS: tuple[type, ...] = (
    Component,
    VectorRendererComponent,
    ParticleEmitterComponent,
    EditorComponent,
    SoundPlayerComponent,
)

DEFAULT_NODES: tuple[type, ...] = (Node, Spaceship)


@dataclass(frozen=True)
class RegistryEntry:
    """A registered class with its name and serialisation id."""

    cls: type
    class_name: str
    serialization_id: int


class Registry:
    """Maps engine classes to entries; ids are handed out in registration order."""

    def __init__(self) -> None:
        self._entries: dict[type, RegistryEntry] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, cls: object) -> bool:
        return cls in self._entries

    def register(self, cls: type) -> RegistryEntry:
        """Add ``cls`` and return its entry.

        Every call consumes an id; a class already registered keeps its
        original entry.
        """
        if not isinstance(cls, type):
            raise TypeError(f"{cls!r} is not a class")
        if self._next_id > MAX_SERIALIZATION_ID:
            raise OverflowError("no serialisation ids left")
        serialization_id = self._next_id
        self._next_id += 1
        return self._entries.setdefault(
            cls, RegistryEntry(cls, cls.__name__, serialization_id)
        )

    def initialize(self) -> None:
        """Register the engine's default components, then its default nodes."""
        for cls in DEFAULT_COMPONENTS:
            self.register(cls)
        for cls in DEFAULT_NODES:
            self.register(cls)
        logger.info("Registry Initialized")

    def lookup(self, cls: type) -> RegistryEntry:
        """Return the entry of ``cls``; raise KeyError if it is not registered."""
        try:
            return self._entries[cls]
        except KeyError:
            raise KeyError(f"{getattr(cls, '__name__', cls)!r} is not registered") from None

    def entries(self) -> list[RegistryEntry]:
        """Return all entries ordered by serialisation id."""
        return sorted(self._entries.values(), key=lambda entry: entry.serialization_id)