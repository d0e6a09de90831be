import pytest

from spacegame.component import Component
from spacegame.editor import EditorComponent
from spacegame.node import Node
from spacegame.particle_emitter import ParticleEmitterComponent
from spacegame.registry import Registry, RegistryEntry
from spacegame.sound_player import SoundPlayerComponent
from spacegame.spaceship import Spaceship
from spacegame.vector_renderer import VectorRendererComponent


def test_initialize_registers_defaults_in_order():
    registry = Registry()
    registry.initialize()
    entries = registry.entries()
    assert [entry.cls for entry in entries] == [
        Component,
        VectorRendererComponent,
        ParticleEmitterComponent,
        EditorComponent,
        SoundPlayerComponent,
        Node,
        Spaceship,
    ]
    assert [entry.serialization_id for entry in entries] == list(range(len(entries)))
    assert len(registry) == len(entries)


def test_class_names_match_classes():
    registry = Registry()
    registry.initialize()
    for entry in registry.entries():
        assert entry.class_name == entry.cls.__name__
    assert registry.lookup(Spaceship).class_name == "Spaceship"
    assert registry.lookup(EditorComponent).class_name == "EditorComponent"


def test_register_returns_entry_found_by_lookup():
    registry = Registry()
    entry = registry.register(Node)
    assert entry == RegistryEntry(Node, "Node", 0)
    assert registry.lookup(Node) is entry
    assert Node in registry


def test_lookup_unknown_raises():
    registry = Registry()
    with pytest.raises(KeyError):
        registry.lookup(Spaceship)


def test_register_again_keeps_first_entry():
    registry = Registry()
    first = registry.register(Node)
    again = registry.register(Node)
    other = registry.register(Spaceship)
    assert again is first
    assert len(registry) == 2
    assert other.serialization_id > first.serialization_id


def test_register_rejects_non_class():
    registry = Registry()
    with pytest.raises(TypeError):
        registry.register("Node")