import pytest

from spacegame.datatypes import Color4, Vector2
from spacegame.node import Node
from spacegame.particle_emitter import ParticleEmitterComponent


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class RecordingRenderer:
    def __init__(self):
        self.points = []

    def render_point(self, point, color):
        self.points.append((point, color))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def emitter(clock):
    node = Node()
    node.global_position = Vector2(5, 7)
    component = node.add_component(ParticleEmitterComponent)
    component.clock = clock
    return component


def test_defaults(emitter):
    assert emitter.velocity == Vector2(0.0, 10.0)
    assert emitter.emission_rate == 0
    assert emitter.lifetime == 1.0
    assert emitter.particles == []


def test_emit_spawns_at_node_position(emitter):
    emitter.velocity = Vector2(1, 2)
    emitter.emit(3)
    assert len(emitter.particles) == 3
    for particle in emitter.particles:
        assert particle.position == emitter.node.global_position
        assert particle.velocity == Vector2(1, 2)
        assert particle.color == Color4(255, 165, 0, 255)


def test_emit_default_is_one(emitter):
    emitter.emit()
    assert len(emitter.particles) == 1


def test_update_moves_particles(emitter):
    emitter.velocity = Vector2(3, -4)
    emitter.emit()
    start = emitter.particles[0].position
    emitter.on_update(1.0)
    assert emitter.particles[0].position == start + emitter.velocity


def test_particle_kept_at_exact_lifetime(emitter, clock):
    emitter.emit()
    clock.now = emitter.lifetime
    emitter.on_update(0.0)
    assert len(emitter.particles) == 1


def test_particle_expires_after_lifetime(emitter, clock):
    emitter.emit()
    clock.now = emitter.lifetime + 0.01
    emitter.on_update(0.0)
    assert emitter.particles == []


def test_only_expired_particles_removed(emitter, clock):
    emitter.emit()
    clock.now = 0.5
    emitter.emit()
    clock.now = 1.2
    emitter.on_update(0.0)
    assert len(emitter.particles) == 1


def test_no_emission_when_rate_zero(emitter, clock):
    clock.now = 100.0
    emitter.lifetime = 1000.0
    emitter.on_update(0.0)
    assert emitter.particles == []


def test_emission_when_interval_elapsed(emitter, clock):
    emitter.emission_rate = 10
    clock.now = 0.1
    emitter.on_update(0.0)
    assert len(emitter.particles) == 1


def test_no_emission_before_interval(emitter, clock):
    emitter.emission_rate = 10
    clock.now = 0.05
    emitter.on_update(0.0)
    assert emitter.particles == []


def test_emission_timer_resets(emitter, clock):
    emitter.emission_rate = 10
    clock.now = 0.1
    emitter.on_update(0.0)
    emitter.on_update(0.0)
    assert len(emitter.particles) == 1


def test_on_draw_renders_each_particle(emitter):
    emitter.emit(2)
    renderer = RecordingRenderer()
    emitter.on_draw(renderer)
    assert renderer.points == [(p.position, p.color) for p in emitter.particles]