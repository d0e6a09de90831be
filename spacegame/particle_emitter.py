"""Component that emits simple point particles from its node."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from spacegame.component import Component
from spacegame.datatypes import Color4, Vector2
from spacegame.profiler import Timer

if TYPE_CHECKING:
    from spacegame.node import Node
    from spacegame.renderer import Renderer

PARTICLE_COLOR = Color4(255, 165, 0, 255)


@dataclass(eq=False)
class Particle:
    """A moving point with its own age timer."""

    position: Vector2
    velocity: Vector2
    color: Color4 = PARTICLE_COLOR
    life_timer: Timer = field(default_factory=Timer)


class ParticleEmitterComponent(Component):
    """Emits particles at the node's position, at ``emission_rate`` per second."""

    def __init__(self, node: Node) -> None:
        super().__init__(node)
        self.particles: list[Particle] = []
        self.velocity = Vector2(0.0, 10.0)
        self.emission_rate = 0
        self.lifetime = 1.0
        self._clock: Callable[[], float] = time.perf_counter
        self._emission_timer = Timer(self._clock)

    @property
    def clock(self) -> Callable[[], float]:
        """Time source for particle ages and emission; setting it restarts emission timing."""
        return self._clock

    @clock.setter
    def clock(self, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._emission_timer = Timer(clock)

    def on_update(self, dt: float) -> None:
        """Emit when due, drop expired particles and move the rest."""
        if self.emission_rate > 0 and self._emission_timer.elapsed() >= 1.0 / self.emission_rate:
            self._emission_timer.reset()
            self.emit()

        self.particles = [p for p in self.particles if p.life_timer.elapsed() <= self.lifetime]
        for particle in self.particles:
            particle.position = particle.position + particle.velocity * dt

    def on_draw(self, renderer: Renderer) -> None:
        """Draw every particle as a single point."""
        for particle in self.particles:
            renderer.render_point(particle.position, particle.color)

    def emit(self, count: int = 1) -> None:
        """Spawn ``count`` particles at the node's global position."""
        for _ in range(count):
            self.particles.append(
                Particle(
                    position=self.node.global_position,
                    velocity=self.velocity,
                    color=PARTICLE_COLOR,
                    life_timer=Timer(self._clock),
                )
            )