"""The player's ship: a triangle that turns, thrusts, leaves a trail and can explode."""

from __future__ import annotations

import math
import random

from spacegame.datatypes import Vector2
from spacegame.inputstate import InputState
from spacegame.node import Node
from spacegame.particle_emitter import ParticleEmitterComponent
from spacegame.rigid_body import RigidBodyComponent
from spacegame.sound_player import SoundPlayerComponent
from spacegame.vector_renderer import VectorRendererComponent

TURN_SPEED = 4.0
THRUST = 200.0
EXHAUST_SPEED = 100.0
EXHAUST_SPREAD = math.pi * 0.2
EXHAUST_RATE = 100
THRUSTER_SOUND = "data/SOUND/thruster_loop.wav"


class Spaceship(Node):
    """A ship steered with A and D, thrusting with Space; E makes it explode."""

    def __init__(
        self,
        input_state: InputState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__("Spaceship")
        self.input_state = input_state if input_state is not None else InputState()
        self._rng = rng if rng is not None else random.Random()
        self.position = Vector2(300.0, 300.0)
        self.velocity = Vector2.ZERO
        self.dead = False

        self.vector_renderer = self.add_component(VectorRendererComponent)
        self.vector_renderer.scale = 10.0
        self.vector_renderer.points = [
            Vector2(-1.0, 1.0),
            Vector2(0.0, -1.0),
            Vector2(1.0, 1.0),
        ]

        self.particle_point = Node("ParticlePoint")
        self.particle_point.position = Vector2(0.0, 15.0)
        self.particle_emitter = self.particle_point.add_component(ParticleEmitterComponent)
        self.particle_emitter.lifetime = 10.0
        self.add_child(self.particle_point)

        self.sound_player = self.add_component(SoundPlayerComponent)
        self.sound_player.wav_path = THRUSTER_SOUND

        self.add_component(RigidBodyComponent)

    def update(self, delta_time: float) -> None:
        """Update components, then steer and move according to the held keys."""
        super().update(delta_time)

        self.particle_emitter.emission_rate = 0

        if self.dead:
            return

        spread = self._rng.uniform(-EXHAUST_SPREAD, EXHAUST_SPREAD)
        self.particle_emitter.velocity = (
            self.velocity * 0.5
            + Vector2.from_angle(self.global_rotation + spread) * EXHAUST_SPEED
        )

        keys = self.input_state
        if keys.is_pressed("a"):
            self.rotation -= delta_time * TURN_SPEED
        if keys.is_pressed("d"):
            self.rotation += delta_time * TURN_SPEED

        if keys.is_pressed("space"):
            self.velocity = self.velocity + Vector2.from_angle(self.rotation + math.pi) * (
                delta_time * THRUST
            )
            self.particle_emitter.emission_rate = EXHAUST_RATE
            if not self.sound_player.playing:
                self.sound_player.play()
        else:
            self.sound_player.stop()

        if keys.is_pressed("e"):
            self.explode()

        self.position = self.position + self.velocity * delta_time

    def explode(self) -> None:
        """Blow the ship up; does nothing if it is already dead."""
        if self.dead:
            return
        self.die()

    def die(self) -> None:
        """Mark the ship dead, silence it and hide its shape."""
        if self.dead:
            return
        self.dead = True
        self.sound_player.stop()
        self.vector_renderer.enabled = False