"""Top of the scene tree, owning a simple rigid-body physics world."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from spacegame.datatypes import Vector2
from spacegame.node import Node


@dataclass(eq=False)
class Body:
    """A rigid body tracked by a :class:`PhysicsWorld`."""

    position: Vector2 = Vector2.ZERO
    velocity: Vector2 = Vector2.ZERO
    rotation: float = 0.0
    angular_velocity: float = 0.0
    dynamic: bool = True
    boxes: list[tuple[float, float]] = field(default_factory=list)


class PhysicsWorld:
    """Integrates bodies under constant gravity."""

    def __init__(self, gravity: Vector2 = Vector2(0.0, -10.0)) -> None:
        self.gravity = gravity
        self.bodies: list[Body] = []

    def create_body(self, position: Vector2) -> Body:
        """Create a dynamic body at ``position`` and return it."""
        body = Body(position=position)
        self.bodies.append(body)
        return body

    def destroy_body(self, body: Body) -> None:
        """Remove ``body`` from the world."""
        for index, existing in enumerate(self.bodies):
            if existing is body:
                del self.bodies[index]
                return
        raise ValueError("body does not belong to this world")

    def step(self, delta_time: float, sub_steps: int) -> None:
        """Advance the simulation by ``delta_time`` seconds in ``sub_steps`` steps."""
        if sub_steps < 1:
            raise ValueError(f"sub_steps must be at least 1, got {sub_steps}")
        if delta_time <= 0.0:
            return
        h = delta_time / sub_steps
        for _ in range(sub_steps):
            for body in self.bodies:
                if not body.dynamic:
                    continue
                body.velocity = body.velocity + self.gravity * h
                body.position = body.position + body.velocity * h
                body.rotation += body.angular_velocity * h


class SceneRoot(Node):
    """Root node of a scene; owns the physics world of that scene."""

    MAX_WORLDS: ClassVar[int] = 128
    num_worlds: ClassVar[int] = 0

    def __init__(self) -> None:
        self._closed = True
        if SceneRoot.num_worlds >= SceneRoot.MAX_WORLDS:
            raise RuntimeError(f"maximum physics worlds reached ({SceneRoot.MAX_WORLDS})")
        super().__init__("SceneRoot")
        self.world = PhysicsWorld(Vector2(0.0, -10.0))
        SceneRoot.num_worlds += 1
        self._closed = False

    def get_root(self) -> SceneRoot:
        """A scene root is its own root."""
        return self

    def step_simulation(self, delta_time: float) -> None:
        """Advance physics by ``delta_time`` seconds."""
        self.world.step(delta_time, 4)

    def close(self) -> None:
        """Release the physics world; further calls do nothing."""
        if self._closed:
            return
        self._closed = True
        self.world.bodies.clear()
        SceneRoot.num_worlds -= 1

    def __enter__(self) -> SceneRoot:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self.close()