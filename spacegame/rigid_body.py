"""Component that registers its node with the scene's physics world."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from spacegame.component import Component
from spacegame.vector_renderer import VectorRendererComponent

if TYPE_CHECKING:
    from spacegame.node import Node
    from spacegame.scene_root import Body, PhysicsWorld


class RigidBodyComponent(Component):
    """Creates a dynamic body in the root's world when attached under a scene root."""

    BOX_HALF_EXTENTS: ClassVar[tuple[float, float]] = (50.0, 10.0)

    def __init__(self, node: Node) -> None:
        super().__init__(node)
        self.body: Body | None = None
        self._world: PhysicsWorld | None = None

    def _create_bodies(self, world: PhysicsWorld) -> None:
        self._world = world
        self.body = world.create_body(self.node.global_position)
        if self.node.get_component(VectorRendererComponent) is not None:
            self.body.boxes.append(self.BOX_HALF_EXTENTS)

    def on_update(self, delta_time: float) -> None:
        """The body does not drive the node's transform."""

    def on_attached(self) -> None:
        """Create the body if the node belongs to a scene."""
        root = self.node.get_root()
        if root is not None:
            self._create_bodies(root.world)

    def on_detached(self) -> None:
        """Remove the body from its world."""
        if self.body is not None and self._world is not None:
            self._world.destroy_body(self.body)
        self.body = None
        self._world = None