"""Component that draws a node as a connected polyline of points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spacegame.component import Component
from spacegame.datatypes import Color4, Vector2

if TYPE_CHECKING:
    from spacegame.node import Node
    from spacegame.renderer import Renderer


class VectorRendererComponent(Component):
    """Draws ``points`` as an open polyline, scaled and placed by the node's transform."""

    def __init__(self, node: Node) -> None:
        super().__init__(node)
        self.scale = 1.0
        self.points: list[Vector2] = []
        self.color = Color4(255, 255, 255, 255)

    def find_nearest_point_index(self, point: Vector2, max_distance: float = 10000.0) -> int | None:
        """Return the index of the point closest to ``point``.

        Only points strictly closer than ``max_distance`` count; on a tie the
        earliest point wins. Returns None when no point is close enough.
        """
        nearest: int | None = None
        for index, candidate in enumerate(self.points):
            distance = point.distance_from(candidate)
            if distance < max_distance:
                max_distance = distance
                nearest = index
        return nearest

    def world_points(self) -> list[Vector2]:
        """Return the points transformed into world space."""
        rotation = self.node.global_rotation
        origin = self.node.global_position
        return [
            (point * self.scale).rotate_around(Vector2.ZERO, rotation) + origin
            for point in self.points
        ]

    def on_draw(self, renderer: Renderer) -> None:
        """Draw a line between each pair of consecutive points."""
        world = self.world_points()
        for start, end in zip(world, world[1:]):
            renderer.render_line(start, end, self.color)