"""Camera node whose global position offsets everything that is drawn."""

from __future__ import annotations

from spacegame.node import Node


class Camera(Node):
    """A node that the renderer uses as the view origin."""

    def __init__(self) -> None:
        super().__init__("Camera")