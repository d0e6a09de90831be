"""Base class for behaviour attached to scene nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spacegame.node import Node
    from spacegame.renderer import Renderer


class Component:
    """A unit of behaviour owned by a single node.

    Subclasses override the ``on_*`` hooks; the base hooks do nothing.
    """

    def __init__(self, node: Node) -> None:
        self.node = node
        self.enabled = True

    def on_attached(self) -> None:
        """Called once the component has been added to its node."""

    def on_detached(self) -> None:
        """Called just before the component is removed from its node."""

    def on_update(self, dt: float) -> None:
        """Advance the component by ``dt`` seconds."""

    def on_draw(self, renderer: Renderer) -> None:
        """Draw the component with ``renderer``."""

    def detach(self) -> None:
        """Remove this component from the node that owns it."""
        self.node.detach_component(self)