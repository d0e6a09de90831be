"""Scene graph node with a transform, children and attached components."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Iterator, TypeVar

from spacegame.component import Component
from spacegame.datatypes import Color4, Vector2

if TYPE_CHECKING:
    from spacegame.renderer import Renderer
    from spacegame.scene_root import SceneRoot

C = TypeVar("C", bound=Component)


class Node:
    """An element of the scene tree.

    ``position`` and ``rotation`` are relative to the parent; the global
    values are filled in by :meth:`update_transform_recursive`.
    """

    def __init__(self, name: str = "Node") -> None:
        self.name = name
        self.position = Vector2.ZERO
        self.rotation = 0.0
        self.global_position = Vector2.ZERO
        self.global_rotation = 0.0
        self._parent: weakref.ref[Node] | None = None
        self.children: list[Node] = []
        self.components: dict[type[Component], Component] = {}

    @property
    def parent(self) -> Node | None:
        """The parent node, or None when detached or the parent is gone."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: Node | None) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def draw(self, renderer: Renderer) -> None:
        """Draw children, then enabled components, then debug overlay."""
        for child in self.children:
            child.draw(renderer)
        for component in list(self.components.values()):
            if component.enabled:
                component.on_draw(renderer)
        if renderer.debug:
            self._draw_debug_info(renderer)

    def update(self, delta_time: float) -> None:
        """Update children, then enabled components."""
        for child in self.children:
            child.update(delta_time)
        for component in list(self.components.values()):
            if component.enabled:
                component.on_update(delta_time)

    def update_transform_recursive(
        self,
        parent_global_position: Vector2 = Vector2.ZERO,
        parent_global_rotation: float = 0.0,
    ) -> None:
        """Compute global transforms for this node and all descendants."""
        self.global_rotation = parent_global_rotation + self.rotation
        self.global_position = (parent_global_position + self.position).rotate_around(
            parent_global_position, parent_global_rotation
        )
        for child in self.children:
            child.update_transform_recursive(self.global_position, self.global_rotation)

    def _draw_debug_info(self, renderer: Renderer) -> None:
        renderer.render_point(self.global_position, Color4.RED)
        renderer.render_text(
            self.name,
            self.global_position + Vector2(2.0, 2.0),
            Vector2.ZERO,
            Color4.RED,
            renderer.debug_font,
            1.0,
        )

    def add_child(self, node: Node) -> None:
        """Append ``node`` to the children and make this node its parent."""
        self.children.append(node)
        node.parent = self

    def find_first_child(self, name: str, recursive: bool = False) -> Node | None:
        """Return the first child called ``name``, searching depth-first if recursive."""
        for child in self.children:
            if child.name == name:
                return child
            if recursive:
                found = child.find_first_child(name, True)
                if found is not None:
                    return found
        return None

    def add_component(self, component_type: type[C]) -> C:
        """Create a component of ``component_type``, attach it and return it.

        An existing component of the same type is replaced.
        """
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component subclass")
        component = component_type(self)
        self.components[component_type] = component
        component.on_attached()
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the attached component of ``component_type``, if any."""
        return self.components.get(component_type)  # type: ignore[return-value]

    def get_or_add_component(self, component_type: type[C]) -> C:
        """Return the component of ``component_type``, adding one if missing."""
        existing = self.get_component(component_type)
        if existing is not None:
            return existing
        return self.add_component(component_type)

    def detach_component(self, component: Component | None) -> None:
        """Detach ``component`` if it is attached to this node."""
        if component is None:
            return
        for key, attached in self.components.items():
            if attached is component:
                attached.on_detached()
                del self.components[key]
                return

    def get_root(self) -> SceneRoot | None:
        """Return the scene root above this node, or None if there is none."""
        parent = self.parent
        if parent is None:
            return None
        return parent.get_root()

    def get_children(self) -> list[Node]:
        """Return a copy of the list of direct children."""
        return list(self.children)

    def _iter_descendants(self) -> Iterator[Node]:
        for child in self.children:
            yield child
            yield from child._iter_descendants()

    def get_descendants(self) -> list[Node]:
        """Return every node below this one, depth-first, parents before children."""
        return list(self._iter_descendants())