"""In-game editor for placing and adjusting the points of a vector shape."""

from __future__ import annotations

import enum
import math
from collections import deque
from typing import TYPE_CHECKING

from spacegame.component import Component
from spacegame.datatypes import Color4, Vector2
from spacegame.inputstate import InputState
from spacegame.node import Node
from spacegame.vector_renderer import VectorRendererComponent

if TYPE_CHECKING:
    from spacegame.renderer import Renderer

SELECT_RADIUS = 10.0
ARROW_SPACING = 40.0
EDIT_TEXT_COLOR = Color4(255, 0, 255, 255)
ARROW_COLOR = Color4(150, 150, 255, 255)

_NUDGES = {
    "up": Vector2(0.0, -1.0),
    "down": Vector2(0.0, 1.0),
    "left": Vector2(-1.0, 0.0),
    "right": Vector2(1.0, 0.0),
}


class EditMode(enum.IntEnum):
    """What the editor currently edits."""

    NONE = 0
    VECTORS = 1


class EditorComponent(Component):
    """Edits the node's vector points with the mouse and arrow keys.

    F1 leaves edit mode and F2 enters vector editing. In vector mode a left
    click adds a point (after the selected one, if any), a right click
    selects the nearest point, arrows nudge it and Delete removes it.
    """

    def __init__(self, node: Node) -> None:
        super().__init__(node)
        self.input_state = InputState()
        self.edit_mode = EditMode.NONE
        self.edit_mode_text = ""
        self.warnings: deque[str] = deque()
        self.messages: deque[str] = deque()
        self.selected_point_index: int | None = None
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.lmb_down = False
        self.rmb_down = False

    def on_attached(self) -> None:
        """The editor needs no setup when attached."""

    def on_detached(self) -> None:
        """The editor holds nothing to release."""

    def on_update(self, delta_time: float) -> None:
        """Read input and apply edits for this frame."""
        keys = self.input_state
        if keys.is_pressed("f1"):
            self.edit_mode = EditMode.NONE
        elif keys.is_pressed("f2"):
            self.edit_mode = EditMode.VECTORS

        self.mouse_x = keys.mouse_x
        self.mouse_y = keys.mouse_y
        lmb_pressed = not self.lmb_down and keys.left_button
        self.lmb_down = keys.left_button
        rmb_pressed = not self.rmb_down and keys.right_button
        self.rmb_down = keys.right_button

        if self.edit_mode is EditMode.NONE:
            self.edit_mode_text = "EDIT MODE: NONE"
            return

        self.edit_mode_text = "EDIT MODE: VECTORS"
        shape = self.node.get_or_add_component(VectorRendererComponent)
        points = shape.points
        mouse = Vector2(self.mouse_x, self.mouse_y)

        self.messages.append(f"POINTS: {len(points)}")

        if self.selected_point_index is not None and self.selected_point_index >= len(points):
            self.selected_point_index = None

        if rmb_pressed:
            self.selected_point_index = shape.find_nearest_point_index(mouse, SELECT_RADIUS)

        if lmb_pressed and self.selected_point_index is None:
            points.append(mouse)

        index = self.selected_point_index
        if index is None:
            return

        self.messages.append(f"INDEX: {index}")

        if lmb_pressed:
            points.insert(index + 1, mouse)

        point = points[index]
        for key, offset in _NUDGES.items():
            if keys.is_pressed(key):
                point = point + offset
        points[index] = point

        if keys.is_pressed("delete"):
            del points[index]
            self.selected_point_index = None

    def on_draw(self, renderer: Renderer) -> None:
        """Draw mode text, queued messages and the selection markers."""
        height = renderer.surface.get_height()
        font = renderer.debug_font

        if self.edit_mode_text:
            renderer.render_text(
                self.edit_mode_text, Vector2(5, height - 20), Vector2.ZERO, EDIT_TEXT_COLOR, font
            )

        for queue, color in ((self.warnings, Color4.RED), (self.messages, Color4.WHITE)):
            while queue:
                y = height - 20 * (len(self.messages) + len(self.warnings))
                renderer.render_text(queue.popleft(), Vector2(200, y), Vector2.ZERO, color, font)

        index = self.selected_point_index
        if index is None:
            return
        points = self.node.get_or_add_component(VectorRendererComponent).points
        if index >= len(points):
            return
        point = points[index]

        renderer.render_line(point + Vector2.ONE, point + Vector2.ONE, Color4.RED)
        renderer.render_line(point - Vector2.ONE, point - Vector2.ONE, Color4.RED)

        if index + 1 < len(points):
            self._draw_pointer_line(renderer, point, points[index + 1])
        if index > 0:
            self._draw_pointer_line(renderer, points[index - 1], point)

    @staticmethod
    def _draw_pointer_line(renderer: Renderer, p1: Vector2, p2: Vector2) -> None:
        delta = p2 - p1
        direction = delta.normalize()
        rotation = math.atan2(delta.y, delta.x)
        num_arrows = math.floor(delta.magnitude() / ARROW_SPACING) + 1

        for i in range(1, num_arrows):
            arrow = Node("Arrow")
            shape = arrow.add_component(VectorRendererComponent)
            shape.color = ARROW_COLOR
            shape.scale = 5.0
            shape.points = [Vector2(-1.0, -1.0), Vector2(0.0, 1.0), Vector2(1.0, -1.0)]
            arrow.update_transform_recursive(p1 + direction * (i * ARROW_SPACING), rotation)
            arrow.draw(renderer)