"""Snapshot of keyboard and mouse state that game logic reads each frame."""

from __future__ import annotations

from collections.abc import Hashable


def _normalise(key: Hashable) -> Hashable:
    return key.lower() if isinstance(key, str) else key


class InputState:
    """Tracks which keys are held and where the mouse is.

    Keys are any hashable value; string names are case-insensitive
    (for example ``"space"``, ``"a"``, ``"f1"``, ``"up"``, ``"delete"``).
    """

    def __init__(self) -> None:
        self._pressed: set[Hashable] = set()
        self.mouse_x: float = 0.0
        self.mouse_y: float = 0.0
        self.left_button: bool = False
        self.right_button: bool = False

    def is_pressed(self, key: Hashable) -> bool:
        """Return whether ``key`` is currently held down."""
        return _normalise(key) in self._pressed

    def set_key(self, key: Hashable, pressed: bool) -> None:
        """Mark ``key`` as held or released."""
        if pressed:
            self._pressed.add(_normalise(key))
        else:
            self._pressed.discard(_normalise(key))

    def set_mouse(self, x: float, y: float, left: bool, right: bool) -> None:
        """Record the mouse position and button states."""
        self.mouse_x = float(x)
        self.mouse_y = float(y)
        self.left_button = bool(left)
        self.right_button = bool(right)