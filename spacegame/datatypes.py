"""Basic value types shared across the engine: 2D vectors and RGBA colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    UP: ClassVar[Vector2]
    DOWN: ClassVar[Vector2]
    LEFT: ClassVar[Vector2]
    RIGHT: ClassVar[Vector2]

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def rotate_around(self, origin: Vector2, angle: float) -> Vector2:
        """Return this point rotated by ``angle`` radians around ``origin``."""
        s = math.sin(angle)
        c = math.cos(angle)
        dx = self.x - origin.x
        dy = self.y - origin.y
        return Vector2(origin.x + c * dx - s * dy, origin.y + s * dx + c * dy)

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Return a unit vector in the same direction.

        A zero-length vector yields a vector of NaNs.
        """
        m = self.magnitude()
        if m == 0.0:
            return Vector2(math.nan, math.nan)
        return Vector2(self.x / m, self.y / m)

    def distance_from(self, other: Vector2) -> float:
        """Return the distance between this point and ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def lerp(self, other: Vector2, delta: float) -> Vector2:
        """Linearly interpolate towards ``other`` by the fraction ``delta``."""
        return Vector2(
            self.x + (other.x - self.x) * delta,
            self.y + (other.y - self.y) * delta,
        )

    @staticmethod
    def from_angle(angle: float) -> Vector2:
        """Return the unit direction for ``angle``; an angle of zero points up."""
        return Vector2(-math.sin(angle), math.cos(angle))


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.UP = Vector2(0.0, 1.0)
Vector2.DOWN = Vector2(0.0, -1.0)
Vector2.LEFT = Vector2(-1.0, 0.0)
Vector2.RIGHT = Vector2(1.0, 0.0)


@dataclass(frozen=True, slots=True)
class Color4:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    RED: ClassVar[Color4]
    GREEN: ClassVar[Color4]
    BLUE: ClassVar[Color4]
    BLACK: ClassVar[Color4]
    WHITE: ClassVar[Color4]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour channel {name} must be an int in 0..255, got {value!r}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a


Color4.RED = Color4(255, 0, 0, 255)
Color4.GREEN = Color4(0, 255, 0, 255)
Color4.BLUE = Color4(0, 0, 255, 255)
Color4.BLACK = Color4(0, 0, 0, 255)
Color4.WHITE = Color4(255, 255, 255, 255)