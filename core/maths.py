"""Math utilities for 2D vectors and axis-aligned bounds."""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import InvalidArgumentType


@dataclass(frozen=True)
class Vector:
    """Immutable 2D point/displacement in grid cells."""

    x: float = 0.0
    y: float = 0.0

    def plus(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            raise InvalidArgumentType(
                f"Vector.plus expects a Vector, got {type(other).__name__}"
            )
        return Vector(self.x + other.x, self.y + other.y)

    def times(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_bounds(
        cls, min_x: float, max_x: float, min_y: float, max_y: float
    ) -> "Rect":
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.w

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.h

    def scaled(self, factor: float) -> "Rect":
        return Rect(self.x * factor, self.y * factor, self.w * factor, self.h * factor)

    def offset(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.w, self.h)

    def to_pygame_rect(self):
        import pygame

        return pygame.Rect(int(self.x), int(self.y), int(round(self.w)), int(round(self.h)))
