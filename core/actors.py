"""Actors: rectangular entities that live inside a Level.

Every actor exposes the same capability set:
- a bounding box derived from ``pos`` (top-left corner) and ``size``
- a ``type`` tag used by the level for contact resolution
- ``act(time, level)`` called once per tick by the driver

Coordinates are in grid cells with y growing downwards.
"""

from __future__ import annotations

import math
import random
from typing import TYPE_CHECKING, ClassVar, Protocol

from core.errors import InvalidArgumentType
from core.maths import Rect, Vector

if TYPE_CHECKING:
    from core.level import Level


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


class Actor:
    """Base actor: a box that does nothing on its own."""

    kind: ClassVar[str] = "actor"

    def __init__(
        self,
        pos: Vector | None = None,
        size: Vector | None = None,
        speed: Vector | None = None,
    ) -> None:
        pos = Vector(0, 0) if pos is None else pos
        size = Vector(1, 1) if size is None else size
        speed = Vector(0, 0) if speed is None else speed
        for name, value in (("pos", pos), ("size", size), ("speed", speed)):
            if not isinstance(value, Vector):
                raise InvalidArgumentType(
                    f"{self.__class__.__name__}.{name} must be a Vector, "
                    f"got {value.__class__.__name__}"
                )
        self.pos = pos
        self.size = size
        self.speed = speed

    @property
    def type(self) -> str:
        return self.kind

    @property
    def left(self) -> float:
        return self.pos.x

    @property
    def top(self) -> float:
        return self.pos.y

    @property
    def right(self) -> float:
        return self.pos.x + self.size.x

    @property
    def bottom(self) -> float:
        return self.pos.y + self.size.y

    @property
    def rect(self) -> Rect:
        return Rect.from_bounds(self.left, self.right, self.top, self.bottom)

    def act(self, time: float = 1.0, level: "Level | None" = None) -> None:
        pass

    def is_intersect(self, other: "Actor") -> bool:
        """Strict AABB overlap; shared edges and self never intersect."""
        if not isinstance(other, Actor):
            raise InvalidArgumentType(
                f"is_intersect expects an Actor, got {other.__class__.__name__}"
            )
        if other is self:
            return False
        return (
            other.left < self.right
            and other.right > self.left
            and other.top < self.bottom
            and other.bottom > self.top
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(pos=({self.pos.x:g}, {self.pos.y:g}), "
            f"size=({self.size.x:g}, {self.size.y:g}))"
        )


class Player(Actor):
    """The player's hitbox. Movement is applied by the driver, not by act()."""

    kind = "player"

    def __init__(self, pos: Vector | None = None) -> None:
        pos = Vector(0, 0) if pos is None else pos
        super().__init__(pos.plus(Vector(0, -0.5)), Vector(0.8, 1.5))


class Coin(Actor):
    """Pickup that bobs vertically around its anchor. Ignores terrain."""

    kind = "coin"

    spring_speed: float = 8.0
    spring_dist: float = 0.07

    def __init__(self, pos: Vector | None = None, *, rng: RandomSource | None = None) -> None:
        pos = Vector(0, 0) if pos is None else pos
        super().__init__(pos.plus(Vector(0.2, 0.1)), Vector(0.6, 0.6))
        self.new_position = self.pos
        source = random if rng is None else rng
        # Random phase so neighbouring coins do not bob in lockstep.
        self.spring = source.random() * math.pi * 2

    def get_spring_vector(self) -> Vector:
        return Vector(0, math.sin(self.spring) * self.spring_dist)

    def update_spring(self, time: float = 1.0) -> None:
        self.spring += self.spring_speed * time

    def get_next_position(self, time: float = 1.0) -> Vector:
        self.update_spring(time)
        return self.new_position.plus(self.get_spring_vector())

    def act(self, time: float = 1.0, level: "Level | None" = None) -> None:
        self.pos = self.get_next_position(time)


class Fireball(Actor):
    """1x1 hazard moving at constant speed.

    ``obstacle_response`` selects what happens when the next position is
    blocked: ``"bounce"`` reverses the speed, ``"reset"`` teleports back to
    the start position.
    """

    kind = "fireball"
    obstacle_response: ClassVar[str] = "bounce"

    def __init__(self, pos: Vector | None = None, speed: Vector | None = None) -> None:
        pos = Vector(0, 0) if pos is None else pos
        speed = Vector(0, 0) if speed is None else speed
        super().__init__(pos, Vector(1, 1), speed)
        self.start_pos = self.pos

    def get_next_position(self, time: float = 1.0) -> Vector:
        return self.pos.plus(self.speed.times(time))

    def handle_obstacle(self) -> None:
        if self.obstacle_response == "reset":
            self.pos = self.start_pos
        elif self.obstacle_response == "bounce":
            self.speed = self.speed.times(-1)
        else:
            raise ValueError(f"Unknown obstacle response: {self.obstacle_response!r}")

    def act(self, time: float = 1.0, level: "Level | None" = None) -> None:
        next_pos = self.get_next_position(time)
        if level is not None and level.obstacle_at(next_pos, self.size) is not None:
            self.handle_obstacle()
        else:
            self.pos = next_pos


class HorizontalFireball(Fireball):
    def __init__(self, pos: Vector | None = None) -> None:
        super().__init__(pos, Vector(2, 0))


class VerticalFireball(Fireball):
    def __init__(self, pos: Vector | None = None) -> None:
        super().__init__(pos, Vector(0, 2))


class FireRain(Fireball):
    """Falls and restarts from the top instead of bouncing."""

    obstacle_response = "reset"

    def __init__(self, pos: Vector | None = None) -> None:
        super().__init__(pos, Vector(0, 3))
