"""Level state: obstacle grid, live actors, and the win/lose state machine.

Contract:
- grid is indexed ``grid[y][x]``; a cell is ``None``, ``"wall"`` or ``"lava"``
- actors keep insertion order; the first ``"player"`` actor is cached as ``player``
- status goes from ``None`` to ``"won"``/``"lost"`` once and never back
- the driver decrements ``finish_delay`` each tick after status is set;
  ``is_finished()`` turns true once it drops below zero
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from core.actors import Actor
from core.config import FINISH_DELAY
from core.errors import InvalidArgumentType
from core.maths import Vector

WALL = "wall"
LAVA = "lava"


@dataclass(frozen=True)
class ActorView:
    """Read-only view of an actor for presentation layers."""

    type: str
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class LevelSnapshot:
    width: int
    height: int
    grid: tuple[tuple[str | None, ...], ...]
    actors: tuple[ActorView, ...]
    status: str | None


class Level:
    def __init__(
        self,
        grid: Sequence[Sequence[str | None]] | None = None,
        actors: Iterable[Actor] | None = None,
    ) -> None:
        self.grid: list[list[str | None]] = [list(row) for row in (grid or [])]
        self.actors: list[Actor] = list(actors or [])
        self.player: Actor | None = next(
            (a for a in self.actors if a.type == "player"), None
        )
        self.height = len(self.grid)
        self.width = max((len(row) for row in self.grid), default=0)
        self.status: str | None = None
        self.finish_delay: float = FINISH_DELAY

    def is_finished(self) -> bool:
        return self.status is not None and self.finish_delay < 0

    def actor_at(self, actor: Actor) -> Actor | None:
        """Return the first live actor overlapping ``actor`` (never itself)."""
        if not isinstance(actor, Actor):
            raise InvalidArgumentType(
                f"actor_at expects an Actor, got {actor.__class__.__name__}"
            )
        return next((other for other in self.actors if actor.is_intersect(other)), None)

    def obstacle_at(self, pos: Vector, size: Vector) -> str | None:
        """Return the obstacle a box at ``pos``/``size`` would touch, if any.

        Leaving the level sideways or through the top is a wall; through the
        bottom is lava. The right and bottom checks use ``>=``, so a box that
        ends exactly on the far border is already out of bounds.
        """
        if not isinstance(pos, Vector) or not isinstance(size, Vector):
            raise InvalidArgumentType("obstacle_at expects Vector pos and size")

        if pos.x < 0 or pos.x + size.x >= self.width or pos.y < 0:
            return WALL
        if pos.y + size.y >= self.height:
            return LAVA

        x_start = math.floor(pos.x)
        x_end = math.ceil(pos.x + size.x)
        y_start = math.floor(pos.y)
        y_end = math.ceil(pos.y + size.y)
        for y in range(y_start, y_end):
            row = self.grid[y]
            for x in range(x_start, min(x_end, len(row))):
                cell = row[x]
                if cell:
                    return cell
        return None

    def remove_actor(self, actor: Actor) -> None:
        for i, live in enumerate(self.actors):
            if live is actor:
                del self.actors[i]
                return

    def no_more_actors(self, type: str) -> bool:
        return not any(actor.type == type for actor in self.actors)

    def player_touched(self, type: str, actor: Actor | None = None) -> None:
        """Resolve a player contact with an obstacle or actor type."""
        if self.status is not None:
            return
        if type in (LAVA, "fireball"):
            self.status = "lost"
        elif type == "coin":
            if actor is not None:
                self.remove_actor(actor)
            if self.no_more_actors("coin"):
                self.status = "won"

    def snapshot(self) -> LevelSnapshot:
        return LevelSnapshot(
            width=self.width,
            height=self.height,
            grid=tuple(tuple(row) for row in self.grid),
            actors=tuple(
                ActorView(a.type, a.left, a.top, a.right, a.bottom) for a in self.actors
            ),
            status=self.status,
        )
