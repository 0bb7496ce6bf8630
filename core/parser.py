"""Text plans -> Level.

Each character of a plan row is either an obstacle symbol (``x`` wall,
``!`` lava) or looked up in a symbol -> actor factory mapping. The factory is
called with the cell position (column = x, row = y).
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Mapping, Sequence

from core.actors import (
    Actor,
    Coin,
    FireRain,
    HorizontalFireball,
    Player,
    RandomSource,
    VerticalFireball,
)
from core.level import LAVA, WALL, Level
from core.maths import Vector

ActorFactory = Callable[[Vector], Actor]

_OBSTACLES = {"x": WALL, "!": LAVA}


def build_actor_dict(rng: RandomSource | None = None) -> dict[str, ActorFactory]:
    """Stock symbol table. ``rng`` seeds every coin's spring phase."""
    return {
        "@": Player,
        "o": partial(Coin, rng=rng),
        "=": HorizontalFireball,
        "|": VerticalFireball,
        "v": FireRain,
    }


DEFAULT_ACTORS: Mapping[str, ActorFactory] = build_actor_dict()


class LevelParser:
    def __init__(self, actors: Mapping[str, ActorFactory] | None = None) -> None:
        self.actors = dict(actors) if actors is not None else {}

    def actor_from_symbol(self, char: str | None) -> ActorFactory | None:
        if char is None:
            return None
        return self.actors.get(char)

    @staticmethod
    def obstacle_from_symbol(char: str | None) -> str | None:
        return _OBSTACLES.get(char) if char is not None else None

    def create_grid(self, rows: Sequence[str]) -> list[list[str | None]]:
        return [[self.obstacle_from_symbol(ch) for ch in row] for row in rows]

    def create_actors(self, rows: Sequence[str]) -> list[Actor]:
        actors: list[Actor] = []
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                factory = self.actor_from_symbol(ch)
                if not callable(factory):
                    continue
                instance = factory(Vector(x, y))
                # Mappings are caller-supplied; anything that is not an Actor is dropped.
                if isinstance(instance, Actor):
                    actors.append(instance)
        return actors

    def parse(self, rows: Sequence[str]) -> Level:
        return Level(self.create_grid(rows), self.create_actors(rows))
