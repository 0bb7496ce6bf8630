"""Controllers for handling user input and translating it to player motion."""

from __future__ import annotations

from core.actors import Actor
from core.config import PLAYER_GRAVITY, PLAYER_JUMP_SPEED, PLAYER_X_SPEED
from core.level import Level
from core.maths import Vector


class PlayerController:
    """Moves the player from input signals; terrain contact goes to the level.

    Horizontal and vertical motion are resolved separately so the player can
    slide along walls. Any obstacle hit is reported with
    ``level.player_touched(obstacle)``; only lava has an effect there.
    """

    def __init__(
        self,
        x_speed: float = PLAYER_X_SPEED,
        gravity: float = PLAYER_GRAVITY,
        jump_speed: float = PLAYER_JUMP_SPEED,
    ):
        self.x_speed = x_speed
        self.gravity = gravity
        self.jump_speed = jump_speed

    def update(self, player: Actor, level: Level, signals: dict, dt: float) -> None:
        self._move_x(player, level, signals, dt)
        self._move_y(player, level, signals, dt)

    def _move_x(self, player: Actor, level: Level, signals: dict, dt: float) -> None:
        vx = 0.0
        if signals.get("left"):
            vx -= self.x_speed
        if signals.get("right"):
            vx += self.x_speed
        if vx == 0.0:
            return

        new_pos = player.pos.plus(Vector(vx * dt, 0))
        obstacle = level.obstacle_at(new_pos, player.size)
        if obstacle is not None:
            level.player_touched(obstacle)
        else:
            player.pos = new_pos

    def _move_y(self, player: Actor, level: Level, signals: dict, dt: float) -> None:
        vy = player.speed.y + dt * self.gravity
        new_pos = player.pos.plus(Vector(0, vy * dt))
        obstacle = level.obstacle_at(new_pos, player.size)
        if obstacle is not None:
            level.player_touched(obstacle)
            # Landing on something is the only time a jump may start.
            if signals.get("jump") and vy > 0:
                vy = -self.jump_speed
            else:
                vy = 0.0
        else:
            player.pos = new_pos
        player.speed = Vector(player.speed.x, vy)
