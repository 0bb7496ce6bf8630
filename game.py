"""Game orchestration: drives one level tick by tick and runs the loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core.config import (
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    MAX_STEP,
    TARGET_RENDERING_FPS,
)
from core.controllers import PlayerController
from core.level import Level


@dataclass
class LoopTimers:
    frame_dt: float
    elapsed_time: float = 0.0
    step_count: int = 0

    def advance_frame(self, dt: float) -> None:
        self.frame_dt = dt
        self.elapsed_time += dt
        self.step_count += 1


class PlatformerGame:
    """Owns the current level and applies the per-tick driver contract.

    Each ``step``:
    1. moves the player from input signals (terrain hits go to the level)
    2. calls ``act`` on every other actor
    3. resolves player-vs-actor contact through ``actor_at``/``player_touched``
    4. counts ``finish_delay`` down once the level has a status
    """

    def __init__(
        self,
        level_factory: Callable[[], Level],
        width: int = DEFAULT_SCREEN_WIDTH,
        height: int = DEFAULT_SCREEN_HEIGHT,
        headless: bool = False,
        controller: PlayerController | None = None,
    ):
        self.level_factory = level_factory
        self.headless = headless
        self.controller = controller or PlayerController()
        self.running = True
        self.level = self._load_level()

        if not headless:
            from ui.renderer import Renderer
            from utils.input import InputHandler

            self.input_handler = InputHandler()
            self.renderer = Renderer(width, height)
        else:
            self.input_handler = None
            self.renderer = None

    def _load_level(self) -> Level:
        level = self.level_factory()
        if level.player is None:
            raise ValueError("Level has no player actor")
        return level

    def reset(self) -> None:
        self.level = self._load_level()

    def step(self, dt: float, signals: dict | None = None) -> None:
        """Advance the level by one tick of ``dt`` seconds (clamped)."""
        signals = signals or {}
        dt = min(dt, MAX_STEP)
        level = self.level
        player = level.player

        self.controller.update(player, level, signals, dt)
        for actor in list(level.actors):
            if actor is not player:
                actor.act(dt, level)

        if level.status is None:
            other = level.actor_at(player)
            if other is not None:
                level.player_touched(other.type, other)

        if level.status is not None:
            level.finish_delay -= 1

    def run(
        self,
        max_steps: int | None = None,
        max_time: float | None = None,
    ) -> dict:
        if self.headless and max_steps is None and max_time is None:
            raise ValueError("Headless mode requires max_steps or max_time")

        timers = LoopTimers(frame_dt=1.0 / TARGET_RENDERING_FPS)
        try:
            while self.running and not self.level.is_finished():
                if max_time is not None and timers.elapsed_time >= max_time:
                    break
                if max_steps is not None and timers.step_count >= max_steps:
                    break

                if self.input_handler is not None:
                    signals = self.input_handler.get_events()
                    if signals.get("quit"):
                        self.running = False
                        break
                    if signals.get("reset"):
                        self.reset()
                else:
                    signals = {}

                self.step(timers.frame_dt, signals)

                frame_dt = timers.frame_dt
                if self.renderer is not None:
                    self.renderer.draw(self.level.snapshot())
                    frame_dt = self.renderer.present(TARGET_RENDERING_FPS)
                timers.advance_frame(frame_dt)
        except Exception:
            # Fail fast rather than keep simulating a corrupt level.
            self.running = False
            raise
        finally:
            if self.renderer is not None:
                self.renderer.close()

        return {
            "status": self.level.status,
            "time": timers.elapsed_time,
            "steps": timers.step_count,
            "coins_left": sum(1 for a in self.level.actors if a.type == "coin"),
        }
