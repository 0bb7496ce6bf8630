"""Rendering system for level snapshots."""

import os

import pygame

from core.config import CELL_PIXELS
from core.level import LevelSnapshot
from core.maths import Rect
from .camera import Camera


class Renderer:
    """Draws the grid and live actors; never mutates the level."""

    def __init__(
        self,
        width: int,
        height: int,
        cell_pixels: int = CELL_PIXELS,
        surface: "pygame.Surface | None" = None,
    ):
        """Create a window, or draw onto ``surface`` when one is given."""
        if surface is None:
            # Avoid forcing an OpenGL context; some environments set this and lack GLX.
            os.environ.pop("PYGAME_FORCE_OPENGL", None)
            os.environ.setdefault("SDL_RENDER_DRIVER", "software")
            pygame.init()
            surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption("Platformer")
            self.owns_display = True
        else:
            self.owns_display = False
        self.screen = surface
        self.clock = pygame.time.Clock()
        self.camera = Camera(width, height, cell_pixels)

        # Colors
        self.bg_color = (52, 166, 251)
        self.cell_colors = {
            "wall": (255, 255, 255),
            "lava": (255, 100, 100),
        }
        self.actor_colors = {
            "player": (64, 64, 64),
            "coin": (241, 229, 89),
            "fireball": (255, 100, 100),
        }
        self.default_actor_color = (200, 200, 200)
        self.won_tint = (68, 191, 255)
        self.lost_tint = (44, 136, 214)

    def draw(self, snapshot: LevelSnapshot) -> None:
        player = next((a for a in snapshot.actors if a.type == "player"), None)
        if player is not None:
            self.camera.follow(player, snapshot)

        if snapshot.status == "won":
            self.screen.fill(self.won_tint)
        elif snapshot.status == "lost":
            self.screen.fill(self.lost_tint)
        else:
            self.screen.fill(self.bg_color)

        self._draw_grid(snapshot)
        for actor in snapshot.actors:
            color = self.actor_colors.get(actor.type, self.default_actor_color)
            rect = Rect.from_bounds(actor.left, actor.right, actor.top, actor.bottom)
            pygame.draw.rect(self.screen, color, self.camera.world_to_screen(rect).to_pygame_rect())

    def _draw_grid(self, snapshot: LevelSnapshot) -> None:
        view = self.camera.get_visible_world_rect()
        x_start = max(0, int(view.min_x))
        x_end = min(snapshot.width, int(view.max_x) + 1)
        y_start = max(0, int(view.min_y))
        y_end = min(snapshot.height, int(view.max_y) + 1)
        for y in range(y_start, y_end):
            row = snapshot.grid[y]
            for x in range(x_start, min(x_end, len(row))):
                cell = row[x]
                if cell is None:
                    continue
                color = self.cell_colors.get(cell, self.default_actor_color)
                rect = self.camera.world_to_screen(Rect(x, y, 1, 1))
                pygame.draw.rect(self.screen, color, rect.to_pygame_rect())

    def present(self, fps: int) -> float:
        """Flip the display and return the elapsed frame time in seconds."""
        if self.owns_display:
            pygame.display.flip()
        return self.clock.tick(fps) / 1000.0

    def close(self) -> None:
        if self.owns_display:
            pygame.quit()
