"""Camera: maps grid cells to screen pixels and follows the player."""

from core.level import ActorView, LevelSnapshot
from core.maths import Rect


class Camera:
    """Scrolling viewport over a cell grid (y grows downwards on both sides)."""

    def __init__(self, screen_width: int, screen_height: int, cell_pixels: int):
        """Initialize camera at the level's top-left corner.

        Args:
            screen_width: Width of the display in pixels
            screen_height: Height of the display in pixels
            cell_pixels: Pixels per grid cell
        """
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.scale = cell_pixels

        # Top-left corner of the view, in cells
        self.x = 0.0
        self.y = 0.0

        # Fraction of the view kept around the player before scrolling
        self.margin = 1.0 / 3.0

    @property
    def view_width(self) -> float:
        return self.screen_width / self.scale

    @property
    def view_height(self) -> float:
        return self.screen_height / self.scale

    def get_visible_world_rect(self) -> Rect:
        return Rect(self.x, self.y, self.view_width, self.view_height)

    def follow(self, target: ActorView, snapshot: LevelSnapshot) -> None:
        """Scroll so ``target`` stays inside the central part of the view."""
        margin_x = self.view_width * self.margin
        margin_y = self.view_height * self.margin
        center_x = (target.left + target.right) / 2.0
        center_y = (target.top + target.bottom) / 2.0

        if center_x < self.x + margin_x:
            self.x = center_x - margin_x
        elif center_x > self.x + self.view_width - margin_x:
            self.x = center_x + margin_x - self.view_width

        if center_y < self.y + margin_y:
            self.y = center_y - margin_y
        elif center_y > self.y + self.view_height - margin_y:
            self.y = center_y + margin_y - self.view_height

        self.x = max(0.0, min(self.x, snapshot.width - self.view_width))
        self.y = max(0.0, min(self.y, snapshot.height - self.view_height))

    def world_to_screen(self, rect: Rect) -> Rect:
        """Convert a cell-space rect to a pixel-space rect."""
        return rect.offset(-self.x, -self.y).scaled(self.scale)
