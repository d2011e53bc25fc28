"""Window settings, colours and the basic geometry shared by every screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Breakout Game"

MENU_ROUNDNESS = 0.2

Color = tuple[int, int, int, int]

COLOR_BG: Color = (24, 24, 24, 255)
COLOR_TEXT: Color = (240, 240, 240, 255)
COLOR_BUTTON_HOVER: Color = (200, 50, 50, 255)
COLOR_BUTTON: Color = (160, 30, 30, 255)
COLOR_MENU_BG: Color = (48, 48, 48, 255)
COLOR_MENU_BORDER: Color = (80, 80, 80, 255)
COLOR_PLATFORM: Color = (240, 240, 240, 255)
COLOR_BALL: Color = (102, 191, 255, 255)
COLOR_END_TEXT: Color = (245, 245, 245, 255)


class GameState(enum.Enum):
    """The screen the application is currently showing."""

    HOME = enum.auto()
    GAME = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with a floating-point origin and size."""

    x: float
    y: float
    width: float
    height: float

    def right(self) -> float:
        """The x coordinate of the right edge."""
        return self.x + self.width

    def bottom(self) -> float:
        """The y coordinate of the bottom edge."""
        return self.y + self.height

    def center(self) -> tuple[float, float]:
        """The centre point of the rectangle."""
        return (self.x + self.width / 2, self.y + self.height / 2)