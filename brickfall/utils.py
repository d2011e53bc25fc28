"""Mouse hit-testing and text helpers used by the screens."""

from __future__ import annotations

import functools

import pygame

from brickfall.defs import COLOR_TEXT, Rect


def mouse_over(rect: Rect, mouse_pos: tuple[float, float]) -> bool:
    """Whether the mouse position lies inside the rectangle, edges included.

    Coordinates are truncated to whole pixels; a negative position is never
    inside.
    """
    mx, my = (int(v) for v in mouse_pos)
    if mx < 0 or my < 0:
        return False
    low_x, low_y = int(rect.x), int(rect.y)
    high_x, high_y = int(rect.right()), int(rect.bottom())
    return low_x <= mx <= high_x and low_y <= my <= high_y


def mouse_pressed_on(rect: Rect, mouse_pos: tuple[float, float], pressed: bool) -> bool:
    """Whether the left button was pressed this frame while over the rectangle."""
    return bool(pressed) and mouse_over(rect, mouse_pos)


def rect_center(rect: Rect) -> tuple[float, float]:
    """The centre point of a rectangle."""
    return rect.center()


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def draw_text_centered(surface, msg: str, x: float, y: float, font_size: int):
    """Draw text centred horizontally on x and vertically on y.

    Returns the area of the surface that was drawn on.
    """
    image = _font(int(font_size)).render(msg, False, COLOR_TEXT)
    left = int(x) - image.get_width() // 2
    top = int(y) - int(font_size) // 2
    return surface.blit(image, (left, top))