"""The title screen with its start button."""

from __future__ import annotations

import pygame

from brickfall.defs import (
    COLOR_BUTTON,
    COLOR_BUTTON_HOVER,
    COLOR_MENU_BG,
    COLOR_MENU_BORDER,
    MENU_ROUNDNESS,
    Rect,
)
from brickfall.utils import draw_text_centered, mouse_over, mouse_pressed_on, rect_center

MENU = Rect(200, 100, 400, 400)
MENU_BORDER = Rect(197, 97, 406, 406)
START_BTN = Rect(300, 350, 200, 125)
START_BTN_BORDER = Rect(297, 347, 206, 131)

_MENU_PANEL_ROUNDNESS = 0.2


def _draw_rounded(surface, rect: Rect, roundness: float, colour) -> None:
    radius = int(roundness * min(rect.width, rect.height) / 2)
    area = pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
    pygame.draw.rect(surface, colour, area, border_radius=radius)


class HomeScreen:
    """Title menu; reports when the start button is clicked."""

    def __init__(self) -> None:
        self.start_btn_hovered = False

    def update(self, mouse_pos: tuple[float, float], pressed: bool) -> bool:
        """Track hovering; returns True when the start button was clicked."""
        self.start_btn_hovered = mouse_over(START_BTN, mouse_pos)
        return mouse_pressed_on(START_BTN, mouse_pos, pressed)

    def draw(self, surface) -> None:
        """Draw the menu panel, its captions and the start button."""
        _draw_rounded(surface, MENU_BORDER, _MENU_PANEL_ROUNDNESS, COLOR_MENU_BORDER)
        _draw_rounded(surface, MENU, _MENU_PANEL_ROUNDNESS, COLOR_MENU_BG)

        draw_text_centered(surface, "BREAKOUT", 400, 180, 30)
        draw_text_centered(surface, "CLICK START TO BEGIN", 400, 230, 15)

        _draw_rounded(surface, START_BTN_BORDER, MENU_ROUNDNESS, COLOR_MENU_BORDER)
        button_colour = COLOR_BUTTON_HOVER if self.start_btn_hovered else COLOR_BUTTON
        _draw_rounded(surface, START_BTN, MENU_ROUNDNESS, button_colour)
        cx, cy = rect_center(START_BTN)
        draw_text_centered(surface, "START", cx, cy, 20)