import pygame
import pytest

from brickfall.defs import COLOR_TEXT, Rect
from brickfall.utils import (
    draw_text_centered,
    mouse_over,
    mouse_pressed_on,
    rect_center,
)

BUTTON = Rect(300, 350, 200, 125)


@pytest.mark.parametrize(
    "pos",
    [(400, 400), (300, 350), (500, 475), (300.9, 475.2)],
)
def test_mouse_over_inside_and_on_edges(pos):
    assert mouse_over(BUTTON, pos) is True


@pytest.mark.parametrize(
    "pos",
    [(299, 400), (501, 400), (400, 349), (400, 476), (-1, 400), (400, -3)],
)
def test_mouse_over_outside(pos):
    assert mouse_over(BUTTON, pos) is False


def test_mouse_pressed_on_requires_press():
    assert mouse_pressed_on(BUTTON, (400, 400), True) is True
    assert mouse_pressed_on(BUTTON, (400, 400), False) is False


def test_mouse_pressed_on_requires_position():
    assert mouse_pressed_on(BUTTON, (10, 10), True) is False


def test_rect_center_matches_rect():
    assert rect_center(BUTTON) == BUTTON.center()


def test_draw_text_centered_places_text_around_point():
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    area = draw_text_centered(surface, "START", 100, 50, 20)
    assert abs(area.centerx - 100) <= 1
    assert area.top <= 50 <= area.bottom
    colours = {
        tuple(surface.get_at((px, py)))
        for px in range(area.left, area.right)
        for py in range(area.top, area.bottom)
    }
    assert COLOR_TEXT in colours


def test_draw_text_centered_wider_text_covers_more():
    surface = pygame.Surface((400, 100))
    short = draw_text_centered(surface, "A", 200, 50, 20)
    long = draw_text_centered(surface, "AAAAAAAA", 200, 50, 20)
    assert long.width > short.width