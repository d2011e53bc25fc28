import pygame
import pytest

from brickfall.defs import (
    COLOR_BG,
    COLOR_BUTTON,
    COLOR_BUTTON_HOVER,
    COLOR_MENU_BG,
    COLOR_MENU_BORDER,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from brickfall.home import MENU, START_BTN, HomeScreen


@pytest.fixture
def surface():
    surf = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surf.fill(COLOR_BG)
    return surf


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))


def test_click_on_start_button_starts():
    home = HomeScreen()
    assert home.update(START_BTN.center(), True) is True
    assert home.start_btn_hovered is True


def test_hover_without_click_does_not_start():
    home = HomeScreen()
    assert home.update(START_BTN.center(), False) is False
    assert home.start_btn_hovered is True


def test_click_outside_button_does_not_start():
    home = HomeScreen()
    assert home.update((10, 10), True) is False
    assert home.start_btn_hovered is False


@pytest.mark.parametrize(
    "pos",
    [
        (START_BTN.x, START_BTN.y),
        (START_BTN.right(), START_BTN.bottom()),
    ],
)
def test_button_edges_count_as_inside(pos):
    home = HomeScreen()
    assert home.update(pos, True) is True


def test_hover_is_cleared_when_mouse_leaves():
    home = HomeScreen()
    home.update(START_BTN.center(), False)
    home.update((START_BTN.right() + 5, START_BTN.y), False)
    assert home.start_btn_hovered is False


def test_draw_uses_button_colour_when_not_hovered(surface):
    home = HomeScreen()
    home.draw(surface)
    assert _pixel(surface, int(START_BTN.x) + 10, int(START_BTN.bottom()) - 15) == COLOR_BUTTON


def test_draw_uses_hover_colour_when_hovered(surface):
    home = HomeScreen()
    home.update(START_BTN.center(), False)
    home.draw(surface)
    assert (
        _pixel(surface, int(START_BTN.x) + 10, int(START_BTN.bottom()) - 15)
        == COLOR_BUTTON_HOVER
    )


def test_draw_menu_panel_and_border(surface):
    home = HomeScreen()
    home.draw(surface)
    assert _pixel(surface, int(MENU.x) + 10, 300) == COLOR_MENU_BG
    assert _pixel(surface, int(MENU.x) - 2, 300) == COLOR_MENU_BORDER
    assert _pixel(surface, 5, 5) == COLOR_BG