import pygame
import pytest

from brickfall.app import App, FrameInput
from brickfall.defs import COLOR_BG, COLOR_PLATFORM, WINDOW_HEIGHT, WINDOW_WIDTH, GameState
from brickfall.game import STARTING_BALLS
from brickfall.home import START_BTN


@pytest.fixture
def surface():
    return pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))


def test_starts_on_home_screen():
    assert App().state is GameState.HOME


def test_clicking_start_enters_game():
    app = App()
    result = app.update(0.016, FrameInput(mouse_pos=START_BTN.center(), mouse_pressed=True))
    assert result is GameState.GAME
    assert app.state is GameState.GAME


def test_home_without_click_stays_home():
    app = App()
    assert app.update(0.016, FrameInput(mouse_pos=START_BTN.center())) is GameState.HOME


def test_transition_to_game_resets_round():
    app = App()
    app.game.balls_left = 0
    app.game.broken[0][0] = True
    app.transition(GameState.GAME)
    assert app.game.balls_left == STARTING_BALLS
    assert app.game.broken[0][0] is False


def test_transition_to_home_keeps_round():
    app = App()
    app.transition(GameState.GAME)
    app.game.balls_left = 1
    app.transition(GameState.HOME)
    assert app.state is GameState.HOME
    assert app.game.balls_left == 1


def test_launch_uses_a_ball():
    app = App()
    app.transition(GameState.GAME)
    app.update(0.016, FrameInput(launch=True))
    assert app.game.ball_active is True
    assert app.game.balls_left == STARTING_BALLS - 1


def test_no_balls_left_ends_game():
    app = App()
    app.transition(GameState.GAME)
    app.game.balls_left = 0
    assert app.update(0.016, FrameInput()) is GameState.END


def test_end_state_ignores_input():
    app = App()
    app.transition(GameState.END)
    result = app.update(0.016, FrameInput(mouse_pos=START_BTN.center(), mouse_pressed=True))
    assert result is GameState.END


def test_draw_game_shows_platform(surface):
    app = App()
    app.transition(GameState.GAME)
    app.draw(surface)
    px, py = app.game.platform_pos
    assert tuple(surface.get_at((int(px), int(py)))) == COLOR_PLATFORM


def test_draw_end_writes_text_in_corner(surface):
    app = App()
    app.transition(GameState.END)
    app.draw(surface)
    corner = [tuple(surface.get_at((x, y))) for x in range(40) for y in range(20)]
    assert any(pixel != COLOR_BG for pixel in corner)
    assert tuple(surface.get_at((WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1))) == COLOR_BG