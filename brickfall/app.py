"""The application: state machine, main loop and window."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from brickfall.defs import (
    COLOR_BG,
    COLOR_END_TEXT,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    GameState,
)
from brickfall.game import Game
from brickfall.home import HomeScreen

_END_FONT_SIZE = 20
_FPS = 60


@dataclass(frozen=True)
class FrameInput:
    """The player's input sampled for a single frame."""

    mouse_pos: tuple[float, float] = (0, 0)
    mouse_pressed: bool = False
    left: bool = False
    right: bool = False
    launch: bool = False


class App:
    """Switches between the title screen, a round of play and the end screen."""

    def __init__(self) -> None:
        self.state = GameState.HOME
        self.home = HomeScreen()
        self.game = Game()

    def transition(self, new_state: GameState) -> None:
        """Enter a new state; entering play starts a fresh round."""
        if new_state is GameState.GAME:
            self.game.reset()
        self.state = new_state

    def update(self, dt: float, frame_input: FrameInput) -> GameState:
        """Advance the current screen by dt seconds; returns the resulting state."""
        if self.state is GameState.HOME:
            if self.home.update(frame_input.mouse_pos, frame_input.mouse_pressed):
                self.transition(GameState.GAME)
        elif self.state is GameState.GAME:
            over = self.game.update(
                dt, frame_input.left, frame_input.right, frame_input.launch
            )
            if over:
                self.transition(GameState.END)
        return self.state

    def draw(self, surface) -> None:
        """Clear the surface and draw the current screen."""
        surface.fill(COLOR_BG)
        if self.state is GameState.HOME:
            self.home.draw(surface)
        elif self.state is GameState.GAME:
            self.game.draw(surface)
        else:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, _END_FONT_SIZE)
            surface.blit(font.render("END", False, COLOR_END_TEXT), (0, 0))


def _read_input(events) -> FrameInput:
    pressed = any(
        event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 for event in events
    )
    keys = pygame.key.get_pressed()
    return FrameInput(
        mouse_pos=pygame.mouse.get_pos(),
        mouse_pressed=pressed,
        left=bool(keys[pygame.K_a] or keys[pygame.K_LEFT]),
        right=bool(keys[pygame.K_d] or keys[pygame.K_RIGHT]),
        launch=bool(keys[pygame.K_w] or keys[pygame.K_UP]),
    )


def main(argv=None) -> int:
    """Open the window and run the game until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        app = App()
        while True:
            dt = clock.tick(_FPS) / 1000.0
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break
            app.update(dt, _read_input(events))
            app.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())