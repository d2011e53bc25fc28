"""The playing field: paddle, ball, bricks and their collisions."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

import pygame

from brickfall.defs import (
    COLOR_BALL,
    COLOR_MENU_BG,
    COLOR_PLATFORM,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Rect,
)

Vec = tuple[float, float]

GRID_WIDTH = 14
GRID_HEIGHT = 8

LARGE_PLATFORM_WIDTH = 80
SMALL_PLATFORM_WIDTH = 40
BLOCK_WIDTH = 25
BLOCK_HEIGHT = 10
BLOCK_MARGIN = 3
STARTING_BALLS = 3
GRID_START_Y = 50

PLATFORM_MOVEMENT_PER_MS = 0.25
PLATFORM_Y_POS = WINDOW_HEIGHT - 100
PLATFORM_HEIGHT = 10
PLATFORM_EDGE_X_MOV = 0.8

SLOW_BALL_MOVEMENT_PER_MS = 0.2
FAST_BALL_MOVEMENT_PER_MS = 0.4
BALL_SIZE = 10

GAME_WIDTH = BLOCK_WIDTH * GRID_WIDTH + (GRID_WIDTH + 1) * BLOCK_MARGIN
GAME_HEIGHT = 550
GAME_START = (WINDOW_WIDTH - GAME_WIDTH) / 2.0
GAME_START_Y = (WINDOW_HEIGHT - GAME_HEIGHT) / 2.0

GAME_WALL_WIDTH = 10
BLOCK_COLOR_GROUP_SIZE = 2
_MIN_STEP = 0.005
_EPSILON = 0.000001

BLOCK_COLORS = (
    (150, 44, 25, 255),
    (185, 136, 47, 255),
    (59, 131, 61, 255),
    (194, 194, 74, 255),
)

GAME_WALLS = (
    Rect(GAME_START - GRID_WIDTH, GAME_START_Y, GAME_WALL_WIDTH, GAME_HEIGHT),
    Rect(GAME_START, GAME_START_Y - GAME_WALL_WIDTH, GAME_WIDTH, GAME_WALL_WIDTH),
    Rect(GAME_START + GAME_WIDTH, GAME_START_Y, GAME_WALL_WIDTH, GAME_HEIGHT),
)

_ZERO: Vec = (0.0, 0.0)


class BallSpeed(enum.Enum):
    SLOW = enum.auto()
    FAST = enum.auto()


class Level(enum.Enum):
    FIRST = enum.auto()
    SECOND = enum.auto()


@dataclass(frozen=True)
class CollisionResult:
    """How far to push the ball back out of an obstacle and where it goes next."""

    undo_move: Vec = _ZERO
    new_dir: Vec = _ZERO

    @property
    def amount(self) -> float:
        """Squared length of the push-back; zero means no effective collision."""
        return self.undo_move[0] ** 2 + self.undo_move[1] ** 2


def _add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def _scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def _normalize(v: Vec) -> Vec:
    length = math.hypot(*v)
    return _scale(v, 1.0 / length) if length > 0 else v


def _equals(p: Vec, q: Vec) -> bool:
    return all(
        abs(a - b) <= _EPSILON * max(1.0, abs(a), abs(b)) for a, b in zip(p, q)
    )


def _axis_scale(overlap: float, component: float) -> float:
    return overlap / abs(component) if component else math.inf


def check_overlap(ball: Rect, obstacle: Rect, direction: Vec) -> CollisionResult:
    """Collide a ball moving along direction with an obstacle.

    The push-back runs against the direction of travel, just far enough to
    clear the shallower axis; the new direction is mirrored on that axis.
    """
    horizontal = min(ball.right(), obstacle.right()) - max(ball.x, obstacle.x)
    vertical = min(ball.bottom(), obstacle.bottom()) - max(ball.y, obstacle.y)
    if horizontal < 0 or vertical < 0:
        return CollisionResult()

    back = (-direction[0], -direction[1])
    scale = min(_axis_scale(horizontal, back[0]), _axis_scale(vertical, back[1]))
    undo = (back[0] * scale if back[0] else 0.0, back[1] * scale if back[1] else 0.0)

    if abs(horizontal) < abs(vertical):
        new_dir = (-direction[0], direction[1])
    else:
        new_dir = (direction[0], -direction[1])
    return CollisionResult(undo_move=undo, new_dir=new_dir)


def block_rect(row: int, col: int) -> Rect:
    """The rectangle of the brick at the given grid cell."""
    return Rect(
        GAME_START + BLOCK_MARGIN + (BLOCK_MARGIN + BLOCK_WIDTH) * col,
        GRID_START_Y + (BLOCK_MARGIN + BLOCK_HEIGHT) * row,
        BLOCK_WIDTH,
        BLOCK_HEIGHT,
    )


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


class Game:
    """State of one round: the brick grid, the paddle and the ball."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start a fresh round with every brick present and a full set of balls."""
        self.broken = [[False] * GRID_WIDTH for _ in range(GRID_HEIGHT)]
        self.ball_speed = BallSpeed.SLOW
        self.level = Level.FIRST
        self.platform_width = LARGE_PLATFORM_WIDTH
        self.balls_left = STARTING_BALLS
        self.score = 0
        self.ball_active = False
        self.ball_pos: Vec = _ZERO
        self.ball_dir: Vec = _ZERO
        self.platform_pos: Vec = (GAME_START + GAME_WIDTH / 2.0, float(PLATFORM_Y_POS))
        self.platform_x_vel = 0.0

    def platform_rect(self) -> Rect:
        px, py = self.platform_pos
        return Rect(
            px - self.platform_width / 2.0,
            py - PLATFORM_HEIGHT / 2.0,
            self.platform_width,
            PLATFORM_HEIGHT,
        )

    def ball_rect(self) -> Rect:
        bx, by = self.ball_pos
        return Rect(bx - BALL_SIZE / 2.0, by - BALL_SIZE / 2.0, BALL_SIZE, BALL_SIZE)

    def check_block_collisions(self, ball: Rect) -> tuple[CollisionResult, tuple[int, int] | None]:
        """The deepest collision with a present brick, and that brick's cell."""
        best = CollisionResult()
        cell = None
        for row, cells in enumerate(self.broken):
            for col, broken in enumerate(cells):
                if broken:
                    continue
                hit = check_overlap(ball, block_rect(row, col), self.ball_dir)
                if hit.amount > best.amount:
                    best, cell = hit, (row, col)
        return best, cell

    def check_wall_collisions(self, ball: Rect) -> CollisionResult:
        """The deepest collision with one of the walls."""
        best = CollisionResult()
        for wall in GAME_WALLS:
            hit = check_overlap(ball, wall, self.ball_dir)
            if hit.amount > best.amount:
                best = hit
        return best

    def check_platform_collisions(self, ball: Rect) -> CollisionResult:
        """Collision with the paddle; a bounce upward is angled by where it hit."""
        result = check_overlap(ball, self.platform_rect(), self.ball_dir)
        if result.new_dir[1] < 0.0:
            diff = self.ball_pos[0] - self.platform_pos[0]
            ratio = diff / (self.platform_width / 2.0)
            x_dir = ratio * PLATFORM_EDGE_X_MOV
            radicand = 1.0 - x_dir * x_dir
            y_dir = -1.0 if math.sqrt(max(radicand, 0.0)) * result.new_dir[1] < 0.0 else 1.0
            result = CollisionResult(undo_move=result.undo_move, new_dir=(x_dir, y_dir))
        return result

    def update_platform(self, dt: float, left: bool, right: bool) -> None:
        """Move the paddle for a frame of dt seconds, kept inside the field."""
        frame_ms = dt * 1000
        if left:
            self.platform_x_vel = -PLATFORM_MOVEMENT_PER_MS
        elif right:
            self.platform_x_vel = PLATFORM_MOVEMENT_PER_MS
        else:
            self.platform_x_vel = 0.0

        half = self.platform_width / 2.0
        new_x = self.platform_pos[0] + frame_ms * self.platform_x_vel
        new_x = min(max(new_x, GAME_START + half), GAME_START + GAME_WIDTH - half)
        self.platform_pos = (new_x, self.platform_pos[1])

    def update_ball(self, dt: float, launch: bool) -> bool:
        """Advance the ball for a frame of dt seconds.

        Returns True once no balls are left to play.
        """
        if not self.ball_active:
            if self.balls_left == 0:
                return True
            px, py = self.platform_pos
            self.ball_pos = (px, py - PLATFORM_HEIGHT / 2.0 - BALL_SIZE / 2.0 - 2)
            if launch:
                self.ball_active = True
                vel = self.platform_x_vel
                self.ball_dir = _normalize((vel, -math.sqrt(1.0 - vel * vel)))
                self.balls_left -= 1
            else:
                self.ball_dir = _ZERO
            return False

        speed = (
            SLOW_BALL_MOVEMENT_PER_MS
            if self.ball_speed is BallSpeed.SLOW
            else FAST_BALL_MOVEMENT_PER_MS
        )
        remaining = dt * 1000 * speed
        while remaining > _MIN_STEP:
            movement = _scale(self.ball_dir, remaining)
            self.ball_pos = _add(self.ball_pos, movement)
            ball = self.ball_rect()

            block_hit, cell = self.check_block_collisions(ball)
            wall_hit = self.check_wall_collisions(ball)
            platform_hit = self.check_platform_collisions(ball)

            if block_hit.amount > wall_hit.amount and block_hit.amount > platform_hit.amount:
                largest = block_hit
            elif wall_hit.amount > platform_hit.amount:
                largest = wall_hit
            else:
                largest = platform_hit

            if largest.amount == 0.0:
                return False

            if cell is not None and _equals(largest.undo_move, block_hit.undo_move):
                row, col = cell
                self.broken[row][col] = True

            self.ball_pos = _add(self.ball_pos, largest.undo_move)
            remaining -= math.hypot(*_add(movement, largest.undo_move))
            self.ball_dir = largest.new_dir
        return False

    def update(self, dt: float, left: bool, right: bool, launch: bool) -> bool:
        """Advance paddle then ball; returns True once the round is over."""
        self.update_platform(dt, left, right)
        return self.update_ball(dt, launch)

    def draw(self, surface) -> None:
        """Draw the field, paddle, ball and remaining bricks."""
        field = Rect(GAME_START, GAME_START_Y, GAME_WIDTH, GAME_HEIGHT)
        pygame.draw.rect(surface, COLOR_MENU_BG, _to_pygame(field))
        pygame.draw.rect(surface, COLOR_PLATFORM, _to_pygame(self.platform_rect()))
        pygame.draw.rect(surface, COLOR_BALL, _to_pygame(self.ball_rect()))
        for row, cells in enumerate(self.broken):
            colour = BLOCK_COLORS[row // BLOCK_COLOR_GROUP_SIZE]
            for col, broken in enumerate(cells):
                if not broken:
                    pygame.draw.rect(surface, colour, _to_pygame(block_rect(row, col)))