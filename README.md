# brickfall

brickfall is a small brick-breaking arcade game built on pygame. You steer a
paddle along the bottom of the playing field and bounce a ball into a wall of
coloured bricks. The wall has 8 rows of 14 bricks. A brick breaks when the
ball hits it.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
brickfall
```

This opens an 800 by 600 window showing the home menu. Click **START** to
begin a round.

| Key               | Action                          |
|-------------------|---------------------------------|
| `A` / Left arrow  | Move the paddle left            |
| `D` / Right arrow | Move the paddle right           |
| `W` / Up arrow    | Launch the ball from the paddle |

Before launch, the ball rests on top of the paddle. Its launch direction
depends on how the paddle is moving at that moment. Where the ball lands on
the paddle decides its outgoing angle: a hit near an edge sends it off more
sharply toward that side. The ball bounces off the left, top and right walls.

Close the window to quit.

## Using it as a library

You can drive the game logic without a display.

- `brickfall.game.Game` holds the state of one round:
  - `broken` is the grid of broken bricks.
  - The paddle state is in `platform_pos` and `platform_width`.
  - The ball state is in `ball_pos`, `ball_dir` and `ball_active`.
  - `balls_left` starts at 3.
- `Game.update(dt, left, right, launch)` advances the round by `dt` seconds. It returns `True` once no balls are left to launch. `Game.reset()` starts a fresh round.
- `brickfall.game.check_overlap(ball, obstacle, direction)` does the collision maths between two `brickfall.defs.Rect` values. It returns a `CollisionResult` holding:
  - `undo_move`, the push-back that undoes the overlap;
  - `new_dir`, the reflected direction.
- `brickfall.game.block_rect(row, col)` gives the rectangle of a brick.
- `brickfall.utils.mouse_over(rect, mouse_pos)` and `mouse_pressed_on(rect, mouse_pos, pressed)` do hit-testing.
- `brickfall.home.HomeScreen.update(mouse_pos, pressed)` returns `True` when the start button is clicked.
- `brickfall.app.App` switches between the `GameState` values `HOME`, `GAME` and `END`. Feed it one `FrameInput` per frame through `App.update(dt, frame_input)`, which returns the resulting state. `App.transition(new_state)` moves to a state directly; entering `GAME` resets the round.

The `draw` methods of `Game`, `HomeScreen` and `App` take a pygame surface.

## What the game does not do

- A ball that falls past the paddle is never lost. It keeps travelling off the
  field. Only the first ball is ever launched, so in normal play the end
  screen is not reached.
- There is no score. `Game.score` stays at 0 and nothing is shown on screen.
- There is a single level. The ball always moves at the slow speed and the
  paddle keeps its large width.
- Clearing every brick does not end the round.
- The end screen only shows "END". It has no way back to the menu, so close
  the window to quit.

## Running the tests

```
pip install .[test]
pytest
```