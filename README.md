# sekentop

A small arcade game. A ball falls and bounces off the walls and the ceiling
of the window. You drag a paddle along the bottom of the window to keep the
ball from hitting the floor. Every time the ball bounces off the paddle, your
score goes up by one. The score is shown on the paddle. When the ball reaches
the floor, the game stops and an explosion marks the spot where it landed.

## Installing

```
pip install .
```

The game window uses Tkinter from the standard library. No other packages
are needed.

## Playing

```
sekentop
```

- Press the left mouse button on the paddle and hold it.
- Move the mouse left and right to drag the paddle. The paddle keeps the
  offset from where you grabbed it, and it cannot leave the window.
- Let go of the button to release the paddle.

The ball starts at a random spot near the top of the window (x from 20 to 399,
y from 20 to 149). It moves 3 pixels per step along each axis, with one step
every 20 milliseconds. At the start it heads down, to the left or to the right.
The paddle stays 60 pixels above the bottom edge, even when you resize the
window.

### Options

```
sekentop [--width W] [--height H] [--seed N]
```

- `--width`, `--height`: size of the playing field in pixels (positive
  integers, default 800 by 600).
- `--seed`: seed for the random start position and direction, to replay the
  same start.

Run `sekentop --help` to see them listed.

## Using the game logic

The game rules do not depend on any display. They are in `sekentop.game`:

```python
import random
from sekentop.game import Game

game = Game(800, 600, random.Random(1))
game.press(game.paddle.x + 10, game.paddle.y + 5)  # grab the paddle
game.drag(200)                                       # move it
game.release()
game.tick()                                          # advance one step
```

- `Game(width, height, rng, *, ball_x=None, ball_y=None, step_x=None)` sets up
  a field; the keyword arguments fix the start position and horizontal
  direction instead of drawing them from `rng`.
- `Game.tick()` moves the ball one step, checks for bounces, scoring and the
  end of the game, and returns whether the game is still running.
- `Game.press(x, y)` grabs the paddle if the point is on it and returns whether
  it is held; `Game.drag(x)` moves a held paddle; `Game.release()` lets go.
- `Game.resize(width, height)` changes the field and keeps the paddle at its
  height above the bottom edge.
- `Game.score`, `Game.running`, `Game.ball`, `Game.paddle` and
  `Game.explosion` hold the current state.
- `Rect.intersects` and `Rect.contains` do the geometry tests that the game
  uses.

`sekentop.app.GameWindow` draws a `Game` in a Tk window, and
`sekentop.app.main` is the entry point of the `sekentop` command.

## What it does not do

The game has no restart: once the ball hits the floor, close the window and run
`sekentop` again. Scores are not saved anywhere. The ball and the explosion are
drawn as plain shapes rather than pictures.

## Running the tests

```
pip install ".[test]"
pytest
```