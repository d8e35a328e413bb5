"""Game state for a single-paddle bouncing ball game."""

from __future__ import annotations

import random
from dataclasses import dataclass

BALL_SIZE = 50
BALL_SPEED = 3
PADDLE_WIDTH = 100
PADDLE_HEIGHT = 40
PADDLE_OFFSET = 60
EXPLOSION_SIZE = 80
EXPLOSION_SHIFT = -15
TICK_MS = 20

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; ``x + width`` and ``y + height`` lie outside it."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles share a non-empty area."""
        if self.width <= 0 or self.height <= 0 or other.width <= 0 or other.height <= 0:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def contains(self, x: int, y: int) -> bool:
        """Return True if the point lies inside the rectangle."""
        return self.x <= x < self.right and self.y <= y < self.bottom


class Game:
    """The ball, the paddle, the score and the rules that move them."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
        *,
        ball_x: int | None = None,
        ball_y: int | None = None,
        step_x: int | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.paddle = Rect(
            (width - PADDLE_WIDTH) // 2,
            height - PADDLE_OFFSET,
            PADDLE_WIDTH,
            PADDLE_HEIGHT,
        )
        self.score = 0
        self.holding = False
        self.grab_offset = 0
        self.running = True
        self.ball_visible = True
        self.explosion: Rect | None = None

        self.ball_x = ball_x if ball_x is not None else rng.randrange(20, 400)
        self.ball_y = ball_y if ball_y is not None else rng.randrange(20, 150)
        if step_x is None:
            step_x = BALL_SPEED if rng.randrange(0, 2) == 0 else -BALL_SPEED
        self.step_x = step_x
        self.step_y = BALL_SPEED
        self.ball = Rect(self.ball_x, self.ball_y, BALL_SIZE, BALL_SIZE)

    def tick(self) -> bool:
        """Advance one frame; return whether the game is still running."""
        if not self.running:
            return False

        self.ball_x += self.step_x
        self.ball_y += self.step_y

        if self.ball_x + BALL_SIZE >= self.width:
            self.step_x = -BALL_SPEED
        if self.ball_x <= 0:
            self.step_x = BALL_SPEED
        if self.ball_y <= 0:
            self.step_y = BALL_SPEED

        # The collision test uses the ball as it was last drawn.
        if self.ball.intersects(self.paddle) and self.step_y > 0:
            if self.ball_y + BALL_SIZE >= self.paddle.y:
                self.step_y = -BALL_SPEED
                self.score += 1

        if self.ball_y + BALL_SIZE >= self.height:
            self.running = False
            self.ball_visible = False
            self.explosion = Rect(
                self.ball_x + EXPLOSION_SHIFT,
                self.height - EXPLOSION_SIZE,
                EXPLOSION_SIZE,
                EXPLOSION_SIZE,
            )
        else:
            self.ball = Rect(self.ball_x, self.ball_y, BALL_SIZE, BALL_SIZE)
        return self.running

    def press(self, x: int, y: int) -> bool:
        """Grab the paddle if the point is on it; return whether it is held."""
        if self.paddle.contains(x, y):
            self.holding = True
            self.grab_offset = x - self.paddle.x
        return self.holding

    def drag(self, x: int) -> None:
        """Move a held paddle so the grab point follows the pointer."""
        if not (self.holding and self.running):
            return
        new_x = x - self.grab_offset
        if new_x < 0:
            new_x = 0
        if new_x > self.width - self.paddle.width:
            new_x = self.width - self.paddle.width
        self.paddle = Rect(
            new_x, self.height - PADDLE_OFFSET, self.paddle.width, self.paddle.height
        )

    def release(self) -> None:
        """Let go of the paddle."""
        self.holding = False

    def resize(self, width: int, height: int) -> None:
        """Change the playing field, keeping the paddle at its distance from the bottom."""
        self.width = width
        self.height = height
        self.paddle = Rect(
            self.paddle.x, height - PADDLE_OFFSET, self.paddle.width, self.paddle.height
        )