"""Window and command line for the bouncing ball game."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from sekentop.game import DEFAULT_HEIGHT, DEFAULT_WIDTH, TICK_MS, Game, Rect


def _positive(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="sekentop", description="Keep the ball in the air with the paddle."
    )
    parser.add_argument("--width", type=_positive, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive, default=DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


class GameWindow:
    """A Tk window that draws a Game and feeds it mouse events."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 seed: int | None = None) -> None:
        import tkinter as tk

        self.game = Game(width, height, random.Random(seed))
        self.root = tk.Tk()
        self.root.title("SekenTop")
        self.canvas = tk.Canvas(self.root, width=width, height=height,
                                highlightthickness=0, background="white")
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self._ball = self.canvas.create_oval(0, 0, 0, 0, fill="orange red", outline="")
        self._paddle = self.canvas.create_rectangle(0, 0, 0, 0, fill="light gray")
        self._score = self.canvas.create_text(0, 0, text="0")
        self._explosion = self.canvas.create_oval(
            0, 0, 0, 0, fill="gold", outline="red", width=4, state="hidden"
        )

        self.canvas.bind("<ButtonPress-1>", lambda e: self.game.press(e.x, e.y))
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<ButtonRelease-1>", lambda e: self.game.release())
        self.canvas.bind("<Configure>", self._on_configure)
        self._draw()

    @staticmethod
    def _box(rect: Rect) -> tuple[int, int, int, int]:
        return rect.x, rect.y, rect.right, rect.bottom

    def _on_motion(self, event) -> None:
        self.game.drag(event.x)
        self._draw()

    def _on_configure(self, event) -> None:
        self.game.resize(event.width, event.height)
        self._draw()

    def _draw(self) -> None:
        game = self.game
        self.canvas.coords(self._ball, *self._box(game.ball))
        self.canvas.itemconfigure(
            self._ball, state="normal" if game.ball_visible else "hidden"
        )
        self.canvas.coords(self._paddle, *self._box(game.paddle))
        self.canvas.coords(
            self._score,
            game.paddle.x + game.paddle.width / 2,
            game.paddle.y + game.paddle.height / 2,
        )
        self.canvas.itemconfigure(self._score, text=str(game.score))
        if game.explosion is not None:
            self.canvas.coords(self._explosion, *self._box(game.explosion))
            self.canvas.itemconfigure(self._explosion, state="normal")

    def _step(self) -> None:
        running = self.game.tick()
        self._draw()
        if running:
            self.root.after(TICK_MS, self._step)

    def run(self) -> None:
        """Start the game loop and block until the window is closed."""
        self.root.after(TICK_MS, self._step)
        self.root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window."""
    args = parse_args(argv)
    GameWindow(args.width, args.height, args.seed).run()
    return 0