import random

import pytest

from sekentop.game import Game, Rect


def make(**kwargs):
    params = dict(width=800, height=600, ball_x=200, ball_y=100, step_x=3)
    params.update(kwargs)
    return Game(**params)


def test_rect_contains_edges():
    r = Rect(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert r.contains(9, 9)
    assert not r.contains(10, 0)
    assert not r.contains(0, 10)
    assert not r.contains(-1, 5)


def test_rect_intersects_overlap_and_touch():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert Rect(5, 5, 10, 10).intersects(a)
    assert not a.intersects(Rect(10, 0, 10, 10))
    assert not a.intersects(Rect(0, 10, 10, 10))
    assert not a.intersects(Rect(2, 2, 0, 5))


def test_initial_paddle_centered_and_above_bottom():
    game = make()
    assert game.paddle.x * 2 + game.paddle.width == game.width
    assert game.height - game.paddle.y == 60
    assert (game.paddle.width, game.paddle.height) == (100, 40)
    assert game.score == 0


@pytest.mark.parametrize("seed", range(20))
def test_random_start_within_bounds(seed):
    game = Game(rng=random.Random(seed))
    assert 20 <= game.ball_x < 400
    assert 20 <= game.ball_y < 150
    assert game.step_x in (3, -3)
    assert game.step_y == 3
    assert game.ball == Rect(game.ball_x, game.ball_y, 50, 50)


def test_tick_moves_ball_by_step():
    game = make()
    x, y = game.ball_x, game.ball_y
    assert game.tick()
    assert (game.ball_x, game.ball_y) == (x + 3, y + 3)
    assert game.ball.x == game.ball_x and game.ball.y == game.ball_y


def test_right_wall_bounce():
    game = make(ball_x=800 - 50 - 3)
    game.tick()
    assert game.step_x == -3


def test_left_wall_bounce():
    game = make(ball_x=3, step_x=-3)
    game.tick()
    assert game.step_x == 3


def test_ceiling_bounce():
    game = make()
    game.step_y = -3
    game.ball_y = 3
    game.tick()
    assert game.step_y == 3


def test_paddle_hit_scores_and_bounces():
    game = make()
    game.ball_x = game.paddle.x
    game.ball_y = game.paddle.y - 50
    game.ball = Rect(game.ball_x, game.ball_y, 50, 50)
    game.step_x = 0
    for _ in range(5):
        game.tick()
        if game.score:
            break
    assert game.score == 1
    assert game.step_y == -3
    assert game.running


def test_game_over_shows_explosion_and_stops():
    game = make(ball_x=600, ball_y=600 - 50 - 2)
    assert not game.tick()
    assert not game.running
    assert not game.ball_visible
    assert game.explosion is not None
    assert game.explosion.x == game.ball_x - 15
    assert game.explosion.bottom == game.height
    frozen = (game.ball_x, game.ball_y)
    assert not game.tick()
    assert (game.ball_x, game.ball_y) == frozen


def test_press_outside_paddle_does_not_grab():
    game = make()
    assert not game.press(0, 0)
    game.drag(10)
    assert game.paddle.x * 2 + game.paddle.width == game.width


def test_drag_keeps_grab_offset():
    game = make()
    start = game.paddle.x
    assert game.press(start + 10, game.paddle.y + 5)
    game.drag(start + 40)
    assert game.paddle.x == start + 30
    assert game.paddle.y == game.height - 60


def test_drag_clamps_to_window():
    game = make()
    game.press(game.paddle.x + 10, game.paddle.y + 5)
    game.drag(-500)
    assert game.paddle.x == 0
    game.drag(5000)
    assert game.paddle.right == game.width


def test_release_stops_drag():
    game = make()
    start = game.paddle.x
    game.press(start + 10, game.paddle.y + 5)
    game.release()
    assert not game.holding
    game.drag(start + 100)
    assert game.paddle.x == start


def test_drag_ignored_after_game_over():
    game = make(ball_x=600, ball_y=600 - 50 - 2)
    start = game.paddle.x
    game.press(start + 10, game.paddle.y + 5)
    game.tick()
    game.drag(start + 100)
    assert game.paddle.x == start


def test_resize_keeps_paddle_x_and_bottom_distance():
    game = make()
    x = game.paddle.x
    game.resize(1000, 700)
    assert game.paddle.x == x
    assert game.height - game.paddle.y == 60
    assert (game.width, game.height) == (1000, 700)