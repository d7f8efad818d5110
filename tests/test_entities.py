import random

import pytest

from flappy_bird.config import BIRD_HEIGHT, GRAVITY, LIFT, PIPE_GAP, PIPE_WIDTH, WINDOW_HEIGHT
from flappy_bird.entities import Bird, Pipe


def test_bird_starts_centered_and_still() -> None:
    bird = Bird(surface_height=600)
    assert bird.y == 300
    assert bird.velocity == 0.0


def test_integrate_one_tick_from_rest() -> None:
    bird = Bird(surface_height=600)
    bird.y = 100
    bird.velocity = 0.0
    bird.integrate()
    assert bird.velocity == pytest.approx(0.6)
    assert bird.y == pytest.approx(100.6)


def test_integrate_clamps_to_floor() -> None:
    bird = Bird(surface_height=600)
    bird.y = 575
    bird.velocity = 5.0
    bird.integrate()
    assert bird.y == 600 - BIRD_HEIGHT
    assert bird.velocity == 0.0


def test_integrate_clamps_to_ceiling() -> None:
    bird = Bird(surface_height=600)
    bird.y = 2
    bird.velocity = LIFT
    bird.integrate()
    assert bird.y == 0.0
    assert bird.velocity == 0.0


def test_impulse_is_absolute() -> None:
    bird = Bird()
    bird.velocity = 3.0
    bird.apply_impulse()
    assert bird.velocity == LIFT
    bird.apply_impulse()
    assert bird.velocity == LIFT


def test_bird_stays_in_bounds_under_random_flaps() -> None:
    """y stays within [0, height - bird.height] after every integrate."""
    rng = random.Random(7)
    bird = Bird(surface_height=WINDOW_HEIGHT)
    for _ in range(2000):
        if rng.random() < 0.1:
            bird.apply_impulse()
        bird.integrate()
        assert 0 <= bird.y <= WINDOW_HEIGHT - bird.height


def test_reset_in_place() -> None:
    bird = Bird(surface_height=600)
    bird.y = 12
    bird.velocity = GRAVITY * 10
    bird.reset()
    assert bird.y == 300
    assert bird.velocity == 0.0
    bird.reset(400)
    assert bird.y == 200
    assert bird.surface_height == 400


def test_pipe_geometry_and_offscreen() -> None:
    pipe = Pipe(100, 60)
    assert pipe.right == 100 + PIPE_WIDTH
    assert pipe.gap_bottom == 60 + PIPE_GAP
    assert pipe.passed is False
    pipe.update(2)
    assert pipe.x == 98
    pipe.x = -PIPE_WIDTH + 0.5
    assert pipe.offscreen() is False
    pipe.x = -PIPE_WIDTH
    assert pipe.offscreen() is True
