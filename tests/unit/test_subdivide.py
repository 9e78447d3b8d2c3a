# tests/unit/test_subdivide.py

import random

import pytest

from grid_texture.subdivide import subdivide_noise
from grid_texture.types import Grid
from grid_texture.utils.grid import is_square
from tests.test_utils import (
    BLACK,
    WHITE,
    CountingRandom,
    assert_channels_in_range,
    copy_grid,
    make_random_grid,
)


@pytest.mark.parametrize("size", [1, 2, 4, 8])
def test_subdivide_doubles_size(size: int) -> None:
    grid = make_random_grid(size)
    result = subdivide_noise(grid, 10.0, random.Random(0))
    assert len(result) == size * 2
    assert is_square(result)


def test_subdivide_without_noise_replicates_blocks() -> None:
    grid = make_random_grid(4, seed=3)
    result = subdivide_noise(grid, 0.0, random.Random(0))
    for r in range(4):
        for c in range(4):
            for dr in (0, 1):
                for dc in (0, 1):
                    assert result[2 * r + dr][2 * c + dc] == pytest.approx(grid[r][c])


def test_subdivide_clamps_channels() -> None:
    grid = make_random_grid(4, seed=1)
    result = subdivide_noise(grid, 1000.0, random.Random(7))
    assert_channels_in_range(result)
    channels = [ch for row in result for color in row for ch in color]
    assert 0.0 in channels
    assert 255.0 in channels


def test_subdivide_keeps_noise_local() -> None:
    grid: Grid = [[BLACK, WHITE], [WHITE, BLACK]]
    result = subdivide_noise(grid, 5.0, random.Random(2))
    # Block of a black source stays dark, block of a white source stays bright
    for dr in (0, 1):
        for dc in (0, 1):
            assert max(result[dr][dc]) < 60.0
            assert min(result[dr][2 + dc]) > 195.0


def test_subdivide_does_not_mutate_input() -> None:
    grid = make_random_grid(2)
    before = copy_grid(grid)
    subdivide_noise(grid, 50.0, random.Random(0))
    assert grid == before


def test_subdivide_is_deterministic() -> None:
    grid = make_random_grid(4)
    first = subdivide_noise(grid, 30.0, random.Random(11))
    second = subdivide_noise(grid, 30.0, random.Random(11))
    assert first == second


def test_subdivide_draws_twelve_values_per_source_cell() -> None:
    rng = CountingRandom(5)
    subdivide_noise(make_random_grid(4), 20.0, rng)
    assert rng.gauss_calls == 4 * 4 * 12


def test_subdivide_consumes_shared_stream() -> None:
    rng = random.Random(9)
    reference = random.Random(9)
    subdivide_noise(make_random_grid(2), 20.0, rng)
    for _ in range(2 * 2 * 12):
        reference.gauss(0.0, 1.0)
    assert rng.random() == reference.random()


@pytest.mark.parametrize(
    "grid",
    [
        [[BLACK, WHITE]],
        [[BLACK], [WHITE]],
        [[BLACK, WHITE], [WHITE]],
    ],
)
def test_subdivide_rejects_non_square_grid(grid: Grid) -> None:
    with pytest.raises(AssertionError, match="square"):
        subdivide_noise(grid, 1.0, random.Random(0))
