"""Resolution doubling with Gaussian channel noise.

Each source cell becomes a 2x2 block in the new grid. Every destination cell
is perturbed independently: one ``rng.gauss(0, noise)`` draw per channel,
added to the source channel and clamped to ``[0, 255]``. Sources are visited
row-major and each block is filled in the order top-left, top-right,
bottom-left, bottom-right, so a given ``rng`` state always yields the same
grid.
"""

import logging
import random
from typing import List

from grid_texture.types import Color, Grid, Pixel
from grid_texture.utils.grid import clamp_channel, grid_size, is_square

logger = logging.getLogger(__name__)

BLOCK_OFFSETS: List[Pixel] = [(0, 0), (0, 1), (1, 0), (1, 1)]


def perturb_color(color: Color, noise: float, rng: random.Random) -> Color:
    r, g, b = (clamp_channel(channel + rng.gauss(0.0, noise)) for channel in color)
    return (r, g, b)


def subdivide_noise(grid: Grid, noise: float, rng: random.Random) -> Grid:
    """Return a new grid twice the size of ``grid``.

    Arguments:
        grid: Square source grid. It is not modified.
        noise: Standard deviation of the per-channel Gaussian perturbation.
        rng: Generator shared with the rest of the pipeline; consumes 12
            draws per source cell.

    Raises:
        AssertionError: If ``grid`` is not square.
    """
    assert is_square(grid), (
        f"subdivide_noise requires a square grid, got {len(grid)} rows "
        f"with lengths {sorted({len(row) for row in grid})}"
    )
    size = grid_size(grid)
    new_size = size * 2
    new_grid: Grid = [[(0.0, 0.0, 0.0)] * new_size for _ in range(new_size)]
    for r, row in enumerate(grid):
        for c, color in enumerate(row):
            for dr, dc in BLOCK_OFFSETS:
                new_grid[r * 2 + dr][c * 2 + dc] = perturb_color(color, noise, rng)
    logger.debug(f"Subdivided {size}x{size} -> {new_size}x{new_size} (noise={noise:.4g})")
    return new_grid
