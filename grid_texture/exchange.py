"""Pixel exchange relaxation.

The optimizer repeatedly picks two random pixels and swaps their colors when
doing so strictly lowers the local energy of the pair. Colors are only moved,
never blended, so the multiset of colors in the grid is preserved exactly.

Local energy of a color placed at a pixel is the sum, over the pixel's four
toroidal neighbors, of ``squared_distance(color, neighbor) ** outerp``. With
``outerp < 1`` many moderate mismatches cost more than one large mismatch.

Contract:

* Acceptance is greedy (zero temperature): equal or worse swaps are rejected.
* Neighbor colors are read from the grid before the swap, including when the
  two pixels are adjacent to each other.
* ``rng`` is consumed as ``p1.row, p1.col, p2.row, p2.col`` per trial.
"""

import logging
import random
from typing import List, Tuple

from grid_texture.types import Color, Grid, Pixel
from grid_texture.utils.grid import grid_size, neighbors

logger = logging.getLogger(__name__)


def squared_distance(a: Color, b: Color) -> float:
    return sum((x - y) ** 2 for x, y in zip(a, b))


def score(grid: Grid, color: Color, group: List[Pixel], outerp: float) -> float:
    """Energy of ``color`` against the grid colors at ``group``."""
    return sum(
        squared_distance(color, grid[r][c]) ** outerp for r, c in group
    )


def local_energy(grid: Grid, pixel: Pixel, outerp: float) -> float:
    """Energy of the color currently at ``pixel`` against its own neighbors."""
    r, c = pixel
    return score(grid, grid[r][c], neighbors(pixel, grid_size(grid)), outerp)


def grid_energy(grid: Grid, outerp: float) -> float:
    """Sum of every pixel's local energy."""
    size = grid_size(grid)
    return sum(local_energy(grid, (r, c), outerp) for r in range(size) for c in range(size))


def exchange_scores(
    grid: Grid, p1: Pixel, p2: Pixel, outerp: float
) -> Tuple[float, float]:
    """Return ``(self_score, swap_score)`` for exchanging ``p1`` and ``p2``."""
    size = grid_size(grid)
    neighbors1 = neighbors(p1, size)
    neighbors2 = neighbors(p2, size)
    color1 = grid[p1[0]][p1[1]]
    color2 = grid[p2[0]][p2[1]]
    self_score = score(grid, color1, neighbors1, outerp) + score(
        grid, color2, neighbors2, outerp
    )
    swap_score = score(grid, color1, neighbors2, outerp) + score(
        grid, color2, neighbors1, outerp
    )
    return self_score, swap_score


def swap(grid: Grid, p1: Pixel, p2: Pixel) -> None:
    (r1, c1), (r2, c2) = p1, p2
    grid[r1][c1], grid[r2][c2] = grid[r2][c2], grid[r1][c1]


def try_exchange(grid: Grid, p1: Pixel, p2: Pixel, outerp: float) -> bool:
    """Run a single trial in place. Returns True if the swap was accepted."""
    self_score, swap_score = exchange_scores(grid, p1, p2, outerp)
    if swap_score < self_score:
        swap(grid, p1, p2)
        return True
    return False


def random_pixel(size: int, rng: random.Random) -> Pixel:
    return (rng.randrange(size), rng.randrange(size))


def perform_exchanges(
    grid: Grid,
    exchanges_per_pixel: int,
    outerp: float,
    rng: random.Random,
) -> int:
    """Run ``exchanges_per_pixel * size**2`` exchange trials on ``grid`` in place.

    Arguments:
        grid: Square grid, mutated in place.
        exchanges_per_pixel: Trials per pixel; 0 leaves the grid and ``rng``
            untouched.
        outerp: Energy exponent applied to each squared neighbor distance.
        rng: Generator shared with the rest of the pipeline.

    Returns:
        int: Number of accepted swaps.
    """
    size = grid_size(grid)
    num_exchanges = size**2 * exchanges_per_pixel
    accepted = 0
    for _ in range(num_exchanges):
        p1 = random_pixel(size, rng)
        p2 = random_pixel(size, rng)
        if try_exchange(grid, p1, p2, outerp):
            accepted += 1
    logger.debug(f"{accepted}/{num_exchanges} exchanges accepted on {size}x{size} grid")
    return accepted
