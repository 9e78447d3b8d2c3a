"""Grid geometry helpers.

Pure functions used by the subdivision and exchange stages. The grid is a
torus: the last row is adjacent to the first and the last column to the
first.
"""

from typing import List

from grid_texture.types import Channel, Grid, MAX_CHANNEL, MIN_CHANNEL, Pixel

NEIGHBOR_OFFSETS: List[Pixel] = [(-1, 0), (0, -1), (1, 0), (0, 1)]


def wrap_pixel(row: int, col: int, size: int) -> Pixel:
    """Toroidal wrap for coordinates."""
    return (row % size, col % size)


def neighbors(pixel: Pixel, size: int) -> List[Pixel]:
    """Return the 4 toroidal neighbors of ``pixel`` (up, left, down, right).

    For ``size == 1`` every neighbor is the pixel itself.
    """
    r, c = pixel
    return [wrap_pixel(r + dr, c + dc, size) for dr, dc in NEIGHBOR_OFFSETS]


def grid_size(grid: Grid) -> int:
    """Side length of a square grid."""
    return len(grid)


def is_square(grid: Grid) -> bool:
    return len(grid) > 0 and all(len(row) == len(grid) for row in grid)


def clamp_channel(value: Channel) -> Channel:
    return min(max(value, MIN_CHANNEL), MAX_CHANNEL)
