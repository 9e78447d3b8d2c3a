"""Common type aliases.

A ``Grid`` is a square list of rows; each cell holds a float ``Color``.
Cells are addressed by ``Pixel`` tuples in ``(row, col)`` order.
"""

import random
from typing import Callable, List, Tuple


Channel = float
Color = Tuple[Channel, Channel, Channel]
Grid = List[List[Color]]
Pixel = Tuple[int, int]

ExchangeFn = Callable[[Grid, int, float, random.Random], int]

MIN_CHANNEL: Channel = 0.0
MAX_CHANNEL: Channel = 255.0
SEED_COLOR: Color = (128.0, 128.0, 128.0)
