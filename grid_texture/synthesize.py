"""Texture synthesis pipeline.

Starting from a single mid-gray cell, each round doubles the grid with
:func:`grid_texture.subdivide.subdivide_noise` and then relaxes it with an
exchange function (by default :func:`grid_texture.exchange.perform_exchanges`).
Noise decays geometrically from ``initial_noise`` to ``final_noise``; the
exchange budget per pixel halves every round. All randomness comes from one
``random.Random(config.seed)``, so a config fully determines the output.
"""

import logging
import random
from typing import Tuple

import numpy as np

from grid_texture.config import SynthesisConfig
from grid_texture.exchange import grid_energy, perform_exchanges
from grid_texture.subdivide import subdivide_noise
from grid_texture.trace import RoundStats, SynthesisResult, SynthesisTrace, UInt8Array
from grid_texture.types import SEED_COLOR, ExchangeFn, Grid
from grid_texture.utils.grid import grid_size
from grid_texture.utils.schedule import exchange_schedule, noise_schedule

logger = logging.getLogger(__name__)

__all__ = [
    "exchange_schedule",
    "make_grid",
    "noise_schedule",
    "quantize",
    "seed_grid",
    "synthesize",
]


def seed_grid() -> Grid:
    return [[SEED_COLOR]]


def make_grid(
    config: SynthesisConfig,
    rng: random.Random,
    exchange_fn: ExchangeFn = perform_exchanges,
) -> Tuple[Grid, SynthesisTrace]:
    """Run every round and return the final float grid with its trace."""
    grid = seed_grid()
    trace = SynthesisTrace()
    noises = config.noise_schedule()
    rates = config.exchange_schedule()
    for i, (noise, exchanges_per_pixel) in enumerate(zip(noises, rates)):
        grid = subdivide_noise(grid, noise, rng)
        size = grid_size(grid)
        accepted = exchange_fn(grid, exchanges_per_pixel, config.outerp, rng)
        stats = RoundStats(
            index=i,
            size=size,
            noise=noise,
            exchanges_per_pixel=exchanges_per_pixel,
            trials=exchanges_per_pixel * size**2,
            accepted=accepted,
            energy=grid_energy(grid, config.outerp),
        )
        trace = trace.append(stats)
        logger.info(
            f"Round {i + 1}/{config.rounds}: {size}x{size}, noise={noise:.4g}, "
            f"accepted {accepted}/{stats.trials} exchanges, energy={stats.energy:.6g}"
        )
    return grid, trace


def quantize(grid: Grid) -> UInt8Array:
    """Round every channel to the nearest integer (halves up) as ``uint8``."""
    values = np.asarray(grid, dtype=np.float64)
    return np.clip(np.floor(values + 0.5), 0, 255).astype(np.uint8)


def synthesize(
    config: SynthesisConfig,
    exchange_fn: ExchangeFn = perform_exchanges,
) -> SynthesisResult:
    """Synthesize a ``config.size`` square texture.

    Arguments:
        config: Validated run parameters.
        exchange_fn: Relaxation step run after every subdivision.

    Returns:
        SynthesisResult: Quantized pixels plus the per-round trace.
    """
    logger.info(f"Synthesizing {config.size}x{config.size} texture ({config.filename()})")
    rng = random.Random(config.seed)
    grid, trace = make_grid(config, rng, exchange_fn)
    return SynthesisResult(config=config, pixels=quantize(grid), trace=trace)
