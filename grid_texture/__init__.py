"""Procedural texture synthesis by noisy subdivision and pixel exchange.

A texture starts as one mid-gray cell. Each round doubles the resolution,
perturbing every new cell with Gaussian noise, then rearranges pixels by
greedy pairwise swaps that reduce color differences between toroidal
neighbors. Swapping never blends colors, so gradients stay crisp. The result
tiles seamlessly because neighbors wrap around the edges.

Typical use::

    from grid_texture import SynthesisConfig, synthesize, save_texture

    config = SynthesisConfig(
        initial_noise=255, final_noise=4, rounds=6, outerp=0.1,
        exchange_rate=10, seed=0,
    )
    save_texture(synthesize(config), "out")
"""

from grid_texture.config import SynthesisConfig
from grid_texture.renderer.texture import render, save_texture, to_png_bytes
from grid_texture.synthesize import synthesize
from grid_texture.trace import RoundStats, SynthesisResult, SynthesisTrace

__all__ = [
    "RoundStats",
    "SynthesisConfig",
    "SynthesisResult",
    "SynthesisTrace",
    "render",
    "save_texture",
    "synthesize",
    "to_png_bytes",
]
