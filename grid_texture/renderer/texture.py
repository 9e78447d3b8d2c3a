"""Pillow conversion and PNG output for synthesized textures."""

import io
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from grid_texture.trace import SynthesisResult, UInt8Array

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def to_image(pixels: UInt8Array) -> Image.Image:
    """Wrap an ``(H, W, 3)`` uint8 array as an RGB image (rows become y)."""
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) array, got shape {pixels.shape}")
    return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))


def render(result: SynthesisResult) -> Image.Image:
    return to_image(result.pixels)


def save_texture(result: SynthesisResult, directory: PathLike = ".") -> Path:
    """Write ``result`` as a PNG named after its config.

    Returns:
        Path: The written file.

    Raises:
        OSError: Propagated from Pillow when the file cannot be written.
    """
    path = Path(directory) / result.config.filename()
    render(result).save(path, format="PNG")
    logger.info(f"Saved {result.size}x{result.size} texture to {path}")
    return path


def to_png_bytes(result: SynthesisResult) -> bytes:
    buffer = io.BytesIO()
    render(result).save(buffer, format="PNG")
    return buffer.getvalue()
