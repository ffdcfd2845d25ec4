"""Per-pixel color filters. Each returns a new buffer."""

import numpy as np
from typing import Optional, Tuple


def negative(buffer: np.ndarray) -> np.ndarray:
    return 255 - buffer


def grayscale(buffer: np.ndarray) -> np.ndarray:
    """Weighted luma (0.3, 0.59, 0.11), truncated, copied to all channels."""
    rgb = buffer.astype(np.float64)
    gray = (rgb[:, :, 0] * 0.3 + rgb[:, :, 1] * 0.59 + rgb[:, :, 2] * 0.11).astype(np.uint8)
    return np.repeat(gray[:, :, None], 3, axis=2)


def tint(buffer: np.ndarray, color: Tuple[int, int, int]) -> np.ndarray:
    """Scale each channel by color / 255 with integer division."""
    tint_rgb = np.asarray(color, dtype=np.int32)
    if tint_rgb.shape != (3,) or tint_rgb.min() < 0 or tint_rgb.max() > 255:
        raise ValueError(f"Tint must be an RGB triple in 0-255, got {color}")
    return (buffer.astype(np.int32) * tint_rgb // 255).astype(np.uint8)


def random_neighbor(buffer: np.ndarray, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Give each interior pixel the color of a random cell of its 3x3 neighborhood.

    Cells are numbered 0-8 column by column starting at the top-left; the draw
    covers 0-7, so the center can be picked and the bottom-right cell never
    is. Border pixels keep their color.
    """
    rng = rng or np.random.default_rng()
    result = buffer.copy()
    h, w = buffer.shape[:2]
    if h < 3 or w < 3:
        return result

    picks = rng.integers(0, 8, size=(h - 2, w - 2))
    rows, cols = np.mgrid[1:h - 1, 1:w - 1]
    result[1:h - 1, 1:w - 1] = buffer[rows + picks % 3 - 1, cols + picks // 3 - 1]
    return result
