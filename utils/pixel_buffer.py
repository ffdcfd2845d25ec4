"""Pixel buffer validation and power-of-two square padding."""

import numpy as np

from utils.constants import WHITE


def as_pixel_buffer(data) -> np.ndarray:
    """Validate an (H, W, 3) RGB grid and return it as uint8."""
    try:
        buffer = np.asarray(data)
    except ValueError as e:
        raise ValueError("Pixel rows have inconsistent lengths") from e
    if buffer.dtype == object:
        raise ValueError("Pixel rows have inconsistent lengths")
    if buffer.ndim != 3 or buffer.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) RGB buffer, got shape {buffer.shape}")
    h, w = buffer.shape[:2]
    if h == 0 or w == 0:
        raise ValueError(f"Buffer must be non-empty, got {w}x{h}")
    if buffer.dtype == np.uint8:
        return buffer
    if not np.issubdtype(buffer.dtype, np.integer):
        raise ValueError(f"Expected integer channel values, got {buffer.dtype}")
    if buffer.min() < 0 or buffer.max() > 255:
        raise ValueError("Channel values must be in 0-255")
    return buffer.astype(np.uint8)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n."""
    if n < 1:
        raise ValueError(f"Expected a positive size, got {n}")
    return 1 << (n - 1).bit_length()


def is_power_of_two_square(buffer: np.ndarray) -> bool:
    h, w = buffer.shape[:2]
    return h == w and is_power_of_two(h)


def pad_to_power_of_two_square(buffer: np.ndarray) -> np.ndarray:
    """Pad bottom/right with white to a square of power-of-two side."""
    buffer = as_pixel_buffer(buffer)
    if is_power_of_two_square(buffer):
        return buffer
    h, w = buffer.shape[:2]
    side = next_power_of_two(max(h, w))
    padded = np.empty((side, side, 3), dtype=np.uint8)
    padded[:, :] = WHITE
    padded[:h, :w] = buffer
    return padded


def as_bound_buffer(data) -> np.ndarray:
    """Validate a buffer a tree will reference and write into.

    Only uint8 arrays qualify: converting anything else would bind a copy
    the caller never sees.
    """
    buffer = as_pixel_buffer(data)
    if buffer is not data:
        raise ValueError(
            f"Bound buffers must be uint8 numpy arrays, got {getattr(data, 'dtype', type(data).__name__)}"
        )
    return buffer
