"""Laplacian edge detection restricted to fine quadtree regions."""

import numpy as np
from scipy.ndimage import correlate
from typing import TYPE_CHECKING

from models.region import Region
from utils.constants import BLACK, WHITE

if TYPE_CHECKING:
    from engines.quadtree import QuadTree


def intensity(buffer: np.ndarray) -> np.ndarray:
    """Per-pixel R+G+B as int32."""
    return buffer.astype(np.int32).sum(axis=2)


def kernel_matrix(kernel) -> np.ndarray:
    """3x3 weights indexed [drow+1, dcol+1] from a 9-weight kernel.

    Weight k applies to the neighbor at row offset k % 3 - 1 and column
    offset k // 3 - 1.
    """
    return np.asarray(kernel, dtype=np.int32).reshape(3, 3).T


def edge_mask(buffer: np.ndarray, kernel, magnitude_threshold: int) -> np.ndarray:
    """Boolean map of pixels whose kernel response exceeds the threshold.

    Pixels on the buffer border have no full 3x3 neighborhood and are never
    edges.
    """
    response = correlate(intensity(buffer), kernel_matrix(kernel), mode='constant', cval=0)
    mask = np.abs(response) > magnitude_threshold
    mask[0, :] = False
    mask[-1, :] = False
    mask[:, 0] = False
    mask[:, -1] = False
    return mask


def detect_edges(tree: 'QuadTree') -> np.ndarray:
    """Replace the bound buffer with a black/white edge map and return it.

    Only internal regions are drawn: coarse ones are blanked black, fine ones
    (height within fine_region_max_height) get per-pixel analysis. Leaves are
    never visited, so run a full decomposition first for complete coverage.
    """
    params = tree.params
    mask = edge_mask(tree.buffer, params.edge_kernel, params.edge_magnitude_threshold)
    out = np.zeros_like(tree.buffer)
    _detect_edges_rec(tree.root, params.fine_region_max_height, mask, out)
    tree.buffer[...] = out
    return tree.buffer


def _detect_edges_rec(region: Region, max_height: int, mask: np.ndarray, out: np.ndarray) -> None:
    if region.is_leaf:
        return

    if region.height <= max_height:
        rows, cols = region.bounds
        out[rows, cols] = np.where(mask[rows, cols, None], WHITE, BLACK)
        # Descendants would rewrite the same pixels with the same values
        return

    out[region.bounds] = BLACK
    for child in region.children:
        _detect_edges_rec(child, max_height, mask, out)
