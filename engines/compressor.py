"""Mean-color compression over quadtree leaves."""

import numpy as np
from typing import TYPE_CHECKING

from models.region import Region

if TYPE_CHECKING:
    from engines.quadtree import QuadTree


def compress(tree: 'QuadTree') -> np.ndarray:
    """Return a new buffer with every leaf filled by its mean source color."""
    result = np.zeros_like(tree.buffer)
    _fill_with_mean_color(tree, tree.root, result)
    return result


def _fill_with_mean_color(tree: 'QuadTree', region: Region, out: np.ndarray) -> None:
    if region.is_leaf:
        out[region.bounds] = tree.mean_color(region)
        return
    for child in region.children:
        _fill_with_mean_color(tree, child, out)
