"""Debug overlay: draw every region's border onto the bound buffer."""

import numpy as np
from typing import Optional, TYPE_CHECKING

from models.region import Region

if TYPE_CHECKING:
    from engines.quadtree import QuadTree


def outline(tree: 'QuadTree', region: Optional[Region] = None) -> np.ndarray:
    """Paint region borders in the outline color, in place. Returns the buffer."""
    _outline_rec(tree.buffer, region or tree.root, tree.params.outline_color)
    return tree.buffer


def _outline_rec(buffer: np.ndarray, region: Region, color) -> None:
    top, left = region.y, region.x
    bottom = top + region.height - 1
    right = left + region.width - 1

    buffer[top, left:right + 1] = color
    buffer[bottom, left:right + 1] = color
    buffer[top:bottom + 1, left] = color
    buffer[top:bottom + 1, right] = color

    for child in region.children:
        _outline_rec(buffer, child, color)
