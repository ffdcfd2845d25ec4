"""Breadth-first variance-driven subdivision."""

import logging
from collections import deque
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from engines.quadtree import QuadTree

logger = logging.getLogger(__name__)


def decompose(tree: 'QuadTree', target_level: Optional[float] = None) -> int:
    """Split regions whose mean squared error exceeds the detail threshold.

    Regions are visited in FIFO order starting at the root, children queued
    NW, NE, SW, SE. With a target level the loop stops as soon as the tree's
    current compression level reaches it, counting children that were just
    split but not yet visited. Without one it runs until every leaf is 1x1 or
    below the threshold.

    Regions split by an earlier call are walked through, not re-split, so
    repeated calls with increasing targets extend the same tree exactly as a
    single call with the final target would.

    Returns the number of splits made by this call.
    """
    threshold = tree.params.detail_threshold
    queue = deque([tree.root])
    splits = 0

    while queue and (target_level is None or tree.compression_level() < target_level):
        region = queue.popleft()

        if not region.is_leaf:
            queue.extend(region.children)
            continue

        if region.is_unit:
            continue

        if tree.mean_squared_error(region) > threshold:
            queue.extend(region.split())
            tree.node_count += 4
            splits += 1

    logger.debug(
        "Decomposed %dx%d tree: %d splits, %d leaves, level %.4f (target %s)",
        tree.width, tree.height, splits, tree.leaf_count,
        tree.compression_level(), target_level,
    )
    return splits
