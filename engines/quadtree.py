"""Quadtree over a pixel buffer: structure, region statistics, traversals."""

from typing import Iterator, Optional, Tuple

import numpy as np

from models.quadtree_params import QuadTreeParams
from models.region import Region
from models.tree_stats import TreeStats
from engines.decomposer import decompose
from engines.compressor import compress
from engines.edge_detector import detect_edges
from engines.outliner import outline
from utils.pixel_buffer import as_bound_buffer, is_power_of_two_square


class QuadTree:
    """Variance-driven spatial partition of an RGB buffer.

    The tree holds a reference to its bound buffer, never a copy. Subdivision
    only ever adds leaves, so the same tree can be divided further and
    recompressed at successively finer levels.
    """

    def __init__(self, buffer: np.ndarray, params: Optional[QuadTreeParams] = None):
        buffer = as_bound_buffer(buffer)
        if not is_power_of_two_square(buffer):
            h, w = buffer.shape[:2]
            raise ValueError(
                f"Quadtree needs a square power-of-two buffer, got {w}x{h}; pad it first"
            )
        self.params = params or QuadTreeParams()
        self._buffer = buffer
        self.height, self.width = buffer.shape[:2]
        self.root = Region(0, 0, self.height, self.width)
        self.node_count = 1

    # --- buffer binding ---

    @property
    def buffer(self) -> np.ndarray:
        return self._buffer

    def rebind(self, buffer: np.ndarray) -> None:
        """Point traversals at another buffer of the same shape."""
        buffer = as_bound_buffer(buffer)
        if buffer.shape[:2] != (self.height, self.width):
            h, w = buffer.shape[:2]
            raise ValueError(
                f"Cannot rebind a {self.width}x{self.height} tree to a {w}x{h} buffer"
            )
        self._buffer = buffer

    # --- structure ---

    @property
    def pixel_count(self) -> int:
        return self.height * self.width

    @property
    def leaf_count(self) -> int:
        # Every split turns one leaf into four
        return 1 + 3 * ((self.node_count - 1) // 4)

    def count_leaves(self, region: Optional[Region] = None) -> int:
        """Recursive leaf count below region (the root by default)."""
        region = region or self.root
        if region.is_leaf:
            return 1
        return sum(self.count_leaves(child) for child in region.children)

    def compression_level(self) -> float:
        """Leaves per pixel; lower means coarser."""
        return self.leaf_count / self.pixel_count

    def depth(self, region: Optional[Region] = None) -> int:
        region = region or self.root
        if region.is_leaf:
            return 0
        return 1 + max(self.depth(child) for child in region.children)

    def iter_regions(self) -> Iterator[Region]:
        """Pre-order walk, children visited NW, NE, SW, SE."""
        stack = [self.root]
        while stack:
            region = stack.pop()
            yield region
            stack.extend(reversed(region.children))

    def iter_leaves(self) -> Iterator[Region]:
        return (region for region in self.iter_regions() if region.is_leaf)

    def stats(self) -> TreeStats:
        return TreeStats(
            node_count=self.node_count,
            leaf_count=self.leaf_count,
            depth=self.depth(),
            pixel_count=self.pixel_count,
            compression_level=self.compression_level(),
        )

    # --- region statistics ---

    def mean_color(self, region: Region) -> Tuple[int, int, int]:
        """Per-channel mean over the region, truncated by default."""
        pixels = self._buffer[region.bounds].reshape(-1, 3)
        totals = pixels.sum(axis=0, dtype=np.int64)
        if self.params.mean_rounding == 'round':
            mean = np.floor(totals / region.area + 0.5).astype(np.int64)
        else:
            mean = totals // region.area
        return tuple(int(c) for c in mean)

    def mean_squared_error(self, region: Region) -> float:
        """Mean squared RGB distance of the region's pixels from its mean color."""
        mean = np.array(self.mean_color(region), dtype=np.int64)
        diff = self._buffer[region.bounds].reshape(-1, 3).astype(np.int64) - mean
        errors = (diff * diff).sum(axis=1)
        return float(errors.sum() / region.area)

    # --- operations ---

    def divide(self, target_level: Optional[float] = None) -> int:
        """Subdivide breadth-first until target_level is reached, or fully if None."""
        return decompose(self, target_level)

    def compress(self) -> np.ndarray:
        return compress(self)

    def detect_edges(self) -> np.ndarray:
        return detect_edges(self)

    def outline(self, region: Optional[Region] = None) -> np.ndarray:
        return outline(self, region)

    def __repr__(self):
        return (f"QuadTree({self.width}x{self.height}, nodes={self.node_count}, "
                f"leaves={self.leaf_count})")
