"""Quadtree decomposition and traversal parameters."""

from dataclasses import dataclass
from typing import Literal, Tuple

from utils.constants import (
    DETAIL_THRESHOLD,
    FINE_REGION_MAX_HEIGHT,
    EDGE_DETECT_KERNEL,
    EDGE_MAGNITUDE_THRESHOLD,
    RED,
)


@dataclass
class QuadTreeParams:
    """Thresholds shared by decomposition, edge detection and outlining."""

    detail_threshold: float = DETAIL_THRESHOLD
    fine_region_max_height: int = FINE_REGION_MAX_HEIGHT
    edge_kernel: Tuple[int, ...] = EDGE_DETECT_KERNEL
    edge_magnitude_threshold: int = EDGE_MAGNITUDE_THRESHOLD
    outline_color: Tuple[int, int, int] = RED
    mean_rounding: Literal['truncate', 'round'] = 'truncate'

    def __post_init__(self):
        if self.detail_threshold < 0:
            raise ValueError(f"Detail threshold must be >= 0, got {self.detail_threshold}")
        if self.fine_region_max_height < 1:
            raise ValueError(
                f"Fine region height must be >= 1, got {self.fine_region_max_height}"
            )
        self.edge_kernel = tuple(int(k) for k in self.edge_kernel)
        if len(self.edge_kernel) != 9:
            raise ValueError(f"Edge kernel must have 9 weights, got {len(self.edge_kernel)}")
        if self.edge_magnitude_threshold < 0:
            raise ValueError(
                f"Edge threshold must be >= 0, got {self.edge_magnitude_threshold}"
            )
        self.outline_color = tuple(int(c) for c in self.outline_color)
        if len(self.outline_color) != 3 or not all(0 <= c <= 255 for c in self.outline_color):
            raise ValueError(f"Outline color must be an RGB triple in 0-255, got {self.outline_color}")
        if self.mean_rounding not in ('truncate', 'round'):
            raise ValueError(f"Unknown mean rounding mode: {self.mean_rounding}")
