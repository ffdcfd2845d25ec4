"""Quadtree shape statistics."""

from dataclasses import dataclass


@dataclass
class TreeStats:
    """Snapshot of a tree's size and how finely it divides the image."""

    node_count: int
    leaf_count: int
    depth: int
    pixel_count: int
    compression_level: float
