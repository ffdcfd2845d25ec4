"""Data models for quadtree regions, parameters and results."""

from .region import Region
from .quadtree_params import QuadTreeParams
from .tree_stats import TreeStats
from .compression_result import CompressionResult

__all__ = ['Region', 'QuadTreeParams', 'TreeStats', 'CompressionResult']
