"""Quadtree engines - pure computation, no I/O."""

from .quadtree import QuadTree
from .decomposer import decompose
from .compressor import compress
from .edge_detector import detect_edges, edge_mask
from .outliner import outline
from .filters import negative, grayscale, tint, random_neighbor
from .pipeline import (
    prepare_image,
    run_compression_sweep,
    run_edge_detection,
    run_random_neighbor,
)

__all__ = [
    'QuadTree',
    'decompose',
    'compress',
    'detect_edges',
    'edge_mask',
    'outline',
    'negative',
    'grayscale',
    'tint',
    'random_neighbor',
    'prepare_image',
    'run_compression_sweep',
    'run_edge_detection',
    'run_random_neighbor',
]
