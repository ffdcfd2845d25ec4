"""Quadtree pipelines: compression sweep, edge detection, random-neighbor filter."""

import logging
import numpy as np
from typing import List, Optional, Sequence

from models.compression_result import CompressionResult
from models.quadtree_params import QuadTreeParams
from engines.quadtree import QuadTree
from engines.filters import random_neighbor
from utils.constants import COMPRESSION_LEVELS
from utils.metrics import compute_psnr_ssim, Timer
from utils.pixel_buffer import pad_to_power_of_two_square

logger = logging.getLogger(__name__)


def prepare_image(image_rgb: np.ndarray) -> np.ndarray:
    """Validate and pad to a power-of-two square; always returns a private copy."""
    padded = pad_to_power_of_two_square(image_rgb)
    if padded is image_rgb:
        padded = padded.copy()
    return padded


def run_compression_sweep(
    image_rgb: np.ndarray,
    levels: Sequence[float] = COMPRESSION_LEVELS,
    params: Optional[QuadTreeParams] = None,
    outline: bool = False
) -> List[CompressionResult]:
    """Compress at each target level, refining one tree between passes."""
    levels = list(levels)
    if any(b < a for a, b in zip(levels, levels[1:])):
        raise ValueError(f"Compression levels must be non-decreasing, got {levels}")

    source = prepare_image(image_rgb)
    tree = QuadTree(source, params)
    results = []

    for level in levels:
        timer = Timer()
        timer.measure_decompose(tree.divide, level)
        compressed = timer.measure_compress(tree.compress)

        # Metrics on the clean image, before any overlay
        metrics = compute_psnr_ssim(source, compressed)

        if outline:
            tree.rebind(compressed)
            tree.outline()
            tree.rebind(source)

        stats = tree.stats()
        logger.debug(
            "Level %.3f: %d leaves (level %.4f), PSNR %.2f dB",
            level, stats.leaf_count, stats.compression_level, metrics['psnr_rgb'],
        )
        results.append(CompressionResult(
            target_level=level,
            original_image=source,
            compressed_image=compressed,
            compression_level=stats.compression_level,
            leaf_count=stats.leaf_count,
            node_count=stats.node_count,
            psnr_rgb=metrics['psnr_rgb'],
            ssim_rgb=metrics['ssim_rgb'],
            psnr_y=metrics['psnr_y'],
            ssim_y=metrics['ssim_y'],
            decompose_time_ms=timer.decompose_time_ms,
            compress_time_ms=timer.compress_time_ms
        ))

    return results


def run_edge_detection(
    image_rgb: np.ndarray,
    params: Optional[QuadTreeParams] = None,
    outline: bool = False
) -> np.ndarray:
    """Fully decompose, then draw the black/white edge map."""
    tree = QuadTree(prepare_image(image_rgb), params)
    tree.divide()
    edges = tree.detect_edges()
    if outline:
        tree.outline()
    logger.debug("Edge detection on %r", tree)
    return edges


def run_random_neighbor(
    image_rgb: np.ndarray,
    params: Optional[QuadTreeParams] = None,
    outline: bool = False,
    seed: Optional[int] = None
) -> np.ndarray:
    """Random-neighbor filter, optionally overlaid with the full decomposition."""
    source = prepare_image(image_rgb)
    filtered = random_neighbor(source, np.random.default_rng(seed))
    if outline:
        tree = QuadTree(source, params)
        tree.divide()
        tree.rebind(filtered)
        tree.outline()
        logger.debug("Random neighbor outlined with %r", tree)
    return filtered
