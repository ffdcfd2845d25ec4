"""Compression pass result with metrics."""

from dataclasses import dataclass
import numpy as np


@dataclass
class CompressionResult:
    """Result of one compression pass at a target level."""
    
    target_level: float
    original_image: np.ndarray
    compressed_image: np.ndarray
    
    # Tree shape
    compression_level: float
    leaf_count: int
    node_count: int
    
    # Quality metrics
    psnr_rgb: float
    ssim_rgb: float
    psnr_y: float
    ssim_y: float
    
    # Runtime
    decompose_time_ms: float
    compress_time_ms: float
