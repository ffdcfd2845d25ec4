"""Metrics: PSNR, SSIM, runtime."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def _luma(rgb: np.ndarray) -> np.ndarray:
    # BT.601
    rgb = rgb.astype(np.float64)
    return 0.299 * rgb[:, :, 0] + 0.587 * rgb[:, :, 1] + 0.114 * rgb[:, :, 2]


def compute_psnr_ssim(original_rgb: np.ndarray, compressed_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM on RGB and Y channel.

    Identical images give an infinite PSNR. SSIM needs a 7x7 window, so
    smaller images report NaN for it.
    """
    if np.array_equal(original_rgb, compressed_rgb):
        return {
            'psnr_rgb': float('inf'),
            'ssim_rgb': 1.0,
            'psnr_y': float('inf'),
            'ssim_y': 1.0,
        }
    
    psnr_rgb = peak_signal_noise_ratio(original_rgb, compressed_rgb, data_range=255)
    original_y = _luma(original_rgb)
    compressed_y = _luma(compressed_rgb)
    psnr_y = peak_signal_noise_ratio(original_y, compressed_y, data_range=255)
    
    if min(original_rgb.shape[:2]) < 7:
        ssim_rgb = ssim_y = float('nan')
    else:
        ssim_rgb = structural_similarity(
            original_rgb, compressed_rgb, channel_axis=2, data_range=255
        )
        ssim_y = structural_similarity(original_y, compressed_y, data_range=255)
    
    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'psnr_y': float(psnr_y),
        'ssim_y': float(ssim_y)
    }


class Timer:
    """Simple timer for decompose/compress runtime."""
    
    def __init__(self):
        self.decompose_time_ms = 0.0
        self.compress_time_ms = 0.0
    
    def measure_decompose(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decompose_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_compress(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.compress_time_ms = (time.perf_counter() - start) * 1000.0
        return result
