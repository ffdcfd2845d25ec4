"""Shared utilities."""

from .constants import COMPRESSION_LEVELS, EDGE_DETECT_KERNEL, WHITE, BLACK, RED
from .metrics import compute_psnr_ssim, Timer
from .pixel_buffer import (
    as_pixel_buffer,
    is_power_of_two,
    next_power_of_two,
    pad_to_power_of_two_square,
)
from .test_images import generate_colored_checkerboard, generate_outlier, generate_uniform
from .image_io import load_image, save_image

__all__ = [
    'COMPRESSION_LEVELS',
    'EDGE_DETECT_KERNEL',
    'WHITE',
    'BLACK',
    'RED',
    'compute_psnr_ssim',
    'Timer',
    'as_pixel_buffer',
    'is_power_of_two',
    'next_power_of_two',
    'pad_to_power_of_two_square',
    'generate_colored_checkerboard',
    'generate_outlier',
    'generate_uniform',
    'load_image',
    'save_image',
]
