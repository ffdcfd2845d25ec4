"""Image I/O using OpenCV."""

from pathlib import Path

import cv2
import numpy as np

from utils.constants import PPM_EXTENSION


def load_image(path: str) -> np.ndarray:
    """Load image as RGB uint8."""
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGB image; .ppm files are written as plain-text P3."""
    params = []
    if Path(path).suffix.lower() == PPM_EXTENSION:
        params = [cv2.IMWRITE_PXM_BINARY, 0]
    if not cv2.imwrite(str(path), cv2.cvtColor(image, cv2.COLOR_RGB2BGR), params):
        raise OSError(f"Could not write image to {path}")
