"""Image I/O using OpenCV."""

import cv2
import numpy as np


_INTERPOLATION = {
    'area': cv2.INTER_AREA,
    'linear': cv2.INTER_LINEAR,
    'nearest': cv2.INTER_NEAREST,
}


def load_image(path: str) -> np.ndarray:
    """Load image as RGBA uint8, adding an opaque alpha plane when missing."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.dtype != np.uint8:
        # 16-bit PNG/TIFF
        img = (img / 257).astype(np.uint8)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGBA image."""
    if not cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)):
        raise ValueError(f"Could not write image to {path}")


def fit_within(image: np.ndarray, max_size: int, interpolation: str = 'area') -> np.ndarray:
    """Downscale so neither side exceeds max_size, keeping the aspect ratio."""
    h, w = image.shape[:2]
    if w <= max_size and h <= max_size:
        return image.copy()

    scale = max_size / max(w, h)
    new_w = max(1, min(max_size, round(w * scale)))
    new_h = max(1, min(max_size, round(h * scale)))
    return cv2.resize(image, (new_w, new_h), interpolation=_INTERPOLATION[interpolation])
