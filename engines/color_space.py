"""Color space conversion between straight-alpha RGBA and LPQA."""

import numpy as np
from typing import Tuple


def average_color(rgba: np.ndarray) -> Tuple[float, float, float, float]:
    """Alpha-weighted average color of an (H, W, 4) uint8 image, in [0, 1]."""
    pixels = rgba.reshape(-1, 4).astype(np.float64)
    alpha = pixels[:, 3] / 255.0
    
    total_alpha = float(np.sum(alpha))
    r = float(np.sum(alpha / 255.0 * pixels[:, 0]))
    g = float(np.sum(alpha / 255.0 * pixels[:, 1]))
    b = float(np.sum(alpha / 255.0 * pixels[:, 2]))
    if total_alpha > 0:
        r /= total_alpha
        g /= total_alpha
        b /= total_alpha
    
    return r, g, b, total_alpha / len(pixels)


def rgba_to_lpqa(
    rgba: np.ndarray,
    avg: Tuple[float, float, float, float]
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """RGBA to LPQA planes, filling transparent areas with the average color."""
    pixels = rgba.astype(np.float64)
    alpha = pixels[:, :, 3] / 255.0
    
    # Blend toward the average where alpha < 1
    R = avg[0] * (1.0 - alpha) + alpha / 255.0 * pixels[:, :, 0]
    G = avg[1] * (1.0 - alpha) + alpha / 255.0 * pixels[:, :, 1]
    B = avg[2] * (1.0 - alpha) + alpha / 255.0 * pixels[:, :, 2]
    
    L = (R + G + B) / 3.0
    P = (R + G) / 2.0 - B
    Q = R - G
    return L, P, Q, alpha


def lpq_to_rgb(l, p, q):
    """LPQ to RGB. Works on scalars and arrays alike."""
    b = l - 2.0 / 3.0 * p
    r = (3.0 * l - b + q) / 2.0
    g = r - q
    return r, g, b


def lpqa_to_rgba(l: np.ndarray, p: np.ndarray, q: np.ndarray, a: np.ndarray) -> np.ndarray:
    """LPQA planes to (H, W, 4) uint8 RGBA."""
    r, g, b = lpq_to_rgb(l, p, q)
    rgba = np.stack([r, g, b, np.broadcast_to(a, np.shape(l))], axis=-1)
    # Round half up, then clamp
    return np.clip(np.floor(rgba * 255.0 + 0.5), 0, 255).astype(np.uint8)
