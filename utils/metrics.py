"""Metrics: placeholder fidelity (PSNR, SSIM) and timing."""

import time
import cv2
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def compare_placeholder(source_rgba: np.ndarray, placeholder_rgba: np.ndarray) -> Dict[str, float]:
    """
    Compare a decoded placeholder with its source image.

    The source is area-resampled down (or up) to the placeholder size first,
    so the numbers describe how well the hash captures the image at the
    resolution it is displayed at. Both inputs are (H, W, 4) uint8.
    """
    ph, pw = placeholder_rgba.shape[:2]
    reference = cv2.resize(source_rgba, (pw, ph), interpolation=cv2.INTER_AREA)

    psnr_rgb = peak_signal_noise_ratio(
        reference[:, :, :3], placeholder_rgba[:, :, :3], data_range=255
    )
    # Very wide or tall placeholders are only a few pixels high
    win_size = min(7, ph, pw)
    win_size -= 1 - win_size % 2
    if win_size >= 3:
        ssim_rgb = structural_similarity(
            reference[:, :, :3], placeholder_rgba[:, :, :3],
            channel_axis=2, data_range=255, win_size=win_size
        )
    else:
        ssim_rgb = float('nan')

    alpha_error = np.abs(
        reference[:, :, 3].astype(np.float64) - placeholder_rgba[:, :, 3].astype(np.float64)
    )
    mean_abs_error = np.mean(
        np.abs(reference.astype(np.float64) - placeholder_rgba.astype(np.float64)), axis=(0, 1)
    )

    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'max_alpha_error': float(alpha_error.max()),
        'mae_r': float(mean_abs_error[0]),
        'mae_g': float(mean_abs_error[1]),
        'mae_b': float(mean_abs_error[2]),
        'mae_a': float(mean_abs_error[3]),
    }


class Timer:
    """Simple timer for encode/decode/PNG runtime."""
    
    def __init__(self):
        self.encode_time_ms = 0.0
        self.decode_time_ms = 0.0
        self.png_time_ms = 0.0
    
    def measure_encode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.encode_time_ms = (time.perf_counter() - start) * 1000.0
        return result
    
    def measure_decode(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.decode_time_ms = (time.perf_counter() - start) * 1000.0
        return result

    def measure_png(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.png_time_ms = (time.perf_counter() - start) * 1000.0
        return result
