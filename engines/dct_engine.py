"""
Separable forward/inverse DCT over a triangular coefficient set.

Only terms with cx * ny < nx * (ny - cy) are kept, so the high-frequency
corner of each grid is dropped. Every consumer of the coefficient order
(forward transform, inverse transform, hash length checks) goes through
triangle_indices().
"""

import numpy as np
from functools import lru_cache
from typing import Tuple

from models.encoded_channel import EncodedChannel
from utils.constants import CHROMA_GRID, ALPHA_GRID


@lru_cache(maxsize=None)
def triangle_indices(nx: int, ny: int) -> Tuple[Tuple[int, int], ...]:
    """AC (cx, cy) pairs in storage order: cy ascending, then cx ascending, DC skipped."""
    indices = []
    for cy in range(ny):
        cx = 1 if cy == 0 else 0
        while cx * ny < nx * (ny - cy):
            indices.append((cx, cy))
            cx += 1
    return tuple(indices)


def count_ac(nx: int, ny: int) -> int:
    """Number of AC terms stored for an nx x ny grid."""
    return len(triangle_indices(nx, ny))


PQ_TRIANGLE = triangle_indices(CHROMA_GRID, CHROMA_GRID)
ALPHA_TRIANGLE = triangle_indices(ALPHA_GRID, ALPHA_GRID)


def cosine_table(size: int, n: int) -> np.ndarray:
    """table[i, c] = cos((i + 0.5) * pi / size * c), shape (size, n)."""
    pos = (np.arange(size, dtype=np.float64) + 0.5) * (np.pi / size)
    return np.cos(np.outer(pos, np.arange(n, dtype=np.float64)))


def encode_channel(plane: np.ndarray, nx: int, ny: int) -> EncodedChannel:
    """Forward DCT of an (H, W) plane, keeping the triangular set."""
    h, w = plane.shape
    fx = cosine_table(w, nx)
    fy = cosine_table(h, ny)
    
    # Pass 1: 1D DCT along x for every row, O(W*H*nx)
    intermediate = plane @ fx
    
    # Pass 2: along y, only for the kept (cx, cy) pairs
    dc = float(fy[:, 0] @ intermediate[:, 0]) / (w * h)
    idx = np.array(triangle_indices(nx, ny), dtype=np.intp).reshape(-1, 2)
    ac = np.einsum('yk,yk->k', intermediate[:, idx[:, 0]], fy[:, idx[:, 1]]) / (w * h)
    
    scale = float(np.max(np.abs(ac))) if len(ac) else 0.0
    if scale > 0:
        ac = 0.5 + ac * (0.5 / scale)
    else:
        ac = np.zeros_like(ac)
    
    return EncodedChannel(dc=dc, ac=ac, scale=scale)


def decode_channel(
    dc: float,
    ac: np.ndarray,
    nx: int,
    ny: int,
    width: int,
    height: int
) -> np.ndarray:
    """Inverse DCT of dequantized AC terms onto a (height, width) plane."""
    indices = triangle_indices(nx, ny)
    if len(ac) != len(indices):
        raise ValueError(f"Expected {len(indices)} AC terms for {nx}x{ny} grid, got {len(ac)}")
    
    fx = cosine_table(width, nx)
    fy = cosine_table(height, ny)
    
    coeffs = np.zeros((ny, nx), dtype=np.float64)
    idx = np.array(indices, dtype=np.intp).reshape(-1, 2)
    coeffs[idx[:, 1], idx[:, 0]] = 2.0 * np.asarray(ac, dtype=np.float64)
    
    # Pass 1: row_sums[y, cx] = sum over cy of 2 * ac(cx, cy) * fy[y, cy]
    row_sums = fy @ coeffs
    
    # Pass 2: per pixel, sum over cx only
    return dc + row_sums @ fx.T
