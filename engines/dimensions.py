"""Coefficient grid sizes and decoded image dimensions."""

from typing import Tuple

from engines.quantizer import round_half_up
from utils.constants import (
    LUMA_LIMIT,
    LUMA_LIMIT_ALPHA,
    MIN_LUMA_GRID,
    CHROMA_GRID,
    ALPHA_GRID,
    OUTPUT_SIZE,
)


def encode_grid(width: int, height: int, has_alpha: bool) -> Tuple[int, int]:
    """Luma grid (lx, ly) following the input aspect ratio."""
    limit = LUMA_LIMIT_ALPHA if has_alpha else LUMA_LIMIT
    longest = max(width, height)
    lx = max(1, round_half_up(limit * width / longest))
    ly = max(1, round_half_up(limit * height / longest))
    return lx, ly


def channel_grids(lx: int, ly: int, has_alpha: bool) -> dict:
    """Transform grid (nx, ny) per channel."""
    grids = {
        'L': (max(MIN_LUMA_GRID, lx), max(MIN_LUMA_GRID, ly)),
        'P': (CHROMA_GRID, CHROMA_GRID),
        'Q': (CHROMA_GRID, CHROMA_GRID),
    }
    if has_alpha:
        grids['A'] = (ALPHA_GRID, ALPHA_GRID)
    return grids


def decode_grid(minor_axis: int, has_alpha: bool, is_landscape: bool) -> Tuple[int, int]:
    """Rebuild (lx, ly) from the header's minor-axis field."""
    major = LUMA_LIMIT_ALPHA if has_alpha else LUMA_LIMIT
    if is_landscape:
        return major, minor_axis
    return minor_axis, major


def decode_size(lx: int, ly: int) -> Tuple[int, int]:
    """Output (width, height); the longer side is always OUTPUT_SIZE."""
    ratio = lx / ly
    if ratio > 1.0:
        return OUTPUT_SIZE, round_half_up(OUTPUT_SIZE / ratio)
    return round_half_up(OUTPUT_SIZE * ratio), OUTPUT_SIZE
