"""Shared utilities."""

from .constants import MAX_INPUT_SIZE, OUTPUT_SIZE, PNG_SIGNATURE, IEND_CHUNK
from .metrics import compare_placeholder, Timer
from .test_images import (
    generate_solid,
    generate_gradient,
    generate_checkerboard,
    generate_radial_alpha,
    generate_demo_image,
)
from .image_io import load_image, save_image, fit_within

__all__ = [
    'MAX_INPUT_SIZE',
    'OUTPUT_SIZE',
    'PNG_SIGNATURE',
    'IEND_CHUNK',
    'compare_placeholder',
    'Timer',
    'generate_solid',
    'generate_gradient',
    'generate_checkerboard',
    'generate_radial_alpha',
    'generate_demo_image',
    'load_image',
    'save_image',
    'fit_within',
]
