"""Decoded placeholder image."""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True)
class ThumbHashImage:
    """
    RGBA pixels of a decoded ThumbHash.

    `rgba` is row-major, 4 bytes per pixel, straight (not premultiplied)
    alpha. Its length is always width * height * 4.
    """
    
    width: int
    height: int
    rgba: bytes
    
    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.rgba) != expected:
            raise ValueError(
                f"RGBA buffer length {len(self.rgba)} does not match "
                f"{self.width}x{self.height} image (expected {expected})"
            )
        if not isinstance(self.rgba, bytes):
            object.__setattr__(self, 'rgba', bytes(self.rgba))
    
    @classmethod
    def from_array(cls, pixels: np.ndarray) -> 'ThumbHashImage':
        """Build from an (H, W, 4) uint8 array."""
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an (H, W, 4) array, got shape {pixels.shape}")
        h, w = pixels.shape[:2]
        return cls(width=w, height=h, rgba=np.ascontiguousarray(pixels, dtype=np.uint8).tobytes())
    
    @property
    def pixel_count(self) -> int:
        return self.width * self.height
    
    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """RGBA values (0-255) of the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        i = (y * self.width + x) * 4
        r, g, b, a = self.rgba[i:i + 4]
        return r, g, b, a
    
    def to_array(self) -> np.ndarray:
        """Read-only (H, W, 4) uint8 view of the pixels."""
        return np.frombuffer(self.rgba, dtype=np.uint8).reshape(self.height, self.width, 4)
    
    def __str__(self) -> str:
        return f"ThumbHashImage({self.width}x{self.height}, {len(self.rgba)} bytes)"
