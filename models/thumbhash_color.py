"""Average color of a ThumbHash."""

from dataclasses import dataclass
from typing import Tuple


def _to_byte(v: float) -> int:
    return min(255, max(0, int(v * 255.0 + 0.5)))


@dataclass(frozen=True)
class ThumbHashColor:
    """Straight-alpha RGBA color, each component in [0, 1]."""
    
    r: float
    g: float
    b: float
    a: float = 1.0
    
    @classmethod
    def opaque(cls, r: float, g: float, b: float) -> 'ThumbHashColor':
        return cls(r, g, b, 1.0)
    
    def to_rgba8(self) -> Tuple[int, int, int, int]:
        """8-bit (r, g, b, a)."""
        return _to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a)
    
    def to_argb32(self) -> int:
        """Packed 0xAARRGGBB."""
        r, g, b, a = self.to_rgba8()
        return (a << 24) | (r << 16) | (g << 8) | b
    
    def __str__(self) -> str:
        return f"ThumbHashColor(r: {self.r:.3f}, g: {self.g:.3f}, b: {self.b:.3f}, a: {self.a:.3f})"
