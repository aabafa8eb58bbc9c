"""ThumbHash header fields."""

from dataclasses import dataclass

from utils.constants import (
    HEADER_LENGTH,
    HEADER_LENGTH_ALPHA,
    LUMA_LIMIT,
    LUMA_LIMIT_ALPHA,
    MIN_LUMA_GRID,
    CHROMA_SCALE_BOOST,
)


@dataclass(frozen=True)
class ThumbHashHeader:
    """
    Integer codes stored in the 5 (or 6) leading bytes of a hash.

    Bit widths: l_dc, p_dc, q_dc, p_scale, q_scale are 6 bits; l_scale is
    5 bits; minor_axis is 3 bits; a_dc and a_scale are 4 bits and only
    present when has_alpha is set.
    """
    
    l_dc: int
    p_dc: int
    q_dc: int
    l_scale: int
    has_alpha: bool
    minor_axis: int
    p_scale: int
    q_scale: int
    is_landscape: bool
    a_dc: int = 15
    a_scale: int = 0
    
    @property
    def header_length(self) -> int:
        return HEADER_LENGTH_ALPHA if self.has_alpha else HEADER_LENGTH
    
    @property
    def major_axis(self) -> int:
        return LUMA_LIMIT_ALPHA if self.has_alpha else LUMA_LIMIT
    
    @property
    def lx(self) -> int:
        return self.major_axis if self.is_landscape else self.minor_axis
    
    @property
    def ly(self) -> int:
        return self.minor_axis if self.is_landscape else self.major_axis
    
    @property
    def nx(self) -> int:
        """Luma grid width used by the transform."""
        return max(MIN_LUMA_GRID, self.lx)
    
    @property
    def ny(self) -> int:
        return max(MIN_LUMA_GRID, self.ly)
    
    # Dequantized values
    
    @property
    def l_dc_value(self) -> float:
        return self.l_dc / 63.0
    
    @property
    def p_dc_value(self) -> float:
        return self.p_dc / 31.5 - 1.0
    
    @property
    def q_dc_value(self) -> float:
        return self.q_dc / 31.5 - 1.0
    
    @property
    def a_dc_value(self) -> float:
        return self.a_dc / 15.0 if self.has_alpha else 1.0
    
    @property
    def l_scale_value(self) -> float:
        return self.l_scale / 31.0
    
    @property
    def p_scale_value(self) -> float:
        return self.p_scale / 63.0 * CHROMA_SCALE_BOOST
    
    @property
    def q_scale_value(self) -> float:
        return self.q_scale / 63.0 * CHROMA_SCALE_BOOST
    
    @property
    def a_scale_value(self) -> float:
        return self.a_scale / 15.0 if self.has_alpha else 0.0
