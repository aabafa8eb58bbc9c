"""Encoder input parameters."""

from dataclasses import dataclass
from typing import Literal

from utils.constants import MAX_INPUT_SIZE


@dataclass
class EncodeParams:
    """How arbitrary images are fitted into the encoder's input cap."""
    
    max_size: int = MAX_INPUT_SIZE
    interpolation: Literal['area', 'linear', 'nearest'] = 'area'
    
    def __post_init__(self):
        if not (1 <= self.max_size <= MAX_INPUT_SIZE):
            raise ValueError(f"Max size must be 1-{MAX_INPUT_SIZE}, got {self.max_size}")
        if self.interpolation not in ['area', 'linear', 'nearest']:
            raise ValueError(f"Interpolation must be area, linear, or nearest, got {self.interpolation}")
