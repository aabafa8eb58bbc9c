"""Forward-transformed channel."""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class EncodedChannel:
    """DC term, normalized AC terms in triangular order, and their scale."""
    
    dc: float
    ac: np.ndarray
    scale: float
