"""Quantization of DC/AC terms and nibble packing."""

import math
import numpy as np


def round_half_up(value: float) -> int:
    """Round x.5 up, unlike the built-in round()."""
    return int(math.floor(value + 0.5))


def to_code(value: float, bits: int) -> int:
    """Round and clamp a scaled value into an unsigned field of the given width."""
    return min((1 << bits) - 1, max(0, round_half_up(value)))


def quantize_ac(ac: np.ndarray) -> np.ndarray:
    """Normalized AC terms in [0, 1] to 4-bit codes."""
    codes = np.floor(15.0 * np.asarray(ac, dtype=np.float64) + 0.5)
    return np.clip(codes, 0, 15).astype(np.uint8)


def dequantize_ac(codes: np.ndarray, scale: float) -> np.ndarray:
    """4-bit codes back to AC terms in [-scale, scale]."""
    return (codes.astype(np.float64) / 7.5 - 1.0) * scale


def pack_nibbles(codes: np.ndarray) -> bytes:
    """Two codes per byte, even index in the low nibble."""
    codes = np.asarray(codes, dtype=np.uint8)
    if len(codes) % 2:
        codes = np.append(codes, np.uint8(0))
    low = codes[0::2] & 0x0F
    high = codes[1::2] & 0x0F
    return (low | (high << 4)).astype(np.uint8).tobytes()


def unpack_nibbles(data: bytes, count: int) -> np.ndarray:
    """Inverse of pack_nibbles for the first `count` codes."""
    packed = np.frombuffer(data, dtype=np.uint8, count=(count + 1) // 2)
    codes = np.empty(len(packed) * 2, dtype=np.uint8)
    codes[0::2] = packed & 0x0F
    codes[1::2] = packed >> 4
    return codes[:count]
