"""Packing and validation of the ThumbHash header."""

from typing import Tuple

from models.encoded_channel import EncodedChannel
from models.header import ThumbHashHeader
from engines.dct_engine import count_ac
from engines.dimensions import decode_grid
from engines.errors import MalformedInputError
from engines.quantizer import to_code
from utils.constants import MIN_HASH_LENGTH, CHROMA_AC_COUNT, ALPHA_AC_COUNT


def header_from_channels(
    l: EncodedChannel,
    p: EncodedChannel,
    q: EncodedChannel,
    a: EncodedChannel | None,
    lx: int,
    ly: int,
    is_landscape: bool
) -> ThumbHashHeader:
    """Quantize DC and scale values of the encoded channels into header codes."""
    return ThumbHashHeader(
        l_dc=to_code(63.0 * l.dc, 6),
        p_dc=to_code(31.5 + 31.5 * p.dc, 6),
        q_dc=to_code(31.5 + 31.5 * q.dc, 6),
        l_scale=to_code(31.0 * l.scale, 5),
        has_alpha=a is not None,
        minor_axis=ly if is_landscape else lx,
        p_scale=to_code(63.0 * p.scale, 6),
        q_scale=to_code(63.0 * q.scale, 6),
        is_landscape=is_landscape,
        a_dc=to_code(15.0 * a.dc, 4) if a is not None else 15,
        a_scale=to_code(15.0 * a.scale, 4) if a is not None else 0,
    )


def pack_header(header: ThumbHashHeader) -> bytes:
    """Header codes to 5 bytes, or 6 when alpha is present."""
    header24 = (
        header.l_dc
        | (header.p_dc << 6)
        | (header.q_dc << 12)
        | (header.l_scale << 18)
        | (int(header.has_alpha) << 23)
    )
    header16 = (
        header.minor_axis
        | (header.p_scale << 3)
        | (header.q_scale << 9)
        | (int(header.is_landscape) << 15)
    )
    out = bytearray(header24.to_bytes(3, 'little') + header16.to_bytes(2, 'little'))
    if header.has_alpha:
        out.append(header.a_dc | (header.a_scale << 4))
    return bytes(out)


def total_ac_count(header: ThumbHashHeader) -> int:
    """AC codes stored after the header: L (triangular), P, Q and optionally A."""
    count = count_ac(header.nx, header.ny) + 2 * CHROMA_AC_COUNT
    if header.has_alpha:
        count += ALPHA_AC_COUNT
    return count


def required_length(header: ThumbHashHeader) -> int:
    """Byte length a hash with this header must have."""
    return header.header_length + (total_ac_count(header) + 1) // 2


def _check_min_length(blob: bytes) -> None:
    if len(blob) < MIN_HASH_LENGTH:
        raise MalformedInputError(
            f"ThumbHash must be at least {MIN_HASH_LENGTH} bytes, got {len(blob)}"
        )


def peek_grid(blob: bytes) -> Tuple[int, int]:
    """Raw luma grid (lx, ly) from the first 5 bytes only."""
    _check_min_length(blob)
    has_alpha = (blob[2] & 0x80) != 0
    is_landscape = (blob[4] & 0x80) != 0
    minor_axis = blob[3] & 7
    if minor_axis == 0:
        raise MalformedInputError("ThumbHash header declares a zero-length minor axis")
    return decode_grid(minor_axis, has_alpha, is_landscape)


def unpack_header(blob: bytes, strict: bool = True) -> ThumbHashHeader:
    """
    Parse the header of a hash.

    In strict mode (the default) the minor axis must be non-zero and the
    whole blob at least as long as the header says; this guards every later
    AC read. Otherwise only the header bytes themselves must be present.
    """
    _check_min_length(blob)
    header24 = int.from_bytes(blob[0:3], 'little')
    header16 = int.from_bytes(blob[3:5], 'little')
    has_alpha = (header24 >> 23) != 0
    
    if has_alpha and len(blob) < 6:
        raise MalformedInputError(
            f"ThumbHash with alpha needs a 6-byte header, got {len(blob)} bytes"
        )
    
    header = ThumbHashHeader(
        l_dc=header24 & 63,
        p_dc=(header24 >> 6) & 63,
        q_dc=(header24 >> 12) & 63,
        l_scale=(header24 >> 18) & 31,
        has_alpha=has_alpha,
        minor_axis=header16 & 7,
        p_scale=(header16 >> 3) & 63,
        q_scale=(header16 >> 9) & 63,
        is_landscape=(header16 >> 15) != 0,
        a_dc=blob[5] & 15 if has_alpha else 15,
        a_scale=(blob[5] >> 4) & 15 if has_alpha else 0,
    )
    
    if strict:
        if header.minor_axis == 0:
            raise MalformedInputError("ThumbHash header declares a zero-length minor axis")
        required = required_length(header)
        if len(blob) < required:
            raise MalformedInputError(
                f"ThumbHash is too short: got {len(blob)} bytes, but header indicates "
                f"{required} bytes required (has_alpha={header.has_alpha}, "
                f"lx={header.lx}, ly={header.ly}). The hash may be truncated or corrupted."
            )
    
    return header
