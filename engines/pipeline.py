"""ThumbHash encode/decode pipeline."""

import numpy as np

from models.thumbhash_color import ThumbHashColor
from models.thumbhash_image import ThumbHashImage
from engines.color_space import average_color, rgba_to_lpqa, lpqa_to_rgba, lpq_to_rgb
from engines.dct_engine import encode_channel, decode_channel, count_ac
from engines.dimensions import encode_grid, channel_grids, decode_size
from engines.errors import InvalidArgumentError
from engines.header_codec import header_from_channels, pack_header, unpack_header, peek_grid
from engines.quantizer import quantize_ac, dequantize_ac, pack_nibbles, unpack_nibbles
from utils.constants import MAX_INPUT_SIZE, CHROMA_GRID, ALPHA_GRID, CHROMA_AC_COUNT, ALPHA_AC_COUNT


def _as_pixels(width: int, height: int, rgba) -> np.ndarray:
    """Validate and view caller pixels as an (H, W, 4) uint8 array."""
    if width > MAX_INPUT_SIZE or height > MAX_INPUT_SIZE:
        raise InvalidArgumentError(
            f"Image dimensions {width}x{height} exceed maximum {MAX_INPUT_SIZE}x{MAX_INPUT_SIZE}"
        )
    if width < 1 or height < 1:
        raise InvalidArgumentError(f"Image dimensions must be positive, got {width}x{height}")
    
    if isinstance(rgba, np.ndarray):
        pixels = rgba.astype(np.uint8, copy=False).reshape(-1)
    else:
        pixels = np.frombuffer(memoryview(rgba).cast('B'), dtype=np.uint8)
    
    if pixels.size != width * height * 4:
        raise InvalidArgumentError(
            f"RGBA buffer length {pixels.size} does not match {width}x{height} image "
            f"(expected {width * height * 4})"
        )
    return pixels.reshape(height, width, 4)


def rgba_to_thumbhash(width: int, height: int, rgba) -> bytes:
    """
    Encode an RGBA image (at most 100x100) to a ThumbHash.

    RGB must not be premultiplied by A. `rgba` is any bytes-like object or a
    uint8 array holding width * height * 4 values, row by row.
    """
    pixels = _as_pixels(width, height, rgba)
    
    avg = average_color(pixels)
    has_alpha = avg[3] < 1.0
    lx, ly = encode_grid(width, height, has_alpha)
    grids = channel_grids(lx, ly, has_alpha)
    
    l, p, q, a = rgba_to_lpqa(pixels, avg)
    l_channel = encode_channel(l, *grids['L'])
    p_channel = encode_channel(p, *grids['P'])
    q_channel = encode_channel(q, *grids['Q'])
    a_channel = encode_channel(a, *grids['A']) if has_alpha else None
    
    header = header_from_channels(
        l_channel, p_channel, q_channel, a_channel, lx, ly, is_landscape=width > height
    )
    
    channels = [l_channel, p_channel, q_channel] + ([a_channel] if a_channel is not None else [])
    codes = np.concatenate([quantize_ac(c.ac) for c in channels])
    return pack_header(header) + pack_nibbles(codes)


def thumbhash_to_rgba(blob) -> ThumbHashImage:
    """
    Decode a ThumbHash to an RGBA image about 32 pixels on its longest side.

    RGB is not premultiplied by A. Raises MalformedInputError when the hash
    is shorter than its header requires.
    """
    blob = bytes(blob)
    header = unpack_header(blob)
    nx, ny = header.nx, header.ny
    width, height = decode_size(header.lx, header.ly)
    
    l_count = count_ac(nx, ny)
    counts = [l_count, CHROMA_AC_COUNT, CHROMA_AC_COUNT]
    if header.has_alpha:
        counts.append(ALPHA_AC_COUNT)
    codes = unpack_nibbles(blob[header.header_length:], sum(counts))
    
    offsets = np.cumsum([0] + counts)
    l_ac = dequantize_ac(codes[offsets[0]:offsets[1]], header.l_scale_value)
    p_ac = dequantize_ac(codes[offsets[1]:offsets[2]], header.p_scale_value)
    q_ac = dequantize_ac(codes[offsets[2]:offsets[3]], header.q_scale_value)
    
    l = decode_channel(header.l_dc_value, l_ac, nx, ny, width, height)
    p = decode_channel(header.p_dc_value, p_ac, CHROMA_GRID, CHROMA_GRID, width, height)
    q = decode_channel(header.q_dc_value, q_ac, CHROMA_GRID, CHROMA_GRID, width, height)
    if header.has_alpha:
        a_ac = dequantize_ac(codes[offsets[3]:offsets[4]], header.a_scale_value)
        a = decode_channel(header.a_dc_value, a_ac, ALPHA_GRID, ALPHA_GRID, width, height)
    else:
        a = np.ones((height, width), dtype=np.float64)
    
    return ThumbHashImage.from_array(lpqa_to_rgba(l, p, q, a))


def thumbhash_to_average_rgba(blob) -> ThumbHashColor:
    """Average color stored in the hash header, straight alpha, in [0, 1]."""
    header = unpack_header(bytes(blob), strict=False)
    r, g, b = lpq_to_rgb(header.l_dc_value, header.p_dc_value, header.q_dc_value)
    return ThumbHashColor(
        r=min(1.0, max(0.0, r)),
        g=min(1.0, max(0.0, g)),
        b=min(1.0, max(0.0, b)),
        a=header.a_dc_value,
    )


def thumbhash_to_approximate_aspect_ratio(blob) -> float:
    """Width / height of the original image, as far as the luma grid tells."""
    lx, ly = peek_grid(bytes(blob))
    return lx / ly
