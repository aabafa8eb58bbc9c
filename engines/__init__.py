"""ThumbHash engines - pure computation, no GUI dependencies."""

from .errors import ThumbHashError, InvalidArgumentError, MalformedInputError
from .color_space import average_color, rgba_to_lpqa, lpqa_to_rgba, lpq_to_rgb
from .dimensions import encode_grid, channel_grids, decode_grid, decode_size
from .dct_engine import triangle_indices, count_ac, encode_channel, decode_channel
from .quantizer import quantize_ac, dequantize_ac, pack_nibbles, unpack_nibbles
from .header_codec import pack_header, unpack_header, required_length
from .png_encoder import crc32, adler32, rgba_to_png, thumbhash_image_to_png
from .pipeline import (
    rgba_to_thumbhash,
    thumbhash_to_rgba,
    thumbhash_to_average_rgba,
    thumbhash_to_approximate_aspect_ratio,
)
from .background import (
    rgba_to_thumbhash_async,
    thumbhash_to_rgba_async,
    thumbhash_image_to_png_async,
)
from .thumbhash import ThumbHash

__all__ = [
    'ThumbHashError',
    'InvalidArgumentError',
    'MalformedInputError',
    'average_color',
    'rgba_to_lpqa',
    'lpqa_to_rgba',
    'lpq_to_rgb',
    'encode_grid',
    'channel_grids',
    'decode_grid',
    'decode_size',
    'triangle_indices',
    'count_ac',
    'encode_channel',
    'decode_channel',
    'quantize_ac',
    'dequantize_ac',
    'pack_nibbles',
    'unpack_nibbles',
    'pack_header',
    'unpack_header',
    'required_length',
    'crc32',
    'adler32',
    'rgba_to_png',
    'thumbhash_image_to_png',
    'rgba_to_thumbhash',
    'thumbhash_to_rgba',
    'thumbhash_to_average_rgba',
    'thumbhash_to_approximate_aspect_ratio',
    'rgba_to_thumbhash_async',
    'thumbhash_to_rgba_async',
    'thumbhash_image_to_png_async',
    'ThumbHash',
]
