"""Data models for decoded images, colors, headers and encoder parameters."""

from .thumbhash_image import ThumbHashImage
from .thumbhash_color import ThumbHashColor
from .encoded_channel import EncodedChannel
from .header import ThumbHashHeader
from .encode_params import EncodeParams

__all__ = ['ThumbHashImage', 'ThumbHashColor', 'EncodedChannel', 'ThumbHashHeader', 'EncodeParams']
