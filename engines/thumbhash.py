"""Caching wrapper around a single ThumbHash."""

import base64
import binascii

from models.thumbhash_color import ThumbHashColor
from models.thumbhash_image import ThumbHashImage
from engines.background import thumbhash_to_rgba_async, thumbhash_image_to_png_async
from engines.errors import MalformedInputError
from engines.pipeline import (
    thumbhash_to_rgba,
    thumbhash_to_average_rgba,
    thumbhash_to_approximate_aspect_ratio,
)
from engines.png_encoder import thumbhash_image_to_png
from utils.constants import MIN_HASH_LENGTH


class ThumbHash:
    """
    Immutable hash bytes with memoized decode and PNG results.

    The first call to to_rgba()/to_png_bytes() computes the result; later
    calls return the same object. Two threads racing on the first call may
    both compute it, which is harmless since the functions are pure.
    """
    
    __slots__ = ('_data', '_image', '_png')
    
    def __init__(self, data: bytes):
        data = bytes(data)
        if len(data) < MIN_HASH_LENGTH:
            raise MalformedInputError(
                f"ThumbHash must be at least {MIN_HASH_LENGTH} bytes, got {len(data)}"
            )
        self._data = data
        self._image = None
        self._png = None
    
    @classmethod
    def from_bytes(cls, data) -> 'ThumbHash':
        return cls(bytes(data))
    
    @classmethod
    def from_int_list(cls, values) -> 'ThumbHash':
        return cls(bytes(values))
    
    @classmethod
    def from_base64(cls, encoded: str) -> 'ThumbHash':
        """Accepts standard or URL-safe alphabet, with or without '=' padding."""
        text = encoded.strip().replace('-', '+').replace('_', '/').rstrip('=')
        text += '=' * (-len(text) % 4)
        try:
            data = base64.b64decode(text, validate=True)
        except binascii.Error as e:
            raise MalformedInputError(f"Invalid base64 ThumbHash: {encoded!r}") from e
        return cls(data)
    
    @property
    def data(self) -> bytes:
        return self._data
    
    @property
    def byte_length(self) -> int:
        return len(self._data)
    
    @property
    def has_alpha(self) -> bool:
        return (self._data[2] & 0x80) != 0
    
    @property
    def is_landscape(self) -> bool:
        return (self._data[4] & 0x80) != 0
    
    @property
    def is_portrait(self) -> bool:
        return not self.is_landscape and self.to_aspect_ratio() < 1.0
    
    def to_base64(self) -> str:
        return base64.b64encode(self._data).decode('ascii')
    
    def to_rgba(self) -> ThumbHashImage:
        if self._image is None:
            self._image = thumbhash_to_rgba(self._data)
        return self._image
    
    def to_png_bytes(self) -> bytes:
        if self._png is None:
            self._png = thumbhash_image_to_png(self.to_rgba())
        return self._png
    
    async def to_rgba_async(self) -> ThumbHashImage:
        if self._image is None:
            self._image = await thumbhash_to_rgba_async(self._data)
        return self._image
    
    async def to_png_bytes_async(self) -> bytes:
        if self._png is None:
            image = await self.to_rgba_async()
            self._png = await thumbhash_image_to_png_async(image)
        return self._png
    
    def to_average_color(self) -> ThumbHashColor:
        return thumbhash_to_average_rgba(self._data)
    
    def to_aspect_ratio(self) -> float:
        return thumbhash_to_approximate_aspect_ratio(self._data)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, ThumbHash):
            return NotImplemented
        return self._data == other._data
    
    def __hash__(self) -> int:
        return hash(self._data)
    
    def __repr__(self) -> str:
        try:
            aspect = f"{self.to_aspect_ratio():.2f}"
        except MalformedInputError:
            aspect = "?"
        return f"ThumbHash({len(self._data)} bytes, alpha: {self.has_alpha}, aspect: {aspect})"
