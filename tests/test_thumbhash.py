"""Tests for the caching ThumbHash wrapper and value models."""

import asyncio
import base64
import pytest

from engines.background import (
    rgba_to_thumbhash_async,
    thumbhash_to_rgba_async,
    thumbhash_image_to_png_async,
)
from engines.errors import MalformedInputError
from engines.pipeline import rgba_to_thumbhash, thumbhash_to_rgba
from engines.png_encoder import thumbhash_image_to_png
from engines.thumbhash import ThumbHash
from models.thumbhash_color import ThumbHashColor
from models.thumbhash_image import ThumbHashImage
from utils.test_images import generate_solid

LANDSCAPE_B64 = '3OcRJYB4d3h/iIeHeEh3eIhw+j3A'
ALPHA_B64 = '3OiFBQAziIWCjHn3aGpwZ/moB8iHeHR6Zw=='


def test_from_base64():
    thumb = ThumbHash.from_base64(LANDSCAPE_B64)
    assert thumb.byte_length == 21
    assert thumb.to_base64() == LANDSCAPE_B64


def test_from_base64_without_padding():
    assert ThumbHash.from_base64(ALPHA_B64.rstrip('=')) == ThumbHash.from_base64(ALPHA_B64)


def test_from_base64_url_safe():
    url_safe = base64.urlsafe_b64encode(base64.b64decode(LANDSCAPE_B64)).decode('ascii')
    assert ThumbHash.from_base64(url_safe) == ThumbHash.from_base64(LANDSCAPE_B64)


def test_invalid_base64_rejected():
    with pytest.raises(MalformedInputError):
        ThumbHash.from_base64('not*base64!')


def test_from_bytes_and_int_list():
    data = base64.b64decode(LANDSCAPE_B64)
    assert ThumbHash.from_bytes(bytearray(data)).data == data
    assert ThumbHash.from_int_list(list(data)) == ThumbHash.from_bytes(data)


def test_short_hash_rejected():
    with pytest.raises(MalformedInputError):
        ThumbHash.from_int_list([0, 1, 2])


def test_to_rgba_is_cached():
    thumb = ThumbHash.from_base64(LANDSCAPE_B64)
    assert thumb.to_rgba() is thumb.to_rgba()
    assert thumb.to_png_bytes() is thumb.to_png_bytes()


def test_flags_and_aspect():
    landscape = ThumbHash.from_base64(LANDSCAPE_B64)
    square = ThumbHash.from_base64(ALPHA_B64)
    
    assert landscape.is_landscape
    assert not landscape.is_portrait
    assert landscape.to_aspect_ratio() > 1.0
    assert not landscape.has_alpha
    
    assert square.has_alpha
    assert not square.is_landscape
    assert not square.is_portrait
    assert square.to_aspect_ratio() == 1.0


def test_portrait_hash():
    blob = rgba_to_thumbhash(30, 90, generate_solid(30, 90))
    thumb = ThumbHash.from_bytes(blob)
    assert thumb.is_portrait
    assert thumb.to_rgba().height == 32


def test_equality_and_hash():
    a = ThumbHash.from_base64(LANDSCAPE_B64)
    b = ThumbHash.from_base64(LANDSCAPE_B64)
    c = ThumbHash.from_base64(ALPHA_B64)
    assert a == b
    assert a != c
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 2


def test_repr():
    text = repr(ThumbHash.from_base64(LANDSCAPE_B64))
    assert 'ThumbHash' in text
    assert 'bytes' in text
    assert 'aspect' in text


def test_average_color():
    color = ThumbHash.from_base64(ALPHA_B64).to_average_color()
    assert isinstance(color, ThumbHashColor)
    assert color.a < 1.0


def test_color_helpers():
    assert ThumbHashColor.opaque(0.5, 0.5, 0.5).a == 1.0
    assert ThumbHashColor(0.5, 0.5, 0.5, 1.0) == ThumbHashColor(0.5, 0.5, 0.5, 1.0)
    assert ThumbHashColor(0.6, 0.5, 0.5, 1.0) != ThumbHashColor(0.5, 0.5, 0.5, 1.0)
    assert ThumbHashColor(1.0, 0.0, 0.5, 1.0).to_rgba8() == (255, 0, 128, 255)
    assert ThumbHashColor(1.0, 0.0, 0.0, 1.0).to_argb32() == 0xFFFF0000


def test_image_helpers():
    image = ThumbHashImage(width=32, height=24, rgba=bytes(32 * 24 * 4))
    assert image.pixel_count == 32 * 24
    assert '32x24' in str(image)
    assert image.get_pixel(31, 23) == (0, 0, 0, 0)
    with pytest.raises(IndexError):
        image.get_pixel(32, 0)
    with pytest.raises(ValueError):
        ThumbHashImage(width=2, height=2, rgba=bytes(15))


def test_get_pixel_matches_buffer():
    image = thumbhash_to_rgba(base64.b64decode(LANDSCAPE_B64))
    assert image.get_pixel(0, 0) == tuple(image.rgba[:4])
    x, y = 5, 7
    i = (y * image.width + x) * 4
    assert image.get_pixel(x, y) == tuple(image.rgba[i:i + 4])


def test_async_functions_match_sync():
    blob = base64.b64decode(LANDSCAPE_B64)
    pixels = generate_solid(8, 8).tobytes()
    
    async def run():
        image = await thumbhash_to_rgba_async(blob)
        png = await thumbhash_image_to_png_async(image)
        encoded = await rgba_to_thumbhash_async(8, 8, pixels)
        return image, png, encoded
    
    image, png, encoded = asyncio.run(run())
    assert image == thumbhash_to_rgba(blob)
    assert png == thumbhash_image_to_png(image)
    assert encoded == rgba_to_thumbhash(8, 8, pixels)


def test_async_errors_propagate():
    with pytest.raises(MalformedInputError):
        asyncio.run(thumbhash_to_rgba_async(b'\x00\x01\x02'))


def test_async_wrapper_shares_cache():
    thumb = ThumbHash.from_base64(ALPHA_B64)
    
    async def run():
        return await thumb.to_rgba_async(), await thumb.to_png_bytes_async()
    
    image, png = asyncio.run(run())
    assert thumb.to_rgba() is image
    assert thumb.to_png_bytes() is png
