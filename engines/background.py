"""Run codec operations off the calling thread with asyncio."""

import asyncio

from models.thumbhash_image import ThumbHashImage
from engines.pipeline import rgba_to_thumbhash, thumbhash_to_rgba
from engines.png_encoder import thumbhash_image_to_png


async def thumbhash_to_rgba_async(blob) -> ThumbHashImage:
    """thumbhash_to_rgba in a worker thread."""
    return await asyncio.to_thread(thumbhash_to_rgba, bytes(blob))


async def rgba_to_thumbhash_async(width: int, height: int, rgba) -> bytes:
    """rgba_to_thumbhash in a worker thread."""
    return await asyncio.to_thread(rgba_to_thumbhash, width, height, rgba)


async def thumbhash_image_to_png_async(image: ThumbHashImage) -> bytes:
    """thumbhash_image_to_png in a worker thread."""
    return await asyncio.to_thread(thumbhash_image_to_png, image)
