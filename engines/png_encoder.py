"""
Uncompressed PNG writer for decoded placeholders.

The file is built in a buffer sized exactly up front: signature, IHDR, a
single IDAT whose zlib stream holds one stored DEFLATE block per scanline,
and IEND. Nothing is compressed.
"""

import struct

from models.thumbhash_image import ThumbHashImage
from engines.errors import InvalidArgumentError
from utils.constants import (
    PNG_SIGNATURE,
    IEND_CHUNK,
    ZLIB_HEADER,
    CRC32_POLYNOMIAL,
    ADLER_MOD,
    ADLER_NMAX,
)

# Stored DEFLATE blocks carry a 16-bit length
_MAX_ROW_BYTES = 0xFFFF


def _make_crc_table() -> list:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = (c >> 1) ^ CRC32_POLYNOMIAL if c & 1 else c >> 1
        table.append(c)
    return table


CRC32_TABLE = _make_crc_table()


def crc32(data, start: int = 0, length: int | None = None) -> int:
    """CRC-32 (PNG/zlib) of data[start:start + length], one table lookup per byte."""
    end = len(data) if length is None else start + length
    table = CRC32_TABLE
    crc = 0xFFFFFFFF
    for i in range(start, end):
        crc = (crc >> 8) ^ table[(crc ^ data[i]) & 0xFF]
    return crc ^ 0xFFFFFFFF


class Adler32:
    """
    Running Adler-32 with batched reduction.

    The sums are only reduced modulo 65521 every ADLER_NMAX bytes and once
    in digest(), which is the most that keeps them inside 32 bits.
    """
    
    def __init__(self):
        self.a1 = 1
        self.a2 = 0
        self._pending = 0
    
    def update(self, data) -> None:
        a1, a2, pending = self.a1, self.a2, self._pending
        for b in data:
            a1 += b
            a2 += a1
            pending += 1
            if pending >= ADLER_NMAX:
                a1 %= ADLER_MOD
                a2 %= ADLER_MOD
                pending = 0
        self.a1, self.a2, self._pending = a1, a2, pending
    
    def digest(self) -> int:
        return ((self.a2 % ADLER_MOD) << 16) | (self.a1 % ADLER_MOD)


def adler32(data) -> int:
    """Adler-32 of a whole buffer."""
    checksum = Adler32()
    checksum.update(data)
    return checksum.digest()


def png_size(width: int, height: int) -> int:
    """Exact byte length of the PNG written for a width x height image."""
    row = width * 4 + 1
    idat_len = 2 + height * (5 + row) + 4
    return 8 + 25 + 8 + idat_len + 4 + 12


def rgba_to_png(width: int, height: int, rgba) -> bytes:
    """Serialize straight-alpha RGBA8 pixels to an uncompressed PNG."""
    if width < 1 or height < 1:
        raise InvalidArgumentError(f"Image size must be positive, got {width}x{height}")
    row = width * 4 + 1
    if row > _MAX_ROW_BYTES:
        raise InvalidArgumentError(
            f"Image width {width} exceeds the stored-block row limit ({(_MAX_ROW_BYTES - 1) // 4})"
        )
    pixels = memoryview(rgba).cast('B')
    if pixels.nbytes != width * height * 4:
        raise InvalidArgumentError(
            f"RGBA buffer length {pixels.nbytes} does not match {width}x{height} image "
            f"(expected {width * height * 4})"
        )
    
    idat_len = 2 + height * (5 + row) + 4
    out = bytearray(png_size(width, height))
    pos = 0
    
    out[pos:pos + 8] = PNG_SIGNATURE
    pos += 8
    
    # IHDR: 8-bit RGBA, no interlace
    ihdr_start = pos
    struct.pack_into('>I4sIIBBBBB', out, pos, 13, b'IHDR', width, height, 8, 6, 0, 0, 0)
    pos += 21
    struct.pack_into('>I', out, pos, crc32(out, ihdr_start + 4, 17))
    pos += 4
    
    # IDAT
    idat_start = pos
    struct.pack_into('>I4s', out, pos, idat_len, b'IDAT')
    pos += 8
    out[pos:pos + 2] = ZLIB_HEADER
    pos += 2
    
    adler = Adler32()
    stride = width * 4
    for y in range(height):
        # Stored block header: BFINAL, LEN, NLEN (little-endian)
        struct.pack_into('<BHH', out, pos, 1 if y == height - 1 else 0, row, row ^ 0xFFFF)
        pos += 5
        # Filter type 0 (None); the zero byte is already in the buffer
        scanline_start = pos
        pos += 1
        out[pos:pos + stride] = pixels[y * stride:(y + 1) * stride]
        pos += stride
        adler.update(memoryview(out)[scanline_start:pos])
    
    struct.pack_into('>I', out, pos, adler.digest())
    pos += 4
    struct.pack_into('>I', out, pos, crc32(out, idat_start + 4, idat_len + 4))
    pos += 4
    
    out[pos:pos + 12] = IEND_CHUNK
    return bytes(out)


def thumbhash_image_to_png(image: ThumbHashImage) -> bytes:
    """PNG file bytes for a decoded placeholder."""
    return rgba_to_png(image.width, image.height, image.rgba)
