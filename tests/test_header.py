"""Tests for header packing, grids and output dimensions."""

import base64
import pytest

from models.header import ThumbHashHeader
from engines.dimensions import encode_grid, channel_grids, decode_grid, decode_size
from engines.errors import MalformedInputError
from engines.header_codec import (
    pack_header,
    unpack_header,
    peek_grid,
    required_length,
    total_ac_count,
)

LANDSCAPE_HASH = base64.b64decode('3OcRJYB4d3h/iIeHeEh3eIhw+j3A')
ALPHA_HASH = base64.b64decode('3OiFBQAziIWCjHn3aGpwZ/moB8iHeHR6Zw==')


def test_pack_unpack_opaque_header():
    header = ThumbHashHeader(
        l_dc=40, p_dc=31, q_dc=33, l_scale=17, has_alpha=False,
        minor_axis=4, p_scale=12, q_scale=63, is_landscape=True,
    )
    packed = pack_header(header)
    assert len(packed) == 5
    assert unpack_header(packed, strict=False) == header


def test_pack_unpack_alpha_header():
    header = ThumbHashHeader(
        l_dc=63, p_dc=0, q_dc=1, l_scale=31, has_alpha=True,
        minor_axis=3, p_scale=0, q_scale=5, is_landscape=False,
        a_dc=9, a_scale=15,
    )
    packed = pack_header(header)
    assert len(packed) == 6
    assert (packed[2] & 0x80) != 0
    assert (packed[4] & 0x80) == 0
    assert unpack_header(packed, strict=False) == header


def test_known_landscape_header():
    header = unpack_header(LANDSCAPE_HASH)
    assert not header.has_alpha
    assert header.is_landscape
    assert (header.lx, header.ly) == (7, 5)
    assert header.header_length == 5
    assert total_ac_count(header) == 22 + 5 + 5
    assert required_length(header) == len(LANDSCAPE_HASH) == 21


def test_known_alpha_header():
    header = unpack_header(ALPHA_HASH)
    assert header.has_alpha
    assert not header.is_landscape
    assert (header.lx, header.ly) == (5, 5)
    assert header.header_length == 6
    assert required_length(header) == len(ALPHA_HASH) == 25
    assert 0.0 <= header.a_dc_value < 1.0


def test_too_short_blob():
    with pytest.raises(MalformedInputError):
        unpack_header(b'\x00\x01\x02')


def test_alpha_flag_without_alpha_byte():
    with pytest.raises(MalformedInputError):
        unpack_header(ALPHA_HASH[:5], strict=False)


def test_zero_minor_axis_rejected():
    blob = bytearray(LANDSCAPE_HASH)
    blob[3] &= 0xF8
    with pytest.raises(MalformedInputError):
        unpack_header(bytes(blob))
    with pytest.raises(MalformedInputError):
        peek_grid(bytes(blob))


def test_peek_grid_needs_five_bytes_only():
    assert peek_grid(LANDSCAPE_HASH[:5]) == (7, 5)


@pytest.mark.parametrize("w, h, has_alpha, expected", [
    (100, 100, False, (7, 7)),
    (100, 75, False, (7, 5)),
    (100, 50, False, (7, 4)),
    (100, 50, True, (5, 3)),
    (20, 100, False, (1, 7)),
    (100, 10, True, (5, 1)),
])
def test_encode_grid(w, h, has_alpha, expected):
    assert encode_grid(w, h, has_alpha) == expected


def test_channel_grids_minimum_three():
    grids = channel_grids(7, 1, True)
    assert grids['L'] == (7, 3)
    assert grids['P'] == grids['Q'] == (3, 3)
    assert grids['A'] == (5, 5)
    assert 'A' not in channel_grids(7, 7, False)


def test_decode_grid():
    assert decode_grid(5, False, True) == (7, 5)
    assert decode_grid(3, True, False) == (3, 5)


@pytest.mark.parametrize("lx, ly, expected", [
    (7, 5, (32, 23)),
    (5, 5, (32, 32)),
    (3, 7, (14, 32)),
    (7, 1, (32, 5)),
    (1, 5, (6, 32)),
])
def test_decode_size(lx, ly, expected):
    size = decode_size(lx, ly)
    assert size == expected
    assert max(size) == 32
