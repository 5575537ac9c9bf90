# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""Tests for packed color ints."""

import numpy as np
import pytest

from swatchcut.color.packed import (
    BLACK,
    WHITE,
    COMPONENT_BLUE,
    COMPONENT_GREEN,
    COMPONENT_RED,
    alpha,
    blue,
    channel,
    components,
    from_hex,
    green,
    is_opaque,
    pack_argb,
    pack_rgb,
    pack_rgba_array,
    red,
    split_rgb,
    to_hex,
    with_alpha,
)


class TestScalarPacking:

    def test_pack_rgb_is_opaque(self):
        color = pack_rgb(0x10, 0x20, 0x30)
        assert color == 0x7F102030
        assert is_opaque(color)

    def test_components(self):
        color = pack_argb(64, 1, 2, 3)
        assert components(color) == (64, 1, 2, 3)
        assert alpha(color) == 64
        assert red(color) == 1
        assert green(color) == 2
        assert blue(color) == 3

    def test_constants(self):
        assert components(BLACK) == (127, 0, 0, 0)
        assert components(WHITE) == (127, 255, 255, 255)

    def test_with_alpha_keeps_rgb(self):
        color = with_alpha(pack_rgb(9, 8, 7), 0)
        assert components(color) == (0, 9, 8, 7)
        assert not is_opaque(color)


class TestHex:

    def test_to_hex(self):
        assert to_hex(pack_rgb(0x39, 0x41, 0xC8)) == "#3941C8"

    def test_to_hex_ignores_alpha(self):
        assert to_hex(with_alpha(WHITE, 10)) == "#FFFFFF"

    def test_from_hex(self):
        assert from_hex("#3941C8") == pack_rgb(0x39, 0x41, 0xC8)
        assert from_hex("3941c8") == pack_rgb(0x39, 0x41, 0xC8)

    def test_from_hex_rejects_short(self):
        with pytest.raises(ValueError, match="RRGGBB"):
            from_hex("#FFF")


class TestArrayPacking:

    def test_rgb_array_is_opaque(self):
        pixels = np.array([[255, 0, 0], [0, 128, 255]], dtype=np.uint8)
        packed = pack_rgba_array(pixels)
        assert list(packed) == [pack_rgb(255, 0, 0), pack_rgb(0, 128, 255)]

    def test_rgba_alpha_scaled_to_7_bits(self):
        pixels = np.array([[1, 2, 3, 255], [1, 2, 3, 0], [1, 2, 3, 128]], dtype=np.uint8)
        packed = pack_rgba_array(pixels)
        assert [alpha(int(c)) for c in packed] == [127, 0, 64]

    def test_invalid_shape_raises(self):
        with pytest.raises(ValueError, match="Expected"):
            pack_rgba_array(np.zeros((4, 2), dtype=np.uint8))

    def test_channel_extraction(self):
        colors = np.array([pack_rgb(10, 20, 30), pack_rgb(40, 50, 60)])
        assert list(channel(colors, COMPONENT_RED)) == [10, 40]
        assert list(channel(colors, COMPONENT_GREEN)) == [20, 50]
        assert list(channel(colors, COMPONENT_BLUE)) == [30, 60]

    def test_split_rgb(self):
        colors = np.array([pack_rgb(10, 20, 30)])
        np.testing.assert_array_equal(split_rgb(colors), [[10, 20, 30]])
