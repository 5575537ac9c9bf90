# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""Tests for the color-cut quantizer and its color filter."""

import numpy as np
import pytest

from swatchcut.color.colorspace import rgb_to_hsl
from swatchcut.color.packed import BLACK, WHITE, pack_argb, pack_rgb
from swatchcut.measure.histogram import ColorHistogram
from swatchcut.measure.quantizer import ColorCutQuantizer, ColorFilter


def _quantize(pixels, max_colors=16, **kwargs):
    return ColorCutQuantizer(ColorHistogram(pixels), max_colors, **kwargs).quantized_colors


def _two_cluster_pixels():
    """50 blues (red 0, green 0-4) and 50 greens (red 0, blue 0-4)."""
    blues = [pack_rgb(0, i // 10, 190 + i % 10) for i in range(50)]
    greens = [pack_rgb(0, 190 + i % 10, i // 10) for i in range(50)]
    return blues + greens


def _alpha_variants(n):
    """n colors with the same RGB, one pixel each, differing only in alpha."""
    return [pack_argb(20 * (i + 1), 0, 0, 200) for i in range(n)]


class TestColorFilter:

    def test_black_ignored(self):
        assert ColorFilter().should_ignore(rgb_to_hsl(0, 0, 0))
        assert ColorFilter().should_ignore(rgb_to_hsl(10, 10, 12))

    def test_white_ignored(self):
        assert ColorFilter().should_ignore(rgb_to_hsl(255, 255, 255))
        assert ColorFilter().should_ignore(rgb_to_hsl(250, 248, 250))

    def test_skin_tone_ignored(self):
        """Desaturated orange-red sits on the red I-line."""
        assert ColorFilter().should_ignore(rgb_to_hsl(224, 172, 105))

    def test_saturated_orange_kept(self):
        """Saturation above the I-line ceiling survives."""
        assert not ColorFilter().should_ignore(rgb_to_hsl(255, 128, 0))

    def test_mid_gray_kept(self):
        assert not ColorFilter().should_ignore(rgb_to_hsl(128, 128, 128))

    def test_custom_thresholds(self):
        strict = ColorFilter(black_max_lightness=0.6)
        assert strict.should_ignore(rgb_to_hsl(128, 128, 128))

    def test_mask_matches_scalar(self):
        hsls = np.array([rgb_to_hsl(0, 0, 0), rgb_to_hsl(0, 0, 200), rgb_to_hsl(224, 172, 105)])
        assert list(ColorFilter().ignore_mask(hsls)) == [True, False, True]


class TestQuantizerScenarios:

    def test_single_mid_gray(self):
        k = 37
        swatches = _quantize([0x7F808080] * k, max_colors=16)
        assert len(swatches) == 1
        assert swatches[0].population == k
        assert swatches[0].rgb & 0xFFFFFF == 0x808080

    def test_few_colors_each_become_a_swatch(self):
        colors = [
            pack_rgb(0, 0, 200),
            pack_rgb(0, 180, 0),
            pack_rgb(120, 0, 200),
            pack_rgb(0, 150, 150),
            pack_rgb(200, 200, 0),
        ]
        pixels = []
        for count, color in enumerate(colors, start=1):
            pixels += [color] * count
        pixels += [BLACK] * 10 + [WHITE] * 10

        swatches = _quantize(pixels, max_colors=16)

        assert len(swatches) == 5
        populations = {s.rgb: s.population for s in swatches}
        assert populations == {color: n for n, color in enumerate(colors, start=1)}

    def test_direct_swatches_are_opaque(self):
        pixels = [pack_argb(100, 30, 60, 200)] * 3 + [pack_argb(20, 30, 60, 200)] * 2
        swatches = _quantize(pixels)

        assert len(swatches) == 1
        assert swatches[0].rgb == pack_rgb(30, 60, 200)
        assert swatches[0].population == 5
        assert swatches[0].body_text_color is not None

    def test_everything_filtered(self):
        assert _quantize([BLACK] * 5 + [WHITE] * 5) == []

    def test_empty_input(self):
        assert _quantize([]) == []

    def test_invalid_budget(self):
        with pytest.raises(ValueError, match="max_colors"):
            ColorCutQuantizer(ColorHistogram([BLACK]), 0)


class TestQuantizerBudget:

    @pytest.mark.parametrize("max_colors", [1, 2, 4, 16, 32])
    def test_never_exceeds_budget(self, max_colors):
        pixels = np.random.RandomState(5).randint(0, 256, size=(4000, 3))
        packed = [pack_rgb(int(r), int(g), int(b)) for r, g, b in pixels]
        swatches = _quantize(packed, max_colors=max_colors)
        assert len(swatches) <= max_colors

    def test_exact_when_within_budget(self):
        pixels = _two_cluster_pixels()
        swatches = _quantize(pixels, max_colors=100)
        assert len(swatches) == 100

    def test_population_never_exceeds_pixels(self):
        pixels = _two_cluster_pixels()
        swatches = _quantize(pixels, max_colors=8)
        assert sum(s.population for s in swatches) <= len(pixels)

    def test_averaged_swatches_pass_filter(self):
        pixels = np.random.RandomState(9).randint(0, 256, size=(2000, 3))
        packed = [pack_rgb(int(r), int(g), int(b)) for r, g, b in pixels]
        color_filter = ColorFilter()
        for swatch in _quantize(packed, max_colors=12):
            assert not color_filter.should_ignore(swatch.hsl)


class TestQuantizerSplitting:

    def test_two_clusters_separate(self):
        swatches = _quantize(_two_cluster_pixels(), max_colors=2)
        assert len(swatches) == 2
        bluish = [s for s in swatches if s.blue > s.green]
        greenish = [s for s in swatches if s.green > s.blue]
        assert len(bluish) == 1
        assert len(greenish) == 1

    def test_deterministic(self):
        pixels = np.random.RandomState(2).randint(0, 256, size=(1500, 3))
        packed = [pack_rgb(int(r), int(g), int(b)) for r, g, b in pixels]
        first = _quantize(packed, max_colors=10)
        second = _quantize(packed, max_colors=10)
        assert first == second

    def test_histogram_untouched_by_splitting(self):
        pixels = _two_cluster_pixels()
        hist = ColorHistogram(pixels)
        before = hist.colors.copy()
        ColorCutQuantizer(hist, 4)
        np.testing.assert_array_equal(hist.colors, before)

    def test_equal_volume_boxes_split_in_insertion_order(self):
        # Every box has volume 1; the multi-color remainder was offered
        # before the singleton it split from, so it is cut first
        swatches = _quantize(_alpha_variants(5), max_colors=3)
        assert [s.population for s in swatches] == [1, 3, 1]

    def test_stops_when_largest_box_holds_one_color(self):
        swatches = _quantize(_alpha_variants(5), max_colors=4)

        assert [s.population for s in swatches] == [3, 1, 1]
        assert {s.rgb for s in swatches} == {pack_rgb(0, 0, 200)}
