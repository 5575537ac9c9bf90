# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""Tests for the color histogram."""

import numpy as np
import pytest

from swatchcut.measure.histogram import ColorHistogram


class TestHistogramScenarios:

    def test_two_dark_one_light(self):
        hist = ColorHistogram([0x7F101010, 0x7F101010, 0x7FF0F0F0])
        assert hist.number_of_colors == 2
        assert list(hist.colors) == [0x7F101010, 0x7FF0F0F0]
        assert list(hist.counts) == [2, 1]

    def test_empty(self):
        hist = ColorHistogram([])
        assert hist.number_of_colors == 0
        assert len(hist.colors) == 0
        assert len(hist.counts) == 0

    def test_single_pixel(self):
        hist = ColorHistogram([0x7F123456])
        assert list(hist.colors) == [0x7F123456]
        assert list(hist.counts) == [1]

    def test_unsorted_input(self):
        hist = ColorHistogram([3, 1, 2, 1, 3, 3])
        assert list(hist.colors) == [1, 2, 3]
        assert list(hist.counts) == [2, 1, 3]

    def test_accepts_generator(self):
        hist = ColorHistogram(c for c in [5, 5, 6])
        assert list(hist.counts) == [2, 1]


class TestHistogramProperties:

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_counts_sum_to_pixel_count(self, seed):
        pixels = np.random.RandomState(seed).randint(0x7F000000, 0x7F000040, size=1000)
        hist = ColorHistogram(pixels)
        assert int(hist.counts.sum()) == len(pixels)

    def test_colors_distinct_and_ascending(self):
        pixels = np.random.RandomState(3).randint(0, 50, size=500)
        hist = ColorHistogram(pixels)
        assert len(set(hist.colors.tolist())) == hist.number_of_colors
        assert np.all(np.diff(hist.colors) > 0)

    def test_accepts_2d_array(self):
        pixels = np.array([[1, 2], [2, 2]])
        hist = ColorHistogram(pixels)
        assert list(hist.colors) == [1, 2]
        assert list(hist.counts) == [1, 3]

    def test_immutable(self):
        hist = ColorHistogram([1, 2, 2])
        with pytest.raises(ValueError):
            hist.colors[0] = 9
        with pytest.raises(ValueError):
            hist.counts[0] = 9

    def test_input_not_modified(self):
        pixels = np.array([3, 1, 2])
        ColorHistogram(pixels)
        assert list(pixels) == [3, 1, 2]
