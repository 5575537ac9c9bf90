# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Color quantization by volume-driven box cutting.

A variant of median-cut tuned for picking out distinct colors rather than
representative ones. The RGB cube is split recursively, but the box chosen
for the next cut is the one with the largest color volume, not the one with
the most pixels. Boxes spanning a wide range of colors are cut first, so
the result favours color diversity over pixel-count balance.

Pipeline:
1. Drop near-black, near-white and red-I-line colors from the histogram
2. If few enough colors remain, each distinct RGB is an opaque swatch
3. Otherwise cut boxes until the budget is reached, then average each box
4. Filter the averaged colors again
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from swatchcut.color.colorspace import rgb_to_hsl_array
from swatchcut.color.packed import OPAQUE, split_rgb
from swatchcut.measure.histogram import ColorHistogram
from swatchcut.measure.vbox import VBox
from swatchcut.schema import Swatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorFilter:
    """Thresholds for colors the quantizer ignores."""

    # Lightness at or below which a color counts as black
    black_max_lightness: float = 0.05

    # Lightness at or above which a color counts as white
    white_min_lightness: float = 0.95

    # Hue window (degrees) and saturation ceiling of the red I-line.
    # Skin tones sit here and would otherwise dominate portraits.
    red_i_line_min_hue: float = 10.0
    red_i_line_max_hue: float = 37.0
    red_i_line_max_saturation: float = 0.82

    def should_ignore(self, hsl: tuple[float, float, float]) -> bool:
        """True if a color with this HSL should be dropped."""
        return bool(self.ignore_mask(np.asarray([hsl], dtype=np.float64))[0])

    def ignore_mask(self, hsl: NDArray[np.float64]) -> NDArray[np.bool_]:
        """Vectorized should_ignore over an (N, 3) HSL array."""
        hsl = np.asarray(hsl, dtype=np.float64).reshape(-1, 3)
        hue_degrees = hsl[:, 0] * 360.0
        saturation = hsl[:, 1]
        lightness = hsl[:, 2]

        is_black = lightness <= self.black_max_lightness
        is_white = lightness >= self.white_min_lightness
        near_red_i_line = (
            (hue_degrees >= self.red_i_line_min_hue)
            & (hue_degrees <= self.red_i_line_max_hue)
            & (saturation <= self.red_i_line_max_saturation)
        )
        return is_black | is_white | near_red_i_line


class ColorCutQuantizer:
    """
    Reduce a histogram to at most ``max_colors`` swatches.

    Attributes:
        colors: The colors that survived filtering. Box cutting reorders
            this array in place.
        populations: Population of each color, kept parallel to ``colors``.
        quantized_colors: The resulting swatches
    """

    def __init__(
        self,
        histogram: ColorHistogram,
        max_colors: int,
        *,
        color_filter: Optional[ColorFilter] = None,
    ) -> None:
        if max_colors < 1:
            raise ValueError(f"max_colors must be >= 1, got {max_colors}")

        self.color_filter = color_filter or ColorFilter()

        raw_colors = histogram.colors
        raw_counts = histogram.counts

        keep = ~self.color_filter.ignore_mask(rgb_to_hsl_array(split_rgb(raw_colors)))

        self.colors: NDArray[np.int64] = raw_colors[keep].copy()
        self.populations: NDArray[np.int64] = raw_counts[keep].copy()

        valid_color_count = len(self.colors)
        logger.debug(
            "Filtered histogram: %d of %d colors kept",
            valid_color_count, len(raw_colors),
        )

        if valid_color_count <= max_colors:
            self.quantized_colors = self._opaque_swatches()
        else:
            self.quantized_colors = self._quantize_pixels(
                valid_color_count - 1, max_colors
            )

    def _opaque_swatches(self) -> list[Swatch]:
        """One opaque swatch per distinct RGB. Colors differing only in alpha merge."""
        opaque = (self.colors & 0xFFFFFF) | (OPAQUE << 24)
        unique, inverse = np.unique(opaque, return_inverse=True)
        totals = np.bincount(inverse.ravel(), weights=self.populations, minlength=len(unique))
        return [
            Swatch(rgb=int(color), population=int(population))
            for color, population in zip(unique, totals)
        ]

    def _quantize_pixels(self, max_color_index: int, max_colors: int) -> list[Swatch]:
        # Start with a single box holding every color
        boxes = self._split_boxes(
            VBox(self.colors, self.populations, 0, max_color_index), max_colors
        )
        return self._generate_average_colors(boxes)

    def _split_boxes(self, first: VBox, max_size: int) -> list[VBox]:
        """
        Repeatedly split the largest-volume box until ``max_size`` boxes
        exist or the largest box cannot be split.

        The queue is a heap keyed on (-volume, insertion order), so boxes of
        equal volume are taken in the order they were offered.
        """
        counter = itertools.count()
        queue: list[tuple[int, int, VBox]] = []

        def offer(box: VBox) -> None:
            heapq.heappush(queue, (-box.volume, next(counter), box))

        offer(first)

        while len(queue) < max_size:
            _, _, box = heapq.heappop(queue)

            if not box.can_split():
                # Put back rather than dropped, so its colors still get a swatch
                offer(box)
                logger.debug(
                    "Stopped splitting at %d boxes: largest box holds one color",
                    len(queue),
                )
                break

            offer(box.split_box())
            offer(box)

        return [box for _, _, box in sorted(queue)]

    def _generate_average_colors(self, boxes: list[VBox]) -> list[Swatch]:
        swatches = []
        for box in boxes:
            swatch = box.average_color()
            # Averaging can land on a color we would have ignored
            if not self.color_filter.should_ignore(swatch.hsl):
                swatches.append(swatch)

        logger.debug(
            "Quantized to %d swatches from %d boxes", len(swatches), len(boxes)
        )
        return swatches
