# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
VBox: a tightly fitting box over a run of colors.

A box covers the inclusive index range [lower_index, upper_index] of a
color array shared with the quantizer, and tracks the per-channel min/max
of the colors in that range. Splitting reorders the box's own slice of the
shared arrays (never anything outside it) so that the colors are sorted by
the channel being cut.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from swatchcut.color.packed import (
    COMPONENT_BLUE,
    COMPONENT_GREEN,
    COMPONENT_RED,
    channel,
    pack_rgb,
)
from swatchcut.errors import InvalidSplitError
from swatchcut.schema import Swatch


def channel_sort_order(colors: NDArray[np.int64], dimension: int) -> NDArray[np.intp]:
    """
    Return the stable ordering of ``colors`` by one channel.

    The sort key moves ``dimension`` into the most significant byte and
    keeps the remaining channels below it (RGB, GRB or BGR), so ties on the
    chosen channel fall back to the other two. Alpha is not part of the key.
    The input is not modified.
    """
    r = channel(colors, COMPONENT_RED)
    g = channel(colors, COMPONENT_GREEN)
    b = channel(colors, COMPONENT_BLUE)

    if dimension == COMPONENT_GREEN:
        key = (g << 16) | (r << 8) | b
    elif dimension == COMPONENT_BLUE:
        key = (b << 16) | (g << 8) | r
    else:
        key = (r << 16) | (g << 8) | b

    return np.argsort(key, kind="stable")


class VBox:
    """Represents a tightly fitting box around a color space."""

    def __init__(
        self,
        colors: NDArray[np.int64],
        populations: NDArray[np.int64],
        lower_index: int,
        upper_index: int,
    ) -> None:
        self._colors = colors
        self._populations = populations
        self.lower_index = lower_index
        self.upper_index = upper_index

        self.min_red = self.min_green = self.min_blue = 255
        self.max_red = self.max_green = self.max_blue = 0
        self.fit_box()

    def __repr__(self) -> str:
        return (
            f"VBox([{self.lower_index}, {self.upper_index}], "
            f"volume={self.volume})"
        )

    @property
    def volume(self) -> int:
        return (
            (self.max_red - self.min_red + 1)
            * (self.max_green - self.min_green + 1)
            * (self.max_blue - self.min_blue + 1)
        )

    @property
    def color_count(self) -> int:
        return self.upper_index - self.lower_index + 1

    def can_split(self) -> bool:
        return self.color_count > 1

    def _slice(self) -> slice:
        return slice(self.lower_index, self.upper_index + 1)

    def fit_box(self) -> None:
        """Recompute the bounds to tightly fit the colors in the box."""
        colors = self._colors[self._slice()]
        if len(colors) == 0:
            raise ValueError(
                f"Empty box range [{self.lower_index}, {self.upper_index}]"
            )

        r = channel(colors, COMPONENT_RED)
        g = channel(colors, COMPONENT_GREEN)
        b = channel(colors, COMPONENT_BLUE)

        self.min_red, self.max_red = int(r.min()), int(r.max())
        self.min_green, self.max_green = int(g.min()), int(g.max())
        self.min_blue, self.max_blue = int(b.min()), int(b.max())

    def longest_color_dimension(self) -> int:
        """
        Return the channel this box is longest in.

        Red wins all ties; green wins ties against blue.
        """
        red_length = self.max_red - self.min_red
        green_length = self.max_green - self.min_green
        blue_length = self.max_blue - self.min_blue

        if red_length >= green_length and red_length >= blue_length:
            return COMPONENT_RED
        if green_length >= blue_length:
            return COMPONENT_GREEN
        return COMPONENT_BLUE

    def midpoint(self, dimension: int) -> float:
        """Midpoint of this box's bounds in ``dimension``."""
        if dimension == COMPONENT_GREEN:
            return (self.min_green + self.max_green) / 2
        if dimension == COMPONENT_BLUE:
            return (self.min_blue + self.max_blue) / 2
        return (self.min_red + self.max_red) / 2

    def find_split_point(self) -> int:
        """
        Sort the box by its longest channel and find where to cut.

        The split point is the first index whose channel value reaches the
        box's midpoint in that channel, capped at ``upper_index - 1`` so
        both halves keep at least one color. Falls back to ``lower_index``
        when no color reaches the midpoint.

        Returns:
            Index of the last color that stays in this box.
        """
        dimension = self.longest_color_dimension()
        # Bounds are read before the slice is reordered
        dimension_midpoint = self.midpoint(dimension)

        window = self._slice()
        order = channel_sort_order(self._colors[window], dimension)
        self._colors[window] = self._colors[window][order]
        self._populations[window] = self._populations[window][order]

        values = channel(self._colors[window], dimension)
        reached = np.flatnonzero(values >= dimension_midpoint)

        if len(reached) == 0:
            return self.lower_index

        return min(self.lower_index + int(reached[0]), self.upper_index - 1)

    def split_box(self) -> VBox:
        """
        Split this box at the midpoint of its longest dimension.

        This box keeps the lower part of the range; the returned box holds
        the upper part. Both are refitted.

        Raises:
            InvalidSplitError: If the box holds a single color.
        """
        if not self.can_split():
            raise InvalidSplitError("Cannot split a box with only 1 color")

        split_point = self.find_split_point()

        new_box = VBox(
            self._colors, self._populations, split_point + 1, self.upper_index
        )

        self.upper_index = split_point
        self.fit_box()

        return new_box

    def average_color(self) -> Swatch:
        """
        Population-weighted average color of the box.

        Each channel is rounded half-up and clamped to [0, 255]. The swatch
        population is the total population of the box.
        """
        window = self._slice()
        colors = self._colors[window]
        weights = self._populations[window].astype(np.float64)
        total = float(weights.sum())

        def _mean(dimension: int) -> int:
            weighted = float(np.dot(channel(colors, dimension), weights))
            return max(0, min(255, int(np.floor(weighted / total + 0.5))))

        return Swatch(
            rgb=pack_rgb(
                _mean(COMPONENT_RED), _mean(COMPONENT_GREEN), _mean(COMPONENT_BLUE)
            ),
            population=int(total),
        )
