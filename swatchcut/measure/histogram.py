# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Color histogram over packed pixel values.

Pixels are sorted ascending, then equal neighbours are counted in a single
linear pass. The whole pixel set must be in memory; the sort dominates at
O(n log n).
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np
from numpy.typing import NDArray


class ColorHistogram:
    """
    Distinct colors of an image and how often each occurs.

    Attributes:
        colors: Distinct packed colors, ascending, no duplicates
        counts: Population of each color, parallel to ``colors``
        number_of_colors: Length of ``colors``
    """

    def __init__(self, pixels: Union[NDArray[np.integer], Iterable[int]]) -> None:
        pixels = np.asarray(
            pixels if isinstance(pixels, np.ndarray) else list(pixels),
            dtype=np.int64,
        ).ravel()

        colors, counts = _count_runs(np.sort(pixels, kind="stable"))

        colors.flags.writeable = False
        counts.flags.writeable = False

        self._colors = colors
        self._counts = counts

    @property
    def colors(self) -> NDArray[np.int64]:
        return self._colors

    @property
    def counts(self) -> NDArray[np.int64]:
        return self._counts

    @property
    def number_of_colors(self) -> int:
        return len(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return (
            f"ColorHistogram(number_of_colors={self.number_of_colors}, "
            f"pixels={int(self._counts.sum())})"
        )


def _count_runs(
    sorted_pixels: NDArray[np.int64],
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """
    Collapse runs of equal values in a sorted array.

    Returns:
        (values, run_lengths)
    """
    if len(sorted_pixels) == 0:
        return np.empty(0, dtype=np.int64), np.empty(0, dtype=np.int64)

    # Index where each new run begins
    starts = np.flatnonzero(
        np.concatenate(([True], sorted_pixels[1:] != sorted_pixels[:-1]))
    )
    run_lengths = np.diff(np.append(starts, len(sorted_pixels)))

    return sorted_pixels[starts].copy(), run_lengths.astype(np.int64)
