# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Packed color ints.

A color is a single int made of four bytes::

    (alpha << 24) | (red << 16) | (green << 8) | blue

Red, green and blue range over 0-255. Alpha ranges over 0-127 only, with
127 meaning fully opaque, so opaque black is 0x7F000000 and transparent
white is 0x00FFFFFF. Values are unpremultiplied: transparency lives in the
alpha byte alone.

Packing performs no range checks. Components outside their range produce
an undefined color; callers are responsible for the range.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


OPAQUE = 0x7F

WHITE = 0x7FFFFFFF
BLACK = 0x7F000000

# Channel identifiers, ordered by priority when breaking ties
COMPONENT_RED = 0
COMPONENT_GREEN = 1
COMPONENT_BLUE = 2

_SHIFTS = {COMPONENT_RED: 16, COMPONENT_GREEN: 8, COMPONENT_BLUE: 0}


# =============================================================================
# Scalar packing
# =============================================================================


def pack_rgb(red: int, green: int, blue: int) -> int:
    """Pack an opaque color from its red, green and blue components."""
    return (OPAQUE << 24) | (red << 16) | (green << 8) | blue


def pack_argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack a color from alpha (0-127) and red, green, blue (0-255)."""
    return (alpha << 24) | (red << 16) | (green << 8) | blue


def alpha(color: int) -> int:
    return (color >> 24) & 0x7F


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def components(color: int) -> tuple[int, int, int, int]:
    """Return (alpha, red, green, blue) of a packed color."""
    return alpha(color), red(color), green(color), blue(color)


def with_alpha(color: int, new_alpha: int) -> int:
    """Return ``color`` with its alpha byte replaced by ``new_alpha``."""
    return (color & 0x00FFFFFF) | (new_alpha << 24)


def is_opaque(color: int) -> bool:
    return alpha(color) == OPAQUE


def to_hex(color: int) -> str:
    """Format the RGB part of a packed color as ``#RRGGBB``."""
    return f"#{red(color):02X}{green(color):02X}{blue(color):02X}"


def from_hex(hex_str: str) -> int:
    """
    Parse ``#RRGGBB`` (or ``RRGGBB``) into an opaque packed color.

    Raises:
        ValueError: If the string is not six hex digits.
    """
    digits = hex_str.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected a #RRGGBB hex color, got {hex_str!r}")
    value = int(digits, 16)
    return (OPAQUE << 24) | value


# =============================================================================
# Vectorized packing
# =============================================================================


def pack_rgba_array(pixels: NDArray[np.uint8]) -> NDArray[np.int64]:
    """
    Pack an (N, 3) or (N, 4) uint8 array into packed color ints.

    Three-channel input is treated as opaque. Four-channel input carries an
    8-bit alpha that is scaled down to the 0-127 range.
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 2 or pixels.shape[1] not in (3, 4):
        raise ValueError(f"Expected (N, 3) or (N, 4) array, got shape {pixels.shape}")

    channels = pixels.astype(np.int64)
    if channels.shape[1] == 4:
        a = channels[:, 3] >> 1
    else:
        a = np.full(len(channels), OPAQUE, dtype=np.int64)

    return (a << 24) | (channels[:, 0] << 16) | (channels[:, 1] << 8) | channels[:, 2]


def channel(colors: NDArray[np.int64], dimension: int) -> NDArray[np.int64]:
    """Extract one RGB channel (COMPONENT_*) from an array of packed colors."""
    return (np.asarray(colors, dtype=np.int64) >> _SHIFTS[dimension]) & 0xFF


def split_rgb(colors: NDArray[np.int64]) -> NDArray[np.int64]:
    """Unpack an array of packed colors into an (N, 3) array of RGB."""
    colors = np.asarray(colors, dtype=np.int64)
    return np.stack(
        [(colors >> 16) & 0xFF, (colors >> 8) & 0xFF, colors & 0xFF],
        axis=-1,
    )
