# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Color primitives for swatchcut.

Packed color ints, RGB ↔ HSL conversion and WCAG contrast helpers.
"""

from swatchcut.color.colorspace import (
    contrast_ratio,
    hsl_to_rgb,
    luminance,
    minimum_alpha_for_contrast,
    rgb_to_hsl,
    text_color_for_background,
)
from swatchcut.color.packed import BLACK, WHITE, from_hex, pack_argb, pack_rgb, to_hex

__all__ = [
    "BLACK",
    "WHITE",
    "pack_rgb",
    "pack_argb",
    "to_hex",
    "from_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "luminance",
    "contrast_ratio",
    "minimum_alpha_for_contrast",
    "text_color_for_background",
]
