# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Swatchcut -- Prominent color extraction for UI theming.

Reduces an image to a handful of representative swatches and assigns
them to six roles: vibrant, muted, and light/dark variants of each.

Quick start::

    from swatchcut import extract, Role

    palette = extract("cover.jpg")
    palette.vibrant                       # Swatch or None
    palette.color(Role.DARK_MUTED, 0x7F000000)  # Packed color with fallback
"""

from __future__ import annotations

__version__ = "1.0.0"

from swatchcut.errors import (
    InvalidSplitError,
    SwatchcutError,
    TranslucentBackgroundError,
    UnsupportedImageError,
)
from swatchcut.measure import (
    ColorCutQuantizer,
    ColorFilter,
    ColorHistogram,
    extract,
    generate_palette,
)
from swatchcut.schema import Palette, Role, Swatch

__all__ = [
    # Core API
    "extract",
    "generate_palette",
    "Palette",
    "Role",
    "Swatch",
    # Pipeline stages
    "ColorHistogram",
    "ColorCutQuantizer",
    "ColorFilter",
    # Errors
    "SwatchcutError",
    "UnsupportedImageError",
    "InvalidSplitError",
    "TranslucentBackgroundError",
    # Version
    "__version__",
]
