# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Schema definitions for swatches and palettes.

All types in this module are immutable (frozen dataclasses).
Once a palette is generated, its role assignment cannot be altered.
"""

from swatchcut.schema.swatch import (
    MIN_CONTRAST_BODY_TEXT,
    MIN_CONTRAST_TITLE_TEXT,
    Palette,
    Role,
    Swatch,
)

__all__ = [
    # Core types
    "Swatch",
    "Role",
    "Palette",
    # Text contrast thresholds
    "MIN_CONTRAST_TITLE_TEXT",
    "MIN_CONTRAST_BODY_TEXT",
]
