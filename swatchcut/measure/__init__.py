# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Measurement core for swatchcut.

Histogram construction, box-cutting quantization and role selection.
All operations are deterministic and single-threaded.
"""

from swatchcut.measure.extract import extract, load_pixels
from swatchcut.measure.histogram import ColorHistogram
from swatchcut.measure.quantizer import ColorCutQuantizer, ColorFilter
from swatchcut.measure.selector import DEFAULT_TARGETS, Target, generate_palette

__all__ = [
    "extract",
    "load_pixels",
    "ColorHistogram",
    "ColorCutQuantizer",
    "ColorFilter",
    "Target",
    "DEFAULT_TARGETS",
    "generate_palette",
]
