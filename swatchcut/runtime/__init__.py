# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Theme delivery runtime for swatchcut.

Serialization of Palette data for downstream consumers:

1. JSON -- Theme files and inter-process hand-off
2. CSS -- Custom properties for web theming
3. Markdown -- Human-readable reports

The delivery layer never modifies palette content.
"""

from swatchcut.runtime.serializers import (
    SerializerFormat,
    to_css_variables,
    to_json,
    to_markdown,
)

__all__ = [
    "to_json",
    "to_css_variables",
    "to_markdown",
    "SerializerFormat",
]
