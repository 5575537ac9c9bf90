# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
JSON document serializer.

Formats a Palette as a JSON object keyed by role, suitable for theme
files or for handing to another process.
"""

from __future__ import annotations

import json

from swatchcut.runtime.serializers.base import SerializerFormat
from swatchcut.schema import Palette


def to_json(
    palette: Palette,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    include_swatches: bool = False,
    include_text_colors: bool = False,
) -> str:
    """Serialize a Palette as JSON.

    Args:
        palette: The Palette to serialize.
        format: Output format (JSON or JSON_PRETTY).
        include_swatches: Include every quantized swatch, not just the
            ones assigned to roles.
        include_text_colors: Include title/body text colors per swatch.

    Returns:
        JSON string. Unfilled roles are ``null``.

    Example::

        {"roles": {"vibrant": {"hex": "#D8402A", "population": 812,
                               "hsl": [7.8, 0.6822, 0.5059]},
                   "light_vibrant": null, ...}}
    """
    data = palette.to_dict(include_text_colors=include_text_colors)
    if not include_swatches:
        data.pop("swatches")

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
