# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Serializers for Palette delivery.

Each serializer formats a Palette for a specific consumer.
All serializers preserve the palette exactly -- no modification or inference.
"""

from swatchcut.runtime.serializers.base import SerializerFormat
from swatchcut.runtime.serializers.block import to_markdown
from swatchcut.runtime.serializers.css import to_css_variables
from swatchcut.runtime.serializers.document import to_json

__all__ = [
    "SerializerFormat",
    "to_json",
    "to_css_variables",
    "to_markdown",
]
