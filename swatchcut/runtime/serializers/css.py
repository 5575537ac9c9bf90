# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
CSS custom property serializer.

Emits one ``--{prefix}-{role}`` property per role, plus optional
``-title`` and ``-body`` text color properties.
"""

from __future__ import annotations

from typing import Mapping, Optional

from swatchcut.color.packed import alpha, blue, green, red, to_hex
from swatchcut.runtime.serializers.base import role_slug
from swatchcut.schema import Palette, Role


def to_css_variables(
    palette: Palette,
    *,
    prefix: str = "swatch",
    selector: str = ":root",
    defaults: Optional[Mapping[Role, int]] = None,
    include_text_colors: bool = True,
) -> str:
    """Serialize a Palette as a CSS rule of custom properties.

    Args:
        palette: The Palette to serialize.
        prefix: Property name prefix.
        selector: Selector the rule is attached to.
        defaults: Packed fallback colors for unfilled roles. Unfilled
            roles without a default are omitted.
        include_text_colors: Emit title/body text colors for filled roles.

    Returns:
        CSS source.

    Example::

        :root {
          --swatch-vibrant: #D8402A;
          --swatch-vibrant-title: rgba(255, 255, 255, 0.87);
          --swatch-vibrant-body: rgba(255, 255, 255, 0.96);
        }
    """
    defaults = defaults or {}
    lines = [f"{selector} {{"]

    for role in Role:
        name = f"--{prefix}-{role_slug(role.value)}"
        swatch = palette.swatch(role)

        if swatch is None:
            if role in defaults:
                lines.append(f"  {name}: {to_hex(defaults[role])};")
            continue

        lines.append(f"  {name}: {swatch.hex};")
        if include_text_colors:
            for suffix, color in (
                ("title", swatch.title_text_color),
                ("body", swatch.body_text_color),
            ):
                if color is not None:
                    lines.append(f"  {name}-{suffix}: {_rgba(color)};")

    lines.append("}")
    return "\n".join(lines)


def _rgba(color: int) -> str:
    return (
        f"rgba({red(color)}, {green(color)}, {blue(color)}, "
        f"{alpha(color) / 127:.2f})"
    )
