# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Markdown block serializer.

Formats a Palette as a Markdown table, one row per role, for reports and
pull-request comments.
"""

from __future__ import annotations

from swatchcut.schema import Palette, Role


def to_markdown(palette: Palette, *, title: str = "Palette") -> str:
    """Serialize a Palette as a Markdown table.

    Args:
        palette: The Palette to serialize.
        title: Heading placed above the table. Empty for no heading.

    Returns:
        Markdown string. Unfilled roles show an em-dash placeholder, and
        synthesized swatches (population 0) are marked.

    Example::

        | Role | Hex | Population | HSL |
        |------|-----|-----------:|-----|
        | vibrant | `#D8402A` | 812 | 8°, 0.68, 0.51 |
        | light_vibrant | — | | |
    """
    lines = []
    if title:
        lines.extend([f"### {title}", ""])

    lines.append("| Role | Hex | Population | HSL |")
    lines.append("|------|-----|-----------:|-----|")

    for role in Role:
        swatch = palette.swatch(role)
        if swatch is None:
            lines.append(f"| {role.value} | — | | |")
            continue

        h, s, l = swatch.hsl
        population = str(swatch.population) if swatch.population else "synthesized"
        lines.append(
            f"| {role.value} | `{swatch.hex}` | {population} | "
            f"{h * 360:.0f}°, {s:.2f}, {l:.2f} |"
        )

    return "\n".join(lines)
