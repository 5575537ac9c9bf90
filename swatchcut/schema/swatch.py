# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Swatch and Palette: canonical result types.

Design principles:
- Immutable: Both types are frozen dataclasses
- Deterministic: Same swatches → same palette
- Serializable: JSON-ready via to_dict()/from_dict()

Role windows (HSL lightness / saturation):

    ┌──────────────┬───────────────────┬────────────────────┐
    │              │ vibrant (S ≥ .35) │ muted (S ≤ .40)    │
    ├──────────────┼───────────────────┼────────────────────┤
    │ light        │ L ≥ .55           │ L ≥ .55            │
    │ normal       │ .30 ≤ L ≤ .70     │ .30 ≤ L ≤ .70      │
    │ dark         │ L ≤ .45           │ L ≤ .45            │
    └──────────────┴───────────────────┴────────────────────┘
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Iterator, Optional

from swatchcut.color.colorspace import rgb_to_hsl, text_color_for_background
from swatchcut.color import packed


MIN_CONTRAST_TITLE_TEXT = 3.0
MIN_CONTRAST_BODY_TEXT = 4.5


# =============================================================================
# Swatch
# =============================================================================


@dataclass(frozen=True)
class Swatch:
    """
    A representative color and the number of source pixels it accounts for.

    HSL is computed once at construction. Text colors require an alpha
    search and are memoized on first access.

    Attributes:
        rgb: Packed color int (alpha byte is carried but ignored for HSL)
        population: Number of source pixels represented by this color.
            Synthesized swatches have population 0.
    """
    rgb: int
    population: int
    hsl: tuple[float, float, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.population < 0:
            raise ValueError(f"Population must be >= 0, got {self.population}")
        object.__setattr__(self, "hsl", rgb_to_hsl(self.red, self.green, self.blue))

    @property
    def red(self) -> int:
        return packed.red(self.rgb)

    @property
    def green(self) -> int:
        return packed.green(self.rgb)

    @property
    def blue(self) -> int:
        return packed.blue(self.rgb)

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8"."""
        return packed.to_hex(self.rgb)

    @cached_property
    def title_text_color(self) -> Optional[int]:
        """Translucent white or black legible as title text on this swatch."""
        return text_color_for_background(self.rgb, MIN_CONTRAST_TITLE_TEXT)

    @cached_property
    def body_text_color(self) -> Optional[int]:
        """Translucent white or black legible as body text on this swatch."""
        return text_color_for_background(self.rgb, MIN_CONTRAST_BODY_TEXT)

    def to_dict(self, include_text_colors: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_text_colors: If True, include title/body text colors as
                ``#AARRGGBB`` strings with alpha rescaled to 0-255.
        """
        h, s, l = self.hsl
        d = {
            "hex": self.hex,
            "population": self.population,
            "hsl": [round(h * 360.0, 1), round(s, 4), round(l, 4)],
        }
        if include_text_colors:
            d["title_text"] = _text_color_hex(self.title_text_color)
            d["body_text"] = _text_color_hex(self.body_text_color)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Swatch:
        """Deserialize from dictionary."""
        return cls(rgb=packed.from_hex(data["hex"]), population=data["population"])


def _text_color_hex(color: Optional[int]) -> Optional[str]:
    """Format a translucent text color as #AARRGGBB (8-bit alpha)."""
    if color is None:
        return None
    a = round(packed.alpha(color) * 255 / packed.OPAQUE)
    return f"#{a:02X}{packed.to_hex(color)[1:]}"


# =============================================================================
# Palette
# =============================================================================


class Role(Enum):
    """
    The six semantic roles a palette fills.

    Definition order is the order in which roles are searched; earlier
    roles claim swatches first.
    """
    VIBRANT = "vibrant"
    LIGHT_VIBRANT = "light_vibrant"
    DARK_VIBRANT = "dark_vibrant"
    MUTED = "muted"
    LIGHT_MUTED = "light_muted"
    DARK_MUTED = "dark_muted"


@dataclass(frozen=True)
class Palette:
    """
    Role assignment over a fixed list of swatches.

    Swatches are held by reference; the palette never copies or alters
    them. A role may be unfilled (None), which is a valid outcome rather
    than an error: use color() with a default to fall back.

    Attributes:
        swatches: The swatches the palette was generated from
        roles: Mapping of every Role to its selected Swatch or None
    """
    swatches: tuple[Swatch, ...]
    roles: dict[Role, Optional[Swatch]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "swatches", tuple(self.swatches))
        object.__setattr__(
            self, "roles", {role: self.roles.get(role) for role in Role}
        )

    def __hash__(self) -> int:
        return hash((self.swatches, tuple(self.roles.items())))

    def swatch(self, role: Role) -> Optional[Swatch]:
        """The swatch selected for ``role``, or None."""
        return self.roles[role]

    def color(self, role: Role, default: int) -> int:
        """Packed color for ``role``, or ``default`` if the role is unfilled."""
        swatch = self.roles[role]
        return default if swatch is None else swatch.rgb

    def __iter__(self) -> Iterator[tuple[Role, Swatch]]:
        """Iterate over filled roles in search order."""
        for role in Role:
            swatch = self.roles[role]
            if swatch is not None:
                yield role, swatch

    @property
    def vibrant(self) -> Optional[Swatch]:
        return self.roles[Role.VIBRANT]

    @property
    def light_vibrant(self) -> Optional[Swatch]:
        return self.roles[Role.LIGHT_VIBRANT]

    @property
    def dark_vibrant(self) -> Optional[Swatch]:
        return self.roles[Role.DARK_VIBRANT]

    @property
    def muted(self) -> Optional[Swatch]:
        return self.roles[Role.MUTED]

    @property
    def light_muted(self) -> Optional[Swatch]:
        return self.roles[Role.LIGHT_MUTED]

    @property
    def dark_muted(self) -> Optional[Swatch]:
        return self.roles[Role.DARK_MUTED]

    @property
    def dominant_swatch(self) -> Optional[Swatch]:
        """The swatch with the highest population, or None if empty."""
        if not self.swatches:
            return None
        return max(self.swatches, key=lambda s: s.population)

    def to_dict(self, include_text_colors: bool = False) -> dict:
        """
        Serialize to dictionary.

        Role entries refer to swatches by value, so synthesized role swatches
        (absent from ``swatches``) survive the round trip.
        """
        return {
            "swatches": [s.to_dict(include_text_colors) for s in self.swatches],
            "roles": {
                role.value: (
                    None if swatch is None else swatch.to_dict(include_text_colors)
                )
                for role, swatch in self.roles.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        swatches = tuple(Swatch.from_dict(s) for s in data["swatches"])
        roles: dict[Role, Optional[Swatch]] = {}
        for key, value in data.get("roles", {}).items():
            roles[Role(key)] = None if value is None else Swatch.from_dict(value)
        return cls(swatches=swatches, roles=roles)
