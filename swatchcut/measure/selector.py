# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Role selection: assign swatches to the six palette roles.

Each role has a saturation window, a lightness window and target values
for both. Roles are searched in a fixed order (vibrant, light vibrant,
dark vibrant, muted, light muted, dark muted). Within a role, every
eligible unclaimed swatch is scored and the best one is claimed, so later
roles never reuse it. The search is greedy: a swatch claimed by an earlier
role is never reconsidered, even if a later role would score it higher.

After the search, a missing vibrant or dark vibrant is synthesized from
the other by moving its lightness to the missing role's target.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from swatchcut.color.colorspace import hsl_to_rgb
from swatchcut.schema import Palette, Role, Swatch

logger = logging.getLogger(__name__)


TARGET_DARK_LUMA = 0.26
MAX_DARK_LUMA = 0.45

MIN_LIGHT_LUMA = 0.55
TARGET_LIGHT_LUMA = 0.74

MIN_NORMAL_LUMA = 0.3
TARGET_NORMAL_LUMA = 0.5
MAX_NORMAL_LUMA = 0.7

TARGET_MUTED_SATURATION = 0.3
MAX_MUTED_SATURATION = 0.4

TARGET_VIBRANT_SATURATION = 1.0
MIN_VIBRANT_SATURATION = 0.35

WEIGHT_SATURATION = 3
WEIGHT_LUMA = 6
WEIGHT_POPULATION = 1


@dataclass(frozen=True)
class Target:
    """Acceptable HSL window and ideal values for one role."""

    min_saturation: float
    target_saturation: float
    max_saturation: float
    min_lightness: float
    target_lightness: float
    max_lightness: float

    def accepts(self, saturation: float, lightness: float) -> bool:
        return (
            self.min_saturation <= saturation <= self.max_saturation
            and self.min_lightness <= lightness <= self.max_lightness
        )


_VIBRANT = dict(
    min_saturation=MIN_VIBRANT_SATURATION,
    target_saturation=TARGET_VIBRANT_SATURATION,
    max_saturation=1.0,
)
_MUTED = dict(
    min_saturation=0.0,
    target_saturation=TARGET_MUTED_SATURATION,
    max_saturation=MAX_MUTED_SATURATION,
)
_NORMAL = dict(
    min_lightness=MIN_NORMAL_LUMA,
    target_lightness=TARGET_NORMAL_LUMA,
    max_lightness=MAX_NORMAL_LUMA,
)
_LIGHT = dict(
    min_lightness=MIN_LIGHT_LUMA,
    target_lightness=TARGET_LIGHT_LUMA,
    max_lightness=1.0,
)
_DARK = dict(
    min_lightness=0.0,
    target_lightness=TARGET_DARK_LUMA,
    max_lightness=MAX_DARK_LUMA,
)

DEFAULT_TARGETS: Mapping[Role, Target] = {
    Role.VIBRANT: Target(**_VIBRANT, **_NORMAL),
    Role.LIGHT_VIBRANT: Target(**_VIBRANT, **_LIGHT),
    Role.DARK_VIBRANT: Target(**_VIBRANT, **_DARK),
    Role.MUTED: Target(**_MUTED, **_NORMAL),
    Role.LIGHT_MUTED: Target(**_MUTED, **_LIGHT),
    Role.DARK_MUTED: Target(**_MUTED, **_DARK),
}


# =============================================================================
# Scoring
# =============================================================================


def invert_diff(value: float, target: float) -> float:
    """1.0 when ``value`` equals ``target``, falling off linearly with distance."""
    return 1.0 - abs(value - target)


def weighted_mean(*pairs: tuple[float, float]) -> float:
    """Weighted mean of (value, weight) pairs."""
    total = 0.0
    total_weight = 0.0
    for value, weight in pairs:
        total += value * weight
        total_weight += weight
    return total / total_weight


def comparison_value(
    saturation: float,
    target_saturation: float,
    lightness: float,
    target_lightness: float,
    population: int,
    highest_population: int,
) -> float:
    """Score a swatch against a role's targets; higher is better."""
    population_share = population / highest_population if highest_population > 0 else 0.0
    return weighted_mean(
        (invert_diff(saturation, target_saturation), WEIGHT_SATURATION),
        (invert_diff(lightness, target_lightness), WEIGHT_LUMA),
        (population_share, WEIGHT_POPULATION),
    )


# =============================================================================
# Selection
# =============================================================================


def find_color(
    swatches: Sequence[Swatch],
    target: Target,
    claimed: set[int],
    highest_population: int,
) -> Optional[int]:
    """
    Find the best unclaimed swatch for ``target``.

    Args:
        swatches: Candidate swatches
        target: Role window and targets
        claimed: Indices into ``swatches`` already taken by earlier roles
        highest_population: Largest population across all swatches

    Returns:
        Index of the chosen swatch, or None if nothing is eligible.
        On equal scores the earliest swatch wins.
    """
    best: Optional[int] = None
    best_value = 0.0

    for index, swatch in enumerate(swatches):
        if index in claimed:
            continue

        _, saturation, lightness = swatch.hsl
        if not target.accepts(saturation, lightness):
            continue

        value = comparison_value(
            saturation, target.target_saturation,
            lightness, target.target_lightness,
            swatch.population, highest_population,
        )
        if best is None or value > best_value:
            best = index
            best_value = value

    return best


def _synthesize(source: Swatch, lightness: float) -> Swatch:
    """Copy hue and saturation of ``source`` at a new lightness."""
    hue, saturation, _ = source.hsl
    return Swatch(rgb=hsl_to_rgb(hue, saturation, lightness), population=0)


def generate_palette(
    swatches: Sequence[Swatch],
    targets: Mapping[Role, Target] = DEFAULT_TARGETS,
) -> Palette:
    """
    Assign swatches to roles and build a Palette.

    Args:
        swatches: Swatches to choose from, typically quantizer output
        targets: Window and targets per role. Roles missing from the
            mapping stay unfilled.

    Returns:
        Palette holding ``swatches`` and the role assignment.
    """
    swatches = tuple(swatches)
    highest_population = max((s.population for s in swatches), default=0)

    claimed: set[int] = set()
    roles: dict[Role, Optional[Swatch]] = {}

    for role in Role:
        target = targets.get(role)
        index = None
        if target is not None:
            index = find_color(swatches, target, claimed, highest_population)
        if index is None:
            roles[role] = None
            continue
        claimed.add(index)
        roles[role] = swatches[index]

    _generate_empty_swatches(roles, targets)

    logger.debug(
        "Filled %d of %d roles from %d swatches",
        sum(s is not None for s in roles.values()), len(roles), len(swatches),
    )
    return Palette(swatches=swatches, roles=roles)


def _generate_empty_swatches(
    roles: dict[Role, Optional[Swatch]],
    targets: Mapping[Role, Target],
) -> None:
    """Fill a missing vibrant or dark vibrant role from the other one."""
    vibrant_luma = targets.get(Role.VIBRANT, DEFAULT_TARGETS[Role.VIBRANT]).target_lightness
    dark_luma = targets.get(
        Role.DARK_VIBRANT, DEFAULT_TARGETS[Role.DARK_VIBRANT]
    ).target_lightness

    if roles[Role.VIBRANT] is None and roles[Role.DARK_VIBRANT] is not None:
        roles[Role.VIBRANT] = _synthesize(roles[Role.DARK_VIBRANT], vibrant_luma)
        logger.debug("Synthesized vibrant from dark vibrant")

    if roles[Role.DARK_VIBRANT] is None and roles[Role.VIBRANT] is not None:
        roles[Role.DARK_VIBRANT] = _synthesize(roles[Role.VIBRANT], dark_luma)
        logger.debug("Synthesized dark vibrant from vibrant")
