# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Color space conversions and contrast math.

- RGB ↔ HSL (hue scaled to [0, 1), saturation and lightness in [0, 1])
- WCAG relative luminance and contrast ratio
- Minimum-alpha search for legible text over a background

References:
- Relative luminance: https://www.w3.org/TR/WCAG20/#relativeluminancedef
- Contrast ratio: https://www.w3.org/TR/WCAG20/#contrast-ratiodef
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from swatchcut.color.packed import (
    BLACK,
    OPAQUE,
    WHITE,
    alpha,
    blue,
    green,
    is_opaque,
    pack_argb,
    pack_rgb,
    red,
    with_alpha,
)
from swatchcut.errors import TranslucentBackgroundError


MIN_ALPHA_SEARCH_MAX_ITERATIONS = 10
MIN_ALPHA_SEARCH_PRECISION = 5


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


def _clamp_byte(value: int) -> int:
    return max(0, min(255, value))


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert RGB components [0-255] to HSL.

    Returns:
        (hue, saturation, lightness) where hue is degrees / 360 in [0, 1)
        and saturation, lightness are in [0, 1]. Grays have hue and
        saturation 0.
    """
    rf = r / 255.0
    gf = g / 255.0
    bf = b / 255.0

    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    delta = mx - mn

    lightness = (mx + mn) / 2.0

    if mx == mn:
        return 0.0, 0.0, lightness

    if mx == rf:
        hue = ((gf - bf) / delta) % 6.0
    elif mx == gf:
        hue = ((bf - rf) / delta) + 2.0
    else:
        hue = ((rf - gf) / delta) + 4.0

    saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))

    return ((hue * 60.0) % 360.0) / 360.0, saturation, lightness


def rgb_to_hsl_array(rgb: NDArray[np.int64]) -> NDArray[np.float64]:
    """
    Vectorized rgb_to_hsl.

    Args:
        rgb: Array of shape (N, 3) with RGB values [0-255]

    Returns:
        Array of shape (N, 3) with (hue, saturation, lightness) rows.
    """
    rgb = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0
    rf, gf, bf = rgb[:, 0], rgb[:, 1], rgb[:, 2]

    mx = rgb.max(axis=1)
    mn = rgb.min(axis=1)
    delta = mx - mn
    lightness = (mx + mn) / 2.0

    chromatic = delta > 0
    # Avoid division warnings for grays; their hue and saturation stay 0
    safe_delta = np.where(chromatic, delta, 1.0)

    hue = np.select(
        [mx == rf, mx == gf],
        [((gf - bf) / safe_delta) % 6.0, ((bf - rf) / safe_delta) + 2.0],
        default=((rf - gf) / safe_delta) + 4.0,
    )
    hue = np.where(chromatic, ((hue * 60.0) % 360.0) / 360.0, 0.0)

    denom = 1.0 - np.abs(2.0 * lightness - 1.0)
    saturation = np.where(
        chromatic,
        delta / np.where(denom > 0, denom, 1.0),
        0.0,
    )

    return np.stack([hue, saturation, lightness], axis=-1)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> int:
    """
    Convert HSL back to an opaque packed color.

    Inverse of rgb_to_hsl. Components are rounded half-up and clamped to
    [0, 255].
    """
    degrees = hue * 360.0

    c = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
    m = lightness - 0.5 * c
    x = c * (1.0 - abs((degrees / 60.0) % 2.0 - 1.0))

    segment = int(degrees // 60.0)

    if segment == 0:
        rf, gf, bf = c, x, 0.0
    elif segment == 1:
        rf, gf, bf = x, c, 0.0
    elif segment == 2:
        rf, gf, bf = 0.0, c, x
    elif segment == 3:
        rf, gf, bf = 0.0, x, c
    elif segment == 4:
        rf, gf, bf = x, 0.0, c
    else:
        rf, gf, bf = c, 0.0, x

    return pack_rgb(
        _clamp_byte(_round_half_up(255.0 * (rf + m))),
        _clamp_byte(_round_half_up(255.0 * (gf + m))),
        _clamp_byte(_round_half_up(255.0 * (bf + m))),
    )


# =============================================================================
# Luminance and contrast
# =============================================================================


def _linearize(component: float) -> float:
    if component < 0.03928:
        return component / 12.92
    return ((component + 0.055) / 1.055) ** 2.4


def luminance(color: int) -> float:
    """WCAG relative luminance of a packed color, in [0, 1]."""
    return (
        0.2126 * _linearize(red(color) / 255.0)
        + 0.7152 * _linearize(green(color) / 255.0)
        + 0.0722 * _linearize(blue(color) / 255.0)
    )


def composite_colors(foreground: int, background: int) -> int:
    """
    Composite ``foreground`` over ``background`` (source-over).

    Both colors may be translucent; alpha uses the 0-127 scale.
    """
    fg_alpha = alpha(foreground) / OPAQUE
    bg_alpha = alpha(background) / OPAQUE

    out_alpha = fg_alpha + bg_alpha * (1.0 - fg_alpha)
    if out_alpha == 0:
        return 0

    def _component(fg_c: int, bg_c: int) -> int:
        value = (fg_c * fg_alpha + bg_c * bg_alpha * (1.0 - fg_alpha)) / out_alpha
        return _clamp_byte(_round_half_up(value))

    return pack_argb(
        _round_half_up(out_alpha * OPAQUE),
        _component(red(foreground), red(background)),
        _component(green(foreground), green(background)),
        _component(blue(foreground), blue(background)),
    )


def contrast_ratio(foreground: int, background: int) -> float:
    """
    WCAG contrast ratio between two colors, in [1, 21].

    A translucent foreground is composited over the background first.

    Raises:
        TranslucentBackgroundError: If the background is not fully opaque.
    """
    if not is_opaque(background):
        raise TranslucentBackgroundError(
            f"Background must be opaque, got alpha {alpha(background)}"
        )

    if not is_opaque(foreground):
        foreground = composite_colors(foreground, background)

    fg_luminance = luminance(foreground) + 0.05
    bg_luminance = luminance(background) + 0.05

    return max(fg_luminance, bg_luminance) / min(fg_luminance, bg_luminance)


def minimum_alpha_for_contrast(
    foreground: int,
    background: int,
    min_contrast_ratio: float,
) -> Optional[int]:
    """
    Find the smallest alpha for ``foreground`` that still reaches
    ``min_contrast_ratio`` against ``background``.

    Binary search over the 0-127 alpha scale, stopping after
    MIN_ALPHA_SEARCH_MAX_ITERATIONS rounds or once the search window is no
    wider than MIN_ALPHA_SEARCH_PRECISION. The upper end of the window is
    returned, which is known to pass.

    Returns:
        The alpha value, or None if even the opaque foreground fails.

    Raises:
        TranslucentBackgroundError: If the background is not fully opaque.
    """
    if not is_opaque(background):
        raise TranslucentBackgroundError(
            f"Background must be opaque, got alpha {alpha(background)}"
        )

    if contrast_ratio(with_alpha(foreground, OPAQUE), background) < min_contrast_ratio:
        return None

    iterations = 0
    min_alpha = 0
    max_alpha = OPAQUE

    while (
        iterations <= MIN_ALPHA_SEARCH_MAX_ITERATIONS
        and (max_alpha - min_alpha) > MIN_ALPHA_SEARCH_PRECISION
    ):
        test_alpha = (min_alpha + max_alpha) // 2
        ratio = contrast_ratio(with_alpha(foreground, test_alpha), background)

        if ratio < min_contrast_ratio:
            min_alpha = test_alpha
        else:
            max_alpha = test_alpha

        iterations += 1

    return max_alpha


def text_color_for_background(background: int, min_contrast_ratio: float) -> Optional[int]:
    """
    Pick a translucent white or black text color legible on ``background``.

    White is tried first since most swatches are dark enough for it.

    Returns:
        Packed color with the minimum sufficient alpha, or None if neither
        white nor black reaches the ratio.
    """
    white_alpha = minimum_alpha_for_contrast(WHITE, background, min_contrast_ratio)
    if white_alpha is not None:
        return with_alpha(WHITE, white_alpha)

    black_alpha = minimum_alpha_for_contrast(BLACK, background, min_contrast_ratio)
    if black_alpha is not None:
        return with_alpha(BLACK, black_alpha)

    return None
