# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""Exception types raised by swatchcut."""

from __future__ import annotations


class SwatchcutError(Exception):
    """Base class for all swatchcut errors."""


class UnsupportedImageError(SwatchcutError, ValueError):
    """The image could not be decoded, or its format is not supported."""


class InvalidSplitError(SwatchcutError, RuntimeError):
    """A box holding a single color was asked to split."""


class TranslucentBackgroundError(SwatchcutError, ValueError):
    """A contrast calculation was given a background that is not opaque."""
