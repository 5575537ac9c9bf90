# Copyright (c) 2026 Swatchcut
# SPDX-License-Identifier: MIT

"""
Main palette extraction API.

This is the primary entry point for swatchcut's measurement core:

    pixels → ColorHistogram → ColorCutQuantizer → generate_palette → Palette
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Mapping, Optional, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageCms, UnidentifiedImageError

from swatchcut.color.packed import pack_rgba_array
from swatchcut.errors import UnsupportedImageError
from swatchcut.measure.histogram import ColorHistogram
from swatchcut.measure.quantizer import ColorCutQuantizer, ColorFilter
from swatchcut.measure.selector import DEFAULT_TARGETS, Target, generate_palette
from swatchcut.schema import Palette, Role

logger = logging.getLogger(__name__)


DEFAULT_CALCULATE_NUMBER_COLORS = 16

SUPPORTED_FORMATS = frozenset({"JPEG", "PNG"})

ImageInput = Union[str, Path, Image.Image, NDArray[np.integer]]


def extract(
    image: ImageInput,
    *,
    max_colors: int = DEFAULT_CALCULATE_NUMBER_COLORS,
    max_pixels: int = 0,  # 0 = no downsampling (accuracy priority)
    color_filter: Optional[ColorFilter] = None,
    targets: Mapping[Role, Target] = DEFAULT_TARGETS,
) -> Palette:
    """
    Extract a role palette from an image.

    Args:
        image: One of:
            - Path to a JPEG or PNG file (str or Path). Embedded ICC
              profiles are converted to sRGB.
            - PIL Image in any mode.
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 values.
            - 1-D integer array of already packed colors.
        max_colors: Swatch budget for the quantizer (default: 16)
        max_pixels: Max pixels to process. Larger images are downsampled
            first. Set to 0 to disable downsampling.
        color_filter: Colors the quantizer ignores (default: ColorFilter())
        targets: Role windows for selection (default: DEFAULT_TARGETS)

    Returns:
        Palette with the quantized swatches and their role assignment.

    Raises:
        UnsupportedImageError: If a file cannot be decoded or its format is
            not supported.

    Example:
        >>> from swatchcut import extract
        >>> palette = extract("cover.jpg")
        >>> palette.vibrant.hex
        '#D8402A'
    """
    pixels = load_pixels(image, max_pixels=max_pixels)

    histogram = ColorHistogram(pixels)
    logger.debug(
        "Histogram: %d pixels, %d distinct colors",
        len(pixels), histogram.number_of_colors,
    )

    quantizer = ColorCutQuantizer(histogram, max_colors, color_filter=color_filter)

    return generate_palette(quantizer.quantized_colors, targets)


def load_pixels(image: ImageInput, *, max_pixels: int = 0) -> NDArray[np.int64]:
    """
    Decode an image into a flat array of packed colors.

    Pixel order is row-major but irrelevant to the histogram.

    Raises:
        UnsupportedImageError: If a file cannot be decoded or its format is
            not in SUPPORTED_FORMATS.
        ValueError: If an array has an unsupported shape or dtype.
        TypeError: If ``image`` is of an unsupported type.
    """
    if isinstance(image, (str, Path)):
        img = _open_image(image)

    elif isinstance(image, Image.Image):
        img = image

    elif isinstance(image, np.ndarray):
        if image.ndim == 1:
            if not np.issubdtype(image.dtype, np.integer):
                raise ValueError(
                    f"Expected integer packed colors, got {image.dtype}"
                )
            return image.astype(np.int64)

        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {image.shape}"
            )
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {image.dtype}")

        if max_pixels <= 0:
            return pack_rgba_array(image.reshape(-1, image.shape[2]))
        img = Image.fromarray(image)

    else:
        raise TypeError(
            f"Expected file path, PIL image or numpy array, got {type(image)}"
        )

    if img.mode != "RGBA":
        img = img.convert("RGBA")

    if max_pixels > 0:
        img = _downsample(img, max_pixels)

    rgba = np.asarray(img, dtype=np.uint8)
    return pack_rgba_array(rgba.reshape(-1, 4))


def _open_image(path: Union[str, Path]) -> Image.Image:
    """
    Open and decode an image file.

    Applies ICC profile conversion to sRGB if the image has an embedded
    color profile.
    """
    try:
        img = Image.open(path)
    except UnidentifiedImageError as e:
        raise UnsupportedImageError(f"Cannot identify image: {path}") from e

    if img.format not in SUPPORTED_FORMATS:
        raise UnsupportedImageError(
            f"Unsupported image format {img.format!r}; "
            f"supported: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )

    try:
        img.load()
    except OSError as e:
        raise UnsupportedImageError(f"Cannot decode image: {path}") from e

    if "icc_profile" in img.info:
        try:
            embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(img.info["icc_profile"]))
            srgb_profile = ImageCms.createProfile("sRGB")
            if img.mode not in ("RGB", "RGBA"):
                img = img.convert("RGBA")
            img = ImageCms.profileToProfile(img, embedded_profile, srgb_profile)
        except (OSError, ImageCms.PyCMSError) as e:
            # Keep the unconverted pixels rather than failing the whole image
            logger.warning("ICC conversion failed for %s: %s", path, e)

    return img


def _downsample(img: Image.Image, max_pixels: int) -> Image.Image:
    """Scale ``img`` down (Lanczos) so it holds at most ``max_pixels``."""
    width, height = img.size
    total_pixels = width * height
    if total_pixels <= max_pixels:
        return img

    scale = (max_pixels / total_pixels) ** 0.5
    new_width = max(1, int(width * scale))
    new_height = max(1, int(height * scale))
    logger.debug(
        "Downsampling %dx%d to %dx%d", width, height, new_width, new_height
    )
    return img.resize((new_width, new_height), Image.Resampling.LANCZOS)
