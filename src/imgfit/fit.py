"""Shrink-to-fit calculations that preserve aspect ratio."""

from __future__ import annotations

import logging
import math
from typing import Any, Final

from imgfit.errors import InvalidDimensionsError
from imgfit.models import BoundingBox, Dimensions, ieee_divide
from imgfit.protocols import SizedImage

logger: Final = logging.getLogger(__name__)


def _check_positive(field: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDimensionsError(field, value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimensionsError(field, value)


def fit(
    source_width: float,
    source_height: float,
    max_width: float,
    max_height: float,
    *,
    strict: bool = False,
) -> Dimensions:
    """Shrink a width/height pair to fit a bounding box.

    The source is never enlarged. When it already fits it is returned
    unchanged; otherwise the width bound is applied first and the height
    bound second, both using the aspect ratio of the original source. The
    result always has one dimension exactly on its bound.

    Inputs are not validated by default: a zero height yields a non-finite
    aspect ratio that propagates into the result.

    Args:
        source_width: Natural width of the object
        source_height: Natural height of the object
        max_width: Maximum allowed width
        max_height: Maximum allowed height
        strict: Reject zero, negative and non-finite inputs

    Returns:
        Fitted dimensions

    Raises:
        InvalidDimensionsError: In strict mode, for the first invalid input
    """
    if strict:
        _check_positive("source_width", source_width)
        _check_positive("source_height", source_height)
        _check_positive("max_width", max_width)
        _check_positive("max_height", max_height)

    width = source_width
    height = source_height

    if width > max_width or height > max_height:
        aspect_ratio = ieee_divide(source_width, source_height)

        if width > max_width:
            width = max_width
            height = ieee_divide(width, aspect_ratio)

        # Width pass may have pushed height over its bound
        if height > max_height:
            height = max_height
            width = height * aspect_ratio

        logger.debug(
            "Shrunk %sx%s to %sx%s (box %sx%s)",
            source_width,
            source_height,
            width,
            height,
            max_width,
            max_height,
        )
    else:
        logger.debug("%sx%s already fits %sx%s", width, height, max_width, max_height)

    return Dimensions(width=width, height=height)


def fit_within(source: Dimensions, box: BoundingBox, *, strict: bool = False) -> Dimensions:
    """Fit source dimensions into a bounding box.

    Same calculation as :func:`fit`, taking model instances.
    """
    return fit(source.width, source.height, box.max_width, box.max_height, strict=strict)


def fit_img(
    img: SizedImage, max_width: float, max_height: float, *, strict: bool = False
) -> Dimensions:
    """Fit an image-like object into ``max_width`` x ``max_height``.

    Args:
        img: Any object with ``width`` and ``height`` attributes, such as a
            ``PIL.Image.Image``
        max_width: Maximum allowed width
        max_height: Maximum allowed height
        strict: Reject zero, negative and non-finite inputs

    Returns:
        Fitted dimensions
    """
    return fit(img.width, img.height, max_width, max_height, strict=strict)
