"""Value types for source sizes, bounding boxes and fitted sizes."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from imgfit.errors import InvalidDimensionsError

# Decimal places kept before flooring to whole pixels
PIXEL_PRECISION = 6


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics instead of raising ZeroDivisionError.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        The quotient; NaN for 0/0 and a signed infinity for x/0
    """
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Dimensions(BaseModel):
    """A width/height pair.

    Used both for the natural size of an image and for the fitted result.
    Non-finite values are allowed so that degenerate inputs propagate
    instead of raising.
    """

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., description="Width in pixels or any consistent unit")
    height: float = Field(..., description="Height in the same unit as width")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return ieee_divide(self.width, self.height)

    def fits_within(self, box: BoundingBox) -> bool:
        """Check whether both dimensions are inside the bounding box.

        Args:
            box: Bounding box to test against

        Returns:
            True if width <= max_width and height <= max_height
        """
        return self.width <= box.max_width and self.height <= box.max_height

    def as_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)

    def to_pixels(self) -> tuple[int, int]:
        """Convert to whole pixels for APIs such as ``PIL.Image.resize``.

        Values are rounded to ``PIXEL_PRECISION`` decimals and then floored,
        so float noise does not lose a pixel and an integral bound is never
        exceeded.

        Returns:
            Tuple of (width, height) as integers

        Raises:
            InvalidDimensionsError: If either dimension is NaN or infinite
        """
        pixels: list[int] = []
        for name, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(value):
                raise InvalidDimensionsError(name, value)
            pixels.append(math.floor(round(value, PIXEL_PRECISION)))
        return (pixels[0], pixels[1])


class BoundingBox(BaseModel):
    """Maximum width and height an output may occupy."""

    model_config = ConfigDict(frozen=True)

    max_width: float = Field(..., description="Maximum allowed width")
    max_height: float = Field(..., description="Maximum allowed height")

    def as_tuple(self) -> tuple[float, float]:
        return (self.max_width, self.max_height)
