"""Shrink image dimensions to fit a bounding box while preserving aspect ratio.

This package provides:
- fit / fit_img / fit_within: the shrink-to-fit calculation
- Dimensions and BoundingBox: immutable value types
- FitSettings: user-configurable defaults loaded from imgfit.yaml
"""

from imgfit.errors import ConfigError, ImgFitError, InvalidDimensionsError
from imgfit.fit import fit, fit_img, fit_within
from imgfit.models import BoundingBox, Dimensions
from imgfit.protocols import SizedImage
from imgfit.settings import FitSettings

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "ConfigError",
    "Dimensions",
    "FitSettings",
    "ImgFitError",
    "InvalidDimensionsError",
    "SizedImage",
    "fit",
    "fit_img",
    "fit_within",
]
