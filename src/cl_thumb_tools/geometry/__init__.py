"""Geometry values, crop rectangles and the math between them."""

from .crop import CropRect, PixelCrop
from .dimensions import DimensionsProvider, IdentifyDimensionsProvider, PillowDimensionsProvider
from .geometry_math import (
    compute_discrete_crop,
    compute_string_scale,
    crop_ratio,
    discrete_cropping,
    string_cropping,
    string_scaling,
)
from .geometry_spec import GeometrySpec

__all__ = [
    "GeometrySpec",
    "CropRect",
    "PixelCrop",
    "DimensionsProvider",
    "PillowDimensionsProvider",
    "IdentifyDimensionsProvider",
    "crop_ratio",
    "string_scaling",
    "string_cropping",
    "compute_string_scale",
    "discrete_cropping",
    "compute_discrete_crop",
]
