"""Public algorithm API for cl_thumb_tools.

Pure geometry and planning functions, usable without the task or the
FastAPI router.

Example:
    Crop-to-fill planning::

        from cl_thumb_tools.algorithms import GeometrySpec, compute_string_scale

        source = GeometrySpec(width=200, height=100)
        target = GeometrySpec.parse("100x100#")
        scale, crop = compute_string_scale(source, target, crop=True)
        # scale == "x100", crop == "100x100+50+0"

    Pipeline selection::

        from cl_thumb_tools.algorithms import decide

        choice = decide("gif", animation_policy_enabled=True)
        # choice.pipeline_kind == "frame_preserving"
"""

# Geometry
from .geometry.crop import CropRect, PixelCrop
from .geometry.geometry_math import (
    compute_discrete_crop,
    compute_string_scale,
    crop_ratio,
)
from .geometry.geometry_spec import GeometrySpec

# Planning
from .plugins.thumbnail.algo.gifsicle_command import build_gifsicle_arguments
from .plugins.thumbnail.algo.pipeline_choice import (
    decide,
    extract_quality,
    extract_strip,
)
from .plugins.thumbnail.algo.transform_planner import plan_transform

__all__ = [
    "GeometrySpec",
    "CropRect",
    "PixelCrop",
    "crop_ratio",
    "compute_string_scale",
    "compute_discrete_crop",
    "plan_transform",
    "decide",
    "extract_quality",
    "extract_strip",
    "build_gifsicle_arguments",
]
