"""Thumbnail planning algorithms."""

from .gifsicle_command import build_gifsicle_arguments
from .pipeline_choice import decide, extract_quality, extract_strip, normalize_extension
from .transform_planner import plan_transform

__all__ = [
    "plan_transform",
    "decide",
    "extract_quality",
    "extract_strip",
    "normalize_extension",
    "build_gifsicle_arguments",
]
