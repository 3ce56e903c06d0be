"""Thumbnail planning plugin."""

from .schema import (
    CropConvention,
    Operation,
    PipelineChoice,
    PipelineKind,
    ScaleMode,
    ThumbnailOutput,
    ThumbnailParams,
    TransformPlan,
)
from .task import CropProvider, ThumbnailTask

__all__ = [
    "ThumbnailTask",
    "ThumbnailParams",
    "ThumbnailOutput",
    "CropProvider",
    "CropConvention",
    "Operation",
    "PipelineChoice",
    "PipelineKind",
    "ScaleMode",
    "TransformPlan",
]
