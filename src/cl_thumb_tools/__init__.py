"""cl_thumb_tools - Thumbnail geometry and pipeline planning."""

from .common.errors import (
    CommandNotFound,
    DegenerateGeometry,
    DimensionsUnavailable,
    GeometryParseError,
    ThumbnailError,
)
from .geometry import (
    CropRect,
    DimensionsProvider,
    GeometrySpec,
    IdentifyDimensionsProvider,
    PillowDimensionsProvider,
    PixelCrop,
)
from .plugins.thumbnail import (
    Operation,
    PipelineChoice,
    PipelineKind,
    ScaleMode,
    ThumbnailOutput,
    ThumbnailParams,
    ThumbnailTask,
    TransformPlan,
)

__version__ = "0.1.0"

__all__ = [
    "GeometrySpec",
    "CropRect",
    "PixelCrop",
    "DimensionsProvider",
    "PillowDimensionsProvider",
    "IdentifyDimensionsProvider",
    "Operation",
    "TransformPlan",
    "PipelineChoice",
    "PipelineKind",
    "ScaleMode",
    "ThumbnailParams",
    "ThumbnailOutput",
    "ThumbnailTask",
    "ThumbnailError",
    "GeometryParseError",
    "DimensionsUnavailable",
    "DegenerateGeometry",
    "CommandNotFound",
    "__version__",
]
