"""Common module - schemas and errors."""

from .errors import (
    CommandNotFound,
    DegenerateGeometry,
    DimensionsUnavailable,
    GeometryParseError,
    ThumbnailError,
)
from .schema_job import BaseJobParams, TaskOutput

__all__ = [
    "BaseJobParams",
    "TaskOutput",
    "ThumbnailError",
    "GeometryParseError",
    "DimensionsUnavailable",
    "DegenerateGeometry",
    "CommandNotFound",
]
