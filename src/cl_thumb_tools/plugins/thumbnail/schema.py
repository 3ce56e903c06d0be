"""Thumbnail planning parameters and output schemas."""

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ...common.schema_job import BaseJobParams, TaskOutput
from ...geometry.crop import CropRect


class ScaleMode(StrEnum):
    FIT = "fit"
    LIMIT = "limit"
    NONE = "none"


class PipelineKind(StrEnum):
    RASTER = "raster"
    FRAME_PRESERVING = "frame_preserving"


class CropConvention(StrEnum):
    STRING = "string"
    DISCRETE = "discrete"


class Operation(BaseModel):
    """A named transform and its positional parameters."""

    name: str = Field(..., min_length=1, description="Operation name, e.g. 'sharpen'")
    params: tuple[Any, ...] = Field(default=(), description="Positional parameters")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def coerce(cls, value: "Operation | tuple[str, Any] | list[Any]") -> "Operation":
        """Accept ``Operation`` or a ``(name, params)`` pair from a transform table."""
        if isinstance(value, Operation):
            return value
        name, params = value
        if params is None:
            params = ()
        elif not isinstance(params, (list, tuple)):
            params = (params,)
        return cls(name=name, params=tuple(params))


class TransformPlan(BaseModel):
    """Ordered crop / scale / transform decisions for one thumbnail."""

    crop_rect: CropRect | None = Field(default=None, description="Crop region in source pixels")
    explicit_crop: bool = Field(default=False, description="crop_rect was supplied by the caller")
    scale_token: str | None = Field(default=None, description="Raw scale geometry token")
    scale_dimensions: tuple[int, int] | None = Field(
        default=None, description="Target (width, height) when resizing is needed"
    )
    scale_mode: ScaleMode = Field(default=ScaleMode.NONE)
    attention_crop: bool = Field(
        default=False, description="Downstream resize should use content-aware cropping"
    )
    extra_operations: tuple[Operation, ...] = Field(default=())

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def operations(self) -> list[Operation]:
        """Full ordered operation list: crop, resize, then extra operations."""
        ops: list[Operation] = []

        if self.crop_rect is not None and not self.attention_crop:
            ops.append(Operation(name="crop", params=tuple(self.crop_rect.as_ordered_list())))

        if self.scale_dimensions is not None:
            name = "resize_to_fit" if self.scale_mode == ScaleMode.FIT else "resize_to_limit"
            params: tuple[Any, ...] = self.scale_dimensions
            if self.attention_crop:
                params = (*params, {"crop": "attention"})
            ops.append(Operation(name=name, params=params))

        ops.extend(self.extra_operations)
        return ops

    def with_operations(self, *operations: Operation) -> "TransformPlan":
        """Return a copy with ``operations`` appended after the existing ones."""
        return self.model_copy(
            update={"extra_operations": (*self.extra_operations, *operations)}
        )


class PipelineChoice(BaseModel):
    """Which output pipeline renders the thumbnail, and how it saves."""

    pipeline_kind: PipelineKind
    output_extension: str = Field(..., min_length=1, description="Extension without the dot")
    quality: int | None = Field(default=None, ge=0, le=100)
    strip_metadata: bool = False
    converted: bool = Field(
        default=False, description="Extension was forced away from the requested one"
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ThumbnailParams(BaseJobParams):
    """Parameters for a thumbnail planning request.

    Attributes:
        input_path: Path to the source image
        output_path: Path the executor will write to (not used for planning)
        geometry: Target geometry, e.g. "100x100#" (crop) or "640x480>"
        format: Requested output extension (None = keep the source's)
        animated: Preserve animation for animated formats
        convert_options: Free-form convert options ("-quality 85 -strip")
        source_file_options: Options influencing how the source is read
        style: Style name used to look up extra transforms
        whiny: Raise on failure instead of logging and returning None
        verbose_errors: Include the underlying cause in raised errors
        explicit_crop: Caller-supplied crop coordinates
    """

    geometry: str = Field(..., min_length=1, description="Target geometry string")
    format: str | None = Field(default=None, description="Requested output extension")
    animated: bool = Field(default=True, description="Preserve animation when possible")
    convert_options: str | list[str] | None = Field(default=None)
    source_file_options: str | list[str] | None = Field(default=None)
    style: str = Field(default="original", description="Style name for transform lookup")
    whiny: bool = Field(default=True, description="Raise errors instead of returning None")
    verbose_errors: bool = Field(default=False, description="Include causes in error messages")
    explicit_crop: CropRect | None = Field(default=None, description="Explicit crop coordinates")


class ThumbnailOutput(TaskOutput):
    source_geometry: str = Field(..., description="Measured source geometry")
    target_geometry: str = Field(..., description="Parsed target geometry")
    choice: PipelineChoice
    plan: TransformPlan
    operations: list[Operation] = Field(
        default_factory=list, description="Raster pipeline operations, in order"
    )
    gifsicle_arguments: list[str] | None = Field(
        default=None, description="Frame-preserving pipeline arguments"
    )
