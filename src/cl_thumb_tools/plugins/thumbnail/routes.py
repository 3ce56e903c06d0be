"""Thumbnail planning route factory."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ...common.errors import ThumbnailError
from ...geometry.crop import CropRect
from ...geometry.geometry_spec import GeometrySpec
from .schema import ThumbnailOutput, ThumbnailParams
from .task import ThumbnailTask


class ThumbnailPlanRequest(BaseModel):
    """Already measured source plus the requested thumbnail."""

    source_width: int = Field(..., gt=0, description="Source width in pixels")
    source_height: int = Field(..., gt=0, description="Source height in pixels")
    source_format: str = Field(..., min_length=1, description="Source extension, e.g. 'gif'")
    geometry: str = Field(..., min_length=1, description="Target geometry, e.g. '100x100#'")
    format: str | None = Field(default=None, description="Requested output extension")
    animated: bool = Field(default=True, description="Preserve animation when possible")
    convert_options: str | None = Field(default=None, description="e.g. '-quality 85 -strip'")
    style: str = Field(default="original", description="Style name for transform lookup")
    crop: CropRect | None = Field(default=None, description="Explicit crop coordinates")


def create_router(task: ThumbnailTask | None = None) -> APIRouter:
    """Create router with an injected planning task."""
    router = APIRouter()
    planner = task or ThumbnailTask()

    @router.post("/thumbnail/plan", response_model=ThumbnailOutput)
    async def plan_thumbnail(request: ThumbnailPlanRequest) -> ThumbnailOutput:
        source = GeometrySpec(width=request.source_width, height=request.source_height)
        params = ThumbnailParams(
            input_path=f"source.{request.source_format}",
            geometry=request.geometry,
            format=request.format,
            animated=request.animated,
            convert_options=request.convert_options,
            style=request.style,
            explicit_crop=request.crop,
        )
        try:
            return planner.build(source, request.source_format, params)
        except ThumbnailError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    _ = plan_thumbnail
    return router
