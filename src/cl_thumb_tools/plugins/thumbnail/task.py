"""Thumbnail planning task implementation."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

from typing_extensions import override

from loguru import logger

from ...common.errors import GeometryParseError, ThumbnailError
from ...geometry.crop import CropRect
from ...geometry.dimensions import DimensionsProvider, PillowDimensionsProvider
from ...geometry.geometry_spec import GeometrySpec
from .algo.gifsicle_command import build_gifsicle_arguments
from .algo.pipeline_choice import decide
from .algo.transform_planner import plan_transform
from .schema import (
    CropConvention,
    Operation,
    PipelineKind,
    ThumbnailOutput,
    ThumbnailParams,
)

TransformTable = Mapping[str, Sequence[Operation | tuple[str, Any]]]

ALL_STYLES = "all"
CONVERSION_OPERATIONS = (
    Operation(name="convert", params=("jpg",)),
    Operation(name="colourspace", params=("srgb",)),
)


class CropProvider(Protocol):
    """Supplies user-chosen crop coordinates for a style, if any."""

    def cropping(self, style: str) -> CropRect | None: ...


class ThumbnailTask:
    """Plans one thumbnail: measure, choose a pipeline, plan the transform.

    Collaborators are passed in explicitly; nothing here keeps global state.
    """

    @property
    @override
    def task_type(self) -> str:
        return "thumbnail"

    def __init__(
        self,
        dimensions_provider: DimensionsProvider | None = None,
        crop_provider: CropProvider | None = None,
        transforms: TransformTable | None = None,
    ) -> None:
        self.dimensions_provider: DimensionsProvider = (
            dimensions_provider or PillowDimensionsProvider()
        )
        self.crop_provider: CropProvider | None = crop_provider
        self.transforms: TransformTable = transforms or {}

    def run(self, params: ThumbnailParams) -> ThumbnailOutput | None:
        """Measure ``params.input_path`` and plan its thumbnail.

        Returns None instead of raising when ``params.whiny`` is False.
        """
        basename = Path(params.input_path).stem
        try:
            source = GeometrySpec.from_file(params.input_path, self.dimensions_provider)
            return self.build(source, Path(params.input_path).suffix, params)
        except ThumbnailError as exc:
            logger.error(f"Error processing {basename}: {exc}")
            if not params.whiny:
                return None

            message = f"There was an error processing the thumbnail for {basename}"
            if params.verbose_errors:
                message += f": {exc}"
            raise ThumbnailError(message) from exc

    def build(
        self,
        source: GeometrySpec,
        source_format: str | None,
        params: ThumbnailParams,
    ) -> ThumbnailOutput:
        """Plan a thumbnail for an already measured source.

        Raises:
            GeometryParseError: If params.geometry holds no dimensions
            DegenerateGeometry: If cropping a zero-sized source
        """
        target = GeometrySpec.parse(params.geometry)
        if target is None:
            raise GeometryParseError(f"Invalid geometry: {params.geometry!r}")

        crop_intent = target.modifier == "#"
        choice = decide(
            source_format,
            params.animated,
            params.format,
            params.convert_options,
        )

        if choice.pipeline_kind == PipelineKind.FRAME_PRESERVING:
            plan = plan_transform(
                source=source,
                target=target,
                crop_intent=crop_intent,
                explicit_crop=self.explicit_crop(params),
                convention=CropConvention.DISCRETE,
            )
            return ThumbnailOutput(
                source_geometry=source.render(),
                target_geometry=target.render(),
                choice=choice,
                plan=plan,
                gifsicle_arguments=build_gifsicle_arguments(plan),
            )

        extra_operations = self.style_transforms(params.style)
        plan = plan_transform(
            source=source,
            target=target,
            crop_intent=crop_intent,
            explicit_crop=self.explicit_crop(params),
            convention=CropConvention.STRING,
            extra_operations=extra_operations,
        )
        if choice.converted:
            plan = plan.with_operations(*CONVERSION_OPERATIONS)

        return ThumbnailOutput(
            source_geometry=source.render(),
            target_geometry=target.render(),
            choice=choice,
            plan=plan,
            operations=plan.operations(),
        )

    def explicit_crop(self, params: ThumbnailParams) -> CropRect | None:
        if params.explicit_crop is not None:
            return params.explicit_crop
        if self.crop_provider is not None:
            return self.crop_provider.cropping(params.style)
        return None

    def style_transforms(self, style: str) -> list[Operation]:
        """Transforms for ``style``, falling back to the "all" entry."""
        entries = self.transforms.get(style) or self.transforms.get(ALL_STYLES) or ()
        operations = [Operation.coerce(entry) for entry in entries]
        for op in operations:
            logger.info(f"Applying {style} transform: {op.name} with {list(op.params)}")
        return operations
