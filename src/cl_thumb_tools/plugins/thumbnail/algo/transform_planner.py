"""Pure transform planning: crop, scale mode and extra operations."""

from collections.abc import Iterable
from typing import Any

from loguru import logger

from ....geometry.crop import CropRect, PixelCrop
from ....geometry.geometry_math import compute_discrete_crop, compute_string_scale
from ....geometry.geometry_spec import GeometrySpec
from ..schema import CropConvention, Operation, ScaleMode, TransformPlan


def plan_transform(
    *,
    source: GeometrySpec,
    target: GeometrySpec,
    crop_intent: bool,
    explicit_crop: CropRect | None = None,
    convention: CropConvention = CropConvention.STRING,
    extra_operations: Iterable[Operation | tuple[str, Any]] = (),
) -> TransformPlan:
    """
    Decide how ``source`` becomes ``target``.

    Args:
        source: Measured source geometry
        target: Requested target geometry
        crop_intent: Target is the exact final box (crop-to-fill)
        explicit_crop: Caller-supplied crop, used verbatim when given
        convention: Crop convention of the active pipeline
        extra_operations: Caller transforms, appended in the given order

    Returns:
        A new TransformPlan

    Raises:
        DegenerateGeometry: If crop_intent is set for a zero-sized source
    """
    derive_crop = crop_intent and explicit_crop is None
    pixel_crop: PixelCrop | None = None

    if convention == CropConvention.DISCRETE:
        scale_token, pixel_crop = compute_discrete_crop(source, target, derive_crop)
        derived_rect = None
        if pixel_crop is not None:
            # the cropped region scales to the clamped destination
            derived_rect = pixel_crop.rect
            scale_token = f"{pixel_crop.dst_w}x{pixel_crop.dst_h}"
    else:
        scale_token, crop_token = compute_string_scale(source, target, derive_crop)
        derived_rect = CropRect.parse(crop_token) if crop_token is not None else None

    crop_rect = explicit_crop if explicit_crop is not None else derived_rect

    scale_dimensions: tuple[int, int] | None = None
    scale_mode = ScaleMode.NONE
    if scale_token:
        if pixel_crop is not None:
            scale_dimensions = pixel_crop.destination
        else:
            scale_dimensions = (int(target.width), int(target.height))
        scale_mode = ScaleMode.FIT if (crop_intent or explicit_crop is not None) else ScaleMode.LIMIT

    plan = TransformPlan(
        crop_rect=crop_rect,
        explicit_crop=explicit_crop is not None,
        scale_token=scale_token or None,
        scale_dimensions=scale_dimensions,
        scale_mode=scale_mode,
        attention_crop=derive_crop and scale_dimensions is not None,
        extra_operations=tuple(Operation.coerce(op) for op in extra_operations),
    )
    logger.debug(f"transform plan {source} -> {target}: {plan!r}")
    return plan
