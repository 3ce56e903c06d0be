"""Scale and crop computations between a source and a target geometry.

Two conventions are supported:

* string geometry (ImageMagick style): a scale token such as ``"100x"`` and
  a centred crop token ``"WxH+X+Y"``;
* discrete pixels (gifsicle style): exact integer source rectangle and
  destination size, ported from WordPress ``image_resize_dimensions``.
"""

import math

from loguru import logger

from ..common.errors import DegenerateGeometry
from .crop import PixelCrop
from .geometry_spec import GeometrySpec


def crop_ratio(source: GeometrySpec, target: GeometrySpec) -> GeometrySpec:
    """Per-axis ratio between target and source, as a geometry."""
    if source.width <= 0 or source.height <= 0:
        raise DegenerateGeometry(
            f"Cannot compute a crop ratio for zero-sized source {source.render()!r}"
        )
    return GeometrySpec(
        width=target.width / source.width,
        height=target.height / source.height,
    )


# ─────────────────────────────────────────────
# String geometry convention
# ─────────────────────────────────────────────


def string_scaling(target: GeometrySpec, ratio: GeometrySpec) -> tuple[str, float]:
    """Return the scale token and the effective scale factor."""
    if ratio.is_horizontal or ratio.is_square:
        return f"{int(target.width)}x", ratio.width
    return f"x{int(target.height)}", ratio.height


def string_cropping(
    source: GeometrySpec,
    target: GeometrySpec,
    ratio: GeometrySpec,
    scale: float,
) -> str:
    """Crop token centring the overflow of the scaled source."""
    if ratio.is_horizontal or ratio.is_square:
        x, y = 0, math.floor((source.height * scale - target.height) / 2)
    else:
        x, y = math.floor((source.width * scale - target.width) / 2), 0
    return f"{int(target.width)}x{int(target.height)}+{x}+{y}"


def compute_string_scale(
    source: GeometrySpec,
    target: GeometrySpec,
    crop: bool = False,
) -> tuple[str, str | None]:
    """Scale and crop tokens needed to turn ``source`` into ``target``.

    When ``crop`` is True the target is the exact final resolution: the
    source is scaled until it covers the target box and the overhang is
    cropped, weighted at the centre.

    Raises:
        DegenerateGeometry: If cropping a source with a zero dimension
    """
    if not crop:
        return target.render(), None

    ratio = crop_ratio(source, target)
    scale_token, scale = string_scaling(target, ratio)
    crop_token = string_cropping(source, target, ratio, scale)
    logger.debug(f"string transformation {source} -> {target}: scale={scale_token} crop={crop_token}")
    return scale_token, crop_token


# ─────────────────────────────────────────────
# Discrete pixel convention
# ─────────────────────────────────────────────


def discrete_cropping(source: GeometrySpec, target: GeometrySpec) -> PixelCrop:
    """Integer crop rectangle and destination size for a fill crop."""
    orig_w, orig_h = source.width, source.height
    if orig_w <= 0 or orig_h <= 0:
        raise DegenerateGeometry(
            f"Cannot compute a pixel crop for zero-sized source {source.render()!r}"
        )

    aspect_ratio = orig_w / orig_h
    new_w = min(target.width, orig_w)
    new_h = min(target.height, orig_h)

    # new_h is derived from the new_w computed just above
    if new_w == 0:
        new_w = math.ceil(new_h * aspect_ratio)
    if new_h == 0:
        new_h = math.floor(new_w / aspect_ratio)

    size_ratio = max(new_w / orig_w, new_h / orig_h)
    if size_ratio <= 0:
        raise DegenerateGeometry(f"Target {target.render()!r} has no positive dimension")

    crop_h = math.ceil(new_h / size_ratio)
    crop_w = math.ceil(new_w / size_ratio)
    src_x = math.floor((orig_w - crop_w) / 2)
    src_y = math.floor((orig_h - crop_h) / 2)

    result = PixelCrop(
        src_x=max(src_x, 0),
        src_y=max(src_y, 0),
        src_w=crop_w,
        src_h=crop_h,
        dst_w=int(new_w),
        dst_h=int(new_h),
    )
    logger.debug(f"discrete cropping {source} -> {target}: {result!r}")
    return result


def compute_discrete_crop(
    source: GeometrySpec,
    target: GeometrySpec,
    crop: bool = False,
) -> tuple[str, PixelCrop | None]:
    """Scale token and pixel crop for the frame-preserving pipeline.

    Raises:
        DegenerateGeometry: If cropping a source with a zero dimension
    """
    if not crop:
        return target.render(), None

    scale_token = f"{int(target.width)}x{int(target.height)}"
    return scale_token, discrete_cropping(source, target)
