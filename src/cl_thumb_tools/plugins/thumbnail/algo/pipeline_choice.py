"""Pipeline selection and convert-option extraction."""

import re
from collections.abc import Sequence

from loguru import logger

from ....common.errors import ThumbnailError
from ..schema import PipelineChoice, PipelineKind

# Formats whose animation the frame-preserving pipeline keeps
ANIMATED_FORMATS: frozenset[str] = frozenset({"gif"})

# The raster encoder only reliably writes a subset of formats
FORCED_EXTENSIONS: dict[str, str] = {
    "jpeg": "jpg",
    "pdf": "jpg",
    "tiff": "jpg",
    "tif": "jpg",
    "bmp": "jpg",
}

QUALITY_PATTERN = re.compile(r"-quality\s+[\"']?(\d+)[\"']?")
STRIP_TOKEN = "-strip"


def normalize_extension(value: str | None) -> str | None:
    """Lowercase an extension and drop the dot and any other punctuation."""
    if not value:
        return None
    ext = re.sub(r"[^a-z0-9]", "", value.lower())
    return ext or None


def _join_options(options: str | Sequence[str] | None) -> str:
    if options is None:
        return ""
    if isinstance(options, str):
        return options
    return " ".join(str(token) for token in options)


def split_options(options: str | Sequence[str] | None) -> list[str]:
    """Split free-form options into whitespace-delimited tokens."""
    return _join_options(options).split()


def extract_quality(options: str | Sequence[str] | None) -> int | None:
    """Return the first ``-quality N`` value, or None."""
    match = QUALITY_PATTERN.search(_join_options(options))
    if match is None:
        return None

    quality = int(match.group(1))
    if quality > 100:
        logger.warning(f"Quality {quality} out of range, clamping to 100")
        quality = 100
    return quality


def extract_strip(options: str | Sequence[str] | None) -> bool:
    return STRIP_TOKEN in split_options(options)


def decide(
    source_format: str | None,
    animation_policy_enabled: bool,
    requested_format: str | None = None,
    convert_options: str | Sequence[str] | None = None,
) -> PipelineChoice:
    """
    Choose the output pipeline and extension for a thumbnail.

    Animated sources keep their animation (frame-preserving pipeline) when
    the policy allows it and the requested format is unset or animated too.
    Everything else goes through the raster pipeline, where some extensions
    are forced to jpg.

    Args:
        source_format: Source extension, e.g. ".gif" or "PNG"
        animation_policy_enabled: Caller allows preserving animation
        requested_format: Requested output extension (None = source's)
        convert_options: Free-form convert options for quality/strip

    Returns:
        PipelineChoice
    """
    source_ext = normalize_extension(source_format)
    requested_ext = normalize_extension(requested_format)
    quality = extract_quality(convert_options)
    strip = extract_strip(convert_options)

    if (
        source_ext in ANIMATED_FORMATS
        and animation_policy_enabled
        and (requested_ext is None or requested_ext in ANIMATED_FORMATS)
    ):
        return PipelineChoice(
            pipeline_kind=PipelineKind.FRAME_PRESERVING,
            output_extension=source_ext,
            quality=quality,
            strip_metadata=strip,
        )

    derived_ext = requested_ext or source_ext
    if derived_ext is None:
        raise ThumbnailError("Cannot determine an output extension without a source or requested format")

    output_ext = FORCED_EXTENSIONS.get(derived_ext, derived_ext)
    if output_ext != derived_ext:
        logger.info(f"Converting .{derived_ext} to .{output_ext}")

    return PipelineChoice(
        pipeline_kind=PipelineKind.RASTER,
        output_extension=output_ext,
        quality=quality,
        strip_metadata=strip,
        converted=output_ext != derived_ext,
    )
