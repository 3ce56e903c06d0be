"""Unit tests for string-geometry and discrete-pixel scale/crop math."""

import pytest

from cl_thumb_tools.common.errors import DegenerateGeometry
from cl_thumb_tools.geometry.crop import CropRect, PixelCrop
from cl_thumb_tools.geometry.geometry_math import (
    compute_discrete_crop,
    compute_string_scale,
    crop_ratio,
    discrete_cropping,
    string_scaling,
)
from cl_thumb_tools.geometry.geometry_spec import GeometrySpec


def geometry(width: float, height: float) -> GeometrySpec:
    return GeometrySpec(width=width, height=height)


# ============================================================================
# RATIO TESTS
# ============================================================================


def test_crop_ratio():
    ratio = crop_ratio(geometry(200, 100), geometry(100, 100))

    assert ratio.width == 0.5
    assert ratio.height == 1.0


@pytest.mark.parametrize("source", [(0, 100), (100, 0), (0, 0)])
def test_crop_ratio_zero_source_raises(source: tuple[int, int]):
    """Test a zero-sized source is a contract violation, not NaN."""
    with pytest.raises(DegenerateGeometry):
        _ = crop_ratio(geometry(*source), geometry(100, 100))


# ============================================================================
# STRING CONVENTION TESTS
# ============================================================================


def test_string_scale_without_crop_renders_target():
    """Test non-crop mode passes the target geometry straight through."""
    target = GeometrySpec.parse("640x480>")
    assert target is not None

    scale, crop = compute_string_scale(geometry(1000, 800), target, crop=False)

    assert scale == "640x480>"
    assert crop is None


def test_string_scale_without_crop_ignores_zero_source():
    scale, crop = compute_string_scale(geometry(0, 0), geometry(100, 100), crop=False)

    assert scale == "100x100"
    assert crop is None


def test_string_scale_landscape_source():
    """Test a wide source is scaled by height and cropped horizontally."""
    scale, crop = compute_string_scale(geometry(200, 100), geometry(100, 100), crop=True)

    assert scale == "x100"
    assert crop == "100x100+50+0"


def test_string_scale_portrait_source():
    """Test a tall source is scaled by width and cropped vertically."""
    scale, crop = compute_string_scale(geometry(100, 200), geometry(100, 100), crop=True)

    assert scale == "100x"
    assert crop == "100x100+0+50"


def test_string_scaling_factor():
    """Test the scale factor follows the ratio orientation."""
    target = geometry(100, 100)

    token, factor = string_scaling(target, crop_ratio(geometry(100, 200), target))
    assert (token, factor) == ("100x", 1.0)

    token, factor = string_scaling(target, crop_ratio(geometry(200, 100), target))
    assert (token, factor) == ("x100", 1.0)

    token, factor = string_scaling(target, crop_ratio(geometry(400, 400), target))
    assert (token, factor) == ("100x", 0.25)


def test_string_scale_square_ratio_has_no_offset():
    scale, crop = compute_string_scale(geometry(400, 400), geometry(100, 100), crop=True)

    assert scale == "100x"
    assert crop == "100x100+0+0"


def test_string_crop_offsets_are_floored():
    """Test odd overflows round down to whole pixels."""
    # ratio (0.5, 0.4) -> horizontal, factor 0.5, overflow (250*0.5 - 100) / 2 = 12.5
    scale, crop = compute_string_scale(geometry(200, 250), geometry(100, 100), crop=True)

    assert scale == "100x"
    assert crop == "100x100+0+12"


def test_string_crop_token_parses_as_rect():
    _, crop = compute_string_scale(geometry(300, 150), geometry(120, 120), crop=True)
    assert crop is not None

    rect = CropRect.parse(crop)

    assert rect == CropRect(x=60, y=0, width=120, height=120)


def test_string_scale_crop_zero_source_raises():
    with pytest.raises(DegenerateGeometry):
        _ = compute_string_scale(geometry(0, 100), geometry(100, 100), crop=True)


# ============================================================================
# DISCRETE CONVENTION TESTS
# ============================================================================


def test_discrete_crop_reference_case():
    """Test the 4000x3000 -> 1200x1200 reference crop."""
    result = discrete_cropping(geometry(4000, 3000), geometry(1200, 1200))

    assert result == PixelCrop(
        src_x=500, src_y=0, src_w=3000, src_h=3000, dst_w=1200, dst_h=1200
    )
    assert result.rect == CropRect(x=500, y=0, width=3000, height=3000)
    assert result.destination == (1200, 1200)


def test_discrete_crop_portrait_source():
    result = discrete_cropping(geometry(300, 600), geometry(100, 100))

    # size_ratio = max(1/3, 1/6); crop 300x300 centred vertically
    assert result.rect == CropRect(x=0, y=150, width=300, height=300)
    assert result.destination == (100, 100)


def test_discrete_crop_never_exceeds_source():
    """Test a target larger than the source is clamped to the source size."""
    result = discrete_cropping(geometry(100, 50), geometry(400, 400))

    assert result.destination == (100, 50)
    assert result.rect == CropRect(x=0, y=0, width=100, height=50)


def test_discrete_crop_width_only_target():
    """Test a zero target height is derived from the clamped width."""
    result = discrete_cropping(geometry(400, 200), geometry(100, 0))

    assert result.destination == (100, 50)
    assert result.rect == CropRect(x=0, y=0, width=400, height=200)


def test_discrete_crop_height_only_target():
    """Test a zero target width is derived from the clamped height."""
    result = discrete_cropping(geometry(400, 200), geometry(0, 100))

    assert result.destination == (200, 100)
    assert result.rect == CropRect(x=0, y=0, width=400, height=200)


def test_discrete_crop_height_uses_updated_width():
    """Test new_h derives from the new_w value recomputed in the same step."""
    # new_w = min(0, 300) = 0 -> ceil(new_h * aspect) = ceil(100 * 1.5) = 150
    result = discrete_cropping(geometry(300, 200), geometry(0, 100))

    assert result.destination == (150, 100)


def test_discrete_crop_empty_target_raises():
    with pytest.raises(DegenerateGeometry):
        _ = discrete_cropping(geometry(300, 200), geometry(0, 0))


def test_discrete_crop_zero_source_raises():
    with pytest.raises(DegenerateGeometry):
        _ = discrete_cropping(geometry(300, 0), geometry(100, 100))


def test_compute_discrete_crop_scale_tokens():
    """Test scale tokens for crop and non-crop modes."""
    target = GeometrySpec.parse("1200x1200#")
    assert target is not None

    scale, pixel_crop = compute_discrete_crop(geometry(4000, 3000), target, crop=True)
    assert scale == "1200x1200"
    assert pixel_crop is not None
    assert pixel_crop.src_x == 500

    scale, pixel_crop = compute_discrete_crop(geometry(4000, 3000), target, crop=False)
    assert scale == "1200x1200#"
    assert pixel_crop is None
