"""Test configuration and fixtures for cl_thumb_tools.

This module provides:
- Fake collaborators (dimension providers, crop providers)
- Function-scoped fixtures (synthetic images written to tmp_path)
- API client fixture for the thumbnail planning router
"""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image

from cl_thumb_tools.common.errors import DimensionsUnavailable
from cl_thumb_tools.geometry.crop import CropRect
from cl_thumb_tools.plugins.thumbnail.routes import create_router
from cl_thumb_tools.plugins.thumbnail.task import ThumbnailTask

# ============================================================================
# Fake collaborators
# ============================================================================


class FakeDimensionsProvider:
    """Reports fixed dimensions and records what was measured."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.measured: list[str] = []

    def measure(self, path):
        self.measured.append(str(path))
        return self.width, self.height


class FailingDimensionsProvider:
    def measure(self, path):
        raise DimensionsUnavailable(f"{path} is not recognized")


class FixedCropProvider:
    """Returns the same crop for every style."""

    def __init__(self, rect: CropRect | None):
        self.rect = rect
        self.styles: list[str] = []

    def cropping(self, style: str) -> CropRect | None:
        self.styles.append(style)
        return self.rect


# ============================================================================
# Function-Scoped Fixtures
# ============================================================================


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Create a 320x240 PNG."""
    image_path = tmp_path / "synthetic.png"
    img = Image.new("RGB", (320, 240), color=(200, 30, 30))
    img.save(image_path, "PNG")
    return image_path


@pytest.fixture
def animated_gif(tmp_path: Path) -> Path:
    """Create a three-frame 120x80 GIF."""
    gif_path = tmp_path / "animated.gif"
    frames = [Image.new("P", (120, 80), color=i * 40) for i in range(3)]
    frames[0].save(gif_path, save_all=True, append_images=frames[1:], duration=100, loop=0)
    return gif_path


@pytest.fixture
def provider_factory() -> type[FakeDimensionsProvider]:
    return FakeDimensionsProvider


@pytest.fixture
def crop_provider_factory() -> type[FixedCropProvider]:
    return FixedCropProvider


@pytest.fixture
def landscape_provider() -> FakeDimensionsProvider:
    return FakeDimensionsProvider(4000, 3000)


@pytest.fixture
def failing_provider() -> FailingDimensionsProvider:
    return FailingDimensionsProvider()


@pytest.fixture
def api_client() -> TestClient:
    """FastAPI test client with the planning router mounted."""
    task = ThumbnailTask(transforms={"all": [("sharpen", [0.5])]})
    app = FastAPI()
    app.include_router(create_router(task))
    return TestClient(app)
