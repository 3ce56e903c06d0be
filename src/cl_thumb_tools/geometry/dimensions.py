"""Dimension providers: report the pixel size of a source image file.

Providers measure only; they never decode pixel data beyond the header.
"""

import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..common.errors import CommandNotFound, DimensionsUnavailable
from .geometry_spec import GeometrySpec


@runtime_checkable
class DimensionsProvider(Protocol):
    """Anything able to report ``(width, height)`` for a file."""

    def measure(self, path: str | Path) -> tuple[int, int]:
        """Return the pixel size of ``path``.

        Raises:
            DimensionsUnavailable: If the file cannot be measured
        """
        ...


class PillowDimensionsProvider:
    """Reads the image header with Pillow (first frame for animations)."""

    def measure(self, path: str | Path) -> tuple[int, int]:
        path = Path(path)
        try:
            with Image.open(path) as img:
                width, height = img.size
        except FileNotFoundError as exc:
            raise DimensionsUnavailable(f"File not found: {path}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise DimensionsUnavailable(f"{path} is not recognized as an image: {exc}") from exc

        return width, height


class IdentifyDimensionsProvider:
    """Measures files with ImageMagick's ``identify`` command."""

    def __init__(self, command: str = "identify", timeout: float = 30) -> None:
        self.command: str = command
        self.timeout: float = timeout

    def measure(self, path: str | Path) -> tuple[int, int]:
        command = [self.command, "-format", "%wx%h", f"{path}[0]"]
        logger.debug(" ".join(command))

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
            output = result.stdout
        except FileNotFoundError as exc:
            raise CommandNotFound(
                f"Could not run the `{self.command}` command. Please install ImageMagick."
            ) from exc
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as exc:
            logger.error(f"{self.command} failed for {path}: {exc}")
            output = ""

        geometry = GeometrySpec.parse(output)
        if geometry is None or geometry.width <= 0 or geometry.height <= 0:
            raise DimensionsUnavailable(f"{path} is not recognized by the '{self.command}' command.")

        return int(geometry.width), int(geometry.height)
