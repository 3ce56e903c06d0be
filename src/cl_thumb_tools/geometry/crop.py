"""Pixel crop rectangles."""

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

CROP_PATTERN = re.compile(r"\A(\d+)x(\d+)\+(-?\d+)\+(-?\d+)\Z")


class CropRect(BaseModel):
    """Crop region in source pixel space (origin top-left)."""

    x: int = Field(..., ge=0, description="Left edge in pixels")
    y: int = Field(..., ge=0, description="Top edge in pixels")
    width: int = Field(..., ge=0, description="Region width in pixels")
    height: int = Field(..., ge=0, description="Region height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, string: str) -> "CropRect":
        """Parse an ImageMagick ``"WxH+X+Y"`` crop geometry."""
        match = CROP_PATTERN.match(string.strip())
        if match is None:
            raise ValueError(f"Unable to parse crop geometry: {string!r}")
        width, height, x, y = (int(value) for value in match.groups())
        return cls(x=max(x, 0), y=max(y, 0), width=width, height=height)

    def as_ordered_list(self) -> list[int]:
        """Return ``[x, y, width, height]``, the order crop operations take."""
        return [self.x, self.y, self.width, self.height]

    def to_magick(self) -> str:
        return f"{self.width}x{self.height}+{self.x}+{self.y}"

    def to_gifsicle(self) -> str:
        return f"{self.x},{self.y}+{self.width}x{self.height}"


class PixelCrop(BaseModel):
    """Integer source rectangle plus the destination size it scales to."""

    src_x: int = Field(..., ge=0)
    src_y: int = Field(..., ge=0)
    src_w: int = Field(..., ge=0)
    src_h: int = Field(..., ge=0)
    dst_w: int = Field(..., ge=0)
    dst_h: int = Field(..., ge=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def rect(self) -> CropRect:
        return CropRect(x=self.src_x, y=self.src_y, width=self.src_w, height=self.src_h)

    @property
    def destination(self) -> tuple[int, int]:
        return (self.dst_w, self.dst_h)
