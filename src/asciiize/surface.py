from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageFont

from asciiize.errors import InvalidArgument, SurfaceUnavailable

TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class PixelBuffer:
    width: int
    height: int
    data: bytes  # row-major RGBA, 4 bytes per pixel

    def __post_init__(self):
        if len(self.data) != 4 * self.width * self.height:
            raise InvalidArgument(
                f"Pixel data is {len(self.data)} bytes, expected {4 * self.width * self.height} "
                f"for {self.width}x{self.height} RGBA"
            )

    def as_array(self) -> np.ndarray:
        """Read-only (height, width, 4) uint8 view of the pixel data."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)


class Surface(Protocol):
    width: int
    height: int

    def read_pixels(self, x: int, y: int, w: int, h: int) -> PixelBuffer:
        """Snapshot a rectangle of the raster."""
        ...

    def clear(self, x: int, y: int, w: int, h: int) -> None: ...

    def draw_glyph(self, text: str, x: int, y: int, font_size: int, fill: str, alpha: float) -> None:
        """Draw text with its top-left corner at (x, y), blended at the given opacity."""
        ...

    def put_pixels(self, buffer: PixelBuffer, x: int, y: int) -> None: ...


def find_monospace_font() -> str | None:
    """Ask fontconfig for the default monospace font file."""
    if shutil.which("fc-match") is None:
        return None
    result = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None


class ImageSurface:
    """Surface backed by an RGBA Pillow image."""

    def __init__(self, image: Image.Image, font_path: str | Path | None = None):
        self.image = image.convert("RGBA")
        self.font_path = str(font_path) if font_path is not None else find_monospace_font()
        self._fonts: dict[int, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}

    @classmethod
    def new(cls, width: int, height: int, font_path: str | Path | None = None) -> ImageSurface:
        return cls(Image.new("RGBA", (width, height), TRANSPARENT), font_path=font_path)

    @classmethod
    def open(cls, path: str | Path, font_path: str | Path | None = None) -> ImageSurface:
        with Image.open(path) as image:
            return cls(image, font_path=font_path)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def read_pixels(self, x: int, y: int, w: int, h: int) -> PixelBuffer:
        if w <= 0 or h <= 0:
            raise SurfaceUnavailable(f"Cannot read a {w}x{h} region")
        region = self.image.crop((x, y, x + w, y + h))
        return PixelBuffer(w, h, region.tobytes())

    def clear(self, x: int, y: int, w: int, h: int) -> None:
        self.image.paste(TRANSPARENT, (x, y, x + w, y + h))

    def put_pixels(self, buffer: PixelBuffer, x: int, y: int) -> None:
        self.image.paste(Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.data), (x, y))

    def draw_glyph(self, text: str, x: int, y: int, font_size: int, fill: str, alpha: float) -> None:
        font = self._font(font_size)
        _, _, right, bottom = font.getbbox(text)
        # Glyph layer clipped to the surface; nothing to do once it falls off the edge
        layer_w = min(int(right), self.width - x)
        layer_h = min(int(bottom), self.height - y)
        if layer_w <= 0 or layer_h <= 0:
            return
        red, green, blue = ImageColor.getrgb(fill)[:3]
        layer = Image.new("RGBA", (layer_w, layer_h), TRANSPARENT)
        ImageDraw.Draw(layer).text((0, 0), text, fill=(red, green, blue, round(alpha * 255)), font=font)
        self.image.alpha_composite(layer, dest=(x, y))

    def _font(self, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        if size not in self._fonts:
            if self.font_path is not None:
                self._fonts[size] = ImageFont.truetype(self.font_path, size)
            else:
                self._fonts[size] = ImageFont.load_default(size=size)
        return self._fonts[size]
