import os

import pytest

from asciiize.surface import PixelBuffer, find_monospace_font

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_font():
    for path in _FONT_CANDIDATES:
        if os.path.exists(path):
            return path
    return find_monospace_font()


FONT_PATH = _find_font()


class RecordingSurface:
    """In-memory surface that records every clear and glyph draw."""

    def __init__(self, width, height, pixel=(0, 0, 0, 0)):
        self.width = width
        self.height = height
        self.data = bytearray(bytes(pixel) * (width * height))
        self.calls = []

    def set_pixel(self, x, y, pixel):
        offset = 4 * (self.width * y + x)
        self.data[offset : offset + 4] = bytes(pixel)

    def read_pixels(self, x, y, w, h):
        self.calls.append(("read", x, y, w, h))
        rows = []
        for row in range(y, y + h):
            start = 4 * (self.width * row + x)
            rows.append(bytes(self.data[start : start + 4 * w]))
        return PixelBuffer(w, h, b"".join(rows))

    def clear(self, x, y, w, h):
        self.calls.append(("clear", x, y, w, h))
        for row in range(y, y + h):
            start = 4 * (self.width * row + x)
            self.data[start : start + 4 * w] = bytes(4 * w)

    def draw_glyph(self, text, x, y, font_size, fill, alpha):
        self.calls.append(("draw", text, x, y, font_size, fill, alpha))

    def put_pixels(self, buffer, x, y):
        self.calls.append(("put", x, y, buffer.width, buffer.height))
        for row in range(buffer.height):
            start = 4 * (self.width * (y + row) + x)
            self.data[start : start + 4 * buffer.width] = buffer.data[
                4 * buffer.width * row : 4 * buffer.width * (row + 1)
            ]

    @property
    def draws(self):
        return [call for call in self.calls if call[0] == "draw"]


@pytest.fixture
def recording_surface():
    return RecordingSurface


@pytest.fixture
def font_path():
    if FONT_PATH is None:
        pytest.skip("No monospace font found on system")
    return FONT_PATH
