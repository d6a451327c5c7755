from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from asciiize.charsets import DEFAULT_RAMP, NUM_BUCKETS, RAMPS, symbol_for
from asciiize.errors import InvalidArgument
from asciiize.surface import PixelBuffer

# Cells whose sampled pixel is this transparent or more are skipped
ALPHA_THRESHOLD = 50

# ITU-R BT.601 luma coefficients
LUMA_WEIGHTS = (0.299, 0.587, 0.114)
WEIGHTINGS = ("mean", "luma")


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    symbol: str
    color: str


def check_cell_size(cell_size) -> int:
    if isinstance(cell_size, bool) or not isinstance(cell_size, (int, np.integer)) or cell_size <= 0:
        raise InvalidArgument(f"cell_size must be a positive integer, got {cell_size!r}")
    return int(cell_size)


def check_symbols(symbols: Sequence[str]) -> None:
    if len(symbols) != NUM_BUCKETS:
        raise InvalidArgument(f"Expected {NUM_BUCKETS} symbols, one per brightness bucket, got {len(symbols)}")


def check_weighting(weighting: str) -> None:
    if weighting not in WEIGHTINGS:
        raise InvalidArgument(f"Unknown weighting {weighting!r}, expected one of {', '.join(WEIGHTINGS)}")


def format_rgb(red: int, green: int, blue: int) -> str:
    return f"rgb({red}, {green}, {blue})"


def brightness(rgb: np.ndarray, weighting: str = "mean") -> np.ndarray:
    """Per-pixel brightness of an (..., 3) array, as floats in 0-255."""
    rgb = np.asarray(rgb, dtype=np.float64)
    if weighting == "luma":
        return rgb @ np.array(LUMA_WEIGHTS)
    return rgb.sum(axis=-1) / 3


def sample_cells(
    buffer: PixelBuffer,
    cell_size: int,
    symbols: Sequence[str] = RAMPS[DEFAULT_RAMP],
    weighting: str = "mean",
) -> list[Cell]:
    """Sample the top-left pixel of every grid cell, skipping mostly transparent ones.

    Cells come back in row-major order. Partial cells at the right and bottom
    edges are included.
    """
    cell_size = check_cell_size(cell_size)
    check_symbols(symbols)
    check_weighting(weighting)

    samples = buffer.as_array()[::cell_size, ::cell_size]
    levels = brightness(samples[:, :, :3], weighting)
    visible = samples[:, :, 3] > ALPHA_THRESHOLD

    cells = []
    for row, col in zip(*np.nonzero(visible)):
        red, green, blue = (int(v) for v in samples[row, col, :3])
        cells.append(
            Cell(
                x=int(col) * cell_size,
                y=int(row) * cell_size,
                symbol=symbol_for(float(levels[row, col]), symbols),
                color=format_rgb(red, green, blue),
            )
        )
    return cells


def greyscale_pixels(buffer: PixelBuffer) -> PixelBuffer:
    """Replace RGB with its floored unweighted mean, keeping alpha."""
    arr = buffer.as_array().copy()
    mean = arr[:, :, :3].astype(np.uint16).sum(axis=2) // 3
    arr[:, :, :3] = mean[:, :, None].astype(np.uint8)
    return PixelBuffer(buffer.width, buffer.height, arr.tobytes())
