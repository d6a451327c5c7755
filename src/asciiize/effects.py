import logging
from dataclasses import dataclass
from typing import ClassVar

from asciiize.charsets import DEFAULT_RAMP, RAMPS
from asciiize.errors import SurfaceUnavailable
from asciiize.sampling import Cell, check_cell_size, check_symbols, check_weighting, greyscale_pixels, sample_cells
from asciiize.surface import Surface

logger = logging.getLogger(__name__)

SHADOW_FILL = "rgb(200, 200, 200)"
SHADOW_ALPHA = 0.1
SHADOW_OFFSET = 1


@dataclass(frozen=True)
class AsciiParams:
    kind: ClassVar[str] = "ascii"

    cell_size: int = 7
    symbols: str = RAMPS[DEFAULT_RAMP]
    weighting: str = "mean"

    def __post_init__(self):
        check_cell_size(self.cell_size)
        check_symbols(self.symbols)
        check_weighting(self.weighting)


@dataclass(frozen=True)
class GreyscaleParams:
    kind: ClassVar[str] = "greyscale"


def _surface_size(surface: Surface) -> tuple[int, int]:
    width, height = surface.width, surface.height
    if width <= 0 or height <= 0:
        raise SurfaceUnavailable(f"Surface is {width}x{height}, nothing to sample")
    return width, height


def asciiize(surface: Surface, params: AsciiParams) -> list[Cell]:
    """Redraw the surface as one coloured glyph per grid cell.

    Every visible cell gets a faint light shadow glyph one pixel down and right,
    then the glyph itself in the sampled pixel's colour. Returns the drawn cells.
    """
    cell_size = check_cell_size(params.cell_size)
    width, height = _surface_size(surface)

    # Snapshot before clearing so sampling never sees our own output
    buffer = surface.read_pixels(0, 0, width, height)
    surface.clear(0, 0, width, height)

    cells = sample_cells(buffer, cell_size, params.symbols, params.weighting)
    for cell in cells:
        surface.draw_glyph(
            cell.symbol, cell.x + SHADOW_OFFSET, cell.y + SHADOW_OFFSET, cell_size, SHADOW_FILL, SHADOW_ALPHA
        )
        surface.draw_glyph(cell.symbol, cell.x, cell.y, cell_size, cell.color, 1.0)

    logger.debug("asciiized %dx%d surface at cell size %d: %d cells drawn", width, height, cell_size, len(cells))
    return cells


def greyscale(surface: Surface, params: GreyscaleParams | None = None) -> None:
    """Replace every pixel's colour with its mean brightness, keeping alpha."""
    width, height = _surface_size(surface)
    buffer = surface.read_pixels(0, 0, width, height)
    surface.put_pixels(greyscale_pixels(buffer), 0, 0)
    logger.debug("greyscaled %dx%d surface", width, height)


EFFECTS = {
    AsciiParams.kind: asciiize,
    GreyscaleParams.kind: greyscale,
}
