import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from asciiize.charsets import DEFAULT_RAMP, RAMPS
from asciiize.converter import transform_image
from asciiize.effects import AsciiParams
from asciiize.errors import SurfaceUnavailable
from asciiize.registry import default_registry
from asciiize.sampling import WEIGHTINGS

logger = logging.getLogger("asciiize")


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv=None):
    registry = default_registry()

    parser = argparse.ArgumentParser(description="Redraw an image as a grid of coloured glyphs")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("-o", "--output", required=True, help="Path to write the transformed image")
    parser.add_argument(
        "-e", "--effect", default="ascii", choices=registry.names(), help="Effect to apply (default: ascii)"
    )
    parser.add_argument(
        "-c", "--cell-size", type=int, default=None, help="Grid cell size in pixels for the ascii effect (default: 7)"
    )
    parser.add_argument(
        "-r",
        "--ramp",
        default=DEFAULT_RAMP,
        choices=sorted(RAMPS),
        help=f"Symbol ramp for the ascii effect (default: {DEFAULT_RAMP})",
    )
    parser.add_argument(
        "-w",
        "--weighting",
        default="mean",
        choices=WEIGHTINGS,
        help="Brightness formula: unweighted channel mean or BT.601 luma (default: mean)",
    )
    parser.add_argument("-f", "--font", default=None, help="TrueType font for glyphs (default: system monospace)")
    parser.add_argument(
        "-b", "--background", default=None, help="Flatten onto this colour, e.g. black or #202020 (default: keep alpha)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    effect = registry[args.effect]
    try:
        if isinstance(effect.params, AsciiParams):
            cell_size = args.cell_size if args.cell_size is not None else effect.params.cell_size
            effect = replace(
                effect,
                params=AsciiParams(cell_size=cell_size, symbols=RAMPS[args.ramp], weighting=args.weighting),
            )
        result = transform_image(image_path, effect, font_path=args.font, background=args.background)
    except (ValueError, SurfaceUnavailable) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("writing %s", args.output)
    result.save(args.output)
