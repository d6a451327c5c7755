from pathlib import Path

from PIL import Image

from asciiize.registry import EffectSpec
from asciiize.surface import ImageSurface


def transform_image(
    image: Image.Image | str | Path,
    effect: EffectSpec,
    font_path: str | Path | None = None,
    background: str | None = None,
) -> Image.Image:
    """Apply an effect to a still image and return the result.

    The result is RGBA. Pass a background colour to flatten it onto an opaque RGB image.
    """
    if isinstance(image, Image.Image):
        surface = ImageSurface(image, font_path=font_path)
    else:
        surface = ImageSurface.open(image, font_path=font_path)

    effect.apply(surface)

    if background is None:
        return surface.image
    flat = Image.new("RGBA", surface.image.size, background)
    flat.alpha_composite(surface.image)
    return flat.convert("RGB")
