import logging
from pathlib import Path

import numpy as np
from PIL import Image

from txtimg.model import RenderOptions

logger = logging.getLogger(__name__)


def load_image(source: Image.Image | str | Path) -> Image.Image:
    """Open ``source`` if it is a path and flatten it to RGB."""
    if not isinstance(source, Image.Image):
        with Image.open(source) as opened:
            return opened.convert("RGB")
    return source.convert("RGB")


def rasterize(image: Image.Image | str | Path, options: RenderOptions) -> np.ndarray:
    """Resample an image to exactly one RGB sample per cell.

    The source aspect ratio is not preserved: the image is stretched to fill
    ``options.width`` x ``options.height``.

    Returns array of shape (height, width, 3) as uint8.
    """
    image = load_image(image)
    size = (options.width, options.height)
    logger.debug("Rasterizing %dx%d image to %dx%d cells", image.width, image.height, *size)
    if image.size != size:
        image = image.resize(size, Image.LANCZOS)
    samples = np.asarray(image, dtype=np.uint8)
    if samples.shape != (options.height, options.width, 3):
        raise ValueError(f"Resampler returned {samples.shape}, expected {(options.height, options.width, 3)}")
    return samples
