from pathlib import Path

import numpy as np
from PIL import Image

from txtimg.model import ColourMode, Pixel, RenderOptions, TextImage
from txtimg.palette import PALETTE, glyph_indices, luminance_grid
from txtimg.raster import rasterize


def compose(samples: np.ndarray, mode: ColourMode = ColourMode.BACKGROUND, palette: str = PALETTE) -> list[Pixel]:
    """Turn an (h, w, 3) uint8 sample array into row-major cells."""
    if samples.ndim != 3 or samples.shape[2] != 3:
        raise ValueError(f"Expected (height, width, 3) samples, got {samples.shape}")
    if samples.dtype != np.uint8:
        raise ValueError(f"Expected uint8 samples, got {samples.dtype}")

    indices = glyph_indices(luminance_grid(samples), palette)
    cells = []
    for row, row_indices in zip(samples, indices):
        for sample, idx in zip(row, row_indices):
            colour = (int(sample[0]), int(sample[1]), int(sample[2]))
            glyph = palette[idx]
            if mode is ColourMode.BACKGROUND:
                # No foreground to draw the glyph with
                cells.append(Pixel(" ", background=colour))
            elif mode is ColourMode.FULL:
                cells.append(Pixel(glyph, background=colour, foreground=colour))
            elif mode is ColourMode.FOREGROUND:
                cells.append(Pixel(glyph, foreground=colour))
            else:
                cells.append(Pixel(glyph))
    return cells


def from_image(
    image: Image.Image | str | Path,
    options: RenderOptions,
    mode: ColourMode = ColourMode.BACKGROUND,
) -> TextImage:
    samples = rasterize(image, options)
    return TextImage(options.width, options.height, compose(samples, mode))
