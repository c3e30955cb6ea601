import numpy as np

# Sparsest to densest visual weight
PALETTE = " .:;+oO&@#"

# BT.601-ish weights, normalised by >> 3
RED_WEIGHT = 3
GREEN_WEIGHT = 4
BLUE_WEIGHT = 1
WEIGHT_SHIFT = 3


def luminance(rgb: tuple[int, int, int]) -> int:
    """Perceptual brightness of an 8-bit RGB triple, in 0..255."""
    r, g, b = rgb
    return (r * RED_WEIGHT + g * GREEN_WEIGHT + b * BLUE_WEIGHT) >> WEIGHT_SHIFT


def glyph_for(lum: int, palette: str = PALETTE) -> str:
    """Pick the palette entry whose equal-width bucket of 0..255 contains ``lum``."""
    if not palette:
        raise ValueError("Palette must not be empty")
    n = len(palette)
    idx = lum * n // 256
    return palette[min(max(idx, 0), n - 1)]


def luminance_grid(samples: np.ndarray) -> np.ndarray:
    """Vectorised luminance over an (h, w, 3) uint8 array; returns (h, w) uint8."""
    wide = samples.astype(np.uint16)
    total = wide[..., 0] * RED_WEIGHT + wide[..., 1] * GREEN_WEIGHT + wide[..., 2] * BLUE_WEIGHT
    return (total >> WEIGHT_SHIFT).astype(np.uint8)


def glyph_indices(lum: np.ndarray, palette: str = PALETTE) -> np.ndarray:
    """Palette indices for an array of luminance values."""
    if not palette:
        raise ValueError("Palette must not be empty")
    n = len(palette)
    return np.clip(lum.astype(np.int64) * n // 256, 0, n - 1)
