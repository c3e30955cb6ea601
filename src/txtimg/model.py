from dataclasses import dataclass, field
from enum import Enum

RGB = tuple[int, int, int]


class ColourMode(Enum):
    """Which colours the compositor attaches to each cell.

    BACKGROUND is the default: every cell is a space on a background of the
    sampled colour, so the output reads as solid colour blocks. FULL draws the
    luminance glyph in the sampled colour on the same background, which gives
    shaded ASCII art. FOREGROUND and NONE drop the background, and NONE drops
    colour altogether.
    """

    BACKGROUND = "background"
    FULL = "full"
    FOREGROUND = "foreground"
    NONE = "none"


class CellStyle(Enum):
    PLAIN = "plain"
    BACKGROUND = "background"
    FOREGROUND = "foreground"
    BOTH = "both"


def _check_size(obj, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")


def _check_colour(name: str, colour) -> None:
    if colour is None:
        return
    if (
        not isinstance(colour, tuple)
        or len(colour) != 3
        or not all(isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255 for v in colour)
    ):
        raise ValueError(f"{name} must be an (r, g, b) tuple of ints in 0..255, got {colour!r}")


@dataclass(frozen=True)
class RenderOptions:
    width: int
    height: int

    def __post_init__(self):
        _check_size(self, "width", "height")


@dataclass(frozen=True)
class Pixel:
    glyph: str
    background: RGB | None = None
    foreground: RGB | None = None

    def __post_init__(self):
        if len(self.glyph) != 1:
            raise ValueError(f"Glyph must be a single character: {self.glyph!r}")
        # Control characters would corrupt row layout and escape sequences
        if not self.glyph.isprintable():
            raise ValueError(f"Glyph must be printable: {self.glyph!r}")
        _check_colour("background", self.background)
        _check_colour("foreground", self.foreground)

    @property
    def style(self) -> CellStyle:
        if self.foreground is not None and self.background is not None:
            return CellStyle.BOTH
        if self.foreground is not None:
            return CellStyle.FOREGROUND
        if self.background is not None:
            return CellStyle.BACKGROUND
        return CellStyle.PLAIN


@dataclass(frozen=True)
class TextImage:
    width: int
    height: int
    cells: tuple[Pixel, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of cells but store it immutably
        object.__setattr__(self, "cells", tuple(self.cells))
        _check_size(self, "width", "height")
        if len(self.cells) != self.width * self.height:
            raise ValueError(f"Expected {self.width * self.height} cells, got {len(self.cells)}")

    def row(self, y: int) -> tuple[Pixel, ...]:
        start = y * self.width
        return self.cells[start : start + self.width]

    def rows(self):
        for y in range(self.height):
            yield self.row(y)
