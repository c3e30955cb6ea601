from typing import TextIO

from txtimg.model import CellStyle, Pixel, TextImage

RESET = "\033[0m"
ROW_END = "\r\n"


def _fg(rgb) -> str:
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m"


def _bg(rgb) -> str:
    r, g, b = rgb
    return f"\033[48;2;{r};{g};{b}m"


def render_cell(pixel: Pixel) -> str:
    """Wrap one glyph in its own truecolor run, reset at the end."""
    style = pixel.style
    if style is CellStyle.BOTH:
        return f"{_fg(pixel.foreground)}{_bg(pixel.background)}{pixel.glyph}{RESET}"
    if style is CellStyle.FOREGROUND:
        return f"{_fg(pixel.foreground)}{pixel.glyph}{RESET}"
    if style is CellStyle.BACKGROUND:
        return f"{_bg(pixel.background)}{pixel.glyph}{RESET}"
    return pixel.glyph


def render_into(image: TextImage, buffer: list[str]) -> None:
    """Append the rendering of ``image`` to ``buffer``, one part per cell.

    Rows end in CRLF so the cursor returns to column 0 under raw terminal modes.
    """
    for row in image.rows():
        buffer.extend(render_cell(pixel) for pixel in row)
        buffer.append(ROW_END)


def render(image: TextImage) -> str:
    parts: list[str] = []
    render_into(image, parts)
    return "".join(parts)


def write(image: TextImage, stream: TextIO) -> None:
    """Write the rendering to ``stream``, bypassing newline translation when possible."""
    output = render(image)
    raw = getattr(stream, "buffer", None)
    if raw is None:
        stream.write(output)
        stream.flush()
        return
    # Keep text already written ahead of the raw bytes
    stream.flush()
    raw.write(output.encode(stream.encoding or "utf-8"))
    raw.flush()
