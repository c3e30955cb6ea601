import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from txtimg.compositor import from_image
from txtimg.model import ColourMode, RenderOptions
from txtimg.renderer import write
from txtimg.terminal import options_for_terminal

logger = logging.getLogger("txtimg")


def setup_logging(debug: bool) -> None:
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an image as truecolor text art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-W", "--width", type=_positive_int, default=None, help="Output width in cells (default: half terminal width)"
    )
    parser.add_argument(
        "-H", "--height", type=_positive_int, default=None, help="Output height in cells (default: terminal height)"
    )
    parser.add_argument(
        "-m",
        "--mode",
        default=ColourMode.BACKGROUND.value,
        choices=[m.value for m in ColourMode],
        help="Colour mode (default: background). 'background' draws solid colour blocks, "
        "'full' draws shaded characters on coloured blocks.",
    )
    parser.add_argument("--debug", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    fallback = options_for_terminal()
    options = RenderOptions(
        width=args.width if args.width is not None else fallback.width,
        height=args.height if args.height is not None else fallback.height,
    )
    logger.debug("Rendering %s at %dx%d in %s mode", image_path, options.width, options.height, args.mode)

    try:
        text_image = from_image(image_path, options, ColourMode(args.mode))
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError):
        print(f"Not a readable image: {image_path}", file=sys.stderr)
        sys.exit(1)

    write(text_image, sys.stdout)
