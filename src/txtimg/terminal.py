import os
import sys

from txtimg.model import RenderOptions


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def options_for_terminal() -> RenderOptions:
    """Cell grid that fills the terminal.

    Columns are halved because a monospace cell is roughly twice as tall as it
    is wide.
    """
    columns, rows = get_terminal_size()
    return RenderOptions(width=max(1, columns // 2), height=max(1, rows))
