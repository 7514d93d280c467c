"""ANSI decoration for interactive terminals.

The checksum and verify modules return plain strings.  Colour and the
transient progress line are added here, by the CLI, only when wanted.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

COLOR_RED = "\x1b[31m"
COLOR_GREEN = "\x1b[32m"
COLOR_RESET = "\x1b[m"
CURSOR_SHOW = "\x1b[?25h"
CURSOR_HIDE = "\x1b[?25l"
CLEAR_RIGHT = "\x1b[K"
CARRIAGE_RETURN = "\r"

PROGRESS_MESSAGE = "calculating checksum..."


def is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def use_color(mode: str, stream: TextIO) -> bool:
    """Resolve a ``auto``/``always``/``never`` colour mode for *stream*."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    return is_tty(stream)


def green(text: str) -> str:
    return f"{COLOR_GREEN}{text}{COLOR_RESET}"


def red(text: str) -> str:
    return f"{COLOR_RED}{text}{COLOR_RESET}"


@contextmanager
def progress(stream: TextIO, enabled: bool = True) -> Iterator[None]:
    """Show a progress line with the cursor hidden while the block runs.

    The line is erased and the cursor shown again on every exit.
    """
    if not enabled:
        yield
        return
    stream.write(CURSOR_HIDE)
    stream.write(PROGRESS_MESSAGE)
    stream.flush()
    try:
        yield
    finally:
        stream.write(CARRIAGE_RETURN + CLEAR_RIGHT)
        stream.write(CURSOR_SHOW)
        stream.flush()
