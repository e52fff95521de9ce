"""Terminal control: cbreak input, non-blocking reads, and size checks."""

from __future__ import annotations

import logging
import os
import select
import shutil
import sys
import termios
import tty
from typing import TextIO

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET_ATTRIBUTES = "\x1b[0m"


class TerminalTooSmallError(Exception):
    """The visible terminal cannot fit the board and HUD."""

    def __init__(
        self, required: tuple[int, int], actual: tuple[int, int],
    ) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"Please resize your terminal to at least "
            f"{required[0]}x{required[1]} characters "
            f"(currently {actual[0]}x{actual[1]})."
        )


def check_size(
    columns: int,
    lines: int,
    size: os.terminal_size | None = None,
) -> None:
    """Raise :class:`TerminalTooSmallError` if the terminal is too small."""
    if size is None:
        size = shutil.get_terminal_size()
    if size.columns < columns or size.lines < lines:
        raise TerminalTooSmallError((columns, lines), (size.columns, size.lines))


class Terminal:
    """Context manager owning the terminal for the duration of a game.

    On entry, stdin is switched to character-at-a-time input with signal
    keys disabled so Ctrl+C and Ctrl+D arrive as ordinary bytes, and the
    cursor is hidden. On exit the saved mode and the cursor are restored.
    """

    def __init__(
        self, stdin: TextIO | None = None, stdout: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.fd = self.stdin.fileno()
        self._saved: list | None = None

    def __enter__(self) -> Terminal:
        if os.isatty(self.fd):
            self._saved = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
            attrs = termios.tcgetattr(self.fd)
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(self.fd, termios.TCSANOW, attrs)
        else:
            logger.warning("stdin is not a terminal; key input may be buffered.")
        self.write(HIDE_CURSOR)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None
        # Frames end without a newline; move below the HUD before any output.
        self.write(RESET_ATTRIBUTES + SHOW_CURSOR + "\n")

    def read(self, timeout: float) -> str:
        """Wait up to *timeout* seconds for input and return what arrived.

        Returns an empty string on timeout. End of input is reported as
        Ctrl+D so that a closed stdin ends the game.
        """
        readable, _, _ = select.select([self.fd], [], [], max(timeout, 0.0))
        if not readable:
            return ""
        data = os.read(self.fd, 64)
        if not data:
            return "\x04"
        return data.decode("utf-8", errors="ignore")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()
