"""Terminal control: escape sequences, raw mode and screen drawing."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from kimchi.logger import Logger

try:
    import termios
    import tty
except ImportError:  # pragma: no cover
    termios = tty = None  # type: ignore[assignment]

LOG_OVERLAY_LINES = 5


def clear_line(out: TextIO | None = None) -> None:
    """Erase the line the terminal cursor is on."""
    (out or sys.stdout).write("\033[2K")


def move_cursor(x: int, y: int, out: TextIO | None = None) -> None:
    """Move the terminal cursor to zero-based column ``x``, row ``y``."""
    (out or sys.stdout).write(f"\033[{y + 1};{x + 1}H")


class Screen:
    """Draws to a terminal and manages its raw mode."""

    def __init__(self, out: TextIO | None = None, fd: int | None = None) -> None:
        self.out = out or sys.stdout
        self._fd = fd
        self._saved_attrs: list | None = None
        self.width = 0
        self.height = 0

    @property
    def fd(self) -> int:
        return self._fd if self._fd is not None else sys.stdin.fileno()

    def enter_raw_mode(self) -> None:
        """Put the input terminal into raw mode, remembering its settings."""
        if termios is None:
            raise OSError("raw mode is not supported on this platform")
        self._saved_attrs = termios.tcgetattr(self.fd)
        tty.setraw(self.fd)

    def exit_raw_mode(self) -> None:
        """Restore saved terminal settings and show the cursor again."""
        if self._saved_attrs is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved_attrs)
            self._saved_attrs = None
        self.out.write("\033[?25h")
        self.out.flush()

    def clear(self) -> None:
        """Clear the screen, hide and home the cursor, refresh the size."""
        try:
            self.width, self.height = os.get_terminal_size(self.out.fileno())
        except (OSError, ValueError, AttributeError):
            self.width, self.height = 0, 0
        self.out.write("\033[2J\033[H\033[?25l")
        move_cursor(0, 0, self.out)
        self.out.flush()

    def render_log(self, logger: Logger) -> None:
        """Draw the most recent log lines as an overlay."""
        for message in logger.tail(LOG_OVERLAY_LINES):
            move_cursor(0, 0, self.out)
            clear_line(self.out)
            self.out.write(message)
        self.out.flush()

    def render(self, logger: Logger) -> None:
        self.clear()
        self.render_log(logger)

    def __enter__(self) -> Screen:
        self.enter_raw_mode()
        self.clear()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.exit_raw_mode()