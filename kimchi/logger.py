"""In-memory log kept as a bounded buffer."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from kimchi.buffer import Buffer

MAX_LOG_LINES = 256


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_message(prefix: str, *args: Any) -> str:
    """Build a log line of the form ``[prefix] message``."""
    # Operands get a space between them only when neither is a string.
    parts: list[str] = []
    previous: Any = ""
    for arg in args:
        if not isinstance(previous, str) and not isinstance(arg, str):
            parts.append(" ")
        parts.append(_text(arg))
        previous = arg
    return f"[{prefix}] {''.join(parts).strip()}"


class Logger:
    """Collects log lines, keeping only the most recent ones."""

    def __init__(self, max_lines: int = MAX_LOG_LINES, out: TextIO | None = None) -> None:
        self.max_lines = max_lines
        self.buffer = Buffer(name="[Log]", content=[])
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    def append_line(self, line: str) -> None:
        """Add a line, dropping the oldest ones past the limit."""
        content = self.buffer.content
        content.append(line)
        del content[: max(0, len(content) - self.max_lines)]
        self.buffer.modified = True

    def log(self, *args: Any) -> None:
        self.append_line(format_message("log", *args))

    def logf(self, fmt: str, *args: Any) -> None:
        """Record a %-formatted message and echo it to the output stream."""
        message = fmt % args
        self.append_line(format_message("log", message))
        print(message, file=self.out)

    def error(self, *args: Any) -> None:
        self.append_line(format_message("error", *args))

    def errorf(self, fmt: str, *args: Any) -> None:
        self.append_line(format_message("error", fmt % args))

    def lines(self) -> list[str]:
        """Return a copy of all retained lines, oldest first."""
        return list(self.buffer.content)

    def tail(self, count: int) -> list[str]:
        """Return up to the last ``count`` lines."""
        return self.buffer.content[-count:] if count > 0 else []

    def dump(self, out: TextIO | None = None) -> None:
        """Print every retained line under a header."""
        stream = out or self.out
        print("\n--- LOG DUMP ---", file=stream)
        for line in self.buffer.content:
            print(line, file=stream)