"""Text buffers and cursors."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

MAIN_CURSOR = 0


@dataclass
class Cursor:
    """A position in a buffer, zero-based column and line."""

    x: int = 0
    y: int = 0


@dataclass
class Cursors:
    """The cursors of a buffer; the first one is the main cursor."""

    list: list[Cursor] = field(default_factory=list)


@dataclass
class Buffer:
    """An editable buffer of lines, optionally backed by a file."""

    name: str
    path: str | None = None
    modified: bool = False
    cursor_x: int = 0
    cursor_y: int = 0
    content: list[str] = field(default_factory=lambda: [""])
    cursors: Cursors = field(default_factory=Cursors)

    def text(self) -> str:
        """Return the buffer contents joined with newlines."""
        return "\n".join(self.content)

    def save(self) -> None:
        """Write the buffer to its file and clear the modified flag."""
        if not self.path:
            raise ValueError(f"buffer {self.name!r} has no path")
        with open(self.path, "wb") as handle:
            handle.write(self.text().encode("utf-8"))
        self.modified = False


def load_buffer(path: str | os.PathLike[str]) -> Buffer:
    """Read a file into a new buffer, normalising CRLF line endings."""
    with open(path, "rb") as handle:
        data = handle.read()
    text = data.decode("utf-8", errors="replace").replace("\r\n", "\n")
    lines = text.split("\n")
    path_str = os.fspath(path)
    return Buffer(name=os.path.basename(path_str), path=path_str, content=lines)


def new_empty_buffer(name: str) -> Buffer:
    """Create an in-memory buffer with a single empty line."""
    return Buffer(name=name)