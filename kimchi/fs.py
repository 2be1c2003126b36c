"""Filesystem helpers for classifying paths."""

from __future__ import annotations

import enum
import os


class PathKind(enum.Enum):
    """What a path on disk refers to."""

    NONE = 0
    FILE = 1
    DIR = 2


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if the path can be stat'ed."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True if the path is an existing directory."""
    return os.path.isdir(path)


def is_file(path: str | os.PathLike[str]) -> bool:
    """Return True if the path is an existing regular file."""
    return os.path.isfile(path)


def classify_path(path: str | os.PathLike[str]) -> tuple[PathKind, str]:
    """Return the kind of ``path`` and its absolute form.

    Raises ``ValueError`` for a path that is neither a file nor a directory.
    """
    absolute = os.path.abspath(path)
    if not file_exists(absolute):
        return PathKind.NONE, absolute
    if is_dir(absolute):
        return PathKind.DIR, absolute
    if is_file(absolute):
        return PathKind.FILE, absolute
    raise ValueError(f"unsupported path type: {absolute}")