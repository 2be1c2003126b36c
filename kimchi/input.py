"""Key input decoding."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Mods:
    """A key together with the modifiers held when it was pressed."""

    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    key: str = ""


def ctrl_mod(char: str) -> int:
    """Return the control code a terminal sends for Ctrl plus ``char``."""
    return ord(char) & 0xFF & 0x1F


def parse_input(s: str) -> int:
    """Decode a ``ctrl+<letter>`` description to its control byte, else 0."""
    encoded = s.encode("utf-8")
    if s.startswith("ctrl+") and len(encoded) == 6:
        return (encoded[-1] - ord("a") + 1) & 0xFF
    return 0