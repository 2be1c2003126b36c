"""Buffers, a rolling log, terminal drawing and key decoding for a terminal text editor."""

__version__ = "1.0.0"