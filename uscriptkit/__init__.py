"""Utilities for scripting tools: logging, timing, boolean expressions, flags, hex, INI, numeric and string helpers."""

__version__ = "1.0.0"

__all__ = [
    "boolexpr",
    "flags",
    "hexdump",
    "hexlify",
    "ini",
    "logger",
    "numeric",
    "strings",
    "timer",
]