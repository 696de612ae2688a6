"""Human-readable hexadecimal dumps of byte strings."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO

from .flags import FlagParser

OFFSET_COLOR = "\033[91m"
HEX_COLOR = "\033[93m"
ASCII_COLOR = "\033[94m"
RESET_COLOR = "\033[0m"


@dataclass(frozen=True)
class HexdumpOptions:
    """Layout switches for a hex dump."""

    show_spaces: bool = True
    show_ascii: bool = True
    show_offset: bool = True
    decimal_offset: bool = False


def options_from_flags(flag_string: str) -> HexdumpOptions:
    """Build options from a flag string of S, A, O and D; absent letters keep defaults.

    Raises ValueError if the flag string is invalid.
    """
    try:
        flags = FlagParser(flag_string)
    except ValueError as err:
        raise ValueError(f"Invalid flag string: {err}") from err
    defaults = HexdumpOptions()
    return HexdumpOptions(
        show_spaces=flags.get_flag("S") if "s" in flags else defaults.show_spaces,
        show_ascii=flags.get_flag("A") if "a" in flags else defaults.show_ascii,
        show_offset=flags.get_flag("O") if "o" in flags else defaults.show_offset,
        decimal_offset=flags.get_flag("D") if "d" in flags else defaults.decimal_offset,
    )


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def _paint(text: str, color: str, colors: bool) -> str:
    return f"{color}{text}{RESET_COLOR}" if colors else text


def _lines(data: bytes, bytes_per_line: int, options: HexdumpOptions, colors: bool):
    cell_width = 3 if options.show_spaces else 2
    for start in range(0, len(data), bytes_per_line):
        chunk = data[start:start + bytes_per_line]
        parts = []
        if options.show_offset:
            offset = f"{start:08d}" if options.decimal_offset else f"{start:08X}"
            parts.append(_paint(f"{offset} | ", OFFSET_COLOR, colors))
        sep = " " if options.show_spaces else ""
        hex_cells = "".join(f"{byte:02X}{sep}" for byte in chunk)
        hex_cells += " " * (cell_width * (bytes_per_line - len(chunk)))
        parts.append(_paint(hex_cells, HEX_COLOR, colors))
        if options.show_ascii:
            ascii_text = "".join(_printable(byte) for byte in chunk)
            parts.append(_paint(f" | {ascii_text}", ASCII_COLOR, colors))
        yield "".join(parts) + "\n"


def format_hexdump(
    data: bytes,
    bytes_per_line: int = 16,
    options: HexdumpOptions | None = None,
    colors: bool = False,
) -> str:
    """Return the dump of data as text, one line per bytes_per_line bytes."""
    if bytes_per_line <= 0:
        raise ValueError("bytes_per_line must be positive")
    return "".join(_lines(bytes(data), bytes_per_line, options or HexdumpOptions(), colors))


def hexdump(
    data: bytes,
    bytes_per_line: int = 16,
    options: HexdumpOptions | None = None,
    colors: bool = True,
    file: IO[str] | None = None,
) -> str:
    """Write the dump of data to file (standard output by default) and return it."""
    text = format_hexdump(data, bytes_per_line, options, colors)
    (file if file is not None else sys.stdout).write(text)
    return text


def hexdump_flags(
    data: bytes,
    bytes_per_line: int = 16,
    flag_string: str = "",
    colors: bool = True,
    file: IO[str] | None = None,
) -> str:
    """Write a dump laid out by a flag string; see options_from_flags."""
    return hexdump(data, bytes_per_line, options_from_flags(flag_string), colors, file)