"""Conversion between binary data and upper-case hexadecimal text."""

from __future__ import annotations

import string
import struct
from enum import IntEnum
from typing import Any, Iterable

_FORMAT_CODES = frozenset("bBhHiIlLqQefd?")


class Endianness(IntEnum):
    """Byte order of typed values; the value is the marker byte written first."""

    LITTLE = 0x4C  # 'L'
    BIG = 0x42  # 'B'


def hexlify(data: bytes, offset: int = 0, count: int | None = None) -> str:
    """Return up to count bytes of data, starting at offset, as upper-case hex.

    Raises ValueError if offset does not fall inside data.
    """
    if offset < 0 or offset >= len(data):
        raise ValueError("offset is outside the data")
    end = len(data) if count is None else offset + max(count, 0)
    return bytes(data[offset:end]).hex().upper()


def unhexlify(text: str) -> bytes:
    """Decode hex text (either case) into bytes.

    Raises ValueError on an odd length or a character that is not a hex digit.
    """
    if len(text) % 2:
        raise ValueError("hex text must have an even length")
    for char in text:
        if char not in string.hexdigits:
            raise ValueError(f"Invalid hex character: {char!r}")
    return bytes.fromhex(text)


def _struct_for(fmt: str, endian: Endianness) -> struct.Struct:
    if len(fmt) != 1 or fmt not in _FORMAT_CODES:
        raise ValueError(f"Unsupported element format: {fmt!r}")
    order = "<" if endian is Endianness.LITTLE else ">"
    return struct.Struct(order + fmt)


def hexlify_any(
    values: Iterable[Any], fmt: str, endian: Endianness = Endianness.LITTLE
) -> str:
    """Encode typed values as hex, prefixed by the endianness marker byte.

    fmt is a single struct format code such as "H", "i" or "d".
    """
    endian = Endianness(endian)
    packer = _struct_for(fmt, endian)
    try:
        body = b"".join(packer.pack(value) for value in values)
    except struct.error as err:
        raise ValueError(str(err)) from err
    return (bytes([endian.value]) + body).hex().upper()


def unhexlify_any(text: str, fmt: str) -> list[Any]:
    """Decode text written by hexlify_any back into a list of values.

    Raises ValueError on malformed text, an unknown marker, or a length
    that is not a whole number of elements.
    """
    if len(text) < 2 or len(text) % 2:
        raise ValueError("hex text must hold a marker and have an even length")
    raw = unhexlify(text)
    try:
        endian = Endianness(raw[0])
    except ValueError:
        raise ValueError(f"Unknown endianness marker: 0x{raw[0]:02X}") from None
    unpacker = _struct_for(fmt, endian)
    body = raw[1:]
    if len(body) % unpacker.size:
        raise ValueError("data length is not a multiple of the element size")
    return [value for (value,) in unpacker.iter_unpack(body)]