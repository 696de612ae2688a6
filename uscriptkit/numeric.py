"""Conversion of text to integers and floating-point numbers."""

from __future__ import annotations

import re
import struct

_WHITESPACE = " \t\n\v\f\r"
_ASCII_DIGITS = "0123456789"

_DIGIT_CLASSES = {
    2: "[01]",
    8: "[0-7]",
    10: "[0-9]",
    16: "[0-9a-fA-F]",
}
_SIGNED_PATTERNS = {
    base: re.compile(f"-?{digits}+") for base, digits in _DIGIT_CLASSES.items()
}
_UNSIGNED_PATTERNS = {
    base: re.compile(f"{digits}+") for base, digits in _DIGIT_CLASSES.items()
}
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class NumericError(ValueError):
    """Raised when text cannot be converted to the requested number."""


def _trimmed(text: str) -> str:
    trimmed = text.strip(_WHITESPACE)
    if not trimmed:
        raise NumericError("Input is empty")
    return trimmed


def detect_base(text: str) -> tuple[int, str]:
    """Return the base given by a prefix of text and the text without that prefix.

    "0x"/"0X" selects 16, "0b"/"0B" selects 2 and a leading "0" followed by a
    digit selects 8; the prefix is only recognised when more text follows it.
    Anything else is base 10 and is returned unchanged.
    """
    if len(text) > 2 and text[0] == "0":
        marker = text[1]
        if marker in "xX":
            return 16, text[2:]
        if marker in "bB":
            return 2, text[2:]
        if marker in _ASCII_DIGITS:
            return 8, text[1:]
    return 10, text


def _check_bits(bits: int) -> None:
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        raise ValueError("bits must be a positive integer")


def _parse_integer(text: str, patterns: dict[int, re.Pattern[str]], low: int, high: int) -> int:
    base, body = detect_base(_trimmed(text))
    # Like the usual C conversion routines, digits after the longest valid run are ignored.
    match = patterns[base].match(body)
    if match is None:
        raise NumericError(f"Invalid format: {text}")
    value = int(match.group(), base)
    if not low <= value <= high:
        raise NumericError(f"Value out of range: {text}")
    return value


def to_signed(text: str, bits: int) -> int:
    """Convert text to a signed integer that fits in the given number of bits.

    Surrounding whitespace is ignored, a base prefix is honoured (see
    detect_base) and a leading "-" is accepted; a leading "+" is not.
    """
    _check_bits(bits)
    limit = 1 << (bits - 1)
    return _parse_integer(text, _SIGNED_PATTERNS, -limit, limit - 1)


def to_unsigned(text: str, bits: int) -> int:
    """Convert text to an unsigned integer that fits in the given number of bits.

    Surrounding whitespace is ignored and a base prefix is honoured; no sign
    is accepted.
    """
    _check_bits(bits)
    return _parse_integer(text, _UNSIGNED_PATTERNS, 0, (1 << bits) - 1)


def to_float(text: str) -> float:
    """Convert the whole of text, less surrounding whitespace, to a float.

    Decimal notation with an optional sign and exponent is accepted; trailing
    characters, infinities, NaNs and values too large for a double are errors.
    """
    trimmed = _trimmed(text)
    if _FLOAT_PATTERN.fullmatch(trimmed) is None:
        raise NumericError(f"Invalid format or extra characters: {text}")
    value = float(trimmed)
    if value in (float("inf"), float("-inf")):
        raise NumericError(f"Invalid format or extra characters: {text}")
    return value


def _to_single(value: float, text: str) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise NumericError(f"Invalid format or extra characters: {text}") from None


def str2int8(text: str) -> int:
    """Convert text to an 8-bit signed integer."""
    return to_signed(text, 8)


def str2int16(text: str) -> int:
    """Convert text to a 16-bit signed integer."""
    return to_signed(text, 16)


def str2int32(text: str) -> int:
    """Convert text to a 32-bit signed integer."""
    return to_signed(text, 32)


def str2int64(text: str) -> int:
    """Convert text to a 64-bit signed integer."""
    return to_signed(text, 64)


def str2uint8(text: str) -> int:
    """Convert text to an 8-bit unsigned integer."""
    return to_unsigned(text, 8)


def str2uint16(text: str) -> int:
    """Convert text to a 16-bit unsigned integer."""
    return to_unsigned(text, 16)


def str2uint32(text: str) -> int:
    """Convert text to a 32-bit unsigned integer."""
    return to_unsigned(text, 32)


def str2uint64(text: str) -> int:
    """Convert text to a 64-bit unsigned integer."""
    return to_unsigned(text, 64)


def str2float(text: str) -> float:
    """Convert text to a single-precision value, returned as a Python float."""
    return _to_single(to_float(text), text)


def str2double(text: str) -> float:
    """Convert text to a double-precision float."""
    return to_float(text)