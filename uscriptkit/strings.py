"""String helpers: trimming, case conversion, tokenizing, joining and macro expansion."""

from __future__ import annotations

import re
from typing import Iterable, Mapping

_WHITESPACE = " \t\n\v\f\r"
_WORD = re.compile(r"[^ \t\n\v\f\r]+")
_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def trim(text: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def trim_all(items: Iterable[str]) -> list[str]:
    """Return a list with every item trimmed."""
    return [trim(item) for item in items]


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of text; other characters are unchanged."""
    return text.translate(_LOWER)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of text; other characters are unchanged."""
    return text.translate(_UPPER)


def split_at_first(text: str, delimiter: str) -> tuple[str, str]:
    """Split at the first delimiter and trim both halves.

    When the delimiter is absent the text is returned as is with an empty second part.
    """
    head, sep, tail = text.partition(delimiter) if delimiter else ("", "x", text)
    if not sep:
        return text, ""
    return trim(head), trim(tail)


def tokenize_whitespace(text: str) -> list[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return _WORD.findall(text)


def tokenize_char(text: str, delimiter: str) -> list[str]:
    """Split text on a single character and trim each token.

    A trailing delimiter does not produce a final empty token, and empty
    text gives no tokens.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return trim_all(parts)


def tokenize(text: str, delimiter: str) -> list[str]:
    """Split text on every occurrence of a string delimiter and trim each token.

    Empty tokens, including a trailing one, are kept.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return trim_all(text.split(delimiter))


def tokenize_any(text: str, delimiters: Iterable[str]) -> list[str]:
    """Split text at whichever delimiter occurs first, preferring longer ones on a tie.

    Empty pieces between delimiters are dropped; the remaining tokens are trimmed.
    """
    ordered = sorted(delimiters, key=len, reverse=True)
    if any(not delim for delim in ordered):
        raise ValueError("delimiters must not be empty")
    tokens: list[str] = []
    start = 0
    while start < len(text):
        best_pos = -1
        best_len = 0
        for delim in ordered:
            pos = text.find(delim, start)
            if pos != -1 and (best_pos == -1 or pos < best_pos):
                best_pos, best_len = pos, len(delim)
        if best_pos == -1:
            tokens.append(text[start:])
            break
        if best_pos > start:
            tokens.append(text[start:best_pos])
        start = best_pos + best_len
    return trim_all(tokens)


def tokenize_sequence(text: str, delimiters: Iterable[str]) -> list[str]:
    """Split text using each delimiter once, in the given order.

    A delimiter not found after the previous split is skipped; any text left
    at the end forms the last token. Tokens are trimmed.
    """
    tokens: list[str] = []
    start = 0
    for delim in delimiters:
        pos = text.find(delim, start)
        if pos != -1:
            tokens.append(text[start:pos])
            start = pos + len(delim)
    if start < len(text):
        tokens.append(text[start:])
    return trim_all(tokens)


def join_strings(strings: Iterable[str], delimiter: str = " ") -> str:
    """Join strings with the delimiter between each pair."""
    return delimiter.join(strings)


def replace_macros(text: str, macros: Mapping[str, str], marker: str) -> str:
    """Replace marker-prefixed identifiers with their values from macros.

    An identifier is [A-Za-z_][A-Za-z0-9_]*; unknown macros are left unchanged.
    """
    if len(marker) != 1:
        raise ValueError("marker must be a single character")
    pattern = re.compile(re.escape(marker) + r"([A-Za-z_][A-Za-z0-9_]*)")
    return pattern.sub(lambda m: macros.get(m.group(1), m.group(0)), text)