"""Reading of simple INI files, with optional ${...} value substitution."""

from __future__ import annotations

import re
from pathlib import Path

_TRIM = " \t\r\n"
_VAR = re.compile(r"\$\{([^}]+)\}")


class IniParser:
    """Holds key/value pairs grouped by section; keys before any header go in ""."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, str]] = {}

    def load(self, path: str | Path) -> None:
        """Read and parse a file; raises OSError if it cannot be opened."""
        with open(path, encoding="utf-8") as handle:
            self.loads(handle.read())

    def loads(self, text: str) -> None:
        """Parse INI text, adding its entries to those already held."""
        section = ""
        for raw in text.split("\n"):
            line = raw.strip(_TRIM)
            if not line or line[0] in ";#":
                continue
            if line.startswith("[") and line.endswith("]") and len(line) >= 2:
                section = line[1:-1]
                continue
            key, sep, value = line.partition("=")
            if sep:
                self._data.setdefault(section, {})[key.strip(_TRIM)] = value.strip(_TRIM)

    def get_value(self, section: str, key: str, default: str = "") -> str:
        """Return the raw value of key in section, or default."""
        return self._data.get(section, {}).get(key, default)

    def get_section(self, section: str) -> dict[str, str]:
        """Return a copy of a section's entries; raises KeyError if absent."""
        return dict(self._data[section])

    def section_exists(self, section: str) -> bool:
        """Whether the section holds at least one entry."""
        return section in self._data


class IniParserEx(IniParser):
    """IniParser whose values may refer to ${key} or ${section:key}."""

    def get_value(
        self, section: str, key: str, default: str = "", depth: int = 5
    ) -> str:
        """Return the value with references resolved, at most depth levels deep."""
        if depth <= 0:
            return default
        entries = self._data.get(section)
        if entries is None or key not in entries:
            return default
        value = entries[key]
        while (match := _VAR.search(value)) is not None:
            name = match.group(1)
            ref_section, colon, ref_key = name.partition(":")
            if colon:
                replacement = self.get_value(ref_section, ref_key, "", depth - 1)
            else:
                replacement = self.get_value(section, name, "", depth - 1)
            value = value[: match.start()] + replacement + value[match.end():]
        return value

    def get_resolved_section(self, section: str, depth: int = 5) -> dict[str, str]:
        """Return a section with every value resolved; raises KeyError if absent."""
        return {
            key: self.get_value(section, key, "", depth) for key in self._data[section]
        }