"""Flag strings where the case of each letter gives its boolean value."""

from __future__ import annotations


class FlagParser:
    """Reads a flag string: an upper-case letter is True, a lower-case letter False.

    Each letter may appear only once, in either case.
    """

    def __init__(self, flags: str) -> None:
        seen: set[str] = set()
        for char in flags:
            lower = char.lower()
            if lower in seen:
                raise ValueError("Flag string contains both cases of the same letter")
            seen.add(lower)
        self._flags = {char.lower(): char.isupper() for char in flags}

    def get_flag(self, flag: str) -> bool:
        """Return the flag's value; a flag that is not present is False."""
        return self._flags.get(flag.lower(), False)

    def __contains__(self, flag: str) -> bool:
        return flag.lower() in self._flags