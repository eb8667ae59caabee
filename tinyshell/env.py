"""The shell's environment: an ordered list of ``KEY=value`` or ``KEY`` entries."""

from __future__ import annotations

from collections.abc import Iterable


def is_valid_key(key: str | None) -> bool:
    """Return True if ``key`` is a valid variable name.

    A valid name is not empty, does not start with a digit and holds only
    ASCII letters, digits and underscores.
    """
    if not key or key[0].isdigit():
        return False
    return all(ch == "_" or (ch.isascii() and ch.isalnum()) for ch in key)


def _split(entry: str) -> tuple[str, str | None]:
    """Split an entry into its name and value (None when only declared)."""
    name, sep, value = entry.partition("=")
    return name, (value if sep else None)


class Environment:
    """Ordered environment variables, some of which may be declared without a value."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def _index(self, key: str) -> int | None:
        for index, entry in enumerate(self._entries):
            if _split(entry)[0] == key:
                return index
        return None

    def get(self, key: str) -> str:
        """Return the value of ``key``, or an empty string if it has none."""
        index = self._index(key)
        if index is None:
            return ""
        value = _split(self._entries[index])[1]
        return "" if value is None else value

    def has(self, key: str) -> bool:
        """Return True if ``key`` is set with a value (not merely declared)."""
        index = self._index(key)
        return index is not None and _split(self._entries[index])[1] is not None

    def set(self, key: str | None, value: str | None, declare_only: bool = False) -> None:
        """Set ``key`` to ``value``.

        With ``declare_only`` the name is added without a value if it is
        absent, and an existing entry is left untouched.
        """
        if key is None or value is None:
            return
        index = self._index(key)
        if index is None:
            self._entries.append(key if declare_only else f"{key}={value}")
        elif not declare_only:
            self._entries[index] = f"{key}={value}"

    def unset(self, key: str) -> None:
        """Remove ``key`` whether it has a value or is only declared."""
        index = self._index(key)
        if index is not None:
            del self._entries[index]

    def entries(self) -> list[str]:
        """Return a copy of all entries in order."""
        return list(self._entries)

    def exported(self) -> dict[str, str]:
        """Return the variables that have a value, in order, as a mapping."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, value = _split(entry)
            if value is not None:
                result[name] = value
        return result

    def sorted_entries(self) -> list[str]:
        """Return all entries sorted in byte order."""
        return sorted(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._index(key) is not None

    def __len__(self) -> int:
        return len(self._entries)