"""Matching of file names against ``*`` patterns."""

from __future__ import annotations


def matches(name: str, pattern: str) -> bool:
    """Return True if ``name`` matches ``pattern``, where ``*`` matches any run.

    Names starting with a dot only match patterns that also start with one.
    """
    if name.startswith(".") and not pattern.startswith("."):
        return False
    p = n = 0
    star: int | None = None
    restart = 0
    while n < len(name):
        current = pattern[p] if p < len(pattern) else ""
        if current == name[n]:
            p += 1
            n += 1
        elif current == "*":
            while p < len(pattern) and pattern[p] == "*":
                p += 1
            star = p
            restart = n
        elif star is not None:
            p = star
            restart += 1
            n = restart
        else:
            return False
    while p < len(pattern) and pattern[p] == "*":
        p += 1
    return p == len(pattern)