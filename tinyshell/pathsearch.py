"""Looking up commands in the directories listed by PATH."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .commands import Command
from .env import Environment

_BUILTIN_NAMES = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})


def find_in_path(name: str, path_value: str) -> str | None:
    """Return the first ``dir/name`` that exists for a directory of ``path_value``.

    Empty entries of the colon-separated list are ignored. None is returned
    when no directory holds ``name``.
    """
    for directory in filter(None, path_value.split(":")):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def resolve_command_paths(commands: Iterable[Command], env: Environment) -> None:
    """Replace each command name by its location in PATH where one is found.

    Names holding a slash, builtin names and empty names are left as they are.
    """
    path_value = env.get("PATH")
    for command in commands:
        if not command.argv or not command.argv[0]:
            continue
        name = command.argv[0]
        if "/" in name or name in _BUILTIN_NAMES:
            continue
        found = find_in_path(name, path_value)
        if found is not None:
            command.argv[0] = found