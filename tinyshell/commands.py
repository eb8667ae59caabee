"""Commands of a pipeline and the redirections attached to them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Redirection(enum.Enum):
    """Kind of a redirection attached to a command."""

    NONE = "none"
    INPUT = "<"
    OUTPUT = ">"
    HEREDOC = "<<"
    OUTPUT_APPEND = ">>"

    @classmethod
    def from_operator(cls, operator: str) -> Redirection:
        """Return the redirection written as ``operator``, or NONE if it is not one."""
        for kind in cls:
            if kind is not cls.NONE and kind.value == operator:
                return kind
        return cls.NONE


@dataclass
class FileRedirect:
    """A redirection target.

    For a here-document ``path`` holds the delimiter and ``content`` the
    collected text once it has been read.
    """

    path: str
    kind: Redirection
    content: str | None = None
    is_heredoc: bool = False


@dataclass
class Command:
    """One command of a pipeline: its arguments and its redirections in order."""

    argv: list[str] = field(default_factory=list)
    redirects: list[FileRedirect] = field(default_factory=list)
    pid: int | None = None

    def add_redirect(self, redirect: FileRedirect) -> None:
        """Append ``redirect`` after the redirections already attached."""
        self.redirects.append(redirect)