"""Replacing ``~`` and ``$NAME`` in tokens."""

from __future__ import annotations

from collections.abc import Sequence

from .env import Environment
from .tokens import NO_QUOTE, SINGLE_QUOTE, Token


def replace_tilde(tokens: Sequence[Token], home: str) -> None:
    """Replace a leading unquoted ``~`` or ``~/`` by ``home`` in each token."""
    for token in tokens:
        content = token.content
        if (
            content.startswith("~")
            and token.in_quote == NO_QUOTE
            and (len(content) == 1 or content[1] == "/")
            and not token.concat
        ):
            token.content = home + content[1:]


def replace_env_vars(tokens: Sequence[Token], env: Environment, status: int) -> None:
    """Replace each ``$NAME`` token by its value and ``$?`` by ``status``.

    A bare ``$`` glued to a following quoted piece disappears; single-quoted
    tokens are left alone. Replaced tokens are marked with ``is_var``.
    """
    for token, following in zip(tokens, [*tokens[1:], None]):
        content = token.content
        value: str | None = None
        if (
            following is not None
            and token.concat
            and token.in_quote == NO_QUOTE
            and content == "$"
            and following.in_quote != NO_QUOTE
        ):
            value = ""
        elif (
            content.startswith("$")
            and token.in_quote != SINGLE_QUOTE
            and len(content) > 1
            and content[1] != " "
        ):
            if content[1] == "?":
                value = str(status) + content[2:]
            else:
                value = env.get(content[1:])
        if value is not None:
            token.content = value
            token.is_var = True