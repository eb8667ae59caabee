"""Checking a token list for misplaced pipes and redirections."""

from __future__ import annotations

from collections.abc import Sequence

from .tokens import Token, TokenType


class ShellSyntaxError(Exception):
    """Raised when a line has a pipe or redirection in the wrong place."""

    status = 2

    def __init__(self, token: str) -> None:
        super().__init__(f"syntax error near unexpected token `{token}'")
        self.token = token


_BAD_PAIRS = {
    (TokenType.REDIRECT, TokenType.REDIRECT),
    (TokenType.PIPE, TokenType.PIPE),
    (TokenType.REDIRECT, TokenType.PIPE),
}


def check_syntax(tokens: Sequence[Token]) -> Sequence[Token]:
    """Return ``tokens`` unchanged, or raise ShellSyntaxError if misplaced."""
    if not tokens:
        return tokens
    if tokens[0].type is TokenType.PIPE:
        raise ShellSyntaxError("|")
    for prev, current in zip(tokens, tokens[1:]):
        if (prev.type, current.type) in _BAD_PAIRS:
            raise ShellSyntaxError(current.content)
    if tokens[-1].type in (TokenType.PIPE, TokenType.REDIRECT):
        raise ShellSyntaxError("newline")
    return tokens