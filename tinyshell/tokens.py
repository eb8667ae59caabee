"""Splitting a command line into words, quoted strings and operators."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .env import is_valid_key

NO_QUOTE = 0
SINGLE_QUOTE = 1
DOUBLE_QUOTE = 2

_SPACES = " \t\n\r\v\f"
_VAR_STOPPERS = " \"'$"


class TokenType(enum.Enum):
    """Kind of a lexical token."""

    WORD = "word"
    REDIRECT = "redirect"
    PIPE = "pipe"
    NONE = "none"


@dataclass
class Token:
    """One piece of a command line.

    ``in_quote`` is NO_QUOTE, SINGLE_QUOTE or DOUBLE_QUOTE; ``concat`` marks a
    token that belongs to a run of adjacent pieces; ``space_after`` marks a
    token followed by unquoted whitespace.
    """

    type: TokenType
    content: str
    in_quote: int = NO_QUOTE
    concat: bool = False
    space_after: bool = False
    is_var: bool = False


class _Lexer:
    """State of the token being built while scanning a line."""

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self.type = TokenType.NONE
        self.content: str | None = None
        self.in_quote = NO_QUOTE
        self.is_var = False
        self.space_after = False
        self.concat = False

    def write(self, text: str) -> None:
        self.content = (self.content or "") + text

    def emit(self) -> None:
        self.tokens.append(
            Token(
                type=self.type,
                content=self.content if self.content is not None else "",
                in_quote=self.in_quote,
                concat=self.concat,
                space_after=self.space_after,
            )
        )
        self.content = None
        self.is_var = False
        self.space_after = False

    def operator(self, kind: TokenType, symbol: str) -> None:
        if self.type is not TokenType.NONE:
            self.emit()
        self.type = kind
        self.concat = False
        self.write(symbol)
        self.emit()
        self.type = TokenType.NONE

    def single_quote(self) -> None:
        self.concat = True
        if self.type is TokenType.WORD and self.in_quote == NO_QUOTE:
            self.emit()
        if self.in_quote == NO_QUOTE:
            self.in_quote = SINGLE_QUOTE
            self.type = TokenType.WORD
        elif self.in_quote == SINGLE_QUOTE:
            self.emit()
            self.type = TokenType.NONE
            self.in_quote = NO_QUOTE
        else:
            if self.is_var:
                self.emit()
                self.type = TokenType.WORD
                self.concat = True
            self.write("'")

    def double_quote(self) -> None:
        self.concat = True
        if self.type is TokenType.WORD and self.in_quote == NO_QUOTE:
            self.emit()
        if self.in_quote == NO_QUOTE:
            self.in_quote = DOUBLE_QUOTE
            self.type = TokenType.WORD
        elif self.in_quote == DOUBLE_QUOTE:
            self.emit()
            self.type = TokenType.NONE
            self.in_quote = NO_QUOTE
        else:
            self.write('"')

    def dollar(self, following: str) -> None:
        if (
            self.type is not TokenType.NONE
            and self.in_quote != SINGLE_QUOTE
            and self.content is not None
        ):
            if self.type is TokenType.WORD:
                self.concat = True
                self.emit()
            self.concat = True
        self.type = TokenType.WORD
        self.write("$")
        if following and following not in _VAR_STOPPERS:
            self.is_var = True

    def space(self, char: str) -> None:
        if self.in_quote == NO_QUOTE:
            if self.type is not TokenType.NONE:
                self.space_after = True
                self.emit()
                self.type = TokenType.NONE
            self.concat = False
        elif self.in_quote == DOUBLE_QUOTE and self.is_var:
            self.concat = True
            self.emit()
            self.type = TokenType.WORD
            self.write(char)
        else:
            self.type = TokenType.WORD
            self.write(char)

    def other(self, char: str) -> None:
        if (
            self.is_var
            and not is_valid_key(char)
            and not ("0" <= char <= "9")
            and not (char == "?" and self.content is not None)
        ):
            self.concat = True
            self.emit()
            self.type = TokenType.WORD
            self.concat = True
        if self.type is TokenType.NONE:
            self.type = TokenType.WORD
        self.write(char)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens: words, quoted pieces, pipes and redirections."""
    lexer = _Lexer()
    i = 0
    while i < len(text):
        char = text[i]
        following = text[i + 1] if i + 1 < len(text) else ""
        quoted = lexer.in_quote != NO_QUOTE
        if char in _SPACES:
            lexer.space(char)
        elif char == "|" and not quoted:
            lexer.operator(TokenType.PIPE, "|")
        elif char == ">" and following == ">" and not quoted:
            lexer.operator(TokenType.REDIRECT, ">>")
            i += 1
        elif char == ">" and not quoted:
            lexer.operator(TokenType.REDIRECT, ">")
        elif char == "<" and following == "<" and not quoted:
            lexer.operator(TokenType.REDIRECT, "<<")
            i += 1
        elif char == "<" and not quoted:
            lexer.operator(TokenType.REDIRECT, "<")
        elif char == "'" and (quoted or "'" in text[i + 1:]):
            lexer.single_quote()
        elif char == '"' and (quoted or '"' in text[i + 1:]):
            lexer.double_quote()
        elif char == "$" and lexer.type in (TokenType.NONE, TokenType.WORD):
            lexer.dollar(following)
        else:
            lexer.other(char)
        i += 1
    if lexer.type is not TokenType.NONE:
        lexer.emit()
    return lexer.tokens