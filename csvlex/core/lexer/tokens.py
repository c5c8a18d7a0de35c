"""
Token model.

A lexer owns exactly one Token and mutates it on every call, so a token is
only valid until the next call to ``next_token()``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class TokenKind(Enum):
    """Kind of a lexer token."""

    CELL = "cell"
    NEWLINE = "newline"
    EOF = "eof"


@dataclass(slots=True)
class Token:
    """
    Lexer output.

    ``value`` is only meaningful for CELL tokens. For NEWLINE and EOF it still
    holds the last cell value and must not be read.
    """

    kind: TokenKind = TokenKind.EOF
    value: str = ""

    def snapshot(self) -> Token:
        """
        Return an independent copy that survives the next call.

        Leftover values are dropped from NEWLINE and EOF copies so that equal
        token streams compare equal.
        """
        if self.kind is TokenKind.CELL:
            return replace(self)
        return Token(self.kind)

    def __repr__(self) -> str:
        if self.kind is TokenKind.CELL:
            return f"Token(CELL, {self.value!r})"
        return f"Token({self.kind.name})"
