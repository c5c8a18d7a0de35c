"""
CSV Lexer Core.

Public API for lexing CSV text token by token.

Usage:
    from csvlex.core.lexer import TokenKind, create_lexer

    lexer = create_lexer(open("data.csv", newline=""))
    while (token := lexer.next_token()).kind is not TokenKind.EOF:
        print(token.kind, token.value)
"""

from __future__ import annotations

from .errors import (
    ERROR_CODES,
    Diagnostic,
    LexerError,
    Location,
    MalformedCsvError,
    get_error_description,
)
from .lexer import Lexer, create_lexer
from .sources import EOF, CharacterSource, StreamSource, StringSource
from .tokens import Token, TokenKind

__all__ = [
    "EOF",
    "ERROR_CODES",
    "CharacterSource",
    "Diagnostic",
    "Lexer",
    "LexerError",
    "Location",
    "MalformedCsvError",
    "StreamSource",
    "StringSource",
    "Token",
    "TokenKind",
    "create_lexer",
    "get_error_description",
]
