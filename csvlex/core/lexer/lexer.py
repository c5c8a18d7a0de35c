"""
CSV lexer.

Pull-based state machine that turns CSV text into Cell / Newline / Eof
tokens, one per call:

    lexer = Lexer.from_string("one,two\\nthree")
    lexer.next_token()  # Token(CELL, 'one')
    lexer.next_token()  # Token(CELL, 'two')
    lexer.next_token()  # Token(NEWLINE)
    lexer.next_token()  # Token(CELL, 'three')
    lexer.next_token()  # Token(EOF)

Dialect is fixed: comma delimiter, double quote quoting with doubled quotes
as escape, CR, LF and CRLF row terminators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import UNCLOSED_QUOTE, UNEXPECTED_AFTER_QUOTE, Location, MalformedCsvError
from .sources import EOF, CharacterSource, StreamSource, StringSource
from .tokens import Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO

ROW_END = frozenset(("\r", "\n", EOF))


class Lexer:
    """Token-by-token CSV lexer over a CharacterSource."""

    def __init__(self, source: CharacterSource) -> None:
        self._source = source
        self._token = Token()
        self._buffer: list[str] = []
        self._line_number = 1
        self._column_number = 1
        self._pending_empty_cell = False

    @classmethod
    def from_string(cls, text: str) -> Lexer:
        """Create a lexer over in-memory text."""
        return cls(StringSource(text))

    @classmethod
    def from_stream(cls, stream: TextIO) -> Lexer:
        """Create a lexer over a text stream."""
        return cls(StreamSource(stream))

    @property
    def token(self) -> Token:
        """The most recently produced token."""
        return self._token

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def column_number(self) -> int:
        return self._column_number

    @property
    def location(self) -> Location:
        return Location(line_no=self._line_number, column=self._column_number)

    def rewind(self) -> None:
        """Rewind to the beginning of the input."""
        self._source.rewind()
        self._line_number = 1
        self._column_number = 1
        self._pending_empty_cell = False

    def next_token(self) -> Token:
        """
        Return the next token.

        The returned Token is reused: read its value before calling again.

        Raises:
            MalformedCsvError: On an unclosed quote or a stray character
                after a closing quote.
        """
        token = self._token

        if self._pending_empty_cell:
            self._pending_empty_cell = False
            token.kind = TokenKind.CELL
            token.value = ""
            return token

        char = self._source.current_character()
        if char == EOF:
            token.kind = TokenKind.EOF
        elif char == ",":
            token.kind = TokenKind.CELL
            token.value = ""
            self._check_trailing_empty_cell()
        elif char == "\r":
            char = self._next_char()
            if char == "\n":
                char = self._next_char()
            token.kind = TokenKind.EOF if char == EOF else TokenKind.NEWLINE
        elif char == "\n":
            token.kind = TokenKind.EOF if self._next_char() == EOF else TokenKind.NEWLINE
        elif char == '"':
            token.kind = TokenKind.CELL
            token.value = self._consume_quoted_cell()
        else:
            token.kind = TokenKind.CELL
            token.value = self._consume_unquoted_cell()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield snapshots of the remaining tokens, ending with EOF."""
        while True:
            token = self.next_token()
            yield token.snapshot()
            if token.kind is TokenKind.EOF:
                return

    def _consume_unquoted_cell(self) -> str:
        value = self._source.read_unquoted_cell()
        char = self._source.current_character()
        # The scan stops on a delimiter; unquoted cells hold no line terminators
        if char == "\n" or char == "\r":
            self._column_number = 0
            self._line_number += 1
        else:
            self._column_number += len(value)
            if char == ",":
                self._check_trailing_empty_cell()
        return value

    def _consume_quoted_cell(self) -> str:
        buffer = self._buffer
        buffer.clear()
        while True:
            char = self._next_char()
            if char == EOF:
                raise self._error("unclosed quote", UNCLOSED_QUOTE)
            if char != '"':
                buffer.append(char)
                continue

            char = self._next_char()
            if char == ",":
                self._check_trailing_empty_cell()
                break
            if char in ROW_END:
                break
            if char == '"':
                buffer.append('"')
                continue
            raise self._error(
                f"expecting comma, newline or end, not {char!r}", UNEXPECTED_AFTER_QUOTE
            )
        return "".join(buffer)

    def _check_trailing_empty_cell(self) -> None:
        # A comma right before a row end leaves one more (empty) cell
        if self._next_char() in ROW_END:
            self._pending_empty_cell = True

    def _next_char(self) -> str:
        self._column_number += 1
        char = self._source.advance_and_return_next_character()
        if char == "\n" or char == "\r":
            self._column_number = 0
            self._line_number += 1
        return char

    def _error(self, message: str, code: str) -> MalformedCsvError:
        return MalformedCsvError(message, self._line_number, self._column_number, code=code)


def create_lexer(data: str | TextIO) -> Lexer:
    """
    Create a lexer from a string or a text stream.

    Args:
        data: CSV text, or a readable text stream

    Returns:
        Lexer positioned at the start of the input
    """
    if isinstance(data, str):
        return Lexer.from_string(data)
    return Lexer.from_stream(data)
