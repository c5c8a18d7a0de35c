"""
Character sources.

A CharacterSource hands characters to the lexer one at a time. The lexer
never branches on the concrete variant:

- StringSource: in-memory text, random access by index
- StreamSource: text stream, reads one character ahead

End of input is reported as the EOF sentinel (an empty string), so a literal
NUL character in the data is an ordinary character.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

EOF = ""

# Characters that end an unquoted cell (EOF ends it as well)
CELL_DELIMITERS = frozenset(",\r\n")

_CELL_END = re.compile(r"[,\r\n]")


class CharacterSource(ABC):
    """Capability interface consumed by the lexer."""

    @abstractmethod
    def current_character(self) -> str:
        """Return the character under the cursor, EOF at end of input."""

    @abstractmethod
    def advance_and_return_next_character(self) -> str:
        """Move the cursor by one character and return the new current one."""

    @abstractmethod
    def read_unquoted_cell(self) -> str:
        """
        Consume an unquoted cell.

        Collects characters up to, not including, the next comma, CR, LF or
        EOF. The delimiter stays under the cursor.
        """

    @abstractmethod
    def rewind(self) -> None:
        """Reset the cursor to the start of the input."""


class StringSource(CharacterSource):
    """Character source over an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def current_character(self) -> str:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return EOF

    def advance_and_return_next_character(self) -> str:
        if self._pos < len(self._text):
            self._pos += 1
        return self.current_character()

    def read_unquoted_cell(self) -> str:
        start = self._pos
        end = _CELL_END.search(self._text, start)
        self._pos = end.start() if end else len(self._text)
        return self._text[start : self._pos]

    def rewind(self) -> None:
        self._pos = 0


class StreamSource(CharacterSource):
    """
    Character source over a text stream.

    Holds a single character of look-ahead. Seekable streams are rewound by
    seeking back to the offset they were at on construction; for other
    streams every character read is kept so it can be replayed.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._seekable = stream.seekable()
        self._origin = stream.tell() if self._seekable else 0
        self._history: list[str] | None = None if self._seekable else []
        self._replay_pos = 0
        self._current = self._read()

    def _read(self) -> str:
        history = self._history
        if history is not None and self._replay_pos < len(history):
            char = history[self._replay_pos]
            self._replay_pos += 1
            return char

        char = self._stream.read(1)
        if not char:
            return EOF
        if history is not None:
            history.append(char)
            self._replay_pos += 1
        return char

    def current_character(self) -> str:
        return self._current

    def advance_and_return_next_character(self) -> str:
        if self._current != EOF:
            self._current = self._read()
        return self._current

    def read_unquoted_cell(self) -> str:
        chars: list[str] = []
        char = self._current
        while char != EOF and char not in CELL_DELIMITERS:
            chars.append(char)
            char = self.advance_and_return_next_character()
        return "".join(chars)

    def rewind(self) -> None:
        if self._seekable:
            self._stream.seek(self._origin)
        self._replay_pos = 0
        self._current = self._read()
