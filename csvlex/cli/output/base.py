"""
Output adapter base classes.

Defines the interface for output adapters.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from pydantic import BaseModel, Field

from csvlex.core.lexer import Diagnostic

if TYPE_CHECKING:
    from csvlex.core.lexer import Location, Token


class OutputFormat(Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"


class LexSummary(BaseModel, frozen=True):
    """Result of lexing a whole file."""

    file: str
    encoding: str
    cell_count: int = Field(ge=0)
    row_count: int = Field(ge=0)
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


class OutputAdapter(ABC):
    """Base class for output adapters."""

    format: OutputFormat

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color

    @abstractmethod
    def render_tokens(
        self,
        tokens: list[tuple[Token, Location]],
        diagnostic: Diagnostic | None = None,
    ) -> str:
        """Render a token listing, optionally ending in an error."""

    @abstractmethod
    def render_summary(self, summary: LexSummary) -> str:
        """Render the result of a check run."""

    def write(self, content: str) -> None:
        """Write rendered output as one newline-terminated block."""
        self.stream.write(content.rstrip("\n") + "\n")
        self.stream.flush()


def get_output_adapter(
    format: OutputFormat | str,
    stream: TextIO | None = None,
    color: bool = True,
) -> OutputAdapter:
    """Get an output adapter by format."""
    if isinstance(format, str):
        format = OutputFormat(format)

    if format == OutputFormat.TERMINAL:
        from csvlex.cli.output.terminal import TerminalOutput

        return TerminalOutput(stream=stream, color=color)

    if format == OutputFormat.JSON:
        from csvlex.cli.output.json import JsonOutput

        return JsonOutput(stream=stream)

    raise ValueError(f"Unknown output format: {format}")
