"""
Lexer error models.

All lexing failures are fatal to the current scan and are raised as
MalformedCsvError from within ``Lexer.next_token()``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Location(BaseModel, frozen=True):
    """Position in the input, 1-based line and column."""

    line_no: int = Field(ge=1)
    column: int = Field(ge=0)

    def __str__(self) -> str:
        return f"line {self.line_no}, col {self.column}"


class Diagnostic(BaseModel, frozen=True):
    """Structured, serializable form of a lexer error."""

    code: str = Field(
        pattern=r"^CSVL-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'CSVL-QUOTE-001'",
    )
    title: str
    message: str
    location: Location

    def __str__(self) -> str:
        return f"[{self.code}] {self.title} - {self.message} ({self.location})"


# =============================================================================
# Error Codes Registry
# =============================================================================

UNCLOSED_QUOTE = "CSVL-QUOTE-001"
UNEXPECTED_AFTER_QUOTE = "CSVL-QUOTE-002"

ERROR_CODES: dict[str, str] = {
    UNCLOSED_QUOTE: "Unexpected end of input in quoted cell",
    UNEXPECTED_AFTER_QUOTE: "Invalid character after closing quote",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return ERROR_CODES.get(code)


class LexerError(Exception):
    """Base class for errors raised by the lexer."""


class MalformedCsvError(LexerError):
    """Malformed CSV input, raised at the position where lexing failed."""

    def __init__(
        self,
        message: str,
        line_number: int,
        column_number: int,
        code: str = UNCLOSED_QUOTE,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.column_number = column_number
        self.code = code
        super().__init__(f"{message} at {line_number}:{column_number}")

    @property
    def location(self) -> Location:
        return Location(line_no=self.line_number, column=self.column_number)

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a structured Diagnostic."""
        return Diagnostic(
            code=self.code,
            title=ERROR_CODES.get(self.code, "Malformed CSV"),
            message=self.message,
            location=self.location,
        )
