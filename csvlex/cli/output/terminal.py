"""
Terminal output adapter.

Renders tokens with ANSI colors when writing to a TTY.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from csvlex.cli.output.base import LexSummary, OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from csvlex.core.lexer import Diagnostic, Location, Token

KIND_STYLES = {
    "cell": "green",
    "newline": "dim",
    "eof": "bold",
}


class TerminalOutput(OutputAdapter):
    """Plain text output with optional ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_tokens(
        self,
        tokens: list[tuple[Token, Location]],
        diagnostic: Diagnostic | None = None,
    ) -> str:
        """Render one token per line, prefixed with its position."""
        lines: list[str] = []
        for token, location in tokens:
            kind = token.kind.value
            position = f"{location.line_no}:{location.column}".ljust(10)
            label = self._style(kind.upper().ljust(8), KIND_STYLES[kind])
            if kind == "cell":
                lines.append(f"{position}{label}{token.value!r}")
            else:
                lines.append(f"{position}{label}".rstrip())

        if diagnostic is not None:
            lines.append(self._format_diagnostic(diagnostic))

        return "\n".join(lines)

    def render_summary(self, summary: LexSummary) -> str:
        """Render check result."""
        header = self._style(summary.file, "bold")
        if summary.diagnostic is not None:
            return f"{header}\n{self._format_diagnostic(summary.diagnostic)}"

        return (
            f"{header}\n"
            + self._style("OK", "green")
            + f": {summary.row_count} row(s), {summary.cell_count} cell(s)"
            + f" [{summary.encoding}]"
        )

    def _format_diagnostic(self, diagnostic: Diagnostic) -> str:
        location = diagnostic.location
        return (
            self._style(f"{location.line_no}:{location.column}", "dim")
            + " "
            + self._style(diagnostic.code, "bold red")
            + f" {diagnostic.title}: {diagnostic.message}"
        )

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "green": "\033[32m",
            "bold red": "\033[1;31m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
