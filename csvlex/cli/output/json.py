"""
JSON output adapter.

Renders tokens and check results as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from csvlex.cli.output.base import LexSummary, OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from csvlex.core.lexer import Diagnostic, Location, Token


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_tokens(
        self,
        tokens: list[tuple[Token, Location]],
        diagnostic: Diagnostic | None = None,
    ) -> str:
        """Render tokens as JSON."""
        output: dict[str, Any] = {
            "tokens": [self._token_to_dict(token, location) for token, location in tokens],
            "error": diagnostic.model_dump() if diagnostic else None,
        }
        return json.dumps(output, indent=self.indent)

    def render_summary(self, summary: LexSummary) -> str:
        """Render check result as JSON."""
        output = summary.model_dump()
        output["ok"] = summary.ok
        return json.dumps(output, indent=self.indent)

    def _token_to_dict(self, token: Token, location: Location) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "kind": token.kind.value,
            "line": location.line_no,
            "column": location.column,
        }
        if token.kind.value == "cell":
            entry["value"] = token.value
        return entry
