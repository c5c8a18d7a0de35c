"""
Output adapters for CLI.

Provides the terminal and JSON output formats.
"""

from csvlex.cli.output.base import LexSummary, OutputAdapter, OutputFormat, get_output_adapter
from csvlex.cli.output.json import JsonOutput
from csvlex.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "LexSummary",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
