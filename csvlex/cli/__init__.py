"""
CLI for csvlex.

The typer application lives in ``csvlex.cli.main``; it is not imported here
so that ``csvlex.cli.context`` can be used without loading typer.
"""

from csvlex.cli.context import CliContext, ExitCode

__all__ = ["CliContext", "ExitCode"]
