"""
Main CLI application.

Entry point for the csvlex command.
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

import csvlex
from csvlex.cli.context import CliContext, ExitCode, resolve_max_bytes
from csvlex.cli.output import LexSummary, OutputFormat, get_output_adapter
from csvlex.core.encoding import decode, detect_encoding
from csvlex.core.lexer import Lexer, MalformedCsvError, TokenKind

# Create main app
app = typer.Typer(
    name="csvlex",
    help="Pull-based CSV tokenizer",
    add_completion=False,
    no_args_is_help=True,
)

FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: terminal, json"),
]
ColorOption = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Enable/disable colored output"),
]
EncodingOption = Annotated[
    str | None,
    typer.Option("--encoding", "-e", help="Input encoding (detected when omitted)"),
]
MaxBytesOption = Annotated[
    int | None,
    typer.Option(
        "--max-bytes",
        help="Maximum input size in bytes (0 = unlimited). Defaults to CSVLEX_MAX_BYTES or 100MiB.",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"csvlex {csvlex.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Pull-based CSV tokenizer."""
    pass


def _build_context(format: str, color: bool, encoding: str | None, max_bytes: int | None) -> CliContext:
    try:
        OutputFormat(format)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None

    try:
        limit = resolve_max_bytes(max_bytes)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    return CliContext(format=format, color=color, encoding=encoding, max_bytes=limit)


def _read_text(file: Path, ctx: CliContext) -> tuple[str, str]:
    """Read and decode a file, honoring the size limit."""
    with file.open("rb") as f:
        data = f.read(ctx.max_bytes + 1) if ctx.max_bytes is not None else f.read()

    if ctx.max_bytes is not None and len(data) > ctx.max_bytes:
        typer.echo(f"File exceeds maximum size of {ctx.max_bytes} bytes", err=True)
        raise typer.Exit(ExitCode.FATAL)

    encoding = ctx.encoding or detect_encoding(data)
    try:
        return decode(data, encoding), encoding
    except LookupError:
        typer.echo(f"Unknown encoding: {encoding}", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


# =============================================================================
# Tokens Command
# =============================================================================


@app.command()
def tokens(
    file: Annotated[Path, typer.Argument(help="CSV file to tokenize", exists=True, dir_okay=False)],
    format: FormatOption = "terminal",
    color: ColorOption = True,
    encoding: EncodingOption = None,
    max_bytes: MaxBytesOption = None,
) -> None:
    """Print every token of a CSV file with its position."""
    ctx = _build_context(format, color, encoding, max_bytes)
    text, _ = _read_text(file, ctx)

    lexer = Lexer.from_string(text)
    listing = []
    diagnostic = None
    try:
        while True:
            location = lexer.location
            token = lexer.next_token()
            listing.append((token.snapshot(), location))
            if token.kind is TokenKind.EOF:
                break
    except MalformedCsvError as e:
        diagnostic = e.to_diagnostic()

    adapter = get_output_adapter(ctx.format, color=ctx.color)
    adapter.write(adapter.render_tokens(listing, diagnostic))

    raise typer.Exit(ExitCode.FATAL if diagnostic else ExitCode.SUCCESS)


# =============================================================================
# Check Command
# =============================================================================


@app.command()
def check(
    file: Annotated[Path, typer.Argument(help="CSV file to check", exists=True, dir_okay=False)],
    format: FormatOption = "terminal",
    color: ColorOption = True,
    encoding: EncodingOption = None,
    max_bytes: MaxBytesOption = None,
) -> None:
    """Lex a whole CSV file and report whether it is well-formed."""
    ctx = _build_context(format, color, encoding, max_bytes)
    text, detected = _read_text(file, ctx)

    lexer = Lexer.from_string(text)
    cells = 0
    rows = 0
    diagnostic = None
    try:
        for token in lexer:
            if token.kind is TokenKind.CELL:
                cells += 1
            elif token.kind is TokenKind.NEWLINE:
                rows += 1
    except MalformedCsvError as e:
        diagnostic = e.to_diagnostic()
    else:
        # The last row has no terminator in front of EOF
        if text:
            rows += 1

    summary = LexSummary(
        file=str(file),
        encoding=detected,
        cell_count=cells,
        row_count=rows,
        diagnostic=diagnostic,
    )
    adapter = get_output_adapter(ctx.format, color=ctx.color)
    adapter.write(adapter.render_summary(summary))

    raise typer.Exit(ExitCode.SUCCESS if summary.ok else ExitCode.FATAL)


if __name__ == "__main__":
    app()
