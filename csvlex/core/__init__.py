"""
csvlex core library.

This package contains the core functionality:
- lexer: token-by-token CSV lexing
- encoding: charset detection for raw input (used by the CLI)
"""

__all__: list[str] = []
