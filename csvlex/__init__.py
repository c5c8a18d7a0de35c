"""
csvlex: pull-based CSV tokenizer.

Converts CSV text into a stream of Cell / Newline / Eof tokens without
building intermediate rows.

Usage:
    from csvlex.core.lexer import create_lexer
    lexer = create_lexer("one,two\\nthree")
    token = lexer.next_token()
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
