"""
Input decoding for the CLI.

The lexer works on text only. The CLI reads whole files, so UTF-8 is checked
against the complete data; charset-normalizer is only consulted for input
that is not UTF-8 at all.
"""

from __future__ import annotations

import codecs

from charset_normalizer import from_bytes

BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

# Used when charset-normalizer has no answer
FALLBACK_ENCODING = "windows-1252"


def detect_encoding(data: bytes) -> str:
    """
    Pick the codec to decode a whole CSV file with.

    Order: byte order mark, strict UTF-8 over all of ``data``,
    charset-normalizer, then Windows-1252.

    Returns:
        Normalized Python codec name, e.g. "utf-8", "utf-8-sig", "cp1252"
    """
    # UTF-32 LE starts with the UTF-16 LE mark, so it is checked first
    for bom, encoding in BOMS:
        if data.startswith(bom):
            return encoding

    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        pass
    else:
        return "utf-8"

    best = from_bytes(data).best()
    if best is None:
        return normalize_encoding(FALLBACK_ENCODING)
    return normalize_encoding(best.encoding)


def normalize_encoding(name: str) -> str:
    """
    Return the canonical codec name for ``name``.

    Raises:
        LookupError: If Python has no codec of that name
    """
    return codecs.lookup(name).name


def decode(data: bytes, encoding: str) -> str:
    """
    Decode ``data``, replacing undecodable bytes with U+FFFD.

    Raises:
        LookupError: If the encoding is unknown
    """
    return data.decode(normalize_encoding(encoding), errors="replace")
