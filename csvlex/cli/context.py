"""
CLI context and configuration.

Manages CLI settings, exit codes and the input size limit.
"""

from __future__ import annotations

import os
from enum import IntEnum

from pydantic import BaseModel, Field

MAX_BYTES_ENV = "CSVLEX_MAX_BYTES"

# Default input size limit for CLI usage (can be overridden via flag/env).
DEFAULT_MAX_BYTES = 100 * 1024 * 1024  # 100 MiB


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Input lexed cleanly
    FATAL = 2  # Malformed CSV or unreadable input
    USAGE = 64  # Command line usage error


class CliContext(BaseModel):
    """Settings shared by the CLI commands."""

    format: str = Field(default="terminal")  # terminal, json
    color: bool = Field(default=True)
    encoding: str | None = Field(default=None)
    max_bytes: int | None = Field(default=DEFAULT_MAX_BYTES)

    model_config = {"frozen": True}


def resolve_max_bytes(max_bytes: int | None) -> int | None:
    """
    Resolve the effective input size limit.

    An explicit value wins over the environment; 0 or less means unlimited.

    Raises:
        ValueError: If the environment variable is not an integer
    """
    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get(MAX_BYTES_ENV)
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise ValueError(f"{MAX_BYTES_ENV} must be an integer") from None
        return None if parsed <= 0 else parsed

    return DEFAULT_MAX_BYTES
