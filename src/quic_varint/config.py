"""
Global configuration for the varint codec.

This module contains environment-specific settings read once at import.
"""

import os

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVEL = os.environ.get("QUIC_VARINT_LOG_LEVEL", "INFO").upper()
"""Default logging level for the CLI. Defaults to 'INFO'."""

if LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid QUIC_VARINT_LOG_LEVEL environment variable: '{LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )
