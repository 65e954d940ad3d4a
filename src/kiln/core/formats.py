# topmark:header:start
#
#   project      : Kiln
#   file         : formats.py
#   file_relpath : src/kiln/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across Kiln frontends.

This module centralizes the `OutputFormat` enum so CLI commands and other
frontends agree on the same format vocabulary without a `click` dependency.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for configuration dumps.

    Attributes:
        INI: INI text, readable back by Kiln; the default.
        TOML: A TOML document with one table per section.
        JSON: A single JSON object (machine-readable, never colored).
    """

    INI = "ini"
    TOML = "toml"
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt == OutputFormat.JSON
