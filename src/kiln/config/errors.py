# topmark:header:start
#
#   project      : Kiln
#   file         : errors.py
#   file_relpath : src/kiln/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for configuration loading.

All configuration failures are fatal: the loader never skips a file it has
identified as an existing regular file, and nothing is retried. Callers catch
`ConfigError` to handle any of them, or a subclass to tell them apart:

- `ConfigReadError`: a directory listing or file read failed.
- `ConfigParseError`: a file does not follow the INI syntax.
- `ConfigValueError`: a typed getter could not coerce a stored value.

Missing optional locations are not errors and never raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class KilnError(Exception):
    """Base exception for all Kiln errors."""


class ConfigError(KilnError):
    """Base exception for configuration errors."""


class ConfigReadError(ConfigError):
    """Raised when a configuration file or fragment directory cannot be read.

    Attributes:
        path (Path): The file or directory that failed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read configuration from {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigParseError(ConfigError):
    """Raised when configuration text is malformed.

    Attributes:
        path (Path | None): The offending file, or None for in-memory text.
    """

    def __init__(self, path: Path | None, reason: str) -> None:
        where = str(path) if path is not None else "<string>"
        super().__init__(f"Malformed configuration in {where}: {reason}")
        self.path = path
        self.reason = reason


class ConfigValueError(ConfigError):
    """Raised when a configuration value cannot be coerced to the requested type."""

    def __init__(self, section: str, key: str, value: str, expected: str) -> None:
        super().__init__(f"{section}.{key}: expected {expected}, got {value!r}")
        self.section = section
        self.key = key
        self.value = value
