# topmark:header:start
#
#   project      : Kiln
#   file         : errors.py
#   file_relpath : src/kiln/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Kiln CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`kiln.config.errors`) are
    translated with `from_config_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from kiln.cli.exit_codes import ExitCode
from kiln.config.errors import ConfigError, ConfigReadError


class KilnCliError(click.ClickException):
    """Base class for all Kiln CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class KilnUsageError(KilnCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class KilnConfigError(KilnCliError):
    """Error for malformed configuration or values that cannot be coerced."""

    exit_code = ExitCode.CONFIG_ERROR


class KilnIOError(KilnCliError):
    """Error for configuration files or directories that cannot be read."""

    exit_code = ExitCode.IO_ERROR


class KilnNotFoundError(KilnCliError):
    """Error for configuration keys that are not set."""

    exit_code = ExitCode.NOT_FOUND


def from_config_error(err: ConfigError) -> KilnCliError:
    """Map a library configuration error to the matching CLI error."""
    if isinstance(err, ConfigReadError):
        return KilnIOError(str(err))
    return KilnConfigError(str(err))
