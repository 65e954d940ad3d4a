# topmark:header:start
#
#   project      : Kiln
#   file         : exit_codes.py
#   file_relpath : src/kiln/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the Kiln CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Kiln CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid flags or arguments (Click's own code).
        CONFIG_ERROR (int): A configuration file is malformed or holds a bad value.
        IO_ERROR (int): A configuration file or directory could not be read.
        NOT_FOUND (int): A requested configuration key is not set.

    Usage:
        ```python
        import subprocess
        from kiln.cli.exit_codes import ExitCode

        result = subprocess.run(["kiln", "config", "get", "core.threads"])
        if result.returncode == ExitCode.NOT_FOUND:
            print("core.threads is not configured")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    IO_ERROR = 4
    NOT_FOUND = 5
