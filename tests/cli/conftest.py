# topmark:header:start
#
#   project      : Kiln
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Kiln against a synthetic configuration tree.

`isolated_args()` builds the hidden ``--global-dir``, ``--global-file`` and
``--home`` options so that a test never reads the real ``/etc/kilnconfig*``
or ``~/.kilnconfig*``.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from kiln.cli.exit_codes import ExitCode
from kiln.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

    from kiln.config import ConfigLocations


def isolated_args(locations: ConfigLocations) -> list[str]:
    """Return resolution options pointing at ``locations``."""
    return [
        "--global-dir",
        str(locations.global_dir),
        "--global-file",
        str(locations.global_file),
        "--home",
        str(locations.home_dir),
    ]


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["config", "get", "core.threads", "--project-root", "."]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 3)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with NOT_FOUND (code 5)."""
    assert result.exit_code == ExitCode.NOT_FOUND, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 4)."""
    assert result.exit_code == ExitCode.IO_ERROR, result.output
