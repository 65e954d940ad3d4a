# topmark:header:start
#
#   project      : Kiln
#   file         : options.py
#   file_relpath : src/kiln/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Kiln CLI.

This module centralizes reusable options (verbosity, configuration
resolution) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from kiln.cli.cli_types import ConfigOverrideParam
from kiln.cli.errors import KilnUsageError
from kiln.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the number of ``-v`` and ``-q`` flags.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level: TRACE for ``-vvv``, DEBUG for ``-vv``, INFO for ``-v``,
        ERROR for ``-q``, WARNING otherwise.

    Raises:
        KilnUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise KilnUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Repeat up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)


def config_resolution_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options that decide which configuration sources are merged.

    Adds ``--project-root``, ``--no-global-config`` and the repeatable
    ``-c/--config section.key=value``. The hidden ``--global-dir``,
    ``--global-file`` and ``--home`` options relocate the system and user
    locations, which is how tests exercise the resolver on a synthetic tree.
    """
    f = click.option(
        "--project-root",
        "project_root",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Project directory whose .kilnconfig and .kilnconfig.local are merged.",
    )(f)
    f = click.option(
        "--no-global-config",
        "no_global_config",
        is_flag=True,
        default=False,
        help="Ignore /etc/kilnconfig* and ~/.kilnconfig*.",
    )(f)
    f = click.option(
        "-c",
        "--config",
        "overrides",
        type=ConfigOverrideParam(),
        multiple=True,
        help="Override a value: section.key=value. Applied after every file.",
    )(f)
    f = click.option(
        "--global-dir",
        "global_dir",
        type=click.Path(path_type=Path),
        default=None,
        hidden=True,
    )(f)
    f = click.option(
        "--global-file",
        "global_file",
        type=click.Path(path_type=Path),
        default=None,
        hidden=True,
    )(f)
    f = click.option(
        "--home",
        "home",
        type=click.Path(path_type=Path),
        default=None,
        hidden=True,
    )(f)
    return f
