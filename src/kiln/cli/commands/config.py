# topmark:header:start
#
#   project      : Kiln
#   file         : config.py
#   file_relpath : src/kiln/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Kiln `config` command group.

Subcommands inspect the configuration that Kiln would use:

- ``kiln config sources``: the files that would be merged, lowest precedence first.
- ``kiln config dump``: the merged configuration as INI, TOML or JSON.
- ``kiln config get SECTION.KEY``: a single value.

All subcommands accept the same resolution options (``--project-root``,
``--no-global-config``, ``-c section.key=value``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kiln.cli.cli_types import EnumChoiceParam
from kiln.cli.cmd_common import (
    build_context,
    build_locations,
    get_console,
    load_config_or_fail,
    resolve_files_or_fail,
)
from kiln.cli.errors import KilnNotFoundError, KilnUsageError
from kiln.cli.options import CONTEXT_SETTINGS, config_resolution_options
from kiln.config.io.render import to_ini, to_json, to_toml
from kiln.config.logging import get_logger
from kiln.core.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from kiln.cli.cli_types import ConfigOverride
    from kiln.config import Config, ConfigContext, ConfigLocations
    from kiln.config.logging import KilnLogger

logger: KilnLogger = get_logger(__name__)


def _context_and_locations(
    *,
    project_root: Path | None,
    no_global_config: bool,
    overrides: tuple[ConfigOverride, ...],
    global_dir: Path | None,
    global_file: Path | None,
    home: Path | None,
) -> tuple[ConfigContext, ConfigLocations]:
    context: ConfigContext = build_context(
        project_root=project_root,
        no_global_config=no_global_config,
        overrides=overrides,
    )
    locations: ConfigLocations = build_locations(
        global_dir=global_dir,
        global_file=global_file,
        home=home,
    )
    logger.debug("Resolution context: %s; locations: %s", context, locations)
    return context, locations


@click.group(
    name="config",
    help="Inspect the layered Kiln configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration inspection commands."""


@config_command.command(
    name="sources",
    help="List the configuration files that would be merged, lowest precedence first.",
    context_settings=CONTEXT_SETTINGS,
)
@config_resolution_options
@click.pass_context
def config_sources_command(
    ctx: click.Context,
    *,
    project_root: Path | None,
    no_global_config: bool,
    overrides: tuple[ConfigOverride, ...],
    global_dir: Path | None,
    global_file: Path | None,
    home: Path | None,
) -> None:
    """Print the candidate configuration files in merge order."""
    console = get_console(ctx)
    context, locations = _context_and_locations(
        project_root=project_root,
        no_global_config=no_global_config,
        overrides=overrides,
        global_dir=global_dir,
        global_file=global_file,
        home=home,
    )
    files: list[Path] = resolve_files_or_fail(context, locations)
    if not files:
        console.warn("No configuration files found.")
    for path in files:
        console.print(str(path))
    if overrides:
        console.print(console.styled(f"(+ {len(overrides)} command-line override(s))", dim=True))


@config_command.command(
    name="dump",
    help="Print the merged configuration.",
    context_settings=CONTEXT_SETTINGS,
)
@config_resolution_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}; default: ini).",
)
@click.pass_context
def config_dump_command(
    ctx: click.Context,
    *,
    project_root: Path | None,
    no_global_config: bool,
    overrides: tuple[ConfigOverride, ...],
    global_dir: Path | None,
    global_file: Path | None,
    home: Path | None,
    output_format: OutputFormat | None,
) -> None:
    """Print the merged configuration in the requested format.

    Raises:
        NotImplementedError: When OutputFormat gains a member without a renderer.
    """
    console = get_console(ctx)
    context, locations = _context_and_locations(
        project_root=project_root,
        no_global_config=no_global_config,
        overrides=overrides,
        global_dir=global_dir,
        global_file=global_file,
        home=home,
    )
    config: Config = load_config_or_fail(context, locations)

    fmt: OutputFormat = output_format or OutputFormat.INI
    if fmt == OutputFormat.INI:
        text: str = to_ini(config.raw)
    elif fmt == OutputFormat.TOML:
        text = to_toml(config.raw)
    elif fmt == OutputFormat.JSON:
        text = to_json(config.raw)
    else:
        raise NotImplementedError(f"Unsupported output format: {fmt!r}")

    console.print(text.rstrip("\n"))


@config_command.command(
    name="get",
    help="Print the value of SECTION.KEY. Exits with code 5 when the key is not set.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("name", metavar="SECTION.KEY")
@config_resolution_options
@click.pass_context
def config_get_command(
    ctx: click.Context,
    *,
    name: str,
    project_root: Path | None,
    no_global_config: bool,
    overrides: tuple[ConfigOverride, ...],
    global_dir: Path | None,
    global_file: Path | None,
    home: Path | None,
) -> None:
    """Print a single configuration value.

    Raises:
        KilnUsageError: If NAME is not of the form SECTION.KEY.
        KilnNotFoundError: If the key is not set.
    """
    section, dot, key = name.partition(".")
    if not dot or not section or not key:
        raise KilnUsageError(f"Expected SECTION.KEY, got {name!r}")

    console = get_console(ctx)
    context, locations = _context_and_locations(
        project_root=project_root,
        no_global_config=no_global_config,
        overrides=overrides,
        global_dir=global_dir,
        global_file=global_file,
        home=home,
    )
    config: Config = load_config_or_fail(context, locations)

    value: str | None = config.get(section, key)
    if value is None:
        raise KilnNotFoundError(f"{section}.{key} is not set")
    console.print(value)
