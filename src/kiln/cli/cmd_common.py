# topmark:header:start
#
#   project      : Kiln
#   file         : cmd_common.py
#   file_relpath : src/kiln/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI commands that resolve configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kiln.cli.cli_types import overrides_to_mapping
from kiln.cli.errors import from_config_error
from kiln.config import (
    Config,
    ConfigContext,
    ConfigError,
    ConfigLocations,
    load_config,
    resolve_config_files,
)
from kiln.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from kiln.cli.cli_types import ConfigOverride
    from kiln.cli.console import ClickConsole
    from kiln.config.logging import KilnLogger

logger: KilnLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context by the ``kiln`` group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def build_context(
    *,
    project_root: Path | None,
    no_global_config: bool,
    overrides: Sequence[ConfigOverride],
) -> ConfigContext:
    """Translate CLI resolution options into a `ConfigContext`."""
    context: ConfigContext = ConfigContext(
        use_global_config=not no_global_config,
        project_root=project_root.resolve() if project_root is not None else None,
    )
    return context.with_overrides(overrides_to_mapping(overrides))


def build_locations(
    *,
    global_dir: Path | None,
    global_file: Path | None,
    home: Path | None,
) -> ConfigLocations:
    """Return the default locations, relocated by any hidden location option."""
    defaults: ConfigLocations = ConfigLocations.default()
    return ConfigLocations(
        global_file=global_file if global_file is not None else defaults.global_file,
        global_dir=global_dir if global_dir is not None else defaults.global_dir,
        home=home,
    )


def resolve_files_or_fail(context: ConfigContext, locations: ConfigLocations) -> list[Path]:
    """Run the resolver, converting library errors to CLI errors."""
    try:
        return resolve_config_files(context, locations)
    except ConfigError as err:
        raise from_config_error(err) from err


def load_config_or_fail(context: ConfigContext, locations: ConfigLocations) -> Config:
    """Load the configuration, converting library errors to CLI errors."""
    try:
        config: Config = load_config(context, locations=locations)
    except ConfigError as err:
        raise from_config_error(err) from err
    logger.debug("Loaded config from %d file(s)", len(config.config_files))
    return config
