# topmark:header:start
#
#   project      : Kiln
#   file         : loader.py
#   file_relpath : src/kiln/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build a `Config` by merging configuration files found on disk.

Precedence (lowest -> highest):
    1. Files in ``/etc/kilnconfig.d`` (lexicographic), then ``/etc/kilnconfig``
    2. Files in ``<HOME>/.kilnconfig.d`` (lexicographic), then ``<HOME>/.kilnconfig``
    3. ``<PROJECT ROOT>/.kilnconfig``, then ``<PROJECT ROOT>/.kilnconfig.local``
    4. Overrides from the `ConfigContext` (usually from the command line)

Loading is all-or-nothing: once a file has been identified as an existing
regular file, failing to read or parse it aborts the whole load.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kiln.config.context import ConfigContext
from kiln.config.errors import ConfigReadError
from kiln.config.io.ini import read_ini
from kiln.config.locations import ConfigLocations, resolve_config_files
from kiln.config.logging import get_logger
from kiln.config.model import RawConfig, RawConfigBuilder
from kiln.config.resolved import Config
from kiln.constants import CONFIG_ENCODING

if TYPE_CHECKING:
    from pathlib import Path

    from kiln.config.logging import KilnLogger
    from kiln.config.types import ConfigMapping

logger: KilnLogger = get_logger(__name__)


def read_config_file(path: Path) -> RawConfig:
    """Read and parse one configuration file.

    Args:
        path (Path): The file to read (UTF-8).

    Returns:
        RawConfig: The parsed sections.

    Raises:
        ConfigReadError: If the file cannot be opened, read or decoded.
        ConfigParseError: If the file is not valid INI.
    """
    try:
        with path.open("r", encoding=CONFIG_ENCODING) as stream:
            return read_ini(stream, source=path)
    except UnicodeDecodeError as err:
        raise ConfigReadError(path, f"not valid {CONFIG_ENCODING}: {err.reason}") from err
    except OSError as err:
        raise ConfigReadError(path, err.strerror or str(err)) from err


def load_config(
    context: ConfigContext,
    *,
    locations: ConfigLocations | None = None,
) -> Config:
    """Generate a configuration by merging files from the standard locations.

    Args:
        context (ConfigContext): Which locations to consult and the overrides to apply.
        locations (ConfigLocations | None): Where the system and user files live;
            `ConfigLocations.default` when omitted.

    Returns:
        Config: The merged configuration, together with ``context`` and the files read.

    Raises:
        ConfigReadError: If a fragment directory or a discovered file cannot be read.
        ConfigParseError: If a discovered file is malformed.
    """
    config_files: list[Path] = resolve_config_files(context, locations)

    builder: RawConfigBuilder = RawConfig.builder()
    for path in config_files:
        parsed: RawConfig = read_config_file(path)
        logger.debug("Loaded a configuration file %s: %s", path, parsed.to_dict())
        builder.put_all(parsed)

    logger.debug("Adding configuration overrides: %s", context.overrides.to_dict())
    builder.put_all(context.overrides)

    config = Config(
        raw=builder.build(),
        context=context,
        config_files=tuple(config_files),
    )
    logger.info(
        "Resolved configuration from %d file(s): %d section(s)",
        len(config_files),
        len(config.raw),
    )
    return config


def create_config(values: ConfigMapping) -> Config:
    """Create a `Config` from a set of values, without consulting the filesystem.

    The values become the override layer of a default `ConfigContext`, so the
    result looks exactly like a load in which nothing was found on disk.
    """
    raw: RawConfig = RawConfig.of(values)
    return Config(
        raw=raw,
        context=ConfigContext.of().with_overrides(raw),
        config_files=(),
    )
