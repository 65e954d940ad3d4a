# topmark:header:start
#
#   project      : Kiln
#   file         : __init__.py
#   file_relpath : src/kiln/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layered configuration for Kiln.

Configuration is read from INI files at fixed locations (system, user,
project) and merged key by key, later layers winning, with command-line
overrides applied last. The result is an immutable `Config`.

Typical use:

    from pathlib import Path
    from kiln.config import ConfigContext, load_config

    context = ConfigContext.of().with_project_root(Path.cwd())
    config = load_config(context.with_overrides({"core": {"threads": "8"}}))
    config.get("core", "threads")  # "8"
"""

from __future__ import annotations

from kiln.config.context import ConfigContext
from kiln.config.errors import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    ConfigValueError,
    KilnError,
)
from kiln.config.loader import create_config, load_config, read_config_file
from kiln.config.locations import ConfigLocations, list_fragment_files, resolve_config_files
from kiln.config.model import RawConfig, RawConfigBuilder
from kiln.config.resolved import Config

__all__ = [
    "Config",
    "ConfigContext",
    "ConfigError",
    "ConfigLocations",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValueError",
    "KilnError",
    "RawConfig",
    "RawConfigBuilder",
    "create_config",
    "list_fragment_files",
    "load_config",
    "read_config_file",
    "resolve_config_files",
]
