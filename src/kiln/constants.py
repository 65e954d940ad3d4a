# topmark:header:start
#
#   project      : Kiln
#   file         : constants.py
#   file_relpath : src/kiln/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Kiln Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from pathlib import Path
from typing import Final

KILN_VERSION: str = get_version("kiln")

# Per-user and per-project configuration names (resolved against $HOME or the project root):
CONFIG_FILE_NAME: Final[str] = ".kilnconfig"
CONFIG_DIRECTORY_NAME: Final[str] = ".kilnconfig.d"
CONFIG_OVERRIDE_FILE_NAME: Final[str] = ".kilnconfig.local"

# System-wide configuration:
GLOBAL_CONFIG_FILE_PATH: Final[Path] = Path("/etc/kilnconfig")
GLOBAL_CONFIG_DIRECTORY_PATH: Final[Path] = Path("/etc/kilnconfig.d")

CONFIG_ENCODING: Final[str] = "utf-8"
