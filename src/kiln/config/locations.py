# topmark:header:start
#
#   project      : Kiln
#   file         : locations.py
#   file_relpath : src/kiln/config/locations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discovery of configuration files on disk.

This module computes *which* files take part in a load and in what order. It
performs no parsing: it only lists directories and checks for regular files.

Merge order (lowest -> highest precedence):
    1. Files in ``/etc/kilnconfig.d`` (lexicographic)
    2. ``/etc/kilnconfig``
    3. Files in ``<HOME>/.kilnconfig.d`` (lexicographic)
    4. ``<HOME>/.kilnconfig``
    5. ``<PROJECT ROOT>/.kilnconfig``
    6. ``<PROJECT ROOT>/.kilnconfig.local``

Steps 1-4 only apply when global configuration is enabled, steps 5-6 only when
a project root is known. Every location is optional. The fixed system paths and
the home directory are carried by `ConfigLocations` so tests can point the
resolver at a synthetic tree.
"""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from kiln.config.errors import ConfigReadError
from kiln.config.logging import get_logger
from kiln.constants import (
    CONFIG_DIRECTORY_NAME,
    CONFIG_FILE_NAME,
    CONFIG_OVERRIDE_FILE_NAME,
    GLOBAL_CONFIG_DIRECTORY_PATH,
    GLOBAL_CONFIG_FILE_PATH,
)

if TYPE_CHECKING:
    from kiln.config.context import ConfigContext
    from kiln.config.logging import KilnLogger

logger: KilnLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigLocations:
    """Filesystem locations consulted by `resolve_config_files`.

    Attributes:
        global_file (Path): System-wide file. Defaults to ``/etc/kilnconfig``.
        global_dir (Path): System-wide fragment directory. Defaults to ``/etc/kilnconfig.d``.
        home (Path | None): Home directory holding the per-user file and fragment
            directory. None means ``Path.home()``, looked up only when a per-user
            location is needed.
        config_file_name (str): Per-user / per-project file name.
        config_dir_name (str): Per-user fragment directory name.
        override_file_name (str): Per-project local override file name.
    """

    global_file: Path = GLOBAL_CONFIG_FILE_PATH
    global_dir: Path = GLOBAL_CONFIG_DIRECTORY_PATH
    home: Path | None = None
    config_file_name: str = CONFIG_FILE_NAME
    config_dir_name: str = CONFIG_DIRECTORY_NAME
    override_file_name: str = CONFIG_OVERRIDE_FILE_NAME

    @classmethod
    def default(cls) -> ConfigLocations:
        """Return the standard locations for the current user."""
        return cls()

    @property
    def home_dir(self) -> Path:
        """The home directory, defaulting to the current user's."""
        return self.home if self.home is not None else Path.home()

    @property
    def user_file(self) -> Path:
        """Per-user configuration file."""
        return self.home_dir / self.config_file_name

    @property
    def user_dir(self) -> Path:
        """Per-user fragment directory."""
        return self.home_dir / self.config_dir_name

    def project_file(self, root: Path) -> Path:
        """Return the project configuration file under ``root``."""
        return root / self.config_file_name

    def project_override_file(self, root: Path) -> Path:
        """Return the project-local override file under ``root``."""
        return root / self.override_file_name


def _stat_mode(path: Path) -> int | None:
    """Return the ``st_mode`` of ``path`` (following symlinks), or None if it does not exist.

    Raises:
        ConfigReadError: If ``path`` exists but cannot be inspected.
    """
    try:
        return path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as err:
        raise ConfigReadError(path, err.strerror or str(err)) from err


def _is_regular_file(path: Path) -> bool:
    mode: int | None = _stat_mode(path)
    return mode is not None and stat.S_ISREG(mode)


def list_fragment_files(directory: Path) -> list[Path]:
    """Return the regular files directly inside ``directory``, sorted by path.

    A missing directory (or a path that is not a directory) yields no files.
    Subdirectories and other non-regular entries are skipped; symlinks to
    regular files are kept.

    Args:
        directory (Path): The fragment directory to list.

    Returns:
        list[Path]: Regular files in lexicographic path order.

    Raises:
        ConfigReadError: If the directory or one of its entries exists but
            cannot be inspected, or the directory cannot be listed.
    """
    mode: int | None = _stat_mode(directory)
    if mode is None or not stat.S_ISDIR(mode):
        logger.trace("No fragment directory at %s", directory)
        return []

    try:
        entries: list[Path] = list(directory.iterdir())
    except OSError as err:
        raise ConfigReadError(directory, err.strerror or str(err)) from err

    files: list[Path] = []
    for entry in entries:
        if _is_regular_file(entry):
            files.append(entry)
        else:
            logger.debug("Skipping non-regular entry in %s: %s", directory, entry.name)
    return sorted(files, key=str)


def _add_if_file(dst: list[Path], path: Path) -> None:
    if _is_regular_file(path):
        dst.append(path)
    else:
        logger.trace("No configuration file at %s", path)


def resolve_config_files(
    context: ConfigContext,
    locations: ConfigLocations | None = None,
) -> list[Path]:
    """Return the configuration files to merge for ``context``, lowest precedence first.

    Args:
        context (ConfigContext): Decides whether global and project files are consulted.
        locations (ConfigLocations | None): Where to look; `ConfigLocations.default`
            when omitted.

    Returns:
        list[Path]: Existing regular files in merge order. May be empty.

    Raises:
        ConfigReadError: If a location exists but cannot be inspected or listed.
    """
    where: ConfigLocations = locations or ConfigLocations.default()
    candidates: list[Path] = []

    if context.use_global_config:
        candidates.extend(list_fragment_files(where.global_dir))
        _add_if_file(candidates, where.global_file)
        candidates.extend(list_fragment_files(where.user_dir))
        _add_if_file(candidates, where.user_file)

    root: Path | None = context.project_root
    if root is not None:
        _add_if_file(candidates, where.project_file(root))
        _add_if_file(candidates, where.project_override_file(root))

    for p in candidates:
        logger.debug("Discovered config file: %s", p)
    return candidates
