# topmark:header:start
#
#   project      : Kiln
#   file         : context.py
#   file_relpath : src/kiln/config/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inputs that decide which configuration sources take part in a load.

A `ConfigContext` is built by the caller (usually the CLI) and handed to
`kiln.config.loader.load_config`. It is also kept on the resolved
`kiln.config.resolved.Config` so downstream code knows, for instance, which
project root was used.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from kiln.config.model import RawConfig

if TYPE_CHECKING:
    from kiln.config.types import ConfigMapping


@dataclass(frozen=True, slots=True)
class ConfigContext:
    """What to look up when building a configuration.

    Attributes:
        use_global_config (bool): Whether system-wide and per-user files are consulted.
        project_root (Path | None): Project whose ``.kilnconfig`` files are consulted, if any.
        overrides (RawConfig): Highest-precedence layer, applied after every file.
    """

    use_global_config: bool = True
    project_root: Path | None = None
    overrides: RawConfig = field(default_factory=RawConfig.empty)

    def __post_init__(self) -> None:
        # Accept plain nested dicts for convenience; always store a snapshot.
        if not isinstance(self.overrides, RawConfig):
            object.__setattr__(self, "overrides", RawConfig.of(self.overrides))
        if self.project_root is not None and not isinstance(self.project_root, Path):
            object.__setattr__(self, "project_root", Path(self.project_root))

    @classmethod
    def of(cls) -> ConfigContext:
        """Return the default context: global config on, no project, no overrides."""
        return cls()

    def with_overrides(self, overrides: ConfigMapping) -> ConfigContext:
        """Return a copy of this context using ``overrides`` as the override layer."""
        return replace(self, overrides=RawConfig.of(overrides))

    def with_project_root(self, project_root: Path | None) -> ConfigContext:
        """Return a copy of this context anchored at ``project_root``."""
        return replace(self, project_root=project_root)

    def with_global_config(self, use_global_config: bool) -> ConfigContext:
        """Return a copy of this context with global lookup switched on or off."""
        return replace(self, use_global_config=use_global_config)
