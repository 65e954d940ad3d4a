# topmark:header:start
#
#   project      : Kiln
#   file         : resolved.py
#   file_relpath : src/kiln/config/resolved.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The resolved, read-only configuration handed to the rest of Kiln.

A `Config` is produced by `kiln.config.loader.load_config` (or
`kiln.config.loader.create_config`) and never changes afterwards. Besides the
merged values it keeps the `ConfigContext` that produced it and the files that
were read, so consumers can resolve paths against the project root and report
where values came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from kiln.config.errors import ConfigValueError

if TYPE_CHECKING:
    from kiln.config.context import ConfigContext
    from kiln.config.model import RawConfig
    from kiln.config.types import ConfigDict, SectionMapping

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "no", "off", "0"})


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable, merged Kiln configuration.

    All fields are required: there is no way to obtain an empty `Config`
    without going through the loader (or `create_config`).

    Attributes:
        raw (RawConfig): Merged values, section -> key -> value.
        context (ConfigContext): The resolution inputs used to build this config.
        config_files (tuple[Path, ...]): Files that were read, in merge order.
    """

    raw: RawConfig
    context: ConfigContext
    config_files: tuple[Path, ...]

    @property
    def project_root(self) -> Path | None:
        """Project root used during resolution, if any."""
        return self.context.project_root

    # ------------------------------ Lookup ------------------------------

    def get(self, section: str, key: str) -> str | None:
        """Return the value at (``section``, ``key``), or None when unset."""
        return self.raw.get_value(section, key)

    def get_value(self, section: str, key: str, default: str | None = None) -> str | None:
        """Return the value at (``section``, ``key``), or ``default`` when unset."""
        value: str | None = self.raw.get_value(section, key)
        return default if value is None else value

    def has_section(self, section: str) -> bool:
        """Return True if ``section`` is present (even when empty)."""
        return section in self.raw

    def has_key(self, section: str, key: str) -> bool:
        """Return True if (``section``, ``key``) holds a value."""
        return self.raw.get_value(section, key) is not None

    def sections(self) -> tuple[str, ...]:
        """Return the section names, sorted."""
        return tuple(sorted(self.raw))

    def keys(self, section: str) -> tuple[str, ...]:
        """Return the keys of ``section``, sorted (empty for an unknown section)."""
        return tuple(sorted(self.raw.get_section(section)))

    def get_section(self, section: str) -> SectionMapping:
        """Return the read-only entries of ``section`` (empty when absent)."""
        return self.raw.get_section(section)

    # --------------------------- Typed getters ---------------------------

    def get_bool(self, section: str, key: str, default: bool = False) -> bool:
        """Return a boolean value.

        Accepts ``true/yes/on/1`` and ``false/no/off/0``, case-insensitively.

        Raises:
            ConfigValueError: If the stored value is not a recognized boolean.
        """
        value: str | None = self.get(section, key)
        if value is None:
            return default
        normalized: str = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigValueError(section, key, value, "a boolean")

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        """Return an integer value, or ``default`` when unset.

        Raises:
            ConfigValueError: If the stored value is not an integer.
        """
        value: str | None = self.get(section, key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError as err:
            raise ConfigValueError(section, key, value, "an integer") from err

    def get_list(self, section: str, key: str, sep: str = ",") -> tuple[str, ...]:
        """Return a ``sep``-separated value as a tuple of stripped, non-empty items."""
        value: str | None = self.get(section, key)
        if value is None:
            return ()
        return tuple(item.strip() for item in value.split(sep) if item.strip())

    def get_path(self, section: str, key: str) -> Path | None:
        """Return a path value, anchoring relative paths at the project root.

        Without a project root, relative paths are returned unchanged.
        """
        value: str | None = self.get(section, key)
        if value is None:
            return None
        path = Path(value)
        if path.is_absolute() or self.project_root is None:
            return path
        return self.project_root / path

    # ------------------------------ Export ------------------------------

    def to_dict(self) -> ConfigDict:
        """Return the merged values as a plain nested ``dict``."""
        return self.raw.to_dict()
