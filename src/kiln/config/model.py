# topmark:header:start
#
#   project      : Kiln
#   file         : model.py
#   file_relpath : src/kiln/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layered key/value store and its merge policy.

This module defines:
    - `RawConfig`: an immutable, two-level mapping (section -> key -> value).
    - `RawConfigBuilder`: a mutable accumulator used while loading; layers are
      merged into it with `RawConfigBuilder.put_all` and it is frozen into a
      `RawConfig` with `RawConfigBuilder.build`.

Merge policy:
    Merging is per key, never per section. A layer that sets one key of a
    section leaves the other keys of that section untouched; a key set by a
    later layer replaces the value of an earlier one.

Immutability:
    `RawConfig` keeps private copies behind ``MappingProxyType`` views, so a
    snapshot never observes later edits to the builder that produced it.

Testing guidance:
    - Unit-test merge behavior with synthetic mappings (no I/O).
    - Exercise file discovery and parsing in ``locations``/``loader`` tests.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from kiln.config.logging import get_logger

if TYPE_CHECKING:
    from kiln.config.logging import KilnLogger
    from kiln.config.types import ConfigDict, ConfigMapping, SectionMapping

logger: KilnLogger = get_logger(__name__)


# ------------------ Immutable snapshot ------------------


class RawConfig(Mapping[str, Mapping[str, str]]):
    """Immutable section -> key -> value mapping.

    Instances are produced by `RawConfigBuilder.build` (or the `of`/`empty`
    shortcuts). Equality compares content only.
    """

    __slots__ = ("_sections",)

    _sections: Mapping[str, SectionMapping]

    def __init__(self, values: ConfigMapping | None = None) -> None:
        frozen: dict[str, SectionMapping] = {}
        for section, entries in (values or {}).items():
            frozen[section] = MappingProxyType(dict(entries))
        self._sections = MappingProxyType(frozen)

    @classmethod
    def of(cls, values: ConfigMapping) -> RawConfig:
        """Return a snapshot of ``values`` (a copy; ``values`` may change afterwards)."""
        if isinstance(values, RawConfig):
            return values
        return cls(values)

    @classmethod
    def empty(cls) -> RawConfig:
        """Return a snapshot without sections."""
        return cls()

    @staticmethod
    def builder() -> RawConfigBuilder:
        """Return a fresh, empty `RawConfigBuilder`."""
        return RawConfigBuilder()

    def __getitem__(self, section: str) -> Mapping[str, str]:
        return self._sections[section]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.to_dict() == {s: dict(v) for s, v in other.items()}

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RawConfig({self.to_dict()!r})"

    def get_value(self, section: str, key: str) -> str | None:
        """Return the value stored at (``section``, ``key``), or None."""
        entries: SectionMapping | None = self._sections.get(section)
        if entries is None:
            return None
        return entries.get(key)

    def get_section(self, section: str) -> SectionMapping:
        """Return the read-only entries of ``section`` (empty when absent)."""
        return self._sections.get(section, MappingProxyType({}))

    def to_dict(self) -> ConfigDict:
        """Return a plain nested ``dict`` copy of this snapshot."""
        return {section: dict(entries) for section, entries in self._sections.items()}


# -------------------------- Mutable builder --------------------------


class RawConfigBuilder:
    """Mutable accumulator for configuration layers.

    Layers are applied in call order; the last write to a (section, key) pair
    wins. One builder belongs to one load: it is not synchronized.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, dict[str, str]] = {}

    def put(self, section: str, key: str, value: str) -> RawConfigBuilder:
        """Set a single value.

        Args:
            section (str): Section name.
            key (str): Key within the section.
            value (str): Value to store; replaces any earlier value.

        Returns:
            RawConfigBuilder: ``self``, for chaining.
        """
        self._values.setdefault(section, {})[key] = value
        return self

    def put_all(self, values: ConfigMapping) -> RawConfigBuilder:
        """Merge ``values`` into the accumulator, key by key.

        Every (section, key) present in ``values`` replaces the current value;
        keys not mentioned by ``values`` keep their value. A section that is
        present but empty in ``values`` is created if absent.

        Args:
            values (ConfigMapping): The layer to apply.

        Returns:
            RawConfigBuilder: ``self``, for chaining.
        """
        for section, entries in values.items():
            target: dict[str, str] = self._values.setdefault(section, {})
            for key, value in entries.items():
                if key in target and target[key] != value:
                    logger.trace(
                        "Overriding %s.%s: %r -> %r", section, key, target[key], value
                    )
                target[key] = value
        return self

    def build(self) -> RawConfig:
        """Freeze the accumulated layers into an immutable `RawConfig` snapshot."""
        return RawConfig(self._values)
