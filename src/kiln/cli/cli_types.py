# topmark:header:start
#
#   project      : Kiln
#   file         : cli_types.py
#   file_relpath : src/kiln/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the Kiln CLI.

- `EnumChoiceParam`: case-insensitive choice over a string-valued Enum.
- `ConfigOverrideParam`: parses ``section.key=value`` overrides.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NamedTuple, NoReturn, Protocol, TypeVar, cast

import click

if TYPE_CHECKING:
    from collections.abc import Iterable

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


def _fail(message: str, param: click.Parameter | None, ctx: click.Context | None) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        _fail(f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}", param, ctx)


class ConfigOverride(NamedTuple):
    """One ``section.key=value`` override from the command line."""

    section: str
    key: str
    value: str


def parse_override(text: str) -> ConfigOverride:
    """Parse ``section.key=value``.

    The section ends at the first dot, so keys may contain dots. The value may
    be empty and may contain ``=``.

    Raises:
        ValueError: If ``text`` has no ``=``, no dot before it, or an empty
            section or key.
    """
    name, sep, value = text.partition("=")
    if not sep:
        raise ValueError(f"Expected 'section.key=value', got {text!r}")
    section, dot, key = name.strip().partition(".")
    if not dot or not section or not key:
        raise ValueError(f"Expected 'section.key=value', got {text!r}")
    return ConfigOverride(section=section, key=key, value=value)


class ConfigOverrideParam(ParamTypeBase):
    """Click parameter type for ``section.key=value`` overrides."""

    name = "section.key=value"

    def convert(
        self,
        value: str | ConfigOverride,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> ConfigOverride:
        """Convert the raw option value into a `ConfigOverride`."""
        if isinstance(value, ConfigOverride):
            return value
        try:
            return parse_override(value)
        except ValueError as err:
            _fail(str(err), param, ctx)


def overrides_to_mapping(overrides: Iterable[ConfigOverride]) -> dict[str, dict[str, str]]:
    """Fold overrides into a nested mapping; a later override of the same key wins."""
    out: dict[str, dict[str, str]] = {}
    for item in overrides:
        out.setdefault(item.section, {})[item.key] = item.value
    return out
