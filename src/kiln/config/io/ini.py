# topmark:header:start
#
#   project      : Kiln
#   file         : ini.py
#   file_relpath : src/kiln/config/io/ini.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read INI-style configuration text into a `RawConfig`.

Parsing is delegated to `configparser`, configured for plain key/value
semantics:

- values are literal (no ``%(name)s`` interpolation),
- keys are case-sensitive,
- a repeated section merges into the earlier one and a repeated key keeps the
  last value,
- there is no implicit ``[DEFAULT]`` section; a section called ``DEFAULT`` is
  an ordinary section.
- a multi-line value may contain blank lines; trailing blank lines are dropped.

Any `configparser.Error` is reported as `ConfigParseError`.
"""

from __future__ import annotations

import configparser
from typing import TYPE_CHECKING, Final

from kiln.config.errors import ConfigParseError
from kiln.config.logging import get_logger
from kiln.config.model import RawConfig

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

    from kiln.config.logging import KilnLogger
    from kiln.config.types import ConfigDict

logger: KilnLogger = get_logger(__name__)

# configparser always has a default section; use a name no header can spell.
_NO_DEFAULT_SECTION: Final[str] = "\x00kiln:no-default\x00"


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        default_section=_NO_DEFAULT_SECTION,
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        empty_lines_in_values=True,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def _to_raw_config(parser: configparser.ConfigParser) -> RawConfig:
    values: ConfigDict = {}
    for section in parser.sections():
        values[section] = {key: value for key, value in parser.items(section, raw=True)}
    return RawConfig(values)


def read_ini(stream: TextIO, *, source: Path | None = None) -> RawConfig:
    """Parse an INI stream.

    Args:
        stream (TextIO): Text stream positioned at the start of the document.
        source (Path | None): Where the text came from; used in error messages.

    Returns:
        RawConfig: The parsed sections.

    Raises:
        ConfigParseError: If the text is not valid INI.
    """
    parser: configparser.ConfigParser = _new_parser()
    try:
        parser.read_file(stream, source=str(source) if source is not None else None)
    except configparser.Error as err:
        raise ConfigParseError(source, err.message) from err
    parsed: RawConfig = _to_raw_config(parser)
    logger.trace("Parsed %d section(s) from %s", len(parsed), source or "<string>")
    return parsed


def parse_ini_text(text: str, *, source: Path | None = None) -> RawConfig:
    """Parse INI ``text``; see `read_ini`."""
    parser: configparser.ConfigParser = _new_parser()
    try:
        parser.read_string(text, source=str(source) if source is not None else "<string>")
    except configparser.Error as err:
        raise ConfigParseError(source, err.message) from err
    return _to_raw_config(parser)
