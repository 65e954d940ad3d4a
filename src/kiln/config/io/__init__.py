# topmark:header:start
#
#   project      : Kiln
#   file         : __init__.py
#   file_relpath : src/kiln/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration I/O: INI parsing and dump rendering.

- `kiln.config.io.ini`: parse INI text into a `RawConfig`.
- `kiln.config.io.render`: serialize a configuration mapping as INI, TOML or JSON.
"""

from __future__ import annotations

from kiln.config.io.ini import parse_ini_text, read_ini
from kiln.config.io.render import to_ini, to_json, to_toml

__all__ = [
    "parse_ini_text",
    "read_ini",
    "to_ini",
    "to_json",
    "to_toml",
]
