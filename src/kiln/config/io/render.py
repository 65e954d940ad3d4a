# topmark:header:start
#
#   project      : Kiln
#   file         : render.py
#   file_relpath : src/kiln/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration mappings for dumps.

All renderers sort sections and keys so the same configuration always
produces the same text, whatever order the layers were merged in.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from kiln.config.logging import get_logger

if TYPE_CHECKING:
    from kiln.config.logging import KilnLogger
    from kiln.config.types import ConfigDict, ConfigMapping

logger: KilnLogger = get_logger(__name__)


def _sorted_dict(values: ConfigMapping) -> ConfigDict:
    return {
        section: {key: values[section][key] for key in sorted(values[section])}
        for section in sorted(values)
    }


def to_ini(values: ConfigMapping) -> str:
    """Serialize ``values`` as INI text (``[section]`` headers, ``key = value`` lines).

    Multi-line values are written with indented continuation lines, which the
    INI reader folds back into a single value.
    """
    chunks: list[str] = []
    for section, entries in _sorted_dict(values).items():
        lines: list[str] = [f"[{section}]"]
        for key, value in entries.items():
            first, *rest = value.split("\n") if value else [""]
            lines.append(f"{key} = {first}".rstrip())
            lines.extend(f"    {line}" for line in rest)
        chunks.append("\n".join(lines) + "\n")
    return "\n".join(chunks)


def to_toml(values: ConfigMapping) -> str:
    """Serialize ``values`` as a TOML document, one table per section."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for section, entries in _sorted_dict(values).items():
        table = tomlkit.table()
        for key, value in entries.items():
            table.add(key, value)
        doc.add(section, table)
    return cast("str", cast("Any", tomlkit).dumps(doc))


def to_json(values: ConfigMapping, *, indent: int | None = 2) -> str:
    """Serialize ``values`` as a JSON object of objects."""
    plain: dict[str, dict[str, str]] = {s: dict(v) for s, v in values.items()}
    logger.trace("Rendering %d section(s) as JSON", len(plain))
    return json.dumps(plain, indent=indent, sort_keys=True, ensure_ascii=False)
