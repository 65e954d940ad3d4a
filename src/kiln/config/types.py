# topmark:header:start
#
#   project      : Kiln
#   file         : types.py
#   file_relpath : src/kiln/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared type aliases for the configuration layer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

#: Values of one section: key -> value.
SectionMapping: TypeAlias = Mapping[str, str]

#: A two-level configuration mapping: section -> key -> value.
ConfigMapping: TypeAlias = Mapping[str, SectionMapping]

#: Plain mutable counterpart of `ConfigMapping`, used for rendering and exports.
ConfigDict: TypeAlias = dict[str, dict[str, str]]
