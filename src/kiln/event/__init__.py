# topmark:header:start
#
#   project      : Kiln
#   file         : __init__.py
#   file_relpath : src/kiln/event/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build event records."""

from __future__ import annotations

from kiln.event.base import BuildEvent, EventKey
from kiln.event.install import (
    DuplicateFinishError,
    InstallEvent,
    InstallFinished,
    InstallStarted,
)

__all__ = [
    "BuildEvent",
    "DuplicateFinishError",
    "EventKey",
    "InstallEvent",
    "InstallFinished",
    "InstallStarted",
]
