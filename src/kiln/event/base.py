# topmark:header:start
#
#   project      : Kiln
#   file         : base.py
#   file_relpath : src/kiln/event/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common shape of Kiln build events.

Events come in pairs linked by an `EventKey`: a "started" record allocates a
new key and its "finished" record reuses it.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final

_KEY_SEQUENCE: Final[itertools.count[int]] = itertools.count(1)


@dataclass(frozen=True, slots=True)
class EventKey:
    """Identifier shared by the records of one event pair."""

    value: int

    @classmethod
    def unique(cls) -> EventKey:
        """Return a key never handed out before in this process."""
        return cls(next(_KEY_SEQUENCE))


class BuildEvent(ABC):
    """Base class for build events.

    Two events are equal when they are of the same type and share a key.
    """

    __slots__ = ("_event_key",)

    def __init__(self, event_key: EventKey) -> None:
        self._event_key = event_key

    @property
    def event_key(self) -> EventKey:
        """Key linking the records of one event pair."""
        return self._event_key

    @property
    @abstractmethod
    def category(self) -> str:
        """Coarse grouping used by listeners."""

    @property
    @abstractmethod
    def event_name(self) -> str:
        """Name of this record, e.g. ``InstallStarted``."""

    @property
    @abstractmethod
    def value_string(self) -> str:
        """Short human-readable payload."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuildEvent) or type(other) is not type(self):
            return NotImplemented
        return self._event_key == other._event_key

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._event_key))

    def __repr__(self) -> str:
        return f"{self.event_name}({self.value_string}, key={self._event_key.value})"
