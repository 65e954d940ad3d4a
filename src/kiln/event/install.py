# topmark:header:start
#
#   project      : Kiln
#   file         : install.py
#   file_relpath : src/kiln/event/install.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Install events: a started/finished pair for installing a built target.

A finished record is created from its started record and shares its key and
target. Each started record accepts exactly one finished record; asking for a
second one is a programming error and raises `DuplicateFinishError`.

Example:
    ```python
    started = InstallStarted(BuildTarget.parse("//apps/demo:app"))
    done = started.finish(success=True, pid=4242)
    assert done.event_key == started.event_key
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from kiln.event.base import BuildEvent, EventKey

if TYPE_CHECKING:
    from kiln.target import BuildTarget

INSTALL_CATEGORY: Final[str] = "install_apk"


class DuplicateFinishError(RuntimeError):
    """Raised when a second finished record is created for one started record."""


class InstallEvent(BuildEvent):
    """Base class of the install event pair."""

    __slots__ = ("_build_target",)

    def __init__(self, event_key: EventKey, build_target: BuildTarget) -> None:
        super().__init__(event_key)
        self._build_target = build_target

    @property
    def build_target(self) -> BuildTarget:
        """The target being installed."""
        return self._build_target

    @property
    def category(self) -> str:
        return INSTALL_CATEGORY

    @property
    def value_string(self) -> str:
        return self._build_target.fully_qualified_name


class InstallStarted(InstallEvent):
    """An install of ``build_target`` has started."""

    __slots__ = ("_finished",)

    def __init__(self, build_target: BuildTarget) -> None:
        super().__init__(EventKey.unique(), build_target)
        self._finished: InstallFinished | None = None

    @property
    def event_name(self) -> str:
        return "InstallStarted"

    @property
    def is_finished(self) -> bool:
        """Whether a finished record was created for this install."""
        return self._finished is not None

    def finish(self, success: bool, pid: int | None = None) -> InstallFinished:
        """Create the finished record for this install; see `InstallFinished`."""
        return InstallFinished(self, success, pid)


class InstallFinished(InstallEvent):
    """An install has finished.

    Attributes:
        success (bool): Whether the install succeeded.
        pid (int | None): Process id of the launched application, if one was started.

    Raises:
        DuplicateFinishError: If ``started`` already has a finished record.
    """

    __slots__ = ("_success", "_pid")

    def __init__(self, started: InstallStarted, success: bool, pid: int | None = None) -> None:
        if started.is_finished:
            raise DuplicateFinishError(
                f"Multiple conflicting finished events for {started.value_string} "
                f"(key={started.event_key.value})"
            )
        super().__init__(started.event_key, started.build_target)
        self._success = success
        self._pid = pid
        started._finished = self

    @property
    def event_name(self) -> str:
        return "InstallFinished"

    @property
    def success(self) -> bool:
        return self._success

    @property
    def pid(self) -> int | None:
        return self._pid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InstallFinished):
            return NotImplemented
        return (
            self.event_key == other.event_key
            and self._success == other._success
            and self._pid == other._pid
        )

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._success))


def started(build_target: BuildTarget) -> InstallStarted:
    """Create an `InstallStarted` record for ``build_target``."""
    return InstallStarted(build_target)


def finished(
    start_event: InstallStarted, success: bool, pid: int | None = None
) -> InstallFinished:
    """Create the `InstallFinished` record paired with ``start_event``."""
    return InstallFinished(start_event, success, pid)
