# topmark:header:start
#
#   project      : Kiln
#   file         : target.py
#   file_relpath : src/kiln/target.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build target identifiers (``//base/path:name``)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BuildTarget:
    """A build rule address.

    Attributes:
        base_name (str): Package path, always starting with ``//`` (e.g. ``//apps/demo``).
        short_name (str): Rule name within the package (e.g. ``app``).
    """

    base_name: str
    short_name: str

    def __post_init__(self) -> None:
        if not self.base_name.startswith("//"):
            raise ValueError(f"Base name must start with '//': {self.base_name!r}")
        if not self.short_name or ":" in self.short_name:
            raise ValueError(f"Invalid short name: {self.short_name!r}")

    @classmethod
    def parse(cls, text: str) -> BuildTarget:
        """Parse a fully qualified name such as ``//apps/demo:app``.

        Raises:
            ValueError: If ``text`` is not of the form ``//base:name``.
        """
        base, sep, name = text.rpartition(":")
        if not sep:
            raise ValueError(f"Build target must contain ':': {text!r}")
        return cls(base_name=base, short_name=name)

    @property
    def fully_qualified_name(self) -> str:
        """Return ``//base:name``."""
        return f"{self.base_name}:{self.short_name}"

    def __str__(self) -> str:
        return self.fully_qualified_name
