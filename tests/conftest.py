# topmark:header:start
#
#   project      : Kiln
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Kiln test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests must never see the real ``/etc/kilnconfig*`` or ``~/.kilnconfig*``.
    Use the `locations` fixture (or ``--no-global-config`` / the hidden
    ``--global-dir``, ``--global-file`` and ``--home`` CLI options) to point
    the resolver at a synthetic tree under ``tmp_path``.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from kiln.config import ConfigLocations, logging

if TYPE_CHECKING:
    from pathlib import Path


def write_text(path: Path, content: str) -> Path:
    """Write dedented ``content`` to ``path``, creating parent directories.

    Args:
        path (Path): Destination file.
        content (str): INI text; common leading indentation is removed.

    Returns:
        Path: ``path``, for convenience.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def silence_kiln_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Kiln's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``KILN_LOG_LEVEL``.
    """
    monkeypatch.delenv("KILN_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def fake_root(tmp_path: Path) -> Path:
    """Return an empty directory standing in for ``/``."""
    root: Path = tmp_path / "root"
    (root / "etc").mkdir(parents=True)
    (root / "home" / "user").mkdir(parents=True)
    return root


@pytest.fixture
def locations(fake_root: Path) -> ConfigLocations:
    """Return `ConfigLocations` rooted in `fake_root` (nothing exists yet)."""
    return ConfigLocations(
        global_file=fake_root / "etc" / "kilnconfig",
        global_dir=fake_root / "etc" / "kilnconfig.d",
        home=fake_root / "home" / "user",
    )


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    proj: Path = tmp_path / "proj"
    proj.mkdir()
    return proj
