# topmark:header:start
#
#   project      : Kiln
#   file         : test_loader.py
#   file_relpath : tests/config/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for loading and merging configuration files."""

from __future__ import annotations

from pathlib import Path

import pytest

from kiln.config import (
    Config,
    ConfigContext,
    ConfigLocations,
    ConfigParseError,
    ConfigReadError,
    create_config,
    load_config,
    read_config_file,
)
from tests.conftest import write_text


@pytest.mark.pipeline
def test_override_wins_over_project_file(locations: ConfigLocations, project: Path) -> None:
    """Command-line overrides are applied after every file."""
    write_text(
        project / ".kilnconfig",
        """
        [core]
        threads = 4
        """,
    )
    context = ConfigContext(
        use_global_config=True,
        project_root=project,
        overrides={"core": {"threads": "8"}},
    )

    config: Config = load_config(context, locations=locations)

    assert config.get("core", "threads") == "8"
    assert config.config_files == (project / ".kilnconfig",)
    assert config.context is context
    assert config.project_root == project


@pytest.mark.pipeline
def test_layers_merge_per_key(locations: ConfigLocations, project: Path) -> None:
    write_text(
        locations.global_file,
        """
        [core]
        threads = 1
        cache = /var/cache/kiln

        [tools]
        java = /usr/bin/java
        """,
    )
    write_text(
        locations.user_file,
        """
        [core]
        threads = 2
        """,
    )
    write_text(
        project / ".kilnconfig",
        """
        [core]
        cache = .cache
        """,
    )
    write_text(
        project / ".kilnconfig.local",
        """
        [core]
        threads = 16
        """,
    )
    context = ConfigContext(project_root=project)

    config: Config = load_config(context, locations=locations)

    assert config.to_dict() == {
        "core": {"threads": "16", "cache": ".cache"},
        "tools": {"java": "/usr/bin/java"},
    }


@pytest.mark.pipeline
def test_fragment_directory_keys_are_merged(locations: ConfigLocations) -> None:
    write_text(locations.user_dir / "10-a", "[s]\nfoo = 1\n")
    write_text(locations.user_dir / "20-b", "[s]\nbar = 2\n")

    config: Config = load_config(ConfigContext(), locations=locations)

    assert config.get("s", "foo") == "1"
    assert config.get("s", "bar") == "2"


@pytest.mark.pipeline
def test_single_file_overrides_its_fragment_directory(locations: ConfigLocations) -> None:
    write_text(locations.global_dir / "defaults", "[s]\nkey = from-fragment\n")
    write_text(locations.global_file, "[s]\nkey = from-file\n")

    config: Config = load_config(ConfigContext(), locations=locations)

    assert config.get("s", "key") == "from-file"


@pytest.mark.pipeline
def test_later_fragment_wins(locations: ConfigLocations) -> None:
    write_text(locations.global_dir / "b", "[s]\nkey = b\n")
    write_text(locations.global_dir / "a", "[s]\nkey = a\n")

    config: Config = load_config(ConfigContext(), locations=locations)

    assert config.get("s", "key") == "b"


def test_no_files_and_no_overrides_gives_empty_config(locations: ConfigLocations) -> None:
    config: Config = load_config(
        ConfigContext(use_global_config=False), locations=locations
    )

    assert config.sections() == ()
    assert config.config_files == ()


def test_overrides_alone(locations: ConfigLocations) -> None:
    context = ConfigContext(use_global_config=False).with_overrides({"a": {"b": "c"}})

    config: Config = load_config(context, locations=locations)

    assert config.to_dict() == {"a": {"b": "c"}}


def test_malformed_file_aborts_load(locations: ConfigLocations, project: Path) -> None:
    write_text(locations.user_file, "[ok]\nkey = value\n")
    bad: Path = write_text(project / ".kilnconfig", "key_without_section = 1\n")
    context = ConfigContext(project_root=project)

    with pytest.raises(ConfigParseError) as excinfo:
        load_config(context, locations=locations)

    assert excinfo.value.path == bad
    assert str(bad) in str(excinfo.value)


def test_undecodable_file_is_a_read_error(tmp_path: Path) -> None:
    path: Path = tmp_path / "latin1.ini"
    path.write_bytes(b"[s]\nkey = caf\xe9\n")

    with pytest.raises(ConfigReadError) as excinfo:
        read_config_file(path)

    assert excinfo.value.path == path


def test_missing_file_is_a_read_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError):
        read_config_file(tmp_path / "absent.ini")


def test_read_config_file_preserves_utf8(tmp_path: Path) -> None:
    path: Path = write_text(tmp_path / "utf8.ini", "[s]\nkey = café\n")

    assert read_config_file(path).to_dict() == {"s": {"key": "café"}}


def test_create_config_uses_values_as_overrides() -> None:
    config: Config = create_config({"core": {"threads": "2"}})

    assert config.get("core", "threads") == "2"
    assert config.config_files == ()
    assert config.context.overrides == {"core": {"threads": "2"}}
    assert config.context.use_global_config is True
    assert config.project_root is None


def test_loading_twice_gives_equal_configs(locations: ConfigLocations, project: Path) -> None:
    write_text(project / ".kilnconfig", "[a]\nx = 1\n[b]\ny = 2\n")
    context = ConfigContext(project_root=project)

    first: Config = load_config(context, locations=locations)
    second: Config = load_config(context, locations=locations)

    assert first.raw == second.raw
    assert first == second
