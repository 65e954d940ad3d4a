# topmark:header:start
#
#   project      : Kiln
#   file         : test_resolved.py
#   file_relpath : tests/config/test_resolved.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for lookups and typed getters on the resolved `Config`."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from kiln.config import Config, ConfigContext, ConfigValueError, RawConfig, create_config


@pytest.fixture
def config() -> Config:
    return create_config(
        {
            "core": {
                "threads": "8",
                "verbose": "Yes",
                "quiet": "off",
                "bad_int": "eight",
                "bad_bool": "maybe",
                "targets": " //a:b, //c:d ,,",
                "out": "buck-out",
                "abs": "/opt/kiln",
            },
            "empty": {},
        }
    )


def test_get_and_get_value(config: Config) -> None:
    assert config.get("core", "threads") == "8"
    assert config.get("core", "missing") is None
    assert config.get_value("core", "missing", "dflt") == "dflt"
    assert config.get_value("core", "threads", "dflt") == "8"


def test_sections_and_keys_are_sorted(config: Config) -> None:
    assert config.sections() == ("core", "empty")
    assert config.keys("core")[:3] == ("abs", "bad_bool", "bad_int")
    assert config.keys("nope") == ()


def test_has_section_and_key(config: Config) -> None:
    assert config.has_section("empty")
    assert not config.has_section("nope")
    assert config.has_key("core", "threads")
    assert not config.has_key("empty", "threads")


@pytest.mark.parametrize(
    ("key", "expected"),
    [("verbose", True), ("quiet", False), ("missing", False)],
)
def test_get_bool(config: Config, key: str, expected: bool) -> None:
    assert config.get_bool("core", key) is expected


def test_get_bool_default_and_error(config: Config) -> None:
    assert config.get_bool("core", "missing", default=True) is True
    with pytest.raises(ConfigValueError) as excinfo:
        config.get_bool("core", "bad_bool")
    assert "core.bad_bool" in str(excinfo.value)


def test_get_int(config: Config) -> None:
    assert config.get_int("core", "threads") == 8
    assert config.get_int("core", "missing") is None
    assert config.get_int("core", "missing", default=3) == 3
    with pytest.raises(ConfigValueError):
        config.get_int("core", "bad_int")


def test_get_list(config: Config) -> None:
    assert config.get_list("core", "targets") == ("//a:b", "//c:d")
    assert config.get_list("core", "missing") == ()


def test_get_path_without_project_root(config: Config) -> None:
    assert config.get_path("core", "out") == Path("buck-out")
    assert config.get_path("core", "abs") == Path("/opt/kiln")
    assert config.get_path("core", "missing") is None


def test_get_path_anchors_relative_values(tmp_path: Path) -> None:
    config = Config(
        raw=RawConfig.of({"core": {"out": "buck-out", "abs": "/opt/kiln"}}),
        context=ConfigContext(project_root=tmp_path),
        config_files=(),
    )

    assert config.get_path("core", "out") == tmp_path / "buck-out"
    assert config.get_path("core", "abs") == Path("/opt/kiln")


def test_config_is_frozen(config: Config) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.config_files = ()  # type: ignore[misc]


def test_section_view_is_read_only(config: Config) -> None:
    with pytest.raises(TypeError):
        config.get_section("core")["threads"] = "1"  # type: ignore[index]
