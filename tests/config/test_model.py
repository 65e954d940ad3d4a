# topmark:header:start
#
#   project      : Kiln
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the layered store (`RawConfig` / `RawConfigBuilder`).

These tests use synthetic mappings only; no files are read.
"""

from __future__ import annotations

import pytest

from kiln.config import RawConfig, RawConfigBuilder


def test_put_all_merges_per_key_not_per_section() -> None:
    """A later layer replaces only the keys it mentions."""
    raw: RawConfig = (
        RawConfig.builder()
        .put_all({"core": {"threads": "4", "jobs": "2"}})
        .put_all({"core": {"threads": "8"}})
        .build()
    )

    assert raw.to_dict() == {"core": {"threads": "8", "jobs": "2"}}


def test_later_layer_wins() -> None:
    builder = RawConfigBuilder()
    for layer in ({"a": {"k": "1"}}, {"a": {"k": "2"}}, {"a": {"k": "3"}}):
        builder.put_all(layer)

    assert builder.build().get_value("a", "k") == "3"


def test_layers_add_new_sections() -> None:
    raw: RawConfig = (
        RawConfig.builder().put_all({"a": {"x": "1"}}).put_all({"b": {"y": "2"}}).build()
    )

    assert sorted(raw) == ["a", "b"]
    assert raw["b"]["y"] == "2"


def test_empty_section_is_kept() -> None:
    raw: RawConfig = RawConfig.builder().put_all({"empty": {}}).build()

    assert "empty" in raw
    assert dict(raw["empty"]) == {}


def test_put_sets_single_value() -> None:
    raw: RawConfig = RawConfig.builder().put("s", "k", "v").put("s", "k", "w").build()

    assert raw.to_dict() == {"s": {"k": "w"}}


def test_snapshot_does_not_see_later_builder_edits() -> None:
    """`build()` returns an independent snapshot."""
    builder = RawConfigBuilder().put("s", "k", "before")
    snapshot: RawConfig = builder.build()

    builder.put("s", "k", "after").put("other", "x", "1")

    assert snapshot.get_value("s", "k") == "before"
    assert "other" not in snapshot
    assert builder.build().get_value("s", "k") == "after"


def test_snapshot_does_not_see_source_mapping_edits() -> None:
    source: dict[str, dict[str, str]] = {"s": {"k": "v"}}
    raw: RawConfig = RawConfig.of(source)

    source["s"]["k"] = "changed"
    source["t"] = {}

    assert raw.to_dict() == {"s": {"k": "v"}}


def test_snapshot_is_read_only() -> None:
    raw: RawConfig = RawConfig.of({"s": {"k": "v"}})

    with pytest.raises(TypeError):
        raw["s"]["k"] = "x"  # type: ignore[index]
    with pytest.raises(TypeError):
        raw._sections["t"] = {}  # type: ignore[index]  # pylint: disable=protected-access


def test_same_layers_give_equal_snapshots() -> None:
    layers = [{"a": {"x": "1"}}, {"a": {"y": "2"}, "b": {"z": "3"}}]

    first = RawConfigBuilder()
    second = RawConfigBuilder()
    for layer in layers:
        first.put_all(layer)
        second.put_all(layer)

    assert first.build() == second.build()


def test_equality_compares_content_only() -> None:
    assert RawConfig.of({"a": {"x": "1"}}) == {"a": {"x": "1"}}
    assert RawConfig.of({"a": {"x": "1"}}) != RawConfig.of({"a": {"x": "2"}})
    assert RawConfig.empty() == RawConfig()
    assert RawConfig.empty() != RawConfig.of({"a": {}})


def test_of_returns_existing_snapshot_unchanged() -> None:
    raw: RawConfig = RawConfig.of({"a": {"x": "1"}})

    assert RawConfig.of(raw) is raw


def test_lookup_of_missing_entries() -> None:
    raw: RawConfig = RawConfig.of({"a": {"x": "1"}})

    assert raw.get_value("a", "missing") is None
    assert raw.get_value("missing", "x") is None
    assert dict(raw.get_section("missing")) == {}


def test_snapshot_is_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(RawConfig.empty())
