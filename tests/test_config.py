"""
Tests for config resolution and YAML loading.
"""

from __future__ import annotations

import pytest

from sortkit.config import DEFAULT_CONFIG, SortConfig, load_config, resolve_config


def test_defaults() -> None:
    cfg = resolve_config(None)
    assert cfg is DEFAULT_CONFIG
    assert cfg == SortConfig(
        insertion_threshold=12,
        quick_threshold=12,
        min_merge=32,
        min_gallop=7,
        probe_sample_size=100,
        fallback="merge",
    )


def test_sortconfig_passes_through() -> None:
    cfg = SortConfig(min_gallop=3)
    assert resolve_config(cfg) is cfg


def test_dict_overrides() -> None:
    cfg = resolve_config({"min_gallop": 3, "fallback": "tim"})
    assert cfg.min_gallop == 3
    assert cfg.fallback == "tim"
    assert cfg.min_merge == 32


@pytest.mark.parametrize(
    "bad",
    [
        {"min_run": 16},
        {"min_gallop": 0},
        {"min_merge": -1},
        {"insertion_threshold": 2.5},
        {"quick_threshold": True},
        {"fallback": "quick"},
    ],
)
def test_rejects_bad_overrides(bad) -> None:
    with pytest.raises(ValueError):
        resolve_config(bad)


def test_rejects_non_mapping() -> None:
    with pytest.raises(ValueError):
        resolve_config([("min_gallop", 3)])


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "sort.yaml"
    path.write_text("min_gallop: 4\nfallback: tim\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.min_gallop == 4
    assert cfg.fallback == "tim"


def test_load_empty_yaml(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) is DEFAULT_CONFIG


def test_load_yaml_with_list_top_level(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_config_is_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.min_gallop = 1  # type: ignore[misc]
