"""
Tunables shared by the sorting algorithms and the dispatcher.

Every algorithm accepts a keyword-only `config=` that may be:
    - None                -> defaults
    - a SortConfig        -> used as-is
    - a dict of overrides -> validated and merged over the defaults

Public API (stable):
    SortConfig, ConfigLike
    DEFAULT_CONFIG
    FALLBACKS
    resolve_config(config) -> SortConfig
    load_config(path) -> SortConfig

YAML files hold a flat mapping with the same keys as SortConfig, e.g.:

    insertion_threshold: 12
    quick_threshold: 12
    min_merge: 32
    min_gallop: 7
    probe_sample_size: 100
    fallback: merge
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

FALLBACKS = ("merge", "tim")

__all__ = ["SortConfig", "ConfigLike", "DEFAULT_CONFIG", "FALLBACKS", "resolve_config", "load_config"]


@dataclass(frozen=True)
class SortConfig:
    insertion_threshold: int = 12
    quick_threshold: int = 12
    min_merge: int = 32
    min_gallop: int = 7
    probe_sample_size: int = 100
    fallback: str = "merge"


DEFAULT_CONFIG = SortConfig()

ConfigLike = Union[SortConfig, Dict[str, Any], None]

_INT_FIELDS = (
    "insertion_threshold",
    "quick_threshold",
    "min_merge",
    "min_gallop",
    "probe_sample_size",
)


def resolve_config(config: ConfigLike) -> SortConfig:
    """
    Normalize the `config=` argument accepted by every algorithm.

    Raises
    ------
    ValueError
        On unknown keys, non-positive integer tunables or an unknown fallback.
    """
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, SortConfig):
        return config
    if not isinstance(config, dict):
        raise ValueError(f"config must be a dict or SortConfig; got {type(config).__name__}")

    known = {f.name for f in fields(SortConfig)}
    unknown = sorted(set(config) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}. Supported: {sorted(known)}")

    overrides: Dict[str, Any] = {}
    for name in _INT_FIELDS:
        if name in config:
            overrides[name] = _parse_positive_int(name, config[name])
    if "fallback" in config:
        overrides["fallback"] = _parse_fallback(config["fallback"])

    return replace(DEFAULT_CONFIG, **overrides)


def load_config(path: Union[str, Path]) -> SortConfig:
    """Read a YAML mapping of overrides and resolve it against the defaults."""
    path = Path(path)
    logger.info("Loading sort config from %s", path)
    with path.open("r", encoding="utf-8") as f:
        raw: Optional[Dict[str, Any]] = yaml.safe_load(f)
    if raw is None:
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return resolve_config(raw)


# ------------------------- helpers ------------------------- #


def _parse_positive_int(name: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"config.{name} must be an integer >= 1; got {value!r}")
    if value < 1:
        raise ValueError(f"config.{name} must be an integer >= 1; got {value!r}")
    return value


def _parse_fallback(value: Any) -> str:
    if value not in FALLBACKS:
        raise ValueError(f"config.fallback must be one of {list(FALLBACKS)}; got {value!r}")
    return value
