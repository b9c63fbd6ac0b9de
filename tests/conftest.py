"""
Shared test setup.

Inserts the project `src/` onto sys.path so `pytest` works from the repo root
without installing the package, and provides the common fixtures.
"""

from __future__ import annotations

import pathlib
import sys

import numpy as np
import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortkit.stability import reset_stability_cache  # noqa: E402


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def fresh_stability_cache():
    reset_stability_cache()
    yield
    reset_stability_cache()
