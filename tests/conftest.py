"""Shared test setup: make `src/` importable without installing, plus small helpers."""

from __future__ import annotations

import pathlib
import sys

import pytest

# Ensure `src/` is importable when running `pytest` from the repo root
_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sorter.algorithms import ALGORITHMS  # noqa: E402


@pytest.fixture(params=sorted(ALGORITHMS))
def algo(request):
    """Each registered algorithm in turn."""
    return ALGORITHMS[request.param]
