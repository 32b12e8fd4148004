"""Shared fixtures for the iterator tests."""

from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rand_utils import make_rng  # noqa: E402


@pytest.fixture
def rng():
    """Fixed-seed generator so failures can be replayed."""
    return make_rng(20240607)
