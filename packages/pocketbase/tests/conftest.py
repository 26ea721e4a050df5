"""Shared fixtures for pocketbase parameter tests."""

from __future__ import annotations

from typing import Any

import pytest

from cqrs_ddd_pocketbase import FilterBuilder, ParamsBuilder, pb_params


@pytest.fixture
def q() -> FilterBuilder:
    """Fresh filter builder (one filter-building session)."""
    return FilterBuilder()


@pytest.fixture
def params() -> ParamsBuilder[Any]:
    """Fresh, untyped parameter builder."""
    return pb_params()
