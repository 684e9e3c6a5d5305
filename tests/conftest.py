"""Shared fixtures for the swapengine tests."""

from __future__ import annotations

import QuantLib as ql
import pytest

from swapengine.settings import evaluation_date_set_to


@pytest.fixture
def today() -> ql.Date:
    """Pin the evaluation date for the duration of a test."""
    as_of = ql.Date(1, 1, 2020)
    with evaluation_date_set_to(as_of):
        yield as_of
