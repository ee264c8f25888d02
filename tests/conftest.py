"""
Pytest configuration and shared fixtures.
"""
import os

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "cycle_api")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

from datetime import date, timedelta
from typing import List

import pytest

from src.models.cycle import CycleRecord
from tests.helpers import FakeCycleStore, FakeLambdaContext, make_cycle

@pytest.fixture
def scenario_cycles() -> List[CycleRecord]:
    """Three regular 28-day cycles, most recent first."""
    return [
        make_cycle(date(2024, 2, 26), 4),
        make_cycle(date(2024, 1, 29), 5),
        make_cycle(date(2024, 1, 1), 5)
    ]


@pytest.fixture
def regular_cycles() -> List[CycleRecord]:
    """Six 28-day cycles in chronological order."""
    return [
        make_cycle(date(2024, 1, 1) + timedelta(days=i * 28), 5)
        for i in range(6)
    ]


@pytest.fixture
def fake_store() -> FakeCycleStore:
    """Empty in-memory cycle store."""
    return FakeCycleStore()


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Lambda context for decorated handlers."""
    return FakeLambdaContext()
