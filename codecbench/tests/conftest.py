"""
Pytest configuration and shared fixtures for codecbench tests
"""

import pytest
import random
import shutil
from datetime import datetime, timedelta, timezone
from pathlib import Path

from codecbench.context.encoding import BUNDLED_SCHEMA_PATH, load_schema
from codecbench.context.generation import generate


class StepClock:
    """Deterministic clock: starts at a fixed instant, advances 1ms per call."""

    def __init__(self, start=datetime(2022, 3, 14, 9, 26, 53, 589000, tzinfo=timezone.utc)):
        self.current = start
        self.calls = 0

    def __call__(self):
        value = self.current
        self.current += timedelta(milliseconds=1)
        self.calls += 1
        return value


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def schema_file(tmp_path) -> Path:
    """Bundled schema copied to a file named ``schema`` in a temp dir"""
    target = tmp_path / "schema"
    shutil.copyfile(BUNDLED_SCHEMA_PATH, target)
    return target


@pytest.fixture(scope="session")
def parsed_schema():
    return load_schema(BUNDLED_SCHEMA_PATH)


@pytest.fixture
def small_dataset(rng, clock):
    """Twenty records with fixed timestamps and seeded metrics"""
    return generate(20, rng=rng, clock=clock)


@pytest.fixture(scope="session")
def full_dataset():
    """Default-size dataset (1000 records), shared across the session"""
    return generate(1000, rng=random.Random(42))
