"""Shared fixtures for narrow tests."""

import os
import tempfile

# Keep test runs from writing narrow.log into the project root
os.environ.setdefault("NARROW_LOG_FILE", os.path.join(tempfile.gettempdir(), "narrow-tests.log"))

import pytest  # noqa: E402

from narrow.core.config import EngineConfig  # noqa: E402
from narrow.core.engine import NarrowEngine  # noqa: E402
from narrow.core.history import InMemoryHistory  # noqa: E402


@pytest.fixture
def engine() -> NarrowEngine:
    return NarrowEngine(history=InMemoryHistory())


@pytest.fixture
def unsorted_engine() -> NarrowEngine:
    return NarrowEngine(config=EngineConfig(sort_enabled=False), history=InMemoryHistory())


@pytest.fixture
def fruits() -> list[str]:
    return ["banana", "apple", "kiwi"]
