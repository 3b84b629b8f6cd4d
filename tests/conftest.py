"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, UTC

import pytest
from fastapi.testclient import TestClient

from db import MemoryStore
from main import create_app


class StepClock:
    """Clock that advances by a fixed step on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        return now


@pytest.fixture
def clock():
    """Deterministic, strictly increasing clock."""
    return StepClock()


@pytest.fixture
def store(clock):
    """Create an empty store for repository and service tests."""
    return MemoryStore(clock=clock)


@pytest.fixture
def app():
    """Create an application with its own empty store."""
    return create_app()


@pytest.fixture
def client(app):
    """Create test client; entering it runs the lifespan and builds the store."""
    with TestClient(app) as test_client:
        yield test_client
