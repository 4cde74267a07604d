"""
Shared test fixtures for teleprompter tests.

This module provides:
- A versioned store on a throwaway SQLite database with a controllable clock
- An application client wired to an in-memory propagation queue
"""

from __future__ import annotations

from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from teleprompter.config import Settings
from teleprompter.database import create_engine, create_session_factory, init_db
from teleprompter.main import create_app
from teleprompter.services.propagator import InMemoryPromptQueue
from teleprompter.services.store import VersionedStore


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> int:
        self.now += ms
        return self.now


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'prompts.db'}",
        "log_to_file": False,
        "queue_backend": "memory",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def store(tmp_path, clock):
    engine = create_engine(make_settings(tmp_path))
    await init_db(engine)
    yield VersionedStore(create_session_factory(engine), clock=clock)
    await engine.dispose()


@pytest.fixture
def queue() -> InMemoryPromptQueue:
    return InMemoryPromptQueue()


@pytest.fixture
def client(tmp_path, queue):
    app = create_app(make_settings(tmp_path), queue=queue)
    with TestClient(app) as test_client:
        yield test_client
