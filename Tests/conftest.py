"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import asyncio
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aclio_coach.config import reset_settings_cache
from aclio_coach.Models.goal import Goal, Step
from aclio_coach.Models.user_profile import Gender, UserProfile
from aclio_coach.Storage.local_storage import InMemoryStorage


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="aclio_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(isolated_temp_dir, monkeypatch):
    """Point every test at its own config file and drop cached settings."""
    config_path = isolated_temp_dir / "config.toml"
    monkeypatch.setenv("ACLIO_CONFIG_PATH", str(config_path))
    monkeypatch.delenv("ACLIO_API_BASE_URL", raising=False)
    monkeypatch.delenv("ACLIO_LOG_LEVEL", raising=False)
    reset_settings_cache()
    yield config_path
    reset_settings_cache()


# ========== Model Fixtures ==========

@pytest.fixture
def sample_goal():
    return Goal(
        id=7,
        name="Run a marathon",
        category="Fitness",
        steps=[
            Step(id=1, title="Buy running shoes"),
            Step(id=2, title="Run 5k"),
            Step(id=3, title="Run 10k"),
            Step(id=4, title="Run a half marathon"),
        ],
        completed_steps=[1],
    )


@pytest.fixture
def sample_profile():
    return UserProfile(name="Sam", age="29", gender=Gender.OTHER)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def onboarded_storage(sample_profile):
    store = InMemoryStorage()
    store.save_profile(sample_profile)
    store.complete_onboarding()
    return store


# ========== Mock Fixtures ==========

class FakeStreamClient:
    """
    Scripted stand-in for the chat backend.

    Delivers ``chunks`` in order, then raises ``error`` if one is set. When
    ``pause_after`` is given the stream waits on ``resume`` after delivering
    that many chunks, so a test can act while the reply is half written.
    """

    def __init__(self, chunks=None, error: Optional[BaseException] = None, pause_after: Optional[int] = None):
        self.chunks: List[str] = list(chunks or [])
        self.error = error
        self.pause_after = pause_after
        self.paused = asyncio.Event()
        self.resume = asyncio.Event()
        self.calls: List[Dict] = []

    async def stream_chat(self, message, goal, history, profile, on_chunk):
        self.calls.append({
            "message": message,
            "goal": goal,
            "history": [dict(entry) for entry in history],
            "profile": profile,
        })
        for index, chunk in enumerate(self.chunks):
            if self.pause_after is not None and index == self.pause_after:
                self.paused.set()
                await self.resume.wait()
            on_chunk(chunk)
            await asyncio.sleep(0)
        if self.pause_after is not None and self.pause_after >= len(self.chunks):
            self.paused.set()
            await self.resume.wait()
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_client_factory():
    return FakeStreamClient


@pytest.fixture
def fake_client():
    return FakeStreamClient(chunks=["Sure", ", let's", " start."])
