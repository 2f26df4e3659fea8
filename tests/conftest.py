# tests/conftest.py
import os

import pytest

# Config is loaded at import time and refuses to start without a key
os.environ.setdefault("OPENAI_API_KEY", "test-key")

from fastapi.testclient import TestClient

from app.main import app
from app.lib.story_cache import InMemoryStoryCache
from tests.fakes import FakeStoryGenerator

@pytest.fixture
def story_cache():
    return InMemoryStoryCache()

@pytest.fixture
def fake_generator():
    return FakeStoryGenerator()

@pytest.fixture(autouse=True)
def app_state(story_cache, fake_generator):
    """
    Fresh cache and a fake generator on the app for every test,
    so nothing leaks between tests and nothing hits the network.
    """
    saved = (app.state.story_cache, app.state.story_generator, app.state.rng)
    app.state.story_cache = story_cache
    app.state.story_generator = fake_generator
    app.state.rng = None
    yield app.state
    app.state.story_cache, app.state.story_generator, app.state.rng = saved

@pytest.fixture
def client():
    return TestClient(app)
