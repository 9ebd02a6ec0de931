from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from debate_core import DebateStore
from tests.fakes import FakeGenerator


@pytest.fixture(autouse=True)
def _safety_rewrite_off(monkeypatch):
    monkeypatch.delenv("SAFETY_REWRITE", raising=False)
    monkeypatch.delenv("MAX_TOKENS_PER_TURN", raising=False)


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def store() -> DebateStore:
    return DebateStore()


@pytest.fixture
def client(store, fake_generator):
    from api_server.main import app
    from api_server.middleware.rate_limit import limiter
    from api_server.routes import debate as debate_routes

    app.dependency_overrides[debate_routes.get_store] = lambda: store
    app.dependency_overrides[debate_routes.get_generator_factory] = lambda: (lambda: fake_generator)
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True
