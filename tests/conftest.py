"""Pytest fixtures for Greeting Responder tests."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project root is in path for app imports
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def app():
    from app.main import app as fastapi_app

    return fastapi_app


@pytest.fixture
def client(app):
    """TestClient with lifespan events run on enter/exit."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def clean_env(monkeypatch):
    """Drop the env vars Settings reads so defaults apply."""
    for name in ("PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
