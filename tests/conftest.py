"""
Pytest fixtures for Domain Assessor tests. Each test gets a fresh in-memory store.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def store():
    """Fresh AssessmentStore with overall-risk recomputation off (the default)."""
    from domain_assessor.analysis_engine.store import AssessmentStore

    return AssessmentStore()


@pytest.fixture
def client(store):
    """FastAPI TestClient bound to the store fixture, so tests can inspect the store directly."""
    from fastapi.testclient import TestClient

    from domain_assessor.api_server.server import create_app

    with TestClient(create_app(store)) as test_client:
        yield test_client
