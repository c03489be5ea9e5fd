"""Shared test fixtures for the practice server."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from practice_server.app import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    """A TestClient with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
