import pytest

from fastapi.testclient import TestClient

from message_service.main import create_app
from message_service.schemas import Message
from message_service.storage import MessageStore


@pytest.fixture
def store():
    """Empty store for each test."""
    return MessageStore()


@pytest.fixture
def seeded_store():
    """Store pre-filled with two known records."""
    return MessageStore([
        Message(id="existing-id", content="Existing message", author="Test Author", time="2023-01-01T12:00:00Z"),
        Message(id="another-id", content="Another message", author="Another Author", time="2023-01-01T12:01:00Z"),
    ])


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(seeded_store):
    with TestClient(create_app(seeded_store)) as test_client:
        yield test_client
