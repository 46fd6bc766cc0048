"""
Shared pytest fixtures for the seed loader tests.
"""
import mongomock
import pytest

from metrics_seed.core.config import settings


@pytest.fixture
def client():
    """In-memory MongoDB client."""
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def db(client):
    """Empty target database."""
    return client[settings.MONGO_DATABASE]


def strip_ids(docs):
    return [{k: v for k, v in doc.items() if k != "_id"} for doc in docs]
