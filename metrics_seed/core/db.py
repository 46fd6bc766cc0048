"""
MongoDB client and database handle management.

Provides:
- Client creation from settings (get_client)
- Database handle lookup (get_database)
- Context manager yielding a database handle with cleanup (get_db)
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from pymongo import MongoClient
from pymongo.database import Database

from .config import settings


def get_client(uri: Optional[str] = None) -> MongoClient:
    """
    Create a MongoDB client.

    Args:
        uri: Connection string, defaults to the configured one

    Returns:
        MongoClient instance (connects lazily on first operation)
    """
    return MongoClient(
        uri or settings.mongo_uri,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
    )


def get_database(client: MongoClient, name: Optional[str] = None) -> Database:
    """Return the target database, defaulting to MONGO_DATABASE."""
    return client[name or settings.MONGO_DATABASE]


@contextmanager
def get_db(uri: Optional[str] = None, name: Optional[str] = None) -> Iterator[Database]:
    """
    Yield the target database and close the client afterwards.

    Usage:
        with get_db() as db:
            run_seed(db)
    """
    client = get_client(uri)
    try:
        yield get_database(client, name)
    finally:
        client.close()
