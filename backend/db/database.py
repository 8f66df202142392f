"""
MongoDB access for the API.

This module owns the process-wide `MongoClient`. It is created lazily on first
use and closed by the FastAPI lifespan (see `main.py`). Routers receive the
database through the `get_database` dependency so tests can swap it out.
"""

from collections.abc import Generator

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from core.config import settings
from . import cocktail_ingredient

_client: MongoClient | None = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
            tz_aware=True,
        )
    return _client


def close_client() -> None:
    global _client
    if _client is None:
        return None
    _client.close()
    _client = None


def get_db() -> Database:
    return get_client()[settings.mongodb_db]


def ensure_indexes(db: Database) -> None:
    # Join rows are looked up by either side for filtering and cascade deletes
    db[cocktail_ingredient.COLLECTION].create_index([("cocktailId", ASCENDING)])
    db[cocktail_ingredient.COLLECTION].create_index([("ingredientId", ASCENDING)])


def get_database() -> Generator[Database, None, None]:
    yield get_db()
