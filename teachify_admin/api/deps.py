from typing import Any, Callable

from pymongo import MongoClient


def get_client_factory() -> Callable[..., Any]:
    """Client constructor used by the database health route; overridden in tests."""
    return MongoClient
