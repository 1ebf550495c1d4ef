"""MongoDB connection helpers for the admin commands."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from teachify_admin.config import mask_uri
from teachify_admin.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def open_database(
    uri: str,
    db_name: str,
    *,
    client_factory: Callable[..., Any] = MongoClient,
    **kwargs: Any,
) -> Iterator[Database]:
    """
    Connect, ping and yield a database handle.

    The client is closed exactly once however the block exits, including
    when the ping itself fails.
    """
    logger.info("Connecting to MongoDB at %s", mask_uri(uri))
    try:
        client = client_factory(uri, **kwargs)
    except PyMongoError as exc:
        raise StoreUnavailable(f"Could not create MongoDB client: {exc}") from exc

    try:
        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            raise StoreUnavailable(f"MongoDB is unreachable: {exc}") from exc
        logger.info("Connected to MongoDB database %s", db_name)
        yield client[db_name]
    finally:
        client.close()
        logger.info("MongoDB connection closed")
