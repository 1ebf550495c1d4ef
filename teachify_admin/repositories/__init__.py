"""Repository exports for teachify_admin."""

from .account_repository import AccountRepository
from .base import BaseRepository, CollectionName

__all__ = [
    "AccountRepository",
    "BaseRepository",
    "CollectionName",
]
