"""Database entity models - represents the actual structure stored in MongoDB"""

from .base import BaseEntity, PyObjectId
from .account import Account, Role

__all__ = [
    "BaseEntity",
    "PyObjectId",
    "Account",
    "Role",
]
