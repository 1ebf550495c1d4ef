"""Repository for accounts in the shared `users` collection."""

import logging
from typing import List, Optional, Tuple

from pymongo.errors import DuplicateKeyError

from teachify_admin.dtos.account import AccountSummary
from teachify_admin.models.account import Account
from teachify_admin.repositories.base import BaseRepository, CollectionName

logger = logging.getLogger(__name__)


class AccountRepository(BaseRepository[Account]):
    def __init__(self, db):
        super().__init__(db, CollectionName.USERS, Account)

    def ensure_indexes(self) -> None:
        with self._store_errors("create the unique email index"):
            self.collection.create_index("email", unique=True)

    def find_by_email(self, email: str) -> Optional[Account]:
        return self.find_one({"email": email})

    def insert_if_absent(self, account: Account) -> Tuple[Account, bool]:
        """
        Insert `account` unless a document with the same email exists.

        Returns the stored account and whether this call created it. An
        existing document is returned untouched.
        """
        doc = account.to_mongo()
        doc.pop("_id", None)
        with self._store_errors("insert account"):
            try:
                result = self.collection.update_one(
                    {"email": account.email},
                    {"$setOnInsert": doc},
                    upsert=True,
                )
            except DuplicateKeyError:
                # Another writer created the same email between match and insert
                logger.warning("Concurrent insert detected for %s", account.email)
                result = None

        if result is None or result.upserted_id is None:
            return self.find_by_email(account.email), False
        return self.find_by_id(result.upserted_id), True

    def list_summaries(self) -> List[AccountSummary]:
        with self._store_errors("list accounts"):
            docs = list(self.collection.find({}, {"_id": 0, "email": 1, "role": 1}))
        return [AccountSummary.model_validate(doc) for doc in docs]


__all__ = ["AccountRepository"]
