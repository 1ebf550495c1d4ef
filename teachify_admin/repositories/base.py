"""Base repository providing common MongoDB CRUD helpers."""

from abc import ABC
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Generic, Iterator, Optional, Type, TypeVar, Union

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from teachify_admin.exceptions import StoreOperationFailed


class CollectionName(str, Enum):
    USERS = "users"


T = TypeVar("T", bound=BaseModel)


class BaseRepository(ABC, Generic[T]):
    """Base repository providing common CRUD operations for MongoDB collections."""

    def __init__(
        self,
        db: Database,
        collection_name: Union[CollectionName, str],
        model_class: Type[T],
    ):
        self.db = db
        self.collection_name: str = (
            collection_name.value
            if isinstance(collection_name, CollectionName)
            else collection_name
        )
        self.collection: Collection = db[self.collection_name]
        self.model_class = model_class

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as exc:
            raise StoreOperationFailed(
                f"Failed to {action} in '{self.collection_name}': {exc}"
            ) from exc

    def find_by_id(self, entity_id: Union[str, ObjectId]) -> Optional[T]:
        identifier = self._to_object_id(entity_id)
        if identifier is None:
            return None
        return self.find_one({"_id": identifier})

    def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        with self._store_errors("query"):
            doc = self.collection.find_one(query)
        return self._to_model(doc)

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[T]:
        if not doc:
            return None
        return self.model_class.model_validate(doc)

    def _to_object_id(
        self, entity_id: Union[str, ObjectId, None]
    ) -> Optional[ObjectId]:
        if entity_id is None:
            return None
        if isinstance(entity_id, ObjectId):
            return entity_id
        try:
            return ObjectId(entity_id)
        except (InvalidId, TypeError):
            return None
