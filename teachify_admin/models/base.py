from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer, WithJsonSchema


def validate_object_id(v: Any) -> Optional[ObjectId]:
    """Validate and convert to ObjectId for entity models."""
    if v is None:
        return None
    if isinstance(v, ObjectId):
        return v
    if isinstance(v, str):
        if not ObjectId.is_valid(v):
            raise ValueError(f"Invalid ObjectId: {v}")
        return ObjectId(v)
    raise ValueError(f"Invalid ObjectId: {v}")


# ObjectId in the database, plain string once serialized
PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(validate_object_id),
    PlainSerializer(lambda x: str(x), return_type=str, when_used="json"),
    WithJsonSchema({"type": "string"}, mode="serialization"),
]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseEntity(BaseModel):
    """Base entity with the fields Mongoose `timestamps: true` maintains"""

    id: Optional[PyObjectId] = Field(None, alias="_id")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True
        use_enum_values = True

    def to_mongo(self):
        """Convert to MongoDB document"""
        return self.model_dump(by_alias=True, exclude_none=True)

