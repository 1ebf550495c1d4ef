"""Account entity - a document in the `users` collection shared with the Express API"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from .base import BaseEntity


class Role(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"
    FACULTY = "faculty"


class Account(BaseEntity):
    email: str
    name: str
    password_hash: str = Field(alias="password")
    role: Role = Role.STUDENT
    major_subject: Optional[str] = Field(None, alias="majorSubject")
    is_approved: Optional[bool] = Field(None, alias="isApproved")
    is_blocked: bool = Field(False, alias="isBlocked")

    @field_validator("email", "name")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def default_approval(self) -> "Account":
        # Admins are approved on creation, everyone else waits for an admin
        if self.is_approved is None:
            self.is_approved = self.role == Role.ADMIN
        return self
