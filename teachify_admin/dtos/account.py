from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from teachify_admin.models.account import Account, Role


class AccountSummary(BaseModel):
    email: str
    role: Optional[str] = None


class AccountResponse(BaseModel):
    """Account as shown to operators; the password hash is never included."""

    id: Optional[str] = None
    email: str
    name: str
    role: str
    is_approved: Optional[bool] = None
    is_blocked: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=str(account.id) if account.id else None,
            email=account.email,
            name=account.name,
            role=Role(account.role).value,
            is_approved=account.is_approved,
            is_blocked=account.is_blocked,
            created_at=account.created_at,
        )


class SeedResult(BaseModel):
    created: bool
    account: AccountResponse


class AccountStatus(BaseModel):
    exists: bool
    account: Optional[AccountResponse] = None
    all_accounts: List[AccountSummary] = Field(default_factory=list)
