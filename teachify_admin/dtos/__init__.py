from .account import AccountResponse, AccountStatus, AccountSummary, SeedResult

__all__ = [
    "AccountResponse",
    "AccountStatus",
    "AccountSummary",
    "SeedResult",
]
