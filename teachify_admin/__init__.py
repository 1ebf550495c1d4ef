"""Operator tooling for the Teachify account store."""

from .config import Settings, get_settings
from .exceptions import (
    TeachifyAdminError,
    ConfigMissing,
    StoreUnavailable,
    StoreOperationFailed,
    InvalidAccountInput,
    HealthCheckFailed,
)
from .mongo import open_database
from .security import hash_password, verify_password

__all__ = [
    "Settings",
    "get_settings",
    "TeachifyAdminError",
    "ConfigMissing",
    "StoreUnavailable",
    "StoreOperationFailed",
    "InvalidAccountInput",
    "HealthCheckFailed",
    "open_database",
    "hash_password",
    "verify_password",
]
