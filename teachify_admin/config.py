"""Settings for the Teachify admin tooling, loaded from the environment and .env."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from teachify_admin.exceptions import ConfigMissing

_DEFAULT_URI_OPTIONS = "retryWrites=true&w=majority"
_CREDENTIALS_RE = re.compile(r"//[^/@]*@")


class Settings(BaseSettings):

    # Database (MongoDB)
    MONGODB_URI: Optional[str] = None
    MONGODB_DB_NAME: str = "teachify"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 30000

    # Privileged account seeded by `teachify-admin seed`
    ADMIN_EMAIL: str = "admin@teachify.com"
    ADMIN_NAME: str = "Admin User"
    ADMIN_ROLE: str = "admin"
    ADMIN_PASSWORD: Optional[str] = None

    # Security
    BCRYPT_ROUNDS: int = 10

    # Deployment checks
    BACKEND_URL: str = "http://localhost:5000"
    HEALTH_TIMEOUT_SECONDS: float = 10.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    def require_mongo_uri(self) -> str:
        if not self.MONGODB_URI or not self.MONGODB_URI.strip():
            raise ConfigMissing(
                "MONGODB_URI is not set. Export it or add it to .env "
                "(e.g. mongodb://localhost:27017/teachify)."
            )
        return normalize_mongo_uri(self.MONGODB_URI, self.MONGODB_DB_NAME)

    def require_admin_password(self) -> str:
        if not self.ADMIN_PASSWORD:
            raise ConfigMissing("ADMIN_PASSWORD is not set.")
        return self.ADMIN_PASSWORD


def normalize_mongo_uri(uri: str, db_name: str) -> str:
    """
    Fill in the parts the Express server expects to find in the URI:
    a database path and the retryable write options.
    """
    normalized = uri.strip()
    scheme, sep, rest = normalized.partition("://")
    if sep and "/" not in rest:
        host_part, qmark, query = rest.partition("?")
        normalized = f"{scheme}://{host_part}/{qmark}{query}"

    if normalized.endswith("/"):
        normalized += db_name

    if "?" not in normalized:
        normalized += "?" + _DEFAULT_URI_OPTIONS
    elif "retryWrites" not in normalized:
        normalized += "&" + _DEFAULT_URI_OPTIONS
    return normalized


def mask_uri(uri: str) -> str:
    """Hide user:password in a connection string before it is logged."""
    return _CREDENTIALS_RE.sub("//***:***@", uri)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
