"""Seed and verify the privileged Teachify account"""

import logging
from datetime import datetime
from typing import Callable, Optional

from teachify_admin.config import Settings
from teachify_admin.dtos import AccountResponse, AccountStatus, SeedResult
from teachify_admin.exceptions import InvalidAccountInput
from teachify_admin.models.account import Account, Role
from teachify_admin.models.base import utcnow
from teachify_admin.mongo import open_database
from teachify_admin.repositories.account_repository import AccountRepository
from teachify_admin.security import DEFAULT_ROUNDS, hash_password

logger = logging.getLogger(__name__)


def _parse_role(role: str) -> Role:
    try:
        return Role(role.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(r.value for r in Role)
        raise InvalidAccountInput(
            f"Unknown role '{role}'. Expected one of: {allowed}"
        ) from exc


def ensure_privileged_account(
    repo: AccountRepository,
    email: str,
    name: str,
    password: str,
    role: str = Role.ADMIN.value,
    *,
    major_subject: Optional[str] = None,
    hasher: Callable[[str], str] = hash_password,
    clock: Callable[[], datetime] = utcnow,
) -> SeedResult:
    """
    Make sure an account exists for `email`, creating it if absent.

    An existing account is returned as-is: its name, role and password are
    not touched even if they differ from the arguments.
    """
    email = (email or "").strip()
    if not email:
        raise InvalidAccountInput("Email is required.")
    if not password or not password.strip():
        raise InvalidAccountInput("Password is required.")
    parsed_role = _parse_role(role)
    if parsed_role == Role.FACULTY and not major_subject:
        raise InvalidAccountInput("Faculty accounts need a major subject.")

    now = clock()
    account = Account(
        email=email,
        name=name,
        password_hash=hasher(password),
        role=parsed_role,
        major_subject=major_subject,
        created_at=now,
        updated_at=now,
    )

    stored, created = repo.insert_if_absent(account)
    if created:
        logger.info("Created %s account %s", parsed_role.value, email)
    else:
        logger.info("Account %s already exists, leaving it unchanged", email)
    return SeedResult(created=created, account=AccountResponse.from_entity(stored))


def report_account_status(repo: AccountRepository, email: str) -> AccountStatus:
    account = repo.find_by_email(email.strip())
    summaries = repo.list_summaries()
    logger.info(
        "Account %s %s; %d account(s) in store",
        email,
        "exists" if account else "not found",
        len(summaries),
    )
    return AccountStatus(
        exists=account is not None,
        account=AccountResponse.from_entity(account) if account else None,
        all_accounts=summaries,
    )


def seed_account(
    settings: Settings,
    *,
    email: Optional[str] = None,
    name: Optional[str] = None,
    password: Optional[str] = None,
    role: Optional[str] = None,
    major_subject: Optional[str] = None,
    client_factory: Optional[Callable] = None,
) -> SeedResult:
    """Connect using `settings`, seed the account and close the connection."""
    uri = settings.require_mongo_uri()
    password = password or settings.require_admin_password()
    rounds = settings.BCRYPT_ROUNDS or DEFAULT_ROUNDS

    with open_database(uri, settings.MONGODB_DB_NAME, **_client_kwargs(settings, client_factory)) as db:
        repo = AccountRepository(db)
        repo.ensure_indexes()
        return ensure_privileged_account(
            repo,
            email or settings.ADMIN_EMAIL,
            name or settings.ADMIN_NAME,
            password,
            role or settings.ADMIN_ROLE,
            major_subject=major_subject,
            hasher=lambda plain: hash_password(plain, rounds=rounds),
        )


def verify_account(
    settings: Settings,
    email: Optional[str] = None,
    *,
    client_factory: Optional[Callable] = None,
) -> AccountStatus:
    """Connect using `settings` and report on `email` without writing."""
    uri = settings.require_mongo_uri()
    with open_database(uri, settings.MONGODB_DB_NAME, **_client_kwargs(settings, client_factory)) as db:
        return report_account_status(AccountRepository(db), email or settings.ADMIN_EMAIL)


def _client_kwargs(settings: Settings, client_factory: Optional[Callable]) -> dict:
    kwargs = {"serverSelectionTimeoutMS": settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS}
    if client_factory is not None:
        kwargs["client_factory"] = client_factory
    return kwargs
