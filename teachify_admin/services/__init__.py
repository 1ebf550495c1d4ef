from .account_service import (
    ensure_privileged_account,
    report_account_status,
    seed_account,
    verify_account,
)
from .env_template import write_env_template
from .health_probe import check_health

__all__ = [
    "ensure_privileged_account",
    "report_account_status",
    "seed_account",
    "verify_account",
    "write_env_template",
    "check_health",
]
