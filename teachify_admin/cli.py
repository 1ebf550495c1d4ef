#!/usr/bin/env python3
"""Operator commands for the Teachify account store.

Usage:
    teachify-admin seed
    teachify-admin verify
    teachify-admin check-health --url https://teachify.example.com
    teachify-admin init-env
"""
import functools
import logging
import sys

import click

from teachify_admin.config import get_settings
from teachify_admin.exceptions import TeachifyAdminError
from teachify_admin.logging import setup_logging
from teachify_admin.services import (
    check_health,
    seed_account,
    verify_account,
    write_env_template,
)

logger = logging.getLogger("teachify_admin.cli")


def fatal_errors(func):
    """Log a tooling error and exit 1 instead of printing a traceback."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except TeachifyAdminError as exc:
            logger.error("%s: %s", type(exc).__name__, exc)
            raise SystemExit(1)

    return wrapper


@click.group()
@click.option("--log-level", default=None, help="Overrides LOG_LEVEL.")
def main(log_level):
    """Teachify admin tooling."""
    # stdout carries the report, logs go to stderr
    setup_logging(log_level or get_settings().LOG_LEVEL, stream=sys.stderr)


@main.command()
@click.option("--email", default=None, help="Defaults to ADMIN_EMAIL.")
@click.option("--name", default=None, help="Defaults to ADMIN_NAME.")
@click.option("--role", default=None, help="admin, student or faculty. Defaults to ADMIN_ROLE.")
@click.option("--major-subject", default=None, help="Required for faculty accounts.")
@click.option(
    "--password",
    default=None,
    envvar="ADMIN_PASSWORD",
    help="Defaults to ADMIN_PASSWORD.",
)
@fatal_errors
def seed(email, name, role, major_subject, password):
    """Create the privileged account if it does not exist yet."""
    result = seed_account(
        get_settings(),
        email=email,
        name=name,
        password=password,
        role=role,
        major_subject=major_subject,
    )
    account = result.account
    if result.created:
        click.echo(f"Created {account.role} account {account.email}.")
    else:
        click.echo(f"Account {account.email} already exists ({account.role}); nothing changed.")


@main.command()
@click.option("--email", default=None, help="Defaults to ADMIN_EMAIL.")
@fatal_errors
def verify(email):
    """Report whether the privileged account exists and list all accounts."""
    status = verify_account(get_settings(), email)
    if status.exists:
        account = status.account
        click.echo(f"Account EXISTS: {account.email}")
        click.echo(f"  Name: {account.name}")
        click.echo(f"  Role: {account.role}")
    else:
        click.echo(f"Account {email or get_settings().ADMIN_EMAIL} NOT FOUND.")
        click.echo("Run `teachify-admin seed` to create it.")

    click.echo(f"\nTotal accounts in database: {len(status.all_accounts)}")
    for summary in status.all_accounts:
        click.echo(f"  - {summary.email} ({summary.role})")


@main.command("check-health")
@click.option("--url", default=None, help="Backend base URL. Defaults to BACKEND_URL.")
@fatal_errors
def check_health_command(url):
    """Call the backend health endpoint."""
    settings = get_settings()
    payload = check_health(url or settings.BACKEND_URL, timeout=settings.HEALTH_TIMEOUT_SECONDS)
    click.echo(f"Backend healthy: {payload.get('message', payload.get('status'))}")


@main.command("init-env")
@click.option("--path", "env_path", default=".env", show_default=True, type=click.Path())
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init_env(env_path, force):
    """Write a starter .env with a random JWT secret."""
    if write_env_template(env_path, overwrite=force):
        click.echo(f"Created {env_path}. Set ADMIN_PASSWORD before running `seed`.")
    else:
        click.echo(f"{env_path} already exists; use --force to replace it.")


@main.command()
@click.option("--host", default="0.0.0.0", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
def serve(host, port):
    """Run the health API."""
    import uvicorn

    uvicorn.run("teachify_admin.main:app", host=host, port=port)


if __name__ == "__main__":
    main()
