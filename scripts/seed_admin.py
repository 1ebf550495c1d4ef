#!/usr/bin/env python3
"""
Create the Teachify admin account if it does not exist.

Reads MONGODB_URI, ADMIN_EMAIL, ADMIN_NAME and ADMIN_PASSWORD from the
environment or .env.

Usage:
    python scripts/seed_admin.py
"""
from teachify_admin.cli import main


if __name__ == "__main__":
    main(["seed"])
