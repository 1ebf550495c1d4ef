#!/usr/bin/env python3
"""
Check whether the Teachify admin account exists and list every account.

Usage:
    python scripts/verify_admin.py
"""
from teachify_admin.cli import main


if __name__ == "__main__":
    main(["verify"])
