#!/usr/bin/env python3
"""
Create the admin and dispatcher logins.

    SEED_ADMIN_PASSWORD=... SEED_USER_PASSWORD=... python scripts/seed_users.py

Existing accounts are left alone. Exits 1 when a password variable is missing.
"""
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from app.auth.utils import get_password_hash
from app.database import SessionLocal, init_db
from app.models import User

logger = logging.getLogger(__name__)

ACCOUNTS = (
    ("admin@admin.com", "Administrator", "Admin", "SEED_ADMIN_PASSWORD"),
    ("dispatch@flixat.com", "Dispatcher", "User", "SEED_USER_PASSWORD"),
)


def seed_users(db, env=os.environ):
    """Add missing accounts; returns the password variables that were unset."""
    missing = []
    for email, full_name, role, password_env in ACCOUNTS:
        if db.query(User).filter(User.email == email).first():
            logger.info(f"{email} already exists")
            continue

        password = env.get(password_env)
        if not password:
            missing.append(password_env)
            continue

        db.add(User(
            full_name=full_name,
            email=email,
            role=role,
            password_hash=get_password_hash(password),
        ))
        logger.info(f"Created {role} {email}")

    db.commit()
    return missing


def main():
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    init_db()

    db = SessionLocal()
    try:
        missing = seed_users(db)
    finally:
        db.close()

    if missing:
        logger.error(f"Missing env vars: {', '.join(missing)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
