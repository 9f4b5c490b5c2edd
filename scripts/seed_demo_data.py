#!/usr/bin/env python3
"""Seed demo data.

Creates an administrator account, a regular demo user and a handful of feed
providers. Re-running replaces the demo feeds and resets both passwords.

Usage:
    ADMIN_EMAIL=admin@example.com python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from feedhub.config import get_settings
from feedhub.database import SessionLocal, init_db
from feedhub.models import FeedProvider
from feedhub.services.user_repository import UserRepository

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"
ADMIN_PASSWORD = "adminpass123"

PUBLIC_FEEDS = [
    ("Python Insider", "https://pythoninsider.blogspot.com/feeds/posts/default"),
    ("PyPI Recent Updates", "https://pypi.org/rss/updates.xml"),
]
PRIVATE_FEEDS = [
    ("Hacker News", "https://news.ycombinator.com/rss"),
]


def ensure_user(users: UserRepository, name: str, email: str, password: str):
    """Create the user, or reset the password of an existing one."""
    user = users.find_by_email(email)
    if user:
        print(f"User {email} exists, resetting password...")
        return users.set_password(user, password)
    print(f"Creating user {email}...")
    return users.create(name, email, password)


def seed_demo_data():
    """Seed the database with representative data."""
    settings = get_settings()
    if not settings.admin_email:
        raise SystemExit("ADMIN_EMAIL must be set to seed the administrator account")

    init_db()
    session = SessionLocal()
    users = UserRepository(session, admin_email=settings.admin_email)

    try:
        admin = ensure_user(users, "Administrator", settings.admin_email, ADMIN_PASSWORD)
        demo = ensure_user(users, "Demo User", DEMO_EMAIL, DEMO_PASSWORD)

        session.query(FeedProvider).filter(
            FeedProvider.owner_id.in_([admin.id, demo.id])
        ).delete(synchronize_session=False)

        print("Creating feed providers...")
        session.add_all(
            [
                FeedProvider(owner_id=admin.id, name=name, url=url, is_public=True)
                for name, url in PUBLIC_FEEDS
            ]
            + [FeedProvider(owner_id=demo.id, name=name, url=url) for name, url in PRIVATE_FEEDS]
        )

        session.commit()
        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
