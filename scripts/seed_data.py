#!/usr/bin/env python3
"""
Database Seed Script

Recreates the schema and populates it with sample users and items.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Drops and recreates users, items, reviews and comments
3. Registers the sample users (passwords are hashed like any registration)
4. Creates the sample catalog items and prints them
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.orm import Session

from review_api.database import SessionLocal, reset_schema
from review_api.models import Item, User
from review_api.services.credentials import register_user
from review_api.services.items import create_item, list_items

SAMPLE_USERS = [
    ("moe", "m_pw"),
    ("lucy", "l_pw"),
    ("ethyl", "e_pw"),
    ("curly", "c_pw"),
]

SAMPLE_ITEMS = ["foo", "bar", "bazz", "quq", "fip"]


def create_users(db: Session) -> list[User]:
    """Register the sample users."""
    print("Creating users...")
    users = [register_user(db, username, password) for username, password in SAMPLE_USERS]
    print(f"Created {len(users)} users.")
    return users


def create_items(db: Session) -> list[Item]:
    """Create the sample catalog items."""
    print("Creating items...")
    items = [create_item(db, name, f"{name} description") for name in SAMPLE_ITEMS]
    print(f"Created {len(items)} items.")
    return items


def seed_database() -> None:
    """Reset the schema and load the sample data."""
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    reset_schema()
    print("Tables dropped and recreated.")

    db = SessionLocal()

    try:
        users = create_users(db)
        items = create_items(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nSummary:")
        print(f"  - Users: {len(users)}")
        print(f"  - Items: {len(items)}")
        print(f"\nCatalog:")
        for item in list_items(db):
            print(f"  {item.id}  {item.name}: {item.description}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
