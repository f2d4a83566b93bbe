#!/usr/bin/env python3
"""
Database management script for the DevBase API.
Creates or drops the tables described by the SQLAlchemy models.
"""

import asyncio
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from devbase.config import get_settings
from devbase.infrastructure.db.database import Database


async def create_tables():
    """Create every table that does not exist yet."""
    settings = get_settings()
    database = Database(settings.database_url_async, echo=settings.debug)
    try:
        print("Creating tables...")
        await database.create_all()
        print("Done.")
    finally:
        await database.dispose()


async def drop_tables():
    """Drop all tables - WARNING: This will drop all data!"""
    settings = get_settings()
    database = Database(settings.database_url_async, echo=settings.debug)
    try:
        print("Dropping tables...")
        await database.drop_all()
        print("Done.")
    finally:
        await database.dispose()


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create         - Create all tables")
        print("  drop           - Drop all tables (WARNING: drops all data)")
        return

    command_name = sys.argv[1]

    if command_name == "create":
        asyncio.run(create_tables())
    elif command_name == "drop":
        response = input("This will drop ALL data. Type 'yes' to continue: ")
        if response.lower() == 'yes':
            asyncio.run(drop_tables())
        else:
            print("Drop cancelled.")
    else:
        print(f"Unknown command: {command_name}")
        sys.exit(1)


if __name__ == "__main__":
    main()
