"""
Database layer: engine, sessions and table models.
"""

from .database import Base, Database, get_db_session

__all__ = ["Base", "Database", "get_db_session"]
