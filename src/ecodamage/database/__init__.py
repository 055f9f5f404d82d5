"""Database layer for ecodamage application."""

from ecodamage.database.base import Database
from ecodamage.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
