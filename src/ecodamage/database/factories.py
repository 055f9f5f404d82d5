"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ecodamage.database.sqlalchemy_db import SQLAlchemyDatabase

DEFAULT_DATA_DIR = ".ecodamage"
DEFAULT_DB_NAME = "ecodamage.db"


def default_database_path() -> str:
    """Return ~/.ecodamage/ecodamage.db, creating the directory if needed."""
    db_dir = Path.home() / DEFAULT_DATA_DIR
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / DEFAULT_DB_NAME)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks ECODAMAGE_DB_PATH
            environment variable, then defaults to ~/.ecodamage/ecodamage.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("ECODAMAGE_DB_PATH") or default_database_path()
    return SQLAlchemyDatabase(f"sqlite:///{database_path}")


def create_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create the configured database instance.

    An explicit SQLite path wins. Otherwise ECODAMAGE_DATABASE_URL selects any
    SQLAlchemy URL (e.g. a PostgreSQL server), and without it the SQLite
    database from create_sqlite_database is used.

    Args:
        database_path: Optional SQLite file path

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_path is None:
        database_url = os.environ.get("ECODAMAGE_DATABASE_URL")
        if database_url:
            return SQLAlchemyDatabase(database_url)
    return create_sqlite_database(database_path)
