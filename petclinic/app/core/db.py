"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits on success
(``get_cursor``) and the schema bootstrap (``init_db``) used by the
relational storage profile.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional

from .config import resolve_path, settings


logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS pet_types (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT
        );

        CREATE TABLE IF NOT EXISTS specialties (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            description TEXT
        );

        CREATE TABLE IF NOT EXISTS owners (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT,
            last_name TEXT,
            address TEXT,
            city TEXT,
            telephone TEXT
        );

        CREATE TABLE IF NOT EXISTS pets (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            birth_date DATE,
            type_id INTEGER,
            owner_id INTEGER,
            FOREIGN KEY(type_id) REFERENCES pet_types(id),
            FOREIGN KEY(owner_id) REFERENCES owners(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS visits (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            date DATE,
            description TEXT,
            pet_id INTEGER NOT NULL,
            FOREIGN KEY(pet_id) REFERENCES pets(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS vets (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT,
            last_name TEXT
        );

        CREATE TABLE IF NOT EXISTS vet_specialties (
            vet_id INTEGER NOT NULL,
            specialty_id INTEGER NOT NULL,
            PRIMARY KEY (vet_id, specialty_id),
            FOREIGN KEY(vet_id) REFERENCES vets(id) ON DELETE CASCADE,
            FOREIGN KEY(specialty_id) REFERENCES specialties(id) ON DELETE CASCADE
        );
        """,
    ),
    # Migration 2: lookup indices used by the owner search and aggregate loading
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_owners_last_name ON owners(last_name);
        CREATE INDEX IF NOT EXISTS idx_pets_owner_id ON pets(owner_id);
        CREATE INDEX IF NOT EXISTS idx_visits_pet_id ON visits(pet_id);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL (``settings.database_url`` by default) is an absolute
    path, use it directly.  Otherwise resolve it relative to the
    project root.
    """
    return str(resolve_path(database_url or settings.database_url))


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects and foreign key
    enforcement is switched on for the lifetime of the connection, so
    deleting an owner also removes its pets and their visits.
    """
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor inside a single transaction.

    Changes are committed when the block exits normally.  If the block
    raises, the connection is closed without committing and the error
    propagates to the caller.
    """
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_url: Optional[str] = None) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with get_cursor(database_url) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying database migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
