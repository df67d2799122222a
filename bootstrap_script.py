"""Create the hotel access tables and confirm the repositories can read them.

Run ``python bootstrap_script.py`` against the project's Postgres database.
SQL files under ``migrations/`` are applied once each, in filename order,
then the script checks that every table the repositories query exists.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence
from urllib.parse import quote_plus

import psycopg
from psycopg import Connection

from config import get_settings
from Database.repositories import (
    ENROLLMENT_TABLE_NAME,
    HOTEL_TABLE_NAME,
    ROOMS_TABLE_NAME,
    SESSION_TABLE_NAME,
    TICKET_TABLE_NAME,
    TICKET_TYPE_TABLE_NAME,
)


LOGGER = logging.getLogger(__name__)
MIGRATIONS_DIR = Path(__file__).with_name("migrations")

# every table read while authenticating and checking hotel eligibility
REQUIRED_TABLES = (
    SESSION_TABLE_NAME,
    ENROLLMENT_TABLE_NAME,
    TICKET_TABLE_NAME,
    TICKET_TYPE_TABLE_NAME,
    HOTEL_TABLE_NAME,
    ROOMS_TABLE_NAME,
)
DSN_PARTS = ("user", "password", "host", "port", "dbname")


def load_configuration(database_url: Optional[str] = None) -> str:
    """Resolve the Postgres DSN holding the hotel access schema.

    Args:
        database_url: Explicit DSN; otherwise ``DATABASE_URL`` from the
            settings, otherwise one assembled from the ``DSN_PARTS``
            environment variables.

    Returns:
        A DSN accepted by psycopg.

    Raises:
        RuntimeError: If neither a DSN nor all the parts are available.
    """

    database_url = database_url or get_settings().database_url
    if not database_url:
        parts = {key: os.getenv(key) for key in DSN_PARTS}
        missing = [key for key, value in parts.items() if not value]
        if missing:
            raise RuntimeError(
                f"Set DATABASE_URL, or all of {', '.join(DSN_PARTS)} (missing: {', '.join(missing)})."
            )
        database_url = (
            f"postgresql://{quote_plus(parts['user'])}:{quote_plus(parts['password'])}"
            f"@{parts['host']}:{parts['port']}/{parts['dbname']}"
        )

    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql://", 1)
    return database_url


def discover_migrations(directory: Path) -> Sequence[Path]:
    return sorted(directory.glob("*.sql"), key=lambda path: path.name)


def apply_pending_migrations(connection: Connection[Any], migrations: Iterable[Path]) -> list[str]:
    """Apply each schema migration not yet recorded in ``schema_migrations``.

    Empty files are skipped without being recorded. Each migration runs in
    its own transaction.

    Returns:
        Filenames applied by this call.
    """

    connection.execute(
        "CREATE TABLE IF NOT EXISTS schema_migrations ("
        " migration_id TEXT PRIMARY KEY,"
        " applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW());"
    )
    applied = {row[0] for row in connection.execute("SELECT migration_id FROM schema_migrations;")}

    newly_applied: list[str] = []
    for migration in migrations:
        if migration.name in applied:
            LOGGER.debug("Migration %s already applied", migration.name)
            continue
        sql = migration.read_text(encoding="utf-8").strip()
        if not sql:
            LOGGER.info("Skipping empty migration %s", migration.name)
            continue

        LOGGER.info("Applying migration %s", migration.name)
        try:
            with connection.transaction():
                connection.execute(sql) # type: ignore
                connection.execute(
                    "INSERT INTO schema_migrations (migration_id) VALUES (%s) ON CONFLICT DO NOTHING;",
                    (migration.name,),
                )
        except psycopg.Error as exc:
            LOGGER.error("Failed to apply migration %s", migration.name)
            raise RuntimeError(f"Migration {migration.name} failed") from exc
        newly_applied.append(migration.name)
    return newly_applied


def missing_tables(connection: Connection[Any]) -> list[str]:
    """Return the required tables absent from the ``public`` schema."""

    rows = connection.execute(
        "SELECT table_name FROM information_schema.tables WHERE table_schema = 'public';"
    )
    present = {row[0] for row in rows}
    return [table for table in REQUIRED_TABLES if table not in present]


def main() -> None:
    """Migrate the database, then fail loudly if a repository table is missing."""

    logging.basicConfig(level=get_settings().log_level.upper(), format="%(levelname)s %(message)s")
    migrations = discover_migrations(MIGRATIONS_DIR)

    with psycopg.connect(load_configuration()) as connection:
        applied = apply_pending_migrations(connection, migrations)
        LOGGER.info("Applied migrations: %s", ", ".join(applied) or "none")

        missing = missing_tables(connection)
        if missing:
            raise RuntimeError(f"Hotel access tables missing after migration: {', '.join(missing)}")
        LOGGER.info("Hotel access schema ready (%d tables).", len(REQUIRED_TABLES))


if __name__ == "__main__":
    main()
