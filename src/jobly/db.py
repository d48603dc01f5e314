"""
Database connection and query utilities.

Provides a simple interface for executing queries with psycopg, returning
results as dictionaries.

Queries use PostgreSQL's native positional placeholders ($1, $2, ...), so
every cursor is a psycopg RawCursor: the statement text reaches the server
unchanged and the parameter list is bound by position.

For testing, use set_connection_override() to inject a connection
that will be used instead of creating new ones. This enables
transaction rollback between tests.
"""

from contextlib import contextmanager
from typing import Any, Sequence

import psycopg
from psycopg.rows import dict_row

from jobly.config import config

# =============================================================================
# Connection Override (for testing)
# =============================================================================

_connection_override: psycopg.Connection | None = None


def set_connection_override(conn: psycopg.Connection) -> None:
    """
    Set a connection to use instead of creating new ones.

    Used by test fixtures to ensure all database operations run
    within a single transaction that can be rolled back.

    Args:
        conn: The connection to use for all subsequent operations
    """
    global _connection_override
    _connection_override = conn


def clear_connection_override() -> None:
    """Clear the connection override, restoring normal behavior."""
    global _connection_override
    _connection_override = None


# =============================================================================
# Connection Management
# =============================================================================


@contextmanager
def get_connection():
    """
    Context manager for database connections.

    In normal operation:
        - Opens a new connection
        - Commits on successful exit
        - Rolls back on exception
        - Closes connection when done

    With override set (testing):
        - Returns the override connection
        - Does NOT commit, rollback, or close
        - Caller (test fixture) manages the transaction
    """
    if _connection_override is not None:
        yield _connection_override
        return

    conn = psycopg.connect(config.database_url)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def get_cursor():
    """
    Context manager for a $N-placeholder cursor with dict rows.

    Usage:
        with get_cursor() as cur:
            cur.execute("SELECT * FROM companies WHERE handle = $1", ["c1"])
            rows = cur.fetchall()  # List of dicts
    """
    with get_connection() as conn:
        with psycopg.RawCursor(conn, row_factory=dict_row) as cur:
            yield cur


# =============================================================================
# Query Helpers
# =============================================================================


def execute(query: str, params: Sequence[Any] = None) -> int:
    """
    Execute a query without returning results.

    Args:
        query: SQL query with $N placeholders
        params: Ordered parameter values; the Nth value binds $N

    Returns:
        Number of rows affected
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.rowcount


def fetch_one(query: str, params: Sequence[Any] = None) -> dict[str, Any] | None:
    """
    Execute a query and return a single row as dict.

    Args:
        query: SQL query with $N placeholders
        params: Ordered parameter values

    Returns:
        Dict of column names to values, or None if no row found
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchone()


def fetch_all(query: str, params: Sequence[Any] = None) -> list[dict[str, Any]]:
    """
    Execute a query and return all rows as list of dicts.

    Args:
        query: SQL query with $N placeholders
        params: Ordered parameter values

    Returns:
        List of dicts, empty list if no rows found
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchall()
