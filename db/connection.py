"""
db/connection.py
----------------
Owns the LightBnB connection pool and PooledExecutor, the executor every
repository falls back to. The pool is a ThreadedConnectionPool because
web request threads borrow connections concurrently.
"""

from dataclasses import dataclass, field
from typing import Any, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Open the LightBnB pool against DATABASE_URL. A second call is a no-op.

    Args:
        min_conn: Connections opened up front (DB_POOL_MIN).
        max_conn: Upper bound on concurrently borrowed connections (DB_POOL_MAX).

    Raises:
        psycopg2.OperationalError: If the lightbnb database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info(f"LightBnB pool ready ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Could not reach the LightBnB database: {e}")
        raise


def get_connection():
    """
    Borrow a connection. Pair every call with release_connection().

    Raises:
        RuntimeError: If init_pool() has not run yet.
        psycopg2.pool.PoolError: If all max_conn connections are borrowed.
    """
    if _pool is None:
        raise RuntimeError("LightBnB pool is not open. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Hand a borrowed connection back; ignored once the pool is closed."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("LightBnB pool closed.")


@dataclass
class QueryResult:
    """Rows returned by a single statement, keyed by column name."""
    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0


class PooledExecutor:
    """
    Runs one statement per call on a connection borrowed from the pool.

    Each call is its own transaction: committed on success, rolled back
    on failure. Repositories receive an executor in their constructor,
    so tests can swap this class for an in-memory fake.
    """

    def execute(self, sql: str, params: Sequence = ()) -> QueryResult:
        conn = get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, tuple(params))
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
                rowcount = cur.rowcount
            conn.commit()
            return QueryResult(rows=rows, rowcount=rowcount)
        except psycopg2.Error:
            # Callers log with their own context.
            conn.rollback()
            raise
        finally:
            release_connection(conn)
