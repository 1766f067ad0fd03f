"""
Tests for PooledExecutor against a mocked psycopg2 connection.
"""

import logging
from unittest.mock import MagicMock

import psycopg2
import pytest

from db import connection
from db.connection import PooledExecutor, QueryResult
from repositories.user_repo import UserRepository
from utils.exceptions import QueryExecutionError


@pytest.fixture
def fake_conn(monkeypatch):
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    released = []
    monkeypatch.setattr(connection, "get_connection", lambda: conn)
    monkeypatch.setattr(connection, "release_connection", released.append)
    conn.released = released
    conn.cur = cursor
    return conn


def test_select_returns_rows(fake_conn):
    fake_conn.cur.description = [("id",), ("name",)]
    fake_conn.cur.fetchall.return_value = [{"id": 1, "name": "Ann"}]
    fake_conn.cur.rowcount = 1

    result = PooledExecutor().execute("SELECT * FROM users WHERE id = %s;", [1])

    assert result == QueryResult(rows=[{"id": 1, "name": "Ann"}], rowcount=1)
    fake_conn.cur.execute.assert_called_once_with("SELECT * FROM users WHERE id = %s;", (1,))
    fake_conn.commit.assert_called_once()
    assert fake_conn.released == [fake_conn]


def test_statement_without_result_set(fake_conn):
    fake_conn.cur.description = None
    fake_conn.cur.rowcount = 0

    result = PooledExecutor().execute("CREATE INDEX IF NOT EXISTS i ON t(c);")

    assert result.rows == []
    fake_conn.cur.fetchall.assert_not_called()


def test_failure_rolls_back_and_releases(fake_conn):
    fake_conn.cur.execute.side_effect = psycopg2.OperationalError("server gone")

    with pytest.raises(psycopg2.OperationalError):
        PooledExecutor().execute("SELECT 1;")

    fake_conn.rollback.assert_called_once()
    fake_conn.commit.assert_not_called()
    assert fake_conn.released == [fake_conn]


def test_get_connection_requires_pool(monkeypatch):
    monkeypatch.setattr(connection, "_pool", None)

    with pytest.raises(RuntimeError):
        connection.get_connection()


def test_failure_is_left_to_callers_to_log(fake_conn, caplog):
    fake_conn.cur.execute.side_effect = psycopg2.OperationalError("server gone")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(psycopg2.OperationalError):
            PooledExecutor().execute("SELECT 1;")

    assert [r for r in caplog.records if r.name == "db.connection"] == []


def test_repository_failure_logged_once(fake_conn, caplog):
    fake_conn.cur.execute.side_effect = psycopg2.OperationalError("server gone")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(QueryExecutionError):
            UserRepository(PooledExecutor()).get_by_id(1)

    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1


def test_init_pool_opens_threaded_pool_once(monkeypatch):
    threaded = MagicMock()
    monkeypatch.setattr(connection, "_pool", None)
    monkeypatch.setattr(connection.pool, "ThreadedConnectionPool", threaded)

    connection.init_pool(2, 8)
    connection.init_pool(2, 8)

    threaded.assert_called_once_with(2, 8, connection.DATABASE_URL)
    assert connection._pool is threaded.return_value
