"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Any, Mapping, Optional, Union

import psycopg2

from db.connection import PooledExecutor
from models.user import User
from utils.exceptions import InvalidUserError, QueryExecutionError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for create and read operations on the users table."""

    def __init__(self, executor=None):
        self.executor = executor or PooledExecutor()

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: Union[User, Mapping[str, Any]]) -> User:
        """
        Insert a new user.

        The password is stored exactly as given; callers hash it first
        (see UserService.register).

        Args:
            user: A User, or a mapping with 'name', 'email' and 'password'.

        Returns:
            The stored User with its generated `id`.

        Raises:
            InvalidUserError: If a required field is missing.
            QueryExecutionError: If the insert fails.
        """
        if not isinstance(user, User):
            missing = [name for name in ("name", "email", "password") if user.get(name) is None]
            if missing:
                raise InvalidUserError(missing)
            user = User(name=user["name"], email=user["email"], password=user["password"])
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        try:
            result = self.executor.execute(sql, (user.name, user.email, user.password))
        except psycopg2.Error as e:
            logger.error(f"Failed to add user {user.email}: {e}")
            raise QueryExecutionError("add user", e) from e
        created = User.from_row(result.rows[0])
        logger.info(f"Added user #{created.id} ({created.email})")
        return created

    # ── READ ──────────────────────────────────────────────

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by exact email match.

        Returns:
            A User or None if no user has this email.
        """
        sql = "SELECT * FROM users WHERE email = %s LIMIT 1;"
        try:
            result = self.executor.execute(sql, (email,))
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch user by email: {e}")
            raise QueryExecutionError("get user by email", e) from e
        return User.from_row(result.rows[0]) if result.rows else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by primary key.

        Returns:
            A User or None if not found.
        """
        sql = "SELECT * FROM users WHERE id = %s LIMIT 1;"
        try:
            result = self.executor.execute(sql, (user_id,))
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch user #{user_id}: {e}")
            raise QueryExecutionError("get user by id", e) from e
        return User.from_row(result.rows[0]) if result.rows else None
