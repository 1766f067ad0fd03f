"""
services/user_service.py
-------------------------
Business logic for signing users up and logging them in.
Owns password hashing so the repository only ever sees bcrypt hashes.
"""

from typing import Optional

import bcrypt

from models.user import User
from repositories.user_repo import UserRepository
from utils.exceptions import DuplicateEmailError
from utils.logger import get_logger

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    """Hash a plain-text password with a fresh bcrypt salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash (e.g. legacy seed data).
        return False


class UserService:
    """
    Handles registration and login.

    Workflow:
        1. Reject duplicate emails.
        2. Hash the password.
        3. Persist via the repository.
    """

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    def register(self, name: str, email: str, password: str) -> User:
        """
        Create a new user account.

        Raises:
            DuplicateEmailError: If the email is already registered.
            QueryExecutionError: If the insert fails.
        """
        if self.repo.get_by_email(email) is not None:
            logger.warning(f"Registration refused, email already in use: {email}")
            raise DuplicateEmailError(email)
        user = User(name=name, email=email, password=hash_password(password))
        return self.repo.add(user)

    def login(self, email: str, password: str) -> Optional[User]:
        """
        Authenticate a user.

        Returns:
            The User on success, None on unknown email or wrong password.
        """
        user = self.repo.get_by_email(email)
        if user is None or not verify_password(password, user.password):
            logger.info(f"Failed login attempt for {email}")
            return None
        return user
