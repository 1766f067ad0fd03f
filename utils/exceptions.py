"""
utils/exceptions.py
-------------------
Error types raised by the data-access layer.

A missing row is never an error: single-row reads return None and
listings return an empty list. Everything below means the call failed.
"""


class RepositoryError(Exception):
    """Base class for all data-access errors."""


class QueryExecutionError(RepositoryError):
    """The database rejected or failed to run a statement."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class InvalidSearchOptionError(RepositoryError, ValueError):
    """A property search option could not be coerced to its column type."""

    def __init__(self, option: str, value):
        self.option = option
        self.value = value
        super().__init__(f"Invalid value for '{option}': {value!r}")


class InvalidPropertyError(RepositoryError, ValueError):
    """A property record is missing required fields."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Property is missing required fields: {', '.join(missing)}")


class InvalidUserError(RepositoryError, ValueError):
    """A user record is missing required fields."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"User is missing required fields: {', '.join(missing)}")


class DuplicateEmailError(RepositoryError):
    """A user with this email address already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email {email} already exists")
