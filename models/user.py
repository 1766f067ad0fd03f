"""
models/user.py
--------------
Domain model for application users (guests and property owners).
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class User:
    """
    Represents a registered user.

    Attributes:
        name: Display name.
        email: Login email, unique across users.
        password: Stored password hash. Never the plain-text password.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
