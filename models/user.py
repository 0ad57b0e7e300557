"""User model for record ownership."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """A registered user. Every other record is owned by exactly one user.

    Attributes:
        id: Unique identifier (auto-generated).
        name: Login name (unique).
        created_at: When the user was registered.
    """

    id: int
    name: str
    created_at: datetime
