"""
User entities.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class User:
    """
    User aggregate.

    Attributes:
        id: Store-assigned identifier
        email: Unique email address
        login: Unique login, without whitespace
        name: Display name (defaults to login when blank)
        birthday: Birth date, not in the future
        friends: Ids of the users this user points to as friends.
            Only filled by find_by_id; lists of users leave it empty.
    """

    id: Optional[int] = None
    email: str = ""
    login: str = ""
    name: Optional[str] = None
    birthday: Optional[date] = None
    friends: set[int] = field(default_factory=set)


@dataclass
class UserUpdate:
    """Partial update of a user: None means "keep the stored value"."""

    id: int
    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None
