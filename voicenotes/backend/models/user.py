"""
User Model.

Minimal user record. Only lookup and creation exist; there is no login flow.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """A registered user. `password` holds a bcrypt hash, never plain text."""

    id: int
    username: str
    password: str = field(repr=False)
