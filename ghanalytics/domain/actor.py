"""
Actor domain object for ghanalytics.

An actor is the GitHub user who triggered an event.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Actor:
    """
    Immutable GitHub user record.

    Identity is the numeric id; the username is display data only.

    Attributes:
        id: GitHub user id
        username: GitHub login
    """

    id: int
    username: str

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        return self.username

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'username': self.username,
        }

    def __str__(self) -> str:
        return self.username
