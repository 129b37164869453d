"""
Repository domain object for ghanalytics.

Repo is the repository an event happened in, as recorded in the event
export (``owner/name``). It carries no git state.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Repo:
    """
    Immutable repository record.

    Attributes:
        id: GitHub repository id
        name: Full repository name (owner/name)
    """

    id: int
    name: str

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'name': self.name,
        }

    def __str__(self) -> str:
        return self.name
