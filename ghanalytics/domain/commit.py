"""
Commit domain object for ghanalytics.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Commit:
    """
    A commit delivered by a push event.

    Identity is the sha.

    Attributes:
        sha: Commit hash
        message: Commit message
        event_id: Id of the PushEvent that carried the commit
    """

    sha: str
    message: str
    event_id: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sha': self.sha,
            'message': self.message,
            'event_id': self.event_id,
        }

    def __repr__(self) -> str:
        return f"Commit(sha={self.sha[:8]!r}, event_id={self.event_id!r})"
