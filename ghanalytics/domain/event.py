"""
Event domain object for ghanalytics.

Events represent something an actor did in a repository, as exported
from the GitHub event timeline:
- PushEvent: Commits pushed to a branch
- PullRequestEvent: Pull request opened, closed, etc.
- WatchEvent: Repository starred
- (any other GitHub event type is kept as-is)

Events reference their actor and repository by id only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class EventType(Enum):
    """
    Well-known GitHub event types.

    The set is open: events carry their type as a plain string, so types
    not listed here still load and can be ranked through the raw
    event-type filter.
    """

    PUSH = "PushEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Event:
    """
    Immutable record of one GitHub event.

    Attributes:
        id: Event id (unique within an export)
        type: Event type string (e.g. "PushEvent")
        actor_id: Id of the actor that triggered the event
        repo_id: Id of the repository the event happened in
    """

    id: int
    type: str
    actor_id: int
    repo_id: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'type': self.type,
            'actor_id': self.actor_id,
            'repo_id': self.repo_id,
        }

    def __str__(self) -> str:
        return f"{self.type} by actor {self.actor_id} in repo {self.repo_id}"
