"""
Domain layer for ghanalytics.

Contains pure domain objects with no I/O or side effects:
- Actor: A GitHub user that triggered events
- Repo: A repository events happened in
- Event: Something an actor did in a repository
- Commit: A commit carried by a push event

These objects are immutable and provide serialization methods
for structured output.
"""

from .actor import Actor
from .repo import Repo
from .event import Event, EventType
from .commit import Commit

__all__ = [
    'Actor',
    'Repo',
    'Event',
    'EventType',
    'Commit',
]
