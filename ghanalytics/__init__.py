"""
ghanalytics - Rank GitHub users and repositories by event activity.

ghanalytics reads a GitHub event export and answers "who (or what) was
most active?" for a chosen kind of activity.

Quick Start:
    from ghanalytics import CsvStore, RankingService, RankingOptions, SortCriterion

    store = CsvStore.from_directory("data")
    service = RankingService(store)

    # Top 10 users by commits pushed and PRs created
    options = RankingOptions(
        criteria=(SortCriterion.COMMITS_PUSHED, SortCriterion.PR_CREATED),
        limit=10,
    )
    for actor in service.top_users(options):
        print(actor.id, actor.username)

    # Top repositories by an event type without a named criterion
    options = RankingOptions(event_types=("ForkEvent",), limit=5)
    for repo in service.top_repos(options):
        print(repo.name)

Domain Objects:
    Actor, Repo, Event, Commit - records from the export
    EventType - well-known GitHub event types

Ranking:
    SortCriterion - named activity criteria
    resolve - criteria to qualifying event types
    aggregate, rank - counting and ordering primitives
    RankingService - top users / top repositories over a store
"""

__version__ = "0.1.0"

# Domain objects
from .domain import Actor, Repo, Event, EventType, Commit

# Criteria
from .criteria import SortCriterion, resolve

# Grouping
from .grouping import group_by

# Store
from .infra import EntityStore, CsvStore

# Services
from .services import (
    Dimension,
    RankedCount,
    RankedEntry,
    RankingOptions,
    RankingService,
    aggregate,
    rank,
    ranked_counts,
)

# Configuration
from .config import load_config

__all__ = [
    "__version__",
    # Domain objects
    "Actor",
    "Repo",
    "Event",
    "EventType",
    "Commit",
    # Criteria
    "SortCriterion",
    "resolve",
    "group_by",
    # Store
    "EntityStore",
    "CsvStore",
    # Services
    "Dimension",
    "RankedCount",
    "RankedEntry",
    "RankingOptions",
    "RankingService",
    "aggregate",
    "rank",
    "ranked_counts",
    # Configuration
    "load_config",
]
