"""
Service layer for ghanalytics.

Contains the ranking logic that orchestrates domain objects and the
entity store:
- aggregate: Count qualifying events per actor or repository
- rank: Order counts and resolve them to entities
- RankingService: Top users and top repositories over a store

Services are the primary API for commands to use.
"""

from .ranking_service import (
    Dimension,
    RankedCount,
    RankedEntry,
    RankingOptions,
    RankingService,
    aggregate,
    rank,
    ranked_counts,
)

__all__ = [
    'Dimension',
    'RankedCount',
    'RankedEntry',
    'RankingOptions',
    'RankingService',
    'aggregate',
    'rank',
    'ranked_counts',
]
