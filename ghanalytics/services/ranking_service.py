"""
Ranking service for ghanalytics.

Ranks actors or repositories by how many qualifying events they have:

1. resolve sort criteria to the qualifying event types
2. pull matching events from the store and count them per key
3. order keys by count (descending), ties by ascending id
4. resolve keys to entities and cut the list at the limit

Every call works on fresh data structures; nothing is cached between
calls, and store errors propagate unchanged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import (
    Callable, Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar, Union,
)
import logging

from ..criteria import SortCriterion, resolve as resolve_criteria
from ..domain import Actor, Event, EventType, Repo
from ..grouping import group_by
from ..infra import EntityStore

logger = logging.getLogger(__name__)

E = TypeVar('E')


class Dimension(Enum):
    """What a ranking groups events by."""

    USERS = "users"
    REPOS = "repos"

    def key_of(self, event: Event) -> int:
        """Extract this dimension's key from an event."""
        if self is Dimension.USERS:
            return event.actor_id
        return event.repo_id


def _as_tuple(values, member_type) -> tuple:
    """Turn a lone string or enum member into a one-item tuple."""
    if isinstance(values, (str, member_type)):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class RankingOptions:
    """
    Immutable configuration for a single ranking call.

    Attributes:
        criteria: Sort criteria selecting qualifying events
        event_types: Extra raw event types that qualify as-is
        limit: Maximum number of entities to return
    """

    criteria: Tuple[Union[SortCriterion, str], ...] = ()
    event_types: Tuple[Union[EventType, str], ...] = ()
    limit: int = 10

    def __post_init__(self):
        if self.limit < 0:
            raise ValueError(f"limit must be non-negative, got {self.limit}")
        # Accept lists or a single value but keep the value hashable
        object.__setattr__(self, 'criteria', _as_tuple(self.criteria, SortCriterion))
        object.__setattr__(self, 'event_types', _as_tuple(self.event_types, EventType))

    def qualifying_types(self):
        return resolve_criteria(self.criteria, self.event_types)


@dataclass(frozen=True)
class RankedCount:
    """Activity count for one dimension key."""

    key: int
    count: int


@dataclass(frozen=True)
class RankedEntry:
    """A ranked entity together with its activity count."""

    entity: Union[Actor, Repo]
    count: int

    def to_dict(self) -> Dict:
        data = self.entity.to_dict()
        data['events'] = self.count
        return data


def aggregate(
    events: Iterable[Event],
    qualifying_types: Iterable[str],
    key_of: Callable[[Event], int],
) -> Dict[int, int]:
    """
    Count qualifying events per key.

    An empty set of qualifying types matches nothing.

    Args:
        events: Events to count
        qualifying_types: Event types that count
        key_of: Extracts the grouping key (actor id or repo id)

    Returns:
        Mapping from key to number of qualifying events
    """
    qualifying = frozenset(qualifying_types)
    if not qualifying:
        return {}

    groups = group_by((e for e in events if e.type in qualifying), key_of)
    return {key: len(group) for key, group in groups.items()}


def ranked_counts(counts: Mapping[int, int]) -> List[RankedCount]:
    """
    Order counts by count descending, ties by ascending key.

    Keys are sorted first so the order never depends on how the mapping
    was built; the stable count sort then keeps ascending keys within a tie.
    """
    ordered = [RankedCount(key=k, count=counts[k]) for k in sorted(counts)]
    ordered.sort(key=lambda rc: rc.count, reverse=True)
    return ordered


def rank(
    counts: Mapping[int, int],
    limit: int,
    resolve: Callable[[int], Optional[E]],
) -> List[E]:
    """
    Rank keys by count and resolve them to entities.

    Keys that do not resolve are skipped, so the result can be shorter
    than ``limit``. A limit larger than the number of resolved entities
    returns all of them.

    Args:
        counts: Activity count per key
        limit: Maximum number of entities to return
        resolve: Returns the entity for a key, or None

    Returns:
        At most ``limit`` entities, most active first
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    entities = []
    for ranked in ranked_counts(counts):
        entity = resolve(ranked.key)
        if entity is None:
            logger.debug(f"No entity found for id {ranked.key}, skipping")
            continue
        entities.append(entity)

    return entities[:min(limit, len(entities))]


def _index_by_id(entities: Iterable[E]) -> Dict[int, E]:
    """Index entities by id, keeping the first entity seen for an id."""
    index: Dict[int, E] = {}
    for entity in entities:
        index.setdefault(entity.id, entity)
    return index


class RankingService:
    """
    Service ranking actors and repositories over an entity store.

    Example:
        service = RankingService(CsvStore.from_directory("data"))
        options = RankingOptions(
            criteria=(SortCriterion.COMMITS_PUSHED, SortCriterion.PR_CREATED),
            limit=10,
        )
        for actor in service.top_users(options):
            print(actor.username)
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def count_events(self, dimension: Dimension, options: RankingOptions) -> Dict[int, int]:
        """Count qualifying events per key of ``dimension``."""
        qualifying = options.qualifying_types()
        if not qualifying:
            logger.debug("No qualifying event types, nothing to rank")
            return {}

        events = self.store.query_events(lambda e: e.type in qualifying)
        return aggregate(events, qualifying, dimension.key_of)

    def count_by_actor(self, options: RankingOptions) -> Dict[int, int]:
        return self.count_events(Dimension.USERS, options)

    def count_by_repo(self, options: RankingOptions) -> Dict[int, int]:
        return self.count_events(Dimension.REPOS, options)

    def top_users(self, options: RankingOptions) -> List[Actor]:
        """Most active actors, at most ``options.limit`` of them."""
        return [entry.entity for entry in self.leaderboard(Dimension.USERS, options)]

    def top_repos(self, options: RankingOptions) -> List[Repo]:
        """Most active repositories, at most ``options.limit`` of them."""
        return [entry.entity for entry in self.leaderboard(Dimension.REPOS, options)]

    def leaderboard(self, dimension: Dimension, options: RankingOptions) -> List[RankedEntry]:
        """
        Rank entities of ``dimension`` and pair each with its count.

        Args:
            dimension: Rank users or repositories
            options: Criteria, raw event types and limit

        Returns:
            Ranked entries, most active first
        """
        counts = self.count_events(dimension, options)
        if not counts:
            return []

        index = self._fetch_entities(dimension, counts)
        logger.debug(
            f"Ranking {len(counts)} {dimension.value} "
            f"({len(index)} resolvable, limit {options.limit})"
        )

        def resolve_entry(key: int) -> Optional[RankedEntry]:
            entity = index.get(key)
            if entity is None:
                return None
            return RankedEntry(entity=entity, count=counts[key])

        return rank(counts, options.limit, resolve_entry)

    def _fetch_entities(self, dimension: Dimension, counts: Mapping[int, int]) -> Dict[int, Union[Actor, Repo]]:
        if dimension is Dimension.USERS:
            return _index_by_id(self.store.query_actors(lambda a: a.id in counts))
        return _index_by_id(self.store.query_repos(lambda r: r.id in counts))
