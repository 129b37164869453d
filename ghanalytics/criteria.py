"""
Sort criteria for activity rankings.

A sort criterion names what kind of activity a ranking counts
("commits pushed", "PRs created"). Each criterion qualifies exactly one
event type. Callers that need an event type without a named criterion
pass it explicitly through ``event_types`` instead.
"""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional, Union
import logging

from .domain import EventType

logger = logging.getLogger(__name__)


class SortCriterion(Enum):
    """Named ranking bases."""

    COMMITS_PUSHED = "commitsPushed"
    PR_CREATED = "prCreated"
    WATCH_ACTIVITY = "watchActivity"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union['SortCriterion', str]) -> Optional['SortCriterion']:
        """
        Look up a criterion by member, value or member name.

        Returns None for anything unrecognized.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for criterion in cls:
            if value == criterion.value or value.upper() == criterion.name:
                return criterion
        return None


CRITERION_EVENT_TYPES: Dict[SortCriterion, EventType] = {
    SortCriterion.COMMITS_PUSHED: EventType.PUSH,
    SortCriterion.PR_CREATED: EventType.PULL_REQUEST,
    SortCriterion.WATCH_ACTIVITY: EventType.WATCH,
}

ALL_CRITERIA = [c.value for c in SortCriterion]


def resolve(
    criteria: Iterable[Union[SortCriterion, str]],
    event_types: Iterable[Union[EventType, str]] = (),
) -> FrozenSet[str]:
    """
    Resolve sort criteria to the set of qualifying event types.

    The result is a union, so criteria order does not matter. An
    unrecognized criterion contributes nothing.

    Args:
        criteria: Sort criteria (members or their string values)
        event_types: Raw event types to include as-is

    Returns:
        Event type strings an event must match to count
    """
    if isinstance(criteria, (str, SortCriterion)):
        criteria = (criteria,)
    if isinstance(event_types, (str, EventType)):
        event_types = (event_types,)

    qualifying = set()

    for value in criteria:
        criterion = SortCriterion.parse(value)
        if criterion is None:
            logger.debug(f"Ignoring unrecognized sort criterion: {value!r}")
            continue
        qualifying.add(CRITERION_EVENT_TYPES[criterion].value)

    for event_type in event_types:
        if isinstance(event_type, EventType):
            event_type = event_type.value
        qualifying.add(event_type)

    return frozenset(qualifying)
