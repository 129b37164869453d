"""
Generic grouping helper.
"""

from typing import Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)


def group_by(items: Iterable[T], key_of: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Group items by the key returned from ``key_of``.

    Items keep their first-seen order inside each group, and keys appear
    in the mapping in the order they were first seen. Every group holds
    at least one item.

    Args:
        items: Items to group
        key_of: Function extracting the grouping key from an item

    Returns:
        Mapping from key to the items sharing that key

    Example:
        >>> group_by([1, 2, 3, 4], lambda n: n % 2)
        {1: [1, 3], 0: [2, 4]}
    """
    grouped: Dict[K, List[T]] = {}
    for item in items:
        grouped.setdefault(key_of(item), []).append(item)
    return grouped
