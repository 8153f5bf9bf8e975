"""
Reconciliation deduplication.

Repeated analysis passes over overlapping workout batches produce redundant
discrepancy reports and pending changes. Both collapse with the same
reducer: group by key, keep the entry with the latest date.
"""

from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

from domain.models import DiscrepancyInfo, PendingChange

T = TypeVar("T")


def keep_most_recent(
    items: Iterable[T],
    key: Callable[[T], Hashable],
    date: Callable[[T], object],
    tiebreak: Optional[Callable[[T], object]] = None,
) -> List[T]:
    """
    Keep one item per key: the one with the latest date.

    On an exact date tie the item with the greater ``tiebreak`` value wins.
    Without a tiebreak, or when it ties too, the first-encountered item is
    kept. Output is ordered by (date, key).

    Examples:
        >>> keep_most_recent([("a", 1), ("a", 3), ("b", 2)], lambda i: i[0], lambda i: i[1])
        [('b', 2), ('a', 3)]
    """

    def rank(item: T) -> tuple:
        if tiebreak is None:
            return (date(item),)
        return (date(item), tiebreak(item))

    winners: Dict[Hashable, T] = {}
    for item in items:
        k = key(item)
        kept = winners.get(k)
        if kept is None or rank(item) > rank(kept):
            winners[k] = item

    return sorted(winners.values(), key=lambda i: (date(i), _sort_key(key(i))))


def _sort_key(key: Hashable) -> Tuple[str, ...]:
    if isinstance(key, tuple):
        return tuple(str(getattr(part, "value", part)) for part in key)
    return (str(key),)


def deduplicate_discrepancies(discrepancies: Iterable[DiscrepancyInfo]) -> List[DiscrepancyInfo]:
    """One report per (exercise id, tier), most recent workout wins."""
    return keep_most_recent(
        discrepancies,
        key=lambda d: d.dedup_key,
        date=lambda d: d.workout_date,
        tiebreak=lambda d: d.workout_id,
    )


def deduplicate_pending_changes(changes: Iterable[PendingChange]) -> List[PendingChange]:
    """One change per progression key, most recent workout wins."""
    return keep_most_recent(
        changes,
        key=lambda c: c.progression_key,
        date=lambda c: c.workout_date,
        tiebreak=lambda c: (c.workout_id, c.id),
    )
