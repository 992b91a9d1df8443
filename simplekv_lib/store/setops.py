"""Set algebra over the distinct elements of two string lists.

These helpers are pure: they never mutate their inputs. Ordering follows
the first occurrence of each element so results are deterministic.
"""
from typing import Iterable, List, Sequence


def distinct(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


def union(first: Sequence[str], second: Sequence[str]) -> List[str]:
    """Distinct elements of either list, `first` before `second`."""
    return distinct([*first, *second])


def intersection(first: Sequence[str], second: Sequence[str]) -> List[str]:
    """Distinct elements present in both lists, in `first` order."""
    wanted = set(second)
    return [item for item in distinct(first) if item in wanted]


def difference(first: Sequence[str], second: Sequence[str]) -> List[str]:
    """Distinct elements of `first` that never appear in `second`."""
    excluded = set(second)
    return [item for item in distinct(first) if item not in excluded]
