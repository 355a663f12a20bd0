"""Comparator-based quicksort for flights and connections.

The same partition-exchange sort orders the raw flight list for display
and ranks the connections found by the enumerator. Ties are not broken:
the relative order of items with equal keys is whatever the partition
scheme yields.
"""

from typing import Any, Callable, Dict, Iterable, List, Tuple, TypeVar, Union

from ..domain.models import Connection, Flight, RankKey, SortKey

T = TypeVar("T")

FLIGHT_SORT_KEYS: Dict[SortKey, Callable[[Flight], Any]] = {
    SortKey.PRICE: lambda flight: flight.price,
    SortKey.DURATION: lambda flight: flight.duration,
    SortKey.AIRLINE: lambda flight: flight.airline,
}

CONNECTION_RANK_KEYS: Dict[RankKey, Callable[[Connection], Any]] = {
    RankKey.PRICE: lambda connection: connection.total_price,
    RankKey.DURATION: lambda connection: connection.total_duration,
    RankKey.HOPS: lambda connection: connection.hops,
}


def quick_sort(items: Iterable[T], key: Callable[[T], Any]) -> List[T]:
    """Sort ``items`` ascending by ``key`` without touching the input.

    Lomuto partition with the last element as pivot. Sub-ranges are kept
    on an explicit stack instead of recursing, so a degenerate input
    (e.g. all keys equal) cannot exhaust the interpreter's recursion
    limit. Average O(n log n), worst case O(n^2).

    Parameters
    ----------
    items:
        Any finite iterable; it is copied into a new list.
    key:
        Function returning a comparable value for each item.

    Returns
    -------
    list
        A new, sorted list.
    """
    result = list(items)
    ranges: List[Tuple[int, int]] = [(0, len(result) - 1)]

    while ranges:
        left, right = ranges.pop()
        if left >= right:
            continue
        pivot_index = _partition(result, key, left, right)
        ranges.append((pivot_index + 1, right))
        ranges.append((left, pivot_index - 1))

    return result


def _partition(
    items: List[T], key: Callable[[T], Any], left: int, right: int
) -> int:
    pivot_key = key(items[right])
    i = left - 1

    for j in range(left, right):
        if key(items[j]) <= pivot_key:
            i += 1
            items[i], items[j] = items[j], items[i]

    items[i + 1], items[right] = items[right], items[i + 1]
    return i + 1


def sort_flights(
    flights: Iterable[Flight], key: Union[SortKey, str] = SortKey.PRICE
) -> List[Flight]:
    """Return the flights ordered by price, duration or airline name.

    Airline names use Python's default string ordering (code point
    order, no locale collation).
    """
    return quick_sort(flights, FLIGHT_SORT_KEYS[SortKey(key)])


def rank_connections(
    connections: Iterable[Connection], rank_by: Union[RankKey, str] = RankKey.PRICE
) -> List[Connection]:
    """Return the connections ordered by total price, duration or hops."""
    return quick_sort(connections, CONNECTION_RANK_KEYS[RankKey(rank_by)])
