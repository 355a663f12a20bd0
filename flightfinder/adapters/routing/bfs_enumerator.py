"""BFS Path Enumerator adapter.

This adapter wraps graph/bfs.py with key validation and logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from ...domain.models import Connection, Flight, RankKey
from ...graph.bfs import all_paths


@dataclass
class BFSPathEnumerator:
    """Enumerates every simple itinerary within a hop budget.

    This adapter implements PathEnumeratorPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def enumerate(
        self,
        flights: Sequence[Flight],
        origin: str,
        destination: str,
        max_hops: int,
        rank_by: Union[RankKey, str] = RankKey.PRICE,
    ) -> List[Connection]:
        rank_key = RankKey(rank_by)
        connections = all_paths(flights, origin, destination, max_hops, rank_key)

        self._logger.info(
            "Routes enumerated",
            extra={
                "origin": origin,
                "destination": destination,
                "max_hops": max_hops,
                "rank_by": rank_key.value,
                "routes": len(connections),
            },
        )
        return connections
