"""Immutable domain models for the flight route finder.

All models are frozen dataclasses with slots. They carry no behaviour
beyond derived properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional


class SortKey(str, Enum):
    """Ordering applied to the raw flight list."""

    PRICE = "price"
    DURATION = "duration"
    AIRLINE = "airline"


class CostKey(str, Enum):
    """Flight attribute used as the edge weight by the route solver."""

    PRICE = "price"
    DURATION = "duration"


class RankKey(str, Enum):
    """Ordering applied to enumerated connections."""

    PRICE = "price"
    DURATION = "duration"
    HOPS = "hops"


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class City:
    """A city served by the flight network.

    Only used for presentation; the routing algorithms work on codes.

    Attributes:
        code: Unique city code (e.g., 'NYC')
        name: Human-readable city name
        location: GPS coordinates of the city
    """

    code: str
    name: str
    location: Optional[GeoLocation] = None


@dataclass(frozen=True, slots=True)
class Flight:
    """A scheduled, directed connection between two cities.

    Attributes:
        id: Flight identifier, assumed unique within a dataset
        origin: Departure city code
        destination: Arrival city code
        airline: Operating carrier name
        price: Ticket price
        duration: Flight time in minutes
        departure_time: Display-only departure time
        arrival_time: Display-only arrival time
    """

    id: str
    origin: str
    destination: str
    airline: str
    price: float
    duration: float
    departure_time: str = ""
    arrival_time: str = ""


@dataclass(frozen=True, slots=True)
class Connection:
    """An itinerary made of consecutive flights.

    Totals are always the sums of the original flight fields, whichever
    attribute was used to select the itinerary.

    Attributes:
        flights: Ordered flights, each departing where the previous landed
        total_price: Sum of flight prices
        total_duration: Sum of flight durations in minutes
    """

    flights: tuple[Flight, ...] = field(default_factory=tuple)
    total_price: float = 0.0
    total_duration: float = 0.0

    @classmethod
    def from_flights(cls, flights: Iterable[Flight]) -> Connection:
        """Build a connection and compute its totals."""
        legs = tuple(flights)
        return cls(
            flights=legs,
            total_price=sum(f.price for f in legs),
            total_duration=sum(f.duration for f in legs),
        )

    def total(self, cost_key: CostKey) -> float:
        """Total of the attribute selected by ``cost_key``."""
        if CostKey(cost_key) is CostKey.DURATION:
            return self.total_duration
        return self.total_price

    @property
    def hops(self) -> int:
        """Number of transfers, ``len(flights) - 1``.

        The zero-flight itinerary (origin equals destination) reports 0
        rather than the -1 that formula would give.
        """
        return max(len(self.flights) - 1, 0)

    @property
    def is_empty(self) -> bool:
        """True for the zero-flight itinerary (origin == destination)."""
        return len(self.flights) == 0

    @property
    def stops(self) -> tuple[str, ...]:
        """City codes visited, origin first."""
        if not self.flights:
            return ()
        return (self.flights[0].origin,) + tuple(f.destination for f in self.flights)

    @property
    def route_label(self) -> str:
        return " → ".join(self.stops)


@dataclass(frozen=True, slots=True)
class RouteAlternative:
    """A candidate itinerary compared against the optimal one.

    Attributes:
        connection: The alternative itinerary
        value: Its total for the optimised attribute
        savings: How much more the alternative costs than the optimum
        savings_percent: ``savings`` as a rounded share of ``value``
    """

    connection: Connection
    value: float
    savings: float
    savings_percent: int

    @property
    def is_optimal(self) -> bool:
        return self.savings == 0


@dataclass(frozen=True, slots=True)
class RouteComparison:
    """Optimal itinerary together with the alternatives it beat."""

    optimal: Connection
    optimize: CostKey
    alternatives: tuple[RouteAlternative, ...] = field(default_factory=tuple)

    @property
    def optimal_value(self) -> float:
        return self.optimal.total(self.optimize)
