"""Typed domain errors for the flight route finder.

All errors inherit from FlightFinderError and can optionally wrap a
root cause exception for debugging.

"No route" is an expected outcome of a routing query: the core
algorithms return ``None`` or an empty list for it. NoRouteFoundError
exists only for callers that explicitly ask for a route to be required.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FlightFinderError(Exception):
    """Base error for the flight finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DatasetError(FlightFinderError):
    """Flight or city data could not be loaded or is malformed.

    Attributes:
        file_path: Path to the offending data file if relevant
        line_number: 1-based line of the offending row if relevant
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class NoRouteFoundError(FlightFinderError):
    """No itinerary exists between the requested cities.

    Attributes:
        origin: Departure city code
        destination: Arrival city code
    """

    origin: str = ""
    destination: str = ""


@dataclass
class CityNotFoundError(FlightFinderError):
    """City code not found in the city metadata.

    Attributes:
        city_code: The code that was not found
    """

    city_code: str = ""


@dataclass
class ConfigurationError(FlightFinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(FlightFinderError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
