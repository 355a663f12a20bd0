"""CSV Flight Repository adapter.

Loads the flight network and city metadata from CSV files and adds:
- Configuration injection (paths from config)
- Caching of the loaded data
- Row validation with typed errors
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from ...config import DataConfig, get_config
from ...domain.errors import CityNotFoundError, DatasetError
from ...domain.models import City, Flight, GeoLocation

FLIGHT_COLUMNS = (
    "flight_id",
    "origin",
    "destination",
    "airline",
    "price",
    "duration",
    "departure_time",
    "arrival_time",
)


@dataclass
class CSVFlightRepository:
    """Flight repository that loads from CSV files.

    This adapter implements FlightRepositoryPort. Negative costs,
    non-numeric costs, missing fields and duplicate flight ids are
    rejected here so the routing core only ever sees well-formed input.

    Attributes:
        config: Data configuration (directory, file names)
    """

    config: DataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _flights: Optional[List[Flight]] = field(default=None, repr=False)
    _cities: Optional[Dict[str, City]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_flights(self) -> Sequence[Flight]:
        """Load the flights from CSV.

        Returns:
            The flights in file order.

        Raises:
            DatasetError: If the file cannot be read or a row is invalid.
        """
        if self._flights is not None:
            return self._flights

        path = self.config.flights_path
        self._logger.debug("Loading flights", extra={"flights_path": str(path)})

        try:
            with path.open(newline="", encoding="utf-8") as f:
                flights = self._parse_flights(csv.DictReader(f), path)
        except OSError as e:
            raise DatasetError(
                f"Failed to read flights: {e}",
                file_path=str(path),
                cause=e,
            )

        self._flights = flights
        self._logger.info("Flights loaded", extra={"flights": len(flights)})
        return flights

    def _parse_flights(self, reader: csv.DictReader, path: Path) -> List[Flight]:
        missing = [c for c in FLIGHT_COLUMNS if c not in (reader.fieldnames or ())]
        if missing:
            raise DatasetError(
                f"Missing columns: {', '.join(missing)}",
                file_path=str(path),
                line_number=1,
            )

        flights: List[Flight] = []
        seen_ids: Dict[str, int] = {}

        # Header is line 1
        for line_number, row in enumerate(reader, start=2):
            flight_id = (row.get("flight_id") or "").strip()
            origin = (row.get("origin") or "").strip()
            destination = (row.get("destination") or "").strip()

            if not flight_id or not origin or not destination:
                raise DatasetError(
                    "Flight id, origin and destination are required",
                    file_path=str(path),
                    line_number=line_number,
                )

            if flight_id in seen_ids:
                raise DatasetError(
                    f"Duplicate flight id {flight_id} "
                    f"(first seen on line {seen_ids[flight_id]})",
                    file_path=str(path),
                    line_number=line_number,
                )
            seen_ids[flight_id] = line_number

            flights.append(
                Flight(
                    id=flight_id,
                    origin=origin,
                    destination=destination,
                    airline=(row.get("airline") or "").strip(),
                    price=self._parse_cost(row, "price", path, line_number),
                    duration=self._parse_cost(row, "duration", path, line_number),
                    departure_time=(row.get("departure_time") or "").strip(),
                    arrival_time=(row.get("arrival_time") or "").strip(),
                )
            )

        return flights

    @staticmethod
    def _parse_cost(
        row: Mapping[str, Optional[str]], column: str, path: Path, line_number: int
    ) -> float:
        raw = (row.get(column) or "").strip()
        try:
            value = float(raw)
        except ValueError as e:
            raise DatasetError(
                f"Invalid {column}: {raw!r}",
                file_path=str(path),
                line_number=line_number,
                cause=e,
            )
        if value < 0:
            raise DatasetError(
                f"Negative {column}: {raw}",
                file_path=str(path),
                line_number=line_number,
            )
        return value

    def get_city(self, code: str) -> Optional[City]:
        """Get city details by code.

        Args:
            code: The city code to look up.

        Returns:
            City with full details, or None if not found.
        """
        return self._load_cities().get(code)

    def get_city_or_raise(self, code: str) -> City:
        """Get city details by code, raising if not found.

        Raises:
            CityNotFoundError: If the city is not found.
        """
        city = self.get_city(code)
        if city is None:
            raise CityNotFoundError(f"City not found: {code}", city_code=code)
        return city

    def list_cities(self) -> Sequence[City]:
        """List all cities in file order."""
        return list(self._load_cities().values())

    def _load_cities(self) -> Dict[str, City]:
        """Load city metadata from CSV."""
        if self._cities is not None:
            return self._cities

        cities: Dict[str, City] = {}

        try:
            with self.config.cities_path.open(newline="", encoding="utf-8") as f:
                for row in csv.DictReader(f):
                    code = (row.get("code") or "").strip()
                    if not code:
                        continue
                    name = (row.get("name") or "").strip()

                    # Cities without usable coordinates are still listed
                    try:
                        location: Optional[GeoLocation] = GeoLocation(
                            latitude=float(row.get("lat") or ""),
                            longitude=float(row.get("lon") or ""),
                        )
                    except ValueError:
                        location = None

                    cities[code] = City(code=code, name=name or code, location=location)

            self._cities = cities
        except OSError as e:
            self._logger.warning(
                "Failed to load city metadata",
                extra={"error": str(e)},
            )
            self._cities = {}

        return self._cities

    def clear_cache(self) -> None:
        """Clear cached flight and city data."""
        self._flights = None
        self._cities = None
        self._logger.debug("Flight data cache cleared")
