"""Folium map renderer adapter.

Draws an itinerary on an interactive Folium map:
- one marker per stop (green origin, red destination, blue transfers)
- one line per flight, with price, duration and times in the tooltip
- optional alternative itineraries drawn underneath in a muted color
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Sequence, Tuple

from ...config import RenderingConfig, get_config
from ...domain.errors import CityNotFoundError, RenderingError
from ...domain.models import City, Connection, Flight


def format_duration(minutes: float) -> str:
    """Format a duration in minutes as ``"5h 30m"``."""
    total = int(round(minutes))
    return f"{total // 60}h {total % 60}m"


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort using Folium for
    generating interactive HTML maps.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        connection: Connection,
        cities: Mapping[str, City],
        output_path: Path,
        alternatives: Sequence[Connection] = (),
    ) -> Path:
        """Render an itinerary on a map and save to file.

        Args:
            connection: The itinerary to highlight.
            cities: City metadata for every stop, keyed by code.
            output_path: Where to save the rendered map.
            alternatives: Other itineraries drawn underneath.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If the itinerary is empty, a stop has no
                coordinates, or rendering fails.
        """
        if connection.is_empty:
            raise RenderingError(
                "Cannot render empty route",
                output_path=str(output_path),
                renderer_type="folium",
            )

        try:
            coordinates = self._coordinates(connection.stops, cities)
        except CityNotFoundError as e:
            raise RenderingError(
                f"No coordinates for {e.city_code}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Rendering route map",
            extra={
                "route": connection.route_label,
                "alternatives": len(alternatives),
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            center_lat = sum(lat for lat, _ in coordinates) / len(coordinates)
            center_lon = sum(lon for _, lon in coordinates) / len(coordinates)

            m = folium.Map(
                location=[center_lat, center_lon],
                zoom_start=self.config.zoom_start,
                tiles=self.config.tiles,
                control_scale=True,
            )

            for alternative in alternatives:
                if alternative.is_empty or alternative == connection:
                    continue
                for flight in alternative.flights:
                    if flight.origin in cities and flight.destination in cities:
                        self._add_leg(
                            folium, m, flight, cities, self.config.alternative_color,
                            weight=2, dash_array="6",
                        )

            for flight in connection.flights:
                self._add_leg(folium, m, flight, cities, self.config.optimal_color, weight=4)

            stops = connection.stops
            for i, (code, location) in enumerate(zip(stops, coordinates)):
                icon_color = "green" if i == 0 else "red" if i == len(stops) - 1 else "blue"
                folium.Marker(
                    location=list(location),
                    popup=f"{cities[code].name} ({code})",
                    tooltip=code,
                    icon=folium.Icon(color=icon_color),
                ).add_to(m)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

    @staticmethod
    def _coordinates(
        stops: Sequence[str], cities: Mapping[str, City]
    ) -> List[Tuple[float, float]]:
        coordinates: List[Tuple[float, float]] = []
        for code in stops:
            city = cities.get(code)
            if city is None or city.location is None:
                raise CityNotFoundError(f"City not found: {code}", city_code=code)
            coordinates.append((city.location.latitude, city.location.longitude))
        return coordinates

    @staticmethod
    def _add_leg(
        folium, m, flight: Flight, cities: Mapping[str, City], color: str, **style
    ) -> None:
        start = cities[flight.origin].location
        end = cities[flight.destination].location
        if start is None or end is None:
            return
        folium.PolyLine(
            [[start.latitude, start.longitude], [end.latitude, end.longitude]],
            color=color,
            opacity=0.8,
            tooltip=(
                f"{flight.id} {flight.airline}: ${flight.price:g}, "
                f"{format_duration(flight.duration)} "
                f"({flight.departure_time}-{flight.arrival_time})"
            ),
            **style,
        ).add_to(m)
