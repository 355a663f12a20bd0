"""Rendering port - Abstraction for map generation.

This protocol defines the contract for drawing itineraries on a map,
allowing different implementations to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import City, Connection


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        connection: Connection,
        cities: Mapping[str, City],
        output_path: Path,
        alternatives: Sequence[Connection] = (),
    ) -> Path:
        """Render an itinerary on a map and save it to file.

        Args:
            connection: The itinerary to highlight.
            cities: City metadata for every stop, keyed by code.
            output_path: Where to save the rendered map.
            alternatives: Other itineraries drawn underneath.

        Returns:
            Path to the generated map file.
        """
        ...
