"""Tests for the Folium map renderer adapter."""

import pytest

from flightfinder.adapters.rendering import FoliumMapRenderer, format_duration
from flightfinder.config import RenderingConfig
from flightfinder.domain.errors import CityNotFoundError, RenderingError
from flightfinder.domain.models import City, Connection, GeoLocation


@pytest.fixture
def cities():
    return {
        "NYC": City("NYC", "New York", GeoLocation(40.7128, -74.0060)),
        "CHI": City("CHI", "Chicago", GeoLocation(41.8781, -87.6298)),
        "DEN": City("DEN", "Denver", GeoLocation(39.7392, -104.9903)),
    }


@pytest.mark.parametrize(
    "minutes,expected", [(0, "0h 0m"), (75, "1h 15m"), (240, "4h 0m"), (415.0, "6h 55m")]
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def test_render_writes_html(cluster_flights, cities, tmp_path):
    pytest.importorskip("folium")
    renderer = FoliumMapRenderer(RenderingConfig())
    optimal = Connection.from_flights([cluster_flights[2]])
    alternative = Connection.from_flights(cluster_flights[:2])

    output = renderer.render(
        optimal, cities, tmp_path / "maps" / "route.html", [optimal, alternative]
    )

    assert output.exists()
    html = output.read_text(encoding="utf-8")
    assert "F043" in html
    assert "F011" in html


def test_render_empty_route_raises(cities, tmp_path):
    with pytest.raises(RenderingError) as exc_info:
        FoliumMapRenderer(RenderingConfig()).render(
            Connection(), cities, tmp_path / "route.html"
        )

    assert exc_info.value.renderer_type == "folium"


def test_render_missing_coordinates_raises(cluster_flights, cities, tmp_path):
    cities["DEN"] = City("DEN", "Denver")

    with pytest.raises(RenderingError) as exc_info:
        FoliumMapRenderer(RenderingConfig()).render(
            Connection.from_flights([cluster_flights[2]]), cities, tmp_path / "route.html"
        )

    assert isinstance(exc_info.value.cause, CityNotFoundError)
    assert not (tmp_path / "route.html").exists()
