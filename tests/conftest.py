"""Shared fixtures for the flightfinder test suite."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from flightfinder.adapters.flights import CSVFlightRepository
from flightfinder.config import DataConfig, reset_config
from flightfinder.container import reset_container
from flightfinder.domain.models import Flight

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def cluster_flights() -> List[Flight]:
    """NYC -> CHI -> DEN plus the direct NYC -> DEN flight."""
    return [
        Flight("F002", "NYC", "CHI", "United", 180, 150, "09:00", "11:30"),
        Flight("F011", "CHI", "DEN", "United", 160, 135, "12:00", "14:15"),
        Flight("F043", "NYC", "DEN", "United", 200, 240, "13:00", "17:00"),
    ]


@pytest.fixture(scope="session")
def sample_flights() -> List[Flight]:
    """The bundled 78-flight dataset."""
    return list(CSVFlightRepository(DataConfig(dir=DATA_DIR)).load_flights())
