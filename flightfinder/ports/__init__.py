"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .flights import FlightRepositoryPort, PathEnumeratorPort, RouteSolverPort
from .rendering import MapRendererPort

__all__ = [
    "FlightRepositoryPort",
    "RouteSolverPort",
    "PathEnumeratorPort",
    "MapRendererPort",
]
