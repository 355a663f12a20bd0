"""Flight data adapters - Implementations of FlightRepositoryPort.

Available implementations:
- CSVFlightRepository: Loads flights and cities from CSV files
"""

from .csv_repository import CSVFlightRepository

__all__ = ["CSVFlightRepository"]
