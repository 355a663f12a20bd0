"""Adapters layer - Concrete implementations of the ports.

Subpackages:
- flights: dataset loading from CSV files
- routing: solver and enumerator adapters over the graph core
- rendering: folium map rendering
"""
