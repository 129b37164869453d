"""
Infrastructure layer for ghanalytics.

Contains adapters for external data sources:
- EntityStore: Query interface the ranking services depend on
- CsvStore: Entity store loaded from a GitHub event CSV export

Infrastructure components handle I/O and can be mocked for testing.
"""

from .csv_store import EntityStore, CsvStore, DEFAULT_FILES

__all__ = [
    'EntityStore',
    'CsvStore',
    'DEFAULT_FILES',
]
