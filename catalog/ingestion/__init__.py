"""
Twin Finder - Ingestion Module
===============================
Loads the catalog file into an immutable CatalogStore.
"""

from .load_catalog import (
    LoadSummary,
    build_catalog,
    build_record,
    compute_file_checksum,
    load_catalog,
)

__all__ = [
    'LoadSummary',
    'build_catalog',
    'build_record',
    'compute_file_checksum',
    'load_catalog',
]
