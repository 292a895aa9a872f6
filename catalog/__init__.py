"""
Deathbat Twin Finder - Catalog Core
====================================
In-memory Deathbats catalog and the twin matching engine.

Provides:
- Catalog loading and trait extraction
- Immutable catalog store with lookup by token id
- Weighted trait similarity and twin selection
- Optional owner enrichment
"""

from catalog.errors import (
    TwinFinderError,
    InvalidIdentifier,
    NotFound,
    UnknownTraitType,
    CatalogError,
)
from catalog.models import Record, TraitProfile
from catalog.store import CatalogStore

__version__ = "1.0.0"

__all__ = [
    'TwinFinderError',
    'InvalidIdentifier',
    'NotFound',
    'UnknownTraitType',
    'CatalogError',
    'Record',
    'TraitProfile',
    'CatalogStore',
]
