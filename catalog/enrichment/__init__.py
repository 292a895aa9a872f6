"""
Twin Finder - Enrichment Module
================================
Optional post-match owner lookup.
"""

from .owner_lookup import (
    UNKNOWN_OWNER,
    BaseOwnerLookup,
    DisabledOwnerLookup,
    OpenSeaOwnerLookup,
    get_owner_lookup,
    parse_owner,
)

__all__ = [
    'UNKNOWN_OWNER',
    'BaseOwnerLookup',
    'DisabledOwnerLookup',
    'OpenSeaOwnerLookup',
    'get_owner_lookup',
    'parse_owner',
]
