"""
Twin Finder - Matching Module
==============================
Weighted trait similarity and twin selection.

Part of Deathbat Twin Finder
"""

from .twin_matcher import (
    TRAIT_WEIGHTS,
    TwinMatch,
    TwinMatcher,
    find_twin,
    parse_token_id,
    resolve_twin,
    score_traits,
)

__all__ = [
    'TRAIT_WEIGHTS',
    'TwinMatch',
    'TwinMatcher',
    'find_twin',
    'parse_token_id',
    'resolve_twin',
    'score_traits',
]
