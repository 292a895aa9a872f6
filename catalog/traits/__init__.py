"""
Twin Finder - Traits Module
============================
Attribute extraction into fixed-shape trait profiles.
"""

from catalog.traits.trait_extraction import (
    TRAIT_SLOTS,
    SIGNATURE_TRAITS,
    RECOGNIZED_TRAITS,
    extract_traits,
    is_signature_trait,
)

__all__ = [
    'TRAIT_SLOTS',
    'SIGNATURE_TRAITS',
    'RECOGNIZED_TRAITS',
    'extract_traits',
    'is_signature_trait',
]
