"""
Twin Finder - Attribute Extractor
==================================
Turns a record's raw (trait_type, value) attribute list into a fixed-shape
TraitProfile.

The set of trait types is closed. Anything outside it is a data-integrity
problem in the catalog file and stops extraction for that record; nothing
is silently dropped.

Part of Deathbat Twin Finder
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from catalog.errors import UnknownTraitType
from catalog.models import TraitProfile

# Raw trait_type -> TraitProfile slot
TRAIT_SLOTS: Mapping[str, str] = MappingProxyType({
    'Background': 'background',
    'Eyes': 'eyes',
    'Facial Hair': 'facial_hair',
    'Head': 'head',
    'Mask': 'mask',
    'Mouth': 'mouth',
    'Nose': 'nose',
    'Skin': 'skin',
    'Perk': 'perk',
})

# One-of-one artist signatures. Any of these marks the record as unique.
SIGNATURE_TRAITS = frozenset([
    'Brooks Wackerman',
    'Johnny Christ',
    'M. Shadows',
    'Synyster Gates',
    'Zacky Vengeance',
])

RECOGNIZED_TRAITS = frozenset(TRAIT_SLOTS) | SIGNATURE_TRAITS


def is_signature_trait(trait_type: str) -> bool:
    """
    Check whether a trait type is a one-of-one signature.

    Examples:
        >>> is_signature_trait('Zacky Vengeance')
        True

        >>> is_signature_trait('Mask')
        False
    """
    return trait_type in SIGNATURE_TRAITS


def extract_traits(
    attributes: Iterable[Tuple[str, str]],
    token_id: Optional[int] = None
) -> TraitProfile:
    """
    Build a TraitProfile from raw attribute pairs.

    A trait type that appears more than once keeps its last value.

    Args:
        attributes: (trait_type, value) pairs in source order
        token_id: Record id, only used to make error messages useful

    Returns:
        Fully populated TraitProfile (unset slots are "")

    Raises:
        UnknownTraitType: a trait type is not in RECOGNIZED_TRAITS

    Examples:
        >>> extract_traits([('Mask', 'Red'), ('Eyes', 'Blue')]).mask
        'Red'

        >>> extract_traits([('Synyster Gates', 'Signed')]).unique
        True
    """
    slots = {}
    signature = ""
    unique = False

    for trait_type, value in attributes:
        if trait_type in TRAIT_SLOTS:
            slots[TRAIT_SLOTS[trait_type]] = value
        elif trait_type in SIGNATURE_TRAITS:
            signature = trait_type
            unique = True
        else:
            raise UnknownTraitType(trait_type, token_id)

    return TraitProfile(signature=signature, unique=unique, **slots)
