"""
Twin Finder - Catalog Models
=============================
Record and trait profile types shared by the loader, store and matcher.

Both types are frozen: records are built once at load time and shared
read-only across request threads. Enrichment works on copies made with
dataclasses.replace().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


# Raw (trait_type, value) pairs in source order
RawAttributes = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class TraitProfile:
    """Fixed-shape view of a record's attributes used for scoring."""
    background: str = ""
    eyes: str = ""
    facial_hair: str = ""
    head: str = ""
    mask: str = ""
    mouth: str = ""
    nose: str = ""
    skin: str = ""

    # Display only, never scored
    perk: str = ""
    signature: str = ""

    unique: bool = False

    def get(self, slot: str) -> str:
        return getattr(self, slot)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'background': self.background,
            'eyes': self.eyes,
            'facial_hair': self.facial_hair,
            'head': self.head,
            'mask': self.mask,
            'mouth': self.mouth,
            'nose': self.nose,
            'skin': self.skin,
            'perk': self.perk,
            'signature': self.signature,
            'unique': self.unique,
        }


@dataclass(frozen=True, eq=False)
class Record:
    """
    One catalog entry.

    Equality and hashing use token_id only: two Record objects with the same
    id are the same catalog entry, whatever their owner enrichment says.
    """
    token_id: int
    name: str = ""
    description: Any = None
    minted: bool = False
    image: str = ""
    attributes: RawAttributes = ()
    traits: TraitProfile = field(default_factory=TraitProfile)
    hyperlink: str = ""
    owner: Optional[str] = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.token_id == other.token_id

    def __hash__(self) -> int:
        return hash(self.token_id)

    @property
    def is_unique(self) -> bool:
        return self.traits.unique

    def attribute_list(self) -> List[Dict[str, str]]:
        return [{'trait_type': t, 'value': v} for t, v in self.attributes]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.token_id,
            'name': self.name,
            'description': self.description,
            'minted': self.minted,
            'image': self.image,
            'attributes': self.attribute_list(),
            'traits': self.traits.to_dict(),
            'hyperlink': self.hyperlink,
            'owner': self.owner,
        }
