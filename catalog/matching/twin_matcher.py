"""
Twin Finder - Similarity Matcher
=================================
Finds the catalog record most alike a source record.

Algorithm:
1. One-of-one short-circuit: a record carrying an artist signature has no
   twin. This is a normal outcome (TwinMatch.no_twin), not an error.
2. Weighted scoring: every other record earns the slot weight for each slot
   where both records hold the same nonempty value. Exact, case-sensitive
   comparison; no partial credit.
3. Selection: the running best starts as (source, 0). A higher score always
   wins. An equal score wins only if its token id is strictly closer to the
   source's id. Records are visited in catalog order, so an exact tie on
   score and distance keeps the first one seen.

The scan is read-only and does no I/O, so it is safe to run concurrently
for any number of sources against one shared catalog.

Part of Deathbat Twin Finder
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from catalog.errors import InvalidIdentifier
from catalog.models import Record, TraitProfile
from catalog.store import CatalogStore

logger = logging.getLogger(__name__)

DEFAULT_MIN_TOKEN_ID = 1
DEFAULT_MAX_TOKEN_ID = 10000

# Scoring weights by TraitProfile slot. Perk and signature never score.
TRAIT_WEIGHTS: Mapping[str, int] = MappingProxyType({
    'mask': 6,
    'facial_hair': 5,
    'eyes': 4,
    'mouth': 4,
    'nose': 4,
    'head': 3,
    'skin': 2,
    'background': 1,
})


@dataclass(frozen=True)
class TwinMatch:
    """Outcome of a twin search."""
    source: Record
    twin: Optional[Record]
    score: int = 0
    no_twin: bool = False

    @property
    def is_self(self) -> bool:
        """True when no other record shared a trait and the source kept the slot."""
        return self.twin is not None and self.twin.token_id == self.source.token_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source.to_dict(),
            'twin': self.twin.to_dict() if self.twin is not None else None,
            'score': self.score,
            'no_twin': self.no_twin,
        }


def score_traits(source: TraitProfile, candidate: TraitProfile) -> int:
    """
    Weighted similarity between two trait profiles.

    Examples:
        >>> score_traits(TraitProfile(mask='Red', eyes='Blue'), TraitProfile(mask='Red'))
        6

        >>> score_traits(TraitProfile(), TraitProfile())
        0
    """
    score = 0
    for slot, weight in TRAIT_WEIGHTS.items():
        value = source.get(slot)
        if value and value == candidate.get(slot):
            score += weight
    return score


def _distance(a: int, b: int) -> int:
    return abs(a - b)


def find_twin(source: Record, catalog: CatalogStore) -> TwinMatch:
    """
    Find the record most alike `source` in `catalog`.

    Args:
        source: Record to match (normally taken from the same catalog)
        catalog: Loaded catalog

    Returns:
        TwinMatch. no_twin is set for one-of-one sources; otherwise twin is
        the best candidate, or the source itself if nothing scored above 0.
    """
    if source.traits.unique:
        logger.debug(f"Token {source.token_id} is a 1/1 ({source.traits.signature}), no twin")
        return TwinMatch(source=source, twin=None, score=0, no_twin=True)

    best = source
    best_score = 0

    for candidate in catalog:
        if candidate.token_id == source.token_id:
            continue

        candidate_score = score_traits(source.traits, candidate.traits)

        if candidate_score > best_score:
            best = candidate
            best_score = candidate_score
        elif candidate_score == best_score:
            # Equal score: prefer the closer id
            if _distance(source.token_id, candidate.token_id) < _distance(source.token_id, best.token_id):
                best = candidate

    logger.debug(f"Token {source.token_id} -> twin {best.token_id} (score {best_score})")
    return TwinMatch(source=source, twin=best, score=best_score)


def parse_token_id(
    value: Any,
    min_id: int = DEFAULT_MIN_TOKEN_ID,
    max_id: int = DEFAULT_MAX_TOKEN_ID
) -> int:
    """
    Validate a token id coming from a caller (HTTP query, CLI argument).

    Accepts ints and decimal strings. Bools and floats are rejected.

    Raises:
        InvalidIdentifier: non-numeric or outside [min_id, max_id]

    Examples:
        >>> parse_token_id(' 42 ')
        42
    """
    if isinstance(value, bool):
        raise InvalidIdentifier(value, min_id, max_id)

    if isinstance(value, int):
        token_id = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            token_id = int(text)
        except ValueError:
            raise InvalidIdentifier(value, min_id, max_id) from None
    else:
        raise InvalidIdentifier(value, min_id, max_id)

    if token_id < min_id or token_id > max_id:
        raise InvalidIdentifier(value, min_id, max_id)

    return token_id


def resolve_twin(
    catalog: CatalogStore,
    identifier: Any,
    min_id: int = DEFAULT_MIN_TOKEN_ID,
    max_id: int = DEFAULT_MAX_TOKEN_ID
) -> TwinMatch:
    """
    Query boundary: validate the identifier, look up the source, match it.

    Raises:
        InvalidIdentifier: before any lookup or scan
        NotFound: identifier is in range but not in the catalog
    """
    token_id = parse_token_id(identifier, min_id, max_id)
    source = catalog.lookup(token_id)
    return find_twin(source, catalog)


class TwinMatcher:
    """
    Matcher bound to one loaded catalog and its valid id range.

    Holds no mutable state; one instance serves every request.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        min_id: int = DEFAULT_MIN_TOKEN_ID,
        max_id: int = DEFAULT_MAX_TOKEN_ID
    ):
        if min_id > max_id:
            raise ValueError(f"min_id ({min_id}) must be <= max_id ({max_id})")
        self.catalog = catalog
        self.min_id = min_id
        self.max_id = max_id

    def lookup(self, identifier: Any) -> Record:
        token_id = parse_token_id(identifier, self.min_id, self.max_id)
        return self.catalog.lookup(token_id)

    def find_twin(self, source: Record) -> TwinMatch:
        return find_twin(source, self.catalog)

    def resolve(self, identifier: Any) -> TwinMatch:
        return resolve_twin(self.catalog, identifier, self.min_id, self.max_id)
