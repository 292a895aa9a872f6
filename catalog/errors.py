"""
Twin Finder - Error Taxonomy
=============================
Exceptions raised by the catalog core.

A one-of-one record having no twin is not an error; see
catalog.matching.twin_matcher.TwinMatch.no_twin.
"""

from typing import Optional


class TwinFinderError(Exception):
    """Base class for all catalog errors."""


class InvalidIdentifier(TwinFinderError, ValueError):
    """Identifier is non-numeric or outside the valid range."""

    def __init__(self, value, min_id: Optional[int] = None, max_id: Optional[int] = None):
        self.value = value
        self.min_id = min_id
        self.max_id = max_id
        if min_id is not None and max_id is not None:
            message = f"invalid token id {value!r}, must be between {min_id} and {max_id} inclusive"
        else:
            message = f"invalid token id {value!r}"
        super().__init__(message)


class NotFound(TwinFinderError, LookupError):
    """Identifier is well-formed but absent from the loaded catalog."""

    def __init__(self, token_id: int):
        self.token_id = token_id
        super().__init__(f"Deathbat not found: {token_id}")


class UnknownTraitType(TwinFinderError, ValueError):
    """An attribute category outside the recognized set was encountered."""

    def __init__(self, trait_type: str, token_id: Optional[int] = None):
        self.trait_type = trait_type
        self.token_id = token_id
        where = f" on token {token_id}" if token_id is not None else ""
        super().__init__(f"unknown trait type {trait_type!r}{where}")


class CatalogError(TwinFinderError):
    """The catalog source is malformed (bad JSON, duplicate or invalid ids)."""
