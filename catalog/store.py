"""
Twin Finder - Catalog Store
============================
In-memory, read-only collection of records indexed by token id.

The id index is built once at construction, so lookups do not depend on
the catalog being sorted or gap-free. After construction nothing is added,
removed or replaced, and the store can be shared across threads.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from catalog.errors import CatalogError, NotFound
from catalog.models import Record

logger = logging.getLogger(__name__)


class CatalogStore:
    """Ordered, immutable catalog with O(1) lookup by token id."""

    def __init__(self, records: Iterable[Record]):
        ordered = tuple(records)
        index = {}

        for record in ordered:
            if not isinstance(record.token_id, int) or isinstance(record.token_id, bool) or record.token_id < 1:
                raise CatalogError(f"Invalid token id in catalog: {record.token_id!r}")
            if record.token_id in index:
                raise CatalogError(f"Duplicate token id in catalog: {record.token_id}")
            index[record.token_id] = record

        self._records: Tuple[Record, ...] = ordered
        self._index: Mapping[int, Record] = MappingProxyType(index)

        logger.debug(f"CatalogStore built with {len(ordered)} records")

    def lookup(self, token_id: int) -> Record:
        """
        Get a record by token id.

        Raises:
            NotFound: no record with that id is loaded
        """
        record = self._index.get(token_id)
        if record is None:
            raise NotFound(token_id)
        return record

    def get(self, token_id: int) -> Optional[Record]:
        return self._index.get(token_id)

    @property
    def records(self) -> Tuple[Record, ...]:
        """Records in catalog (insertion) order."""
        return self._records

    def ids(self) -> Tuple[int, ...]:
        return tuple(r.token_id for r in self._records)

    @property
    def min_id(self) -> Optional[int]:
        return min(self._index) if self._index else None

    @property
    def max_id(self) -> Optional[int]:
        return max(self._index) if self._index else None

    @property
    def unique_count(self) -> int:
        return sum(1 for r in self._records if r.is_unique)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, token_id) -> bool:
        return token_id in self._index

    def __repr__(self) -> str:
        return f"CatalogStore(records={len(self._records)})"
