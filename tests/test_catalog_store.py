"""
Catalog Store Tests
====================
Lookup by id over ordered, sparse and shuffled catalogs.
"""

import pytest

from catalog.errors import CatalogError, NotFound
from catalog.models import Record
from catalog.store import CatalogStore


def test_lookup_dense_catalog(make_record, make_catalog):
    catalog = make_catalog(*[make_record(i, Mask="Red") for i in range(1, 11)])

    for token_id in range(1, 11):
        assert catalog.lookup(token_id).token_id == token_id


def test_lookup_absent_id_raises_not_found(make_record, make_catalog):
    catalog = make_catalog(*[make_record(i) for i in range(1, 11)])

    with pytest.raises(NotFound) as exc_info:
        catalog.lookup(99999)

    assert exc_info.value.token_id == 99999
    assert isinstance(exc_info.value, LookupError)


def test_lookup_out_of_order_catalog(make_record, make_catalog):
    """Lookup must not assume the catalog is sorted by id."""
    catalog = make_catalog(make_record(3), make_record(1), make_record(2))

    assert catalog.lookup(1).token_id == 1
    assert catalog.lookup(2).token_id == 2
    assert catalog.lookup(3).token_id == 3


def test_lookup_sparse_catalog(make_record, make_catalog):
    """Gaps in the id range are fine; the gap itself is NotFound."""
    catalog = make_catalog(make_record(1), make_record(5), make_record(500))

    assert catalog.lookup(5).token_id == 5
    assert catalog.lookup(500).token_id == 500
    with pytest.raises(NotFound):
        catalog.lookup(2)


def test_iteration_preserves_insertion_order(make_record, make_catalog):
    catalog = make_catalog(make_record(9), make_record(2), make_record(5))

    assert [r.token_id for r in catalog] == [9, 2, 5]
    assert catalog.ids() == (9, 2, 5)
    assert len(catalog) == 3


def test_min_max_and_membership(make_record, make_catalog):
    catalog = make_catalog(make_record(9), make_record(2), make_record(5))

    assert catalog.min_id == 2
    assert catalog.max_id == 9
    assert 5 in catalog
    assert 6 not in catalog


def test_empty_catalog():
    catalog = CatalogStore([])
    assert len(catalog) == 0
    assert catalog.min_id is None
    with pytest.raises(NotFound):
        catalog.lookup(1)


def test_duplicate_id_rejected(make_record):
    with pytest.raises(CatalogError, match="Duplicate"):
        CatalogStore([make_record(1), make_record(2), make_record(1)])


@pytest.mark.parametrize("bad_id", [0, -3])
def test_non_positive_id_rejected(bad_id):
    with pytest.raises(CatalogError):
        CatalogStore([Record(token_id=bad_id)])


def test_unique_count(make_record, make_catalog):
    catalog = make_catalog(
        make_record(1, Mask="Red"),
        make_record(2, ZackyVengeance="1/1"),
        make_record(3, MShadows="1/1"),
    )
    assert catalog.unique_count == 2


def test_records_are_not_mutable_through_store(make_record, make_catalog):
    catalog = make_catalog(make_record(1), make_record(2))

    assert isinstance(catalog.records, tuple)
    with pytest.raises(Exception):
        catalog.lookup(1).owner = "someone"


def test_record_equality_is_by_id(make_record):
    a = make_record(7, Mask="Red")
    b = make_record(7, Mask="Blue")
    assert a == b
    assert hash(a) == hash(b)
    assert a != make_record(8, Mask="Red")
