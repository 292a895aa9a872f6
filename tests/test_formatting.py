"""
Command-line rendering of records and matches.
"""

from dataclasses import replace

from catalog.matching import find_twin
from catalog.formatting import format_match, format_record


def test_format_record(make_record):
    record = replace(make_record(7, Mask="Red", Eyes="Blue"), owner="batfan")

    text = format_record(record)

    assert text.splitlines() == [
        "Deathbat #7",
        "Mask: Red, Eyes: Blue",
        "Owner: batfan",
        "OpenSea.io link: https://opensea.io/assets/0xtest/7",
    ]


def test_format_record_without_owner(make_record):
    assert "Owner: Unknown" in format_record(make_record(7, Mask="Red"))


def test_format_match_with_twin(make_record, make_catalog):
    catalog = make_catalog(make_record(1, Mask="Red"), make_record(2, Mask="Red"))

    text = format_match(find_twin(catalog.lookup(1), catalog))

    assert text.startswith("SOURCE\nDeathbat #1")
    assert "TWIN (score 6)\nDeathbat #2" in text


def test_format_match_one_of_one(make_record, make_catalog):
    catalog = make_catalog(make_record(5, ZackyVengeance="1/1"), make_record(6, Mask="Red"))

    text = format_match(find_twin(catalog.lookup(5), catalog))

    assert "Deathbat #5 is a 1/1 (Zacky Vengeance) and has no twin." in text
    assert "TWIN" not in text
