"""
Owner Lookup Tests
===================
OpenSea owner enrichment, including every way it is allowed to fail.
"""

import os
from unittest.mock import patch

import httpx
import pytest

from catalog.enrichment import (
    UNKNOWN_OWNER,
    DisabledOwnerLookup,
    OpenSeaOwnerLookup,
    get_owner_lookup,
    parse_owner,
)
from catalog.settings import EnrichmentSettings


def _lookup(handler, api_key=None):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return OpenSeaOwnerLookup(
        endpoint="https://api.example.test/asset/",
        contract_address="0xabc",
        api_key=api_key,
        client=client,
    )


def test_resolve_username():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("X-API-KEY")
        return httpx.Response(200, json={"owner": {"user": {"username": "batfan"}, "address": "0x1"}})

    lookup = _lookup(handler, api_key="secret")

    assert lookup.resolve(42) == "batfan"
    assert seen["url"] == "https://api.example.test/asset/0xabc/42"
    assert seen["key"] == "secret"


def test_no_api_key_header_when_unset():
    seen = {}

    def handler(request):
        seen["has_key"] = "X-API-KEY" in request.headers
        return httpx.Response(200, json={"owner": {"address": "0x1"}})

    assert _lookup(handler).resolve(1) == "0x1"
    assert seen["has_key"] is False


def test_top_ownerships_fallback():
    payload = {"owner": {"user": None, "address": ""}, "top_ownerships": [{"owner": {"user": {"username": "holder"}}}]}
    assert _lookup(lambda r: httpx.Response(200, json=payload)).resolve(1) == "holder"


def test_non_200_degrades_to_unknown():
    assert _lookup(lambda r: httpx.Response(503)).resolve(1) == UNKNOWN_OWNER


def test_transport_error_degrades_to_unknown():
    def handler(request):
        raise httpx.ConnectError("registry unreachable", request=request)

    assert _lookup(handler).resolve(1) == UNKNOWN_OWNER


def test_timeout_degrades_to_unknown():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    assert _lookup(handler).resolve(1) == UNKNOWN_OWNER


def test_invalid_json_degrades_to_unknown():
    assert _lookup(lambda r: httpx.Response(200, content=b"<html>")).resolve(1) == UNKNOWN_OWNER


def test_missing_owner_degrades_to_unknown():
    assert _lookup(lambda r: httpx.Response(200, json={"id": 1})).resolve(1) == UNKNOWN_OWNER


def test_enrich_returns_copy(make_record):
    record = make_record(7, Mask="Red")
    lookup = _lookup(lambda r: httpx.Response(200, json={"owner": {"address": "0x7"}}))

    enriched = lookup.enrich(record)

    assert enriched.owner == "0x7"
    assert enriched.traits == record.traits
    assert record.owner is None


def test_disabled_lookup():
    lookup = DisabledOwnerLookup()
    assert lookup.resolve(1) == UNKNOWN_OWNER


@pytest.mark.parametrize("payload,expected", [
    ({"owner": {"user": {"username": "a"}, "address": "0x1"}}, "a"),
    ({"owner": {"user": {"username": None}, "address": "0x1"}}, "0x1"),
    ({"owner": None, "top_ownerships": [{"owner": {"address": "0x2"}}]}, "0x2"),
    ({"top_ownerships": [None, {"owner": {}}]}, None),
    ([], None),
])
def test_parse_owner(payload, expected):
    assert parse_owner(payload) == expected


def test_get_owner_lookup_disabled():
    assert isinstance(get_owner_lookup(EnrichmentSettings(enabled=False)), DisabledOwnerLookup)


def test_get_owner_lookup_reads_api_key_from_env():
    with patch.dict(os.environ, {"OPENSEA_API_KEY": "  k3y  "}):
        lookup = get_owner_lookup(EnrichmentSettings(enabled=True), contract_address="0xabc")

    try:
        assert isinstance(lookup, OpenSeaOwnerLookup)
        assert lookup.api_key == "k3y"
        assert lookup.contract_address == "0xabc"
    finally:
        lookup.close()


def test_malformed_url_degrades_to_unknown():
    def handler(request):
        raise AssertionError("request should never be sent")

    lookup = OpenSeaOwnerLookup(
        endpoint="https://api.example.test/as\x00set",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )

    assert lookup.resolve(1) == UNKNOWN_OWNER
