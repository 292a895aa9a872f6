"""
Twin Finder - Owner Lookup
===========================
Optional enrichment: asks the OpenSea asset API who owns a Deathbat.

Ownership is cosmetic. A lookup that fails, times out or returns something
unexpected resolves to UNKNOWN_OWNER and is logged; it never raises to the
caller, so a dead registry cannot block a twin result.
"""

import os
import logging
import httpx
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Dict, Optional

from catalog.models import Record
from catalog.settings import DEATHBATS_CONTRACT, EnrichmentSettings

logger = logging.getLogger(__name__)

UNKNOWN_OWNER = "Unknown"


def _owner_name(owner: Any) -> Optional[str]:
    """Pick a display name from an OpenSea owner object."""
    if not isinstance(owner, dict):
        return None
    user = owner.get("user")
    if isinstance(user, dict) and user.get("username"):
        return str(user["username"])
    if owner.get("address"):
        return str(owner["address"])
    return None


def parse_owner(payload: Any) -> Optional[str]:
    """
    Extract the owner from an asset API response.

    Tries `owner` first, then the first usable `top_ownerships` entry.

    Examples:
        >>> parse_owner({"owner": {"user": {"username": "bat"}, "address": "0xabc"}})
        'bat'

        >>> parse_owner({"owner": {"user": None, "address": "0xabc"}})
        '0xabc'

        >>> parse_owner({})
    """
    if not isinstance(payload, dict):
        return None

    name = _owner_name(payload.get("owner"))
    if name:
        return name

    for ownership in payload.get("top_ownerships") or []:
        if isinstance(ownership, dict):
            name = _owner_name(ownership.get("owner"))
            if name:
                return name

    return None


class BaseOwnerLookup(ABC):
    """Abstract base class for owner lookups."""

    @abstractmethod
    def resolve(self, token_id: int) -> str:
        """Return the owner of a token, or UNKNOWN_OWNER."""
        pass

    def enrich(self, record: Record) -> Record:
        """Return a copy of `record` with its owner filled in."""
        return replace(record, owner=self.resolve(record.token_id))

    def close(self) -> None:
        pass


class OpenSeaOwnerLookup(BaseOwnerLookup):
    """OpenSea v1 asset API client."""

    def __init__(
        self,
        endpoint: str = "https://api.opensea.io/api/v1/asset",
        contract_address: str = DEATHBATS_CONTRACT,
        timeout: float = 5.0,
        api_key: Optional[str] = None,
        client: Optional[httpx.Client] = None
    ):
        self.endpoint = endpoint.rstrip("/")
        self.contract_address = contract_address
        self.api_key = api_key
        self.client = client or httpx.Client(timeout=timeout)

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-API-KEY"] = self.api_key
        return headers

    def resolve(self, token_id: int) -> str:
        url = f"{self.endpoint}/{self.contract_address}/{token_id}"

        try:
            response = self.client.get(url, headers=self._headers())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Owner lookup for token {token_id} failed: {e}")
            return UNKNOWN_OWNER

        if response.status_code != 200:
            logger.warning(f"Owner lookup for token {token_id}: OpenSea returned HTTP {response.status_code}")
            return UNKNOWN_OWNER

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Owner lookup for token {token_id}: invalid JSON: {e}")
            return UNKNOWN_OWNER

        owner = parse_owner(payload)
        if not owner:
            logger.warning(f"Owner lookup for token {token_id}: no owner in response")
            return UNKNOWN_OWNER

        return owner

    def close(self) -> None:
        self.client.close()


class DisabledOwnerLookup(BaseOwnerLookup):
    """Used when enrichment is turned off; never touches the network."""

    def resolve(self, token_id: int) -> str:
        return UNKNOWN_OWNER


def get_owner_lookup(
    settings: EnrichmentSettings,
    contract_address: str = DEATHBATS_CONTRACT
) -> BaseOwnerLookup:
    """
    Create the owner lookup described by the enrichment settings.

    The API key is read from the environment variable named in
    settings.api_key_env.
    """
    if not settings.enabled:
        logger.info("Owner enrichment disabled")
        return DisabledOwnerLookup()

    api_key = os.environ.get(settings.api_key_env, "").strip() or None
    if api_key is None:
        logger.info(f"{settings.api_key_env} not set, owner lookups will be unauthenticated")

    return OpenSeaOwnerLookup(
        endpoint=settings.owner_api_url,
        contract_address=contract_address,
        timeout=settings.timeout_seconds,
        api_key=api_key,
    )
