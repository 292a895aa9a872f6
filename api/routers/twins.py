"""
Twin Finder - Twins Router
===========================
Twin lookup and single-record endpoints.

Token ids arrive as raw strings and are validated by the matcher, so a bad
id is a 400 with a readable message rather than a framework 422.
"""

import logging
from dataclasses import replace
from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_matcher, get_owner_lookup_dep
from api.schemas import DeathbatRecord, TwinResponse, ErrorResponse
from catalog.enrichment import BaseOwnerLookup
from catalog.errors import InvalidIdentifier, NotFound
from catalog.matching import TwinMatcher

router = APIRouter(prefix="/api/v1", tags=["Twins"])
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid token id"},
    404: {"model": ErrorResponse, "description": "Token not in catalog"},
}


@router.get("/twin", response_model=TwinResponse, responses=ERROR_RESPONSES)
def get_twin(
    token_id: str = Query(..., description="Deathbat token id"),
    include_owner: bool = Query(True, description="Look up current owners on OpenSea"),
    matcher: TwinMatcher = Depends(get_matcher),
    owner_lookup: BaseOwnerLookup = Depends(get_owner_lookup_dep)
):
    """
    Find the Deathbat most alike the given one.

    Returns the source and its twin. For 1/1 Deathbats `twin` is null and
    `no_twin` is true.
    """
    try:
        match = matcher.resolve(token_id)
    except InvalidIdentifier as e:
        logger.info(f"twin: {token_id!r}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except NotFound as e:
        logger.info(f"twin: {token_id!r}: {e}")
        raise HTTPException(status_code=404, detail=str(e))

    if include_owner:
        # Enrichment never raises; failures come back as the unknown placeholder
        source = owner_lookup.enrich(match.source)
        twin = owner_lookup.enrich(match.twin) if match.twin is not None else None
        match = replace(match, source=source, twin=twin)

    logger.info(
        f"twin: {match.source.token_id} -> "
        f"{'1/1' if match.no_twin else match.twin.token_id} (score {match.score})"
    )
    return TwinResponse.from_match(match)


@router.get("/records/{token_id}", response_model=DeathbatRecord, responses=ERROR_RESPONSES)
def get_record(
    token_id: str,
    include_owner: bool = Query(False, description="Look up the current owner on OpenSea"),
    matcher: TwinMatcher = Depends(get_matcher),
    owner_lookup: BaseOwnerLookup = Depends(get_owner_lookup_dep)
):
    """Get a single Deathbat by token id."""
    try:
        record = matcher.lookup(token_id)
    except InvalidIdentifier as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    if include_owner:
        record = owner_lookup.enrich(record)

    return DeathbatRecord.from_record(record)
