"""
Twin Finder - Health Router
============================
Health check endpoint.
"""

from typing import Optional
from fastapi import APIRouter, Depends
from datetime import datetime

from api.deps import get_load_summary, get_matcher, get_owner_lookup_dep
from api.schemas import HealthStatus
from api import __version__
from catalog.enrichment import BaseOwnerLookup, DisabledOwnerLookup
from catalog.ingestion import LoadSummary
from catalog.matching import TwinMatcher

router = APIRouter(prefix="/api/v1", tags=["Health"])


@router.get("/health", response_model=HealthStatus)
def health_check(
    matcher: TwinMatcher = Depends(get_matcher),
    owner_lookup: BaseOwnerLookup = Depends(get_owner_lookup_dep),
    summary: Optional[LoadSummary] = Depends(get_load_summary)
):
    """
    Health check endpoint.

    Returns API status, catalog size and the outcome of the catalog load.
    An empty catalog is reported as degraded: every twin query would 404.
    """
    records = len(matcher.catalog)

    return HealthStatus(
        status="ok" if records else "degraded",
        catalog="ok" if records else "empty",
        records=records,
        unique_records=matcher.catalog.unique_count,
        records_skipped=summary.records_skipped if summary else 0,
        checksum=summary.checksum if summary else None,
        enrichment=not isinstance(owner_lookup, DisabledOwnerLookup),
        version=__version__,
        timestamp=datetime.utcnow()
    )
