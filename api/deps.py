"""
Twin Finder - API Dependencies
===============================
Catalog and owner-lookup dependency injection for FastAPI endpoints.

The catalog is loaded once, before the first request, and then only read.
Tests swap in synthetic catalogs through app.dependency_overrides.
"""

import logging
from typing import Optional

from catalog.enrichment import BaseOwnerLookup, get_owner_lookup
from catalog.ingestion import LoadSummary, load_catalog
from catalog.matching import TwinMatcher
from catalog.settings import TwinSettings, load_settings

logger = logging.getLogger(__name__)

# Process-wide instances, created by init_catalog()
_settings: Optional[TwinSettings] = None
_matcher: Optional[TwinMatcher] = None
_owner_lookup: Optional[BaseOwnerLookup] = None
_load_summary: Optional[LoadSummary] = None


def get_settings() -> TwinSettings:
    """Get or load the settings (TWIN_CONFIG_PATH or config/twin_config.yml)."""
    global _settings

    if _settings is None:
        _settings = load_settings()
        logger.info(f"Settings loaded from {_settings.config_path}")

    return _settings


def init_catalog(settings: Optional[TwinSettings] = None) -> TwinMatcher:
    """
    Load the catalog and build the shared matcher and owner lookup.

    Called from the app lifespan so the catalog is complete before any
    request is served. Calling it again returns the existing matcher.
    """
    global _settings, _matcher, _owner_lookup, _load_summary

    if _matcher is not None:
        return _matcher

    if settings is not None:
        _settings = settings
    settings = get_settings()

    store, summary = load_catalog(settings=settings.catalog)
    _load_summary = summary
    _matcher = TwinMatcher(
        store,
        min_id=settings.catalog.min_token_id,
        max_id=settings.catalog.max_token_id,
    )
    _owner_lookup = get_owner_lookup(settings.enrichment, settings.catalog.contract_address)

    logger.info(f"Catalog ready: {len(store)} records, checksum {summary.checksum[:16]}...")
    return _matcher


def get_matcher() -> TwinMatcher:
    """
    FastAPI dependency that provides the shared TwinMatcher.

    Usage in endpoints:
        @router.get("/endpoint")
        def endpoint(matcher: TwinMatcher = Depends(get_matcher)):
            match = matcher.resolve(token_id)
    """
    if _matcher is None:
        return init_catalog()
    return _matcher


def get_owner_lookup_dep() -> BaseOwnerLookup:
    """FastAPI dependency that provides the owner lookup."""
    if _owner_lookup is None:
        init_catalog()
    return _owner_lookup


def get_load_summary() -> Optional[LoadSummary]:
    return _load_summary


def shutdown_catalog():
    """
    Release the owner lookup's HTTP client and drop the loaded catalog.
    """
    global _matcher, _owner_lookup, _load_summary

    if _owner_lookup is not None:
        _owner_lookup.close()
        logger.info("Owner lookup closed")

    _matcher = None
    _owner_lookup = None
    _load_summary = None
