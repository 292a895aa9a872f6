#!/usr/bin/env python
"""
Deathbat Twin Finder - Command Line
====================================
Loads the catalog and prints the twin of one Deathbat.

Usage:
    python scripts/find_twin.py 42
    python scripts/find_twin.py 42 --no-owner
    python scripts/find_twin.py 42 --config config/twin_config.yml --log-level DEBUG
"""

import sys
import argparse
from pathlib import Path
from dataclasses import replace
from datetime import datetime

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import yaml
from dotenv import load_dotenv

from catalog.enrichment import get_owner_lookup
from catalog.errors import CatalogError, InvalidIdentifier, NotFound, UnknownTraitType
from catalog.formatting import format_match
from catalog.ingestion import load_catalog
from catalog.logging_config import setup_logging, get_logger
from catalog.matching import TwinMatcher
from catalog.settings import load_settings


def print_banner():
    """Print the application banner."""
    print()
    print("=" * 70)
    print("  Deathbat Twin Finder")
    print("=" * 70)
    print()


def main():
    """Main entry point for the twin finder CLI."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description='Find the most alike Deathbat',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 42                       # Twin of Deathbat #42
  %(prog)s 42 --no-owner            # Skip the OpenSea owner lookup
        """
    )

    parser.add_argument('token_id', help='Deathbat token id')

    parser.add_argument(
        '--config',
        default=None,
        help='Path to config file (default: $TWIN_CONFIG_PATH or config/twin_config.yml)'
    )

    parser.add_argument(
        '--no-owner',
        action='store_true',
        help='Do not look up owners on OpenSea'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity level (default: WARNING)'
    )

    args = parser.parse_args()

    setup_logging(log_level=args.log_level)
    logger = get_logger(__name__)

    start_time = datetime.now()

    try:
        settings = load_settings(args.config)
        store, _ = load_catalog(settings=settings.catalog)
    except (FileNotFoundError, ValueError, yaml.YAMLError, CatalogError, UnknownTraitType) as e:
        logger.error(f"Could not load catalog: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)

    matcher = TwinMatcher(
        store,
        min_id=settings.catalog.min_token_id,
        max_id=settings.catalog.max_token_id,
    )

    try:
        match = matcher.resolve(args.token_id)
    except (InvalidIdentifier, NotFound) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if not args.no_owner:
        owner_lookup = get_owner_lookup(settings.enrichment, settings.catalog.contract_address)
        try:
            source = owner_lookup.enrich(match.source)
            twin = owner_lookup.enrich(match.twin) if match.twin is not None else None
        finally:
            owner_lookup.close()
        match = replace(match, source=source, twin=twin)

    print_banner()
    print(format_match(match))
    print()
    print(f"  Elapsed: {(datetime.now() - start_time).total_seconds():.2f} seconds")
    print("=" * 70)


if __name__ == '__main__':
    main()
