"""
Twin Finder - Catalog Loader
=============================
Reads the Deathbats JSON file once at startup and builds the CatalogStore.

Features:
- Checksum of the source file logged for traceability
- Trait profiles extracted for every record at load time
- Hyperlinks derived from the configured marketplace URL
- Configurable policy for records with unknown trait types
  ('fail' aborts the load, 'skip' leaves the record out)

Expected file shape:
    [{"id": 1, "name": "...", "description": ..., "minted": true,
      "image": "...", "attributes": [{"trait_type": "Mask", "value": "..."}]}]
"""

import hashlib
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from catalog.errors import CatalogError, UnknownTraitType
from catalog.models import Record
from catalog.settings import CatalogSettings, ON_INVALID_SKIP
from catalog.store import CatalogStore
from catalog.traits import extract_traits

logger = logging.getLogger(__name__)


@dataclass
class LoadSummary:
    """Statistics from one catalog load."""
    source: Optional[str] = None
    checksum: Optional[str] = None
    records_read: int = 0
    records_loaded: int = 0
    records_skipped: int = 0
    unique_records: int = 0
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'checksum': self.checksum,
            'records_read': self.records_read,
            'records_loaded': self.records_loaded,
            'records_skipped': self.records_skipped,
            'unique_records': self.unique_records,
            'errors': self.errors,
        }


def compute_file_checksum(file_path: Path) -> str:
    """
    Compute SHA256 checksum of a file

    Args:
        file_path: Path to file

    Returns:
        Hexadecimal checksum string
    """
    sha256_hash = hashlib.sha256()

    with open(file_path, "rb") as f:
        for byte_block in iter(lambda: f.read(65536), b""):
            sha256_hash.update(byte_block)

    checksum = sha256_hash.hexdigest()
    logger.debug(f"Computed checksum for {file_path.name}: {checksum[:16]}...")
    return checksum


def _parse_attributes(raw: Any, token_id: int) -> Tuple[Tuple[str, str], ...]:
    """Normalize the raw attribute list into (trait_type, value) pairs."""
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise CatalogError(f"Token {token_id}: 'attributes' must be a list")

    pairs = []
    for item in raw:
        if not isinstance(item, dict):
            raise CatalogError(f"Token {token_id}: attribute entries must be objects")
        trait_type = item.get('trait_type')
        value = item.get('value')
        pairs.append((
            '' if trait_type is None else str(trait_type),
            '' if value is None else str(value),
        ))
    return tuple(pairs)


def build_record(raw: Dict[str, Any], settings: CatalogSettings) -> Record:
    """
    Build one Record (with its trait profile) from a raw JSON object.

    Raises:
        CatalogError: the object is malformed or its id is not a positive int
        UnknownTraitType: an attribute category is not recognized
    """
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog entries must be objects, got {type(raw).__name__}")

    token_id = raw.get('id')
    if not isinstance(token_id, int) or isinstance(token_id, bool) or token_id < 1:
        raise CatalogError(f"Invalid token id: {token_id!r}")

    attributes = _parse_attributes(raw.get('attributes'), token_id)
    traits = extract_traits(attributes, token_id)

    return Record(
        token_id=token_id,
        name=str(raw.get('name') or ''),
        description=raw.get('description'),
        minted=bool(raw.get('minted', False)),
        image=str(raw.get('image') or ''),
        attributes=attributes,
        traits=traits,
        hyperlink=settings.hyperlink_for(token_id),
    )


def build_catalog(
    raw_records: Iterable[Dict[str, Any]],
    settings: Optional[CatalogSettings] = None,
    summary: Optional[LoadSummary] = None
) -> Tuple[CatalogStore, LoadSummary]:
    """
    Build a CatalogStore from already-parsed raw records.

    The source of the records (file, API, fixture) does not matter here.

    Args:
        raw_records: Raw record objects in catalog order
        settings: Catalog settings (defaults if None)
        summary: Summary to fill in (a new one if None)

    Returns:
        (store, summary)

    Raises:
        UnknownTraitType: a record has an unknown trait type and the policy is 'fail'
        CatalogError: malformed record, or duplicate token ids
    """
    settings = settings or CatalogSettings()
    summary = summary or LoadSummary()
    skip_invalid = settings.on_invalid_record == ON_INVALID_SKIP

    records = []
    for raw in raw_records:
        summary.records_read += 1
        try:
            records.append(build_record(raw, settings))
        except (UnknownTraitType, CatalogError) as e:
            if not skip_invalid:
                raise
            summary.records_skipped += 1
            summary.errors.append(str(e))
            logger.error(f"Skipping catalog record: {e}")

    store = CatalogStore(records)
    summary.records_loaded = len(store)
    summary.unique_records = store.unique_count
    return store, summary


def load_catalog(
    path: Optional[str] = None,
    settings: Optional[CatalogSettings] = None
) -> Tuple[CatalogStore, LoadSummary]:
    """
    Main entry point: read the catalog JSON file and build the store.

    Args:
        path: Catalog file (defaults to settings.path)
        settings: Catalog settings (defaults if None)

    Returns:
        (store, summary)

    Raises:
        FileNotFoundError: catalog file does not exist
        CatalogError: file is not a JSON array of objects
        UnknownTraitType: see build_catalog
    """
    settings = settings or CatalogSettings()
    file_path = Path(path or settings.path)

    if not file_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {file_path}")

    logger.info(f"Loading catalog from {file_path}")

    summary = LoadSummary(source=str(file_path), checksum=compute_file_checksum(file_path))

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file is not valid JSON: {file_path}: {e}") from e

    if not isinstance(data, list):
        raise CatalogError(f"Catalog file must contain a JSON array: {file_path}")

    store, summary = build_catalog(data, settings, summary)

    logger.info(
        f"Catalog loaded: {summary.records_loaded} of {summary.records_read} records "
        f"({summary.unique_records} one-of-one, {summary.records_skipped} skipped), "
        f"checksum {summary.checksum[:16]}..."
    )
    return store, summary
