"""
Configuration for Deathbat Twin Finder
Loads catalog, enrichment and logging settings from YAML
"""

import os
import yaml
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/twin_config.yml'
CONFIG_PATH_ENV = 'TWIN_CONFIG_PATH'

ON_INVALID_FAIL = 'fail'
ON_INVALID_SKIP = 'skip'

DEATHBATS_CONTRACT = '0x1D3aDa5856B14D9dF178EA5Cab137d436dC55F1D'


@dataclass
class CatalogSettings:
    """Where the catalog comes from and which ids are valid."""
    path: str = 'data/deathbats.json'
    min_token_id: int = 1
    max_token_id: int = 10000
    on_invalid_record: str = ON_INVALID_FAIL
    contract_address: str = DEATHBATS_CONTRACT
    marketplace_url: str = 'https://opensea.io/assets'

    def hyperlink_for(self, token_id: int) -> str:
        if not self.marketplace_url:
            return ""
        return f"{self.marketplace_url.rstrip('/')}/{self.contract_address}/{token_id}"


@dataclass
class EnrichmentSettings:
    """Owner lookup against the external registry."""
    enabled: bool = True
    owner_api_url: str = 'https://api.opensea.io/api/v1/asset'
    timeout_seconds: float = 5.0
    api_key_env: str = 'OPENSEA_API_KEY'


@dataclass
class LoggingSettings:
    level: str = 'INFO'
    file: Optional[str] = None


@dataclass
class TwinSettings:
    """Top-level settings object."""
    catalog: CatalogSettings = field(default_factory=CatalogSettings)
    enrichment: EnrichmentSettings = field(default_factory=EnrichmentSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    config_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'catalog': dict(self.catalog.__dict__),
            'enrichment': dict(self.enrichment.__dict__),
            'logging': dict(self.logging.__dict__),
            'config_path': self.config_path,
        }


def _section(config: Dict[str, Any], name: str, cls):
    """Build a settings dataclass from one YAML section, ignoring unknown keys."""
    raw = config.get(name) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    known = {k: v for k, v in raw.items() if k in cls.__dataclass_fields__}
    unknown = set(raw) - set(known)
    if unknown:
        logger.warning(f"Ignoring unknown keys in '{name}' config: {sorted(unknown)}")
    return cls(**known)


def load_settings(config_path: Optional[str] = None) -> TwinSettings:
    """
    Load settings from YAML.

    Args:
        config_path: Path to config file. Defaults to $TWIN_CONFIG_PATH,
            then config/twin_config.yml.

    Returns:
        TwinSettings with defaults for anything the file leaves out

    Raises:
        FileNotFoundError: config file does not exist
        ValueError: a section or value is malformed
    """
    path = Path(config_path or os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    settings = TwinSettings(
        catalog=_section(config, 'catalog', CatalogSettings),
        enrichment=_section(config, 'enrichment', EnrichmentSettings),
        logging=_section(config, 'logging', LoggingSettings),
        config_path=str(path),
    )

    catalog = settings.catalog
    if catalog.on_invalid_record not in (ON_INVALID_FAIL, ON_INVALID_SKIP):
        raise ValueError(
            f"catalog.on_invalid_record must be '{ON_INVALID_FAIL}' or '{ON_INVALID_SKIP}', "
            f"got {catalog.on_invalid_record!r}"
        )
    if catalog.min_token_id > catalog.max_token_id:
        raise ValueError("catalog.min_token_id must be <= catalog.max_token_id")

    # A relative catalog path that is not found from the working directory is
    # tried next to the config file, then one level up (config/ sits beside data/)
    catalog_path = Path(catalog.path)
    if not catalog_path.is_absolute() and not catalog_path.exists():
        config_dir = path.resolve().parent
        for base in (config_dir, config_dir.parent):
            candidate = base / catalog_path
            if candidate.exists():
                catalog.path = str(candidate)
                break

    logger.debug(f"Settings loaded from {path}")
    return settings
