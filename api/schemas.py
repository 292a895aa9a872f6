"""
Twin Finder - Pydantic Response Schemas
========================================
Response models for the twin finder API.
"""

from typing import Optional, List, Any
from datetime import datetime
from pydantic import BaseModel, Field

from catalog.models import Record
from catalog.matching import TwinMatch


# =====================================================================
# HEALTH SCHEMAS
# =====================================================================

class HealthStatus(BaseModel):
    """Health check response."""
    status: str = Field(description="Overall API status")
    catalog: str = Field(description="Catalog load status")
    records: int = Field(0, description="Number of records loaded")
    unique_records: int = Field(0, description="Number of one-of-one records")
    records_skipped: int = Field(0, description="Records dropped by the skip policy at load time")
    checksum: Optional[str] = Field(None, description="SHA256 of the loaded catalog file")
    enrichment: bool = Field(False, description="Whether owner lookups are enabled")
    version: str = Field(description="API version")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


# =====================================================================
# RECORD SCHEMAS
# =====================================================================

class Attribute(BaseModel):
    """Raw attribute as it appears in the catalog file."""
    trait_type: str
    value: str


class Traits(BaseModel):
    """Normalized trait profile."""
    background: str = ""
    eyes: str = ""
    facial_hair: str = ""
    head: str = ""
    mask: str = ""
    mouth: str = ""
    nose: str = ""
    skin: str = ""
    perk: str = ""
    signature: str = ""
    unique: bool = False


class DeathbatRecord(BaseModel):
    """One catalog record."""
    id: int
    name: str = ""
    description: Any = None
    minted: bool = False
    image: str = ""
    attributes: List[Attribute] = []
    traits: Traits = Traits()
    hyperlink: str = ""
    owner: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "DeathbatRecord":
        return cls(**record.to_dict())


# =====================================================================
# TWIN SCHEMAS
# =====================================================================

class TwinResponse(BaseModel):
    """Source record and its twin."""
    source: DeathbatRecord
    twin: Optional[DeathbatRecord] = Field(None, description="Null when the source is a 1/1")
    score: int = Field(0, description="Weighted trait similarity of the pair")
    no_twin: bool = Field(False, description="True when the source is a 1/1 and has no twin")

    @classmethod
    def from_match(cls, match: TwinMatch) -> "TwinResponse":
        return cls(
            source=DeathbatRecord.from_record(match.source),
            twin=DeathbatRecord.from_record(match.twin) if match.twin is not None else None,
            score=match.score,
            no_twin=match.no_twin,
        )


class ErrorResponse(BaseModel):
    """Error body for rejected queries."""
    detail: str
