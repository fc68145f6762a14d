"""
PageCarbon Backend — Pydantic Schemas
Audit results plus the request/response models of the HTTP API.
"""
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field

from pagecarbon.services.extractor import AssetType


# ── Audit Core ───────────────────────────────────────────────────────────────
class AssetRecord(BaseModel):
    type: AssetType
    url: str = Field(description="Absolute URL of the asset")
    bytes: int = Field(ge=0, description="Transfer size; 0 when unknown")

    class Config:
        frozen = True


class AuditResult(BaseModel):
    source_url: str
    page_bytes: int = Field(ge=0)
    assets: Tuple[AssetRecord, ...] = ()
    total_bytes: int = Field(ge=0)

    class Config:
        frozen = True

    @classmethod
    def build(cls, source_url: str, page_bytes: int, assets: List[AssetRecord]) -> "AuditResult":
        """Assemble a result whose total is the exact sum of page and asset bytes."""
        return cls(
            source_url=source_url,
            page_bytes=page_bytes,
            assets=tuple(assets),
            total_bytes=page_bytes + sum(a.bytes for a in assets),
        )


# ── Audit API ────────────────────────────────────────────────────────────────
class AuditRequest(BaseModel):
    url: str = Field(default="", description="http(s) URL of the page to audit")


class AuditResponse(BaseModel):
    ok: bool = True
    url: str
    page_bytes: int
    bytes_total: int
    co2_per_k_views_g: int
    cost_per_k_views_usd: float
    assets: List[AssetRecord]
    tips: List[str]
    assumptions: Dict[str, float]


# ── Health ───────────────────────────────────────────────────────────────────
class HealthResponse(BaseModel):
    ok: bool
    version: str
    environment: str
