"""
PageCarbon — Audit Routes
Page weight, carbon and bandwidth cost estimates for a single URL.
"""

import logging
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, HTTPException, status

from pagecarbon.core.config import settings
from pagecarbon.core.errors import (
    InputValidationError,
    InternalAuditError,
    PageFetchError,
)
from pagecarbon.schemas.schemas import AuditRequest, AuditResponse, AuditResult
from pagecarbon.services.auditor import audit_page
from pagecarbon.services.suggestions import build_tips
from pagecarbon.utils.carbon import estimate_per_thousand_views

logger = logging.getLogger(__name__)
router = APIRouter()

Auditor = Callable[[str], Awaitable[AuditResult]]


async def _configured_audit(url: str) -> AuditResult:
    return await audit_page(
        url,
        concurrency_limit=settings.AUDIT_CONCURRENCY,
        max_images=settings.MAX_IMAGES,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
        user_agent=settings.USER_AGENT,
    )


def get_auditor() -> Auditor:
    """Dependency returning the audit callable (overridden in tests)."""
    return _configured_audit


@router.post(
    "/audit",
    response_model=AuditResponse,
    summary="Audit a page's weight and footprint",
    description="Fetch a page, size its stylesheets, scripts and images, and estimate CO2 and cost per 1k views.",
)
async def run_audit(
    request: AuditRequest,
    auditor: Auditor = Depends(get_auditor),
):
    """Audit a page and attach emission, cost and suggestion data."""
    try:
        result = await auditor(request.url)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PageFetchError as e:
        logger.warning(f"Audit aborted: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to fetch URL")
    except InternalAuditError as e:
        logger.error(f"Audit failed: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error")

    coefficients = settings.coefficients
    footprint = estimate_per_thousand_views(result.total_bytes, coefficients)
    tips = build_tips(
        result,
        large_image_bytes=settings.LARGE_IMAGE_BYTES,
        large_script_bytes=settings.LARGE_SCRIPT_BYTES,
        heavy_page_bytes=settings.HEAVY_PAGE_BYTES,
    )

    return AuditResponse(
        url=result.source_url,
        page_bytes=result.page_bytes,
        bytes_total=result.total_bytes,
        co2_per_k_views_g=footprint.co2_per_k_views_g,
        cost_per_k_views_usd=footprint.cost_per_k_views_usd,
        assets=list(result.assets),
        tips=tips,
        assumptions={
            "ENERGY_KWH_PER_GB": coefficients.energy_kwh_per_gb,
            "CARBON_G_PER_KWH": coefficients.carbon_g_per_kwh,
            "COST_USD_PER_GB": coefficients.cost_usd_per_gb,
        },
    )
