"""
Report router endpoints.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..models.report import ParseHtmlRequest, ReportResponse
from ..services.report_service import ReportService
from ...parsers.models import sections_to_dicts

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache()
def get_report_service() -> ReportService:
    """Shared ReportService (overridden in tests)."""
    return ReportService()


def _require_unlocked(service: ReportService, invite_code: Optional[str]):
    if not service.is_unlocked(invite_code):
        raise HTTPException(status_code=402, detail="Report is locked; payment required")


@router.post("/parse", response_model=ReportResponse)
def parse_report(request: ParseHtmlRequest, service: ReportService = Depends(get_report_service)):
    """Parse a results page supplied in the request body."""
    sections = service.parse_html(request.html)
    return ReportResponse(success=True, source="html", sections=sections_to_dicts(sections))


@router.get("/scraped", response_model=ReportResponse)
def get_scraped_report(
    industry_id: int,
    country_id: int,
    invite_code: Optional[str] = None,
    service: ReportService = Depends(get_report_service)
):
    """Scrape and parse the results page for an industry/country pair."""
    _require_unlocked(service, invite_code)

    try:
        sections = service.load_scraped_report(industry_id, country_id)
    except Exception as e:
        logger.error(f"[ERROR] Scraped report failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if sections is None:
        raise HTTPException(status_code=502, detail="Failed to load report data")

    return ReportResponse(
        success=bool(sections),
        source="scraped",
        sections=sections_to_dicts(sections),
        industry=str(industry_id),
        country=str(country_id)
    )


@router.get("/local", response_model=ReportResponse)
def get_local_report(
    country: str,
    industry: str,
    invite_code: Optional[str] = None,
    service: ReportService = Depends(get_report_service)
):
    """Build a report for a country/industry pair from the embedded database."""
    _require_unlocked(service, invite_code)

    try:
        sections = service.load_local_report(country, industry)
    except Exception as e:
        logger.error(f"[ERROR] Local report failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if sections is None:
        raise HTTPException(status_code=503, detail="Report database not available")
    if not sections:
        raise HTTPException(status_code=404, detail=f"No report data for {country}/{industry}")

    return ReportResponse(
        success=True,
        source="database",
        sections=sections_to_dicts(sections),
        industry=industry,
        country=country
    )
