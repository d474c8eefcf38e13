"""
Request/response models for the report endpoints.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ParseHtmlRequest(BaseModel):
    """Raw results page to parse."""
    html: str = Field("", description="Scraped results page HTML")


class ReportResponse(BaseModel):
    """Parsed report in the renderer wire format."""
    success: bool
    source: str = Field(..., description="html, scraped or database")
    sections: List[Dict[str, Any]] = Field(default_factory=list)
    industry: Optional[str] = None
    country: Optional[str] = None
