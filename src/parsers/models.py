"""
Data models for the parsed report.

Defines the section/category/theme structures handed to the renderers.
`to_dict()` on every model produces the renderer wire format (camelCase keys).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from bs4 import Tag


class SectionType(Enum):
    """Payload shape of a report section."""
    TEXT = "text"
    RISK = "risk"


@dataclass
class RiskItem:
    """One identified risk inside a theme."""
    risk_title: str
    risk_description: str
    sources: List[str] = field(default_factory=list)
    raw_html: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "riskTitle": self.risk_title,
            "riskDescription": self.risk_description,
            "sources": list(self.sources),
        }
        if self.raw_html is not None:
            data["rawHtml"] = self.raw_html
        return data


@dataclass
class RecommendationItem:
    """One recommendation (advice) inside a theme."""
    recommendation_text: str
    raw_html: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"recommendationText": self.recommendation_text}
        if self.raw_html is not None:
            data["rawHtml"] = self.raw_html
        return data


@dataclass
class ThemeEntry:
    """
    One sub-topic within a category.

    The counts are authoritative for consumers; they are filled from the
    list lengths when not given explicitly.
    """
    theme_name: str
    risks: List[RiskItem] = field(default_factory=list)
    recommendations: List[RecommendationItem] = field(default_factory=list)
    risk_count: Optional[int] = None
    recommendation_count: Optional[int] = None

    def __post_init__(self):
        if self.risk_count is None:
            self.risk_count = len(self.risks)
        if self.recommendation_count is None:
            self.recommendation_count = len(self.recommendations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "themeName": self.theme_name,
            "risks": [r.to_dict() for r in self.risks],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "riskCount": self.risk_count,
            "recommendationCount": self.recommendation_count,
        }


@dataclass
class RiskCategory:
    """One top-level ESG category with its themes in source order."""
    category_title: str
    themes: List[ThemeEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categoryTitle": self.category_title,
            "themes": [t.to_dict() for t in self.themes],
        }


@dataclass
class ReportSection:
    """One top-level report block."""
    id: str
    title: str
    type: SectionType
    html: Optional[str] = None
    categories: Optional[List[RiskCategory]] = None

    def __post_init__(self):
        # risk sections always carry a list, text sections never do
        if self.type == SectionType.RISK:
            self.html = None
            if self.categories is None:
                self.categories = []
        else:
            self.categories = None
            if self.html is None:
                self.html = ""

    @property
    def is_risk(self) -> bool:
        return self.type == SectionType.RISK

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "type": self.type.value,
        }
        if self.is_risk:
            data["categories"] = [c.to_dict() for c in self.categories]
        else:
            data["html"] = self.html
        return data


@dataclass
class RawBlock:
    """A segmented top-level block before assembly."""
    title: str
    id: str
    node: Tag
    is_risk_analysis: bool = False


def sections_to_dicts(sections: List[ReportSection]) -> List[Dict[str, Any]]:
    """Serialize a section list for JSON output."""
    return [s.to_dict() for s in sections]
