"""
Folds segmented blocks into the final section list.
"""

import logging
from typing import List, Optional

from .models import RawBlock, ReportSection, SectionType
from .risk_extractor import RiskExtractor

logger = logging.getLogger(__name__)


class SectionAssembler:
    """Turns RawBlocks into typed ReportSections, keeping document order."""

    def __init__(self, extractor: Optional[RiskExtractor] = None):
        self.extractor = extractor or RiskExtractor()

    def assemble(self, blocks: List[RawBlock]) -> List[ReportSection]:
        sections = []
        for block in blocks:
            if block.is_risk_analysis:
                sections.append(ReportSection(
                    id=block.id,
                    title=block.title,
                    type=SectionType.RISK,
                    categories=self.extractor.extract(block)
                ))
            else:
                sections.append(ReportSection(
                    id=block.id,
                    title=block.title,
                    type=SectionType.TEXT,
                    html=str(block.node)
                ))

        risk_blocks = sum(1 for s in sections if s.is_risk)
        if risk_blocks > 1:
            logger.warning(f"[WARN] {risk_blocks} blocks classified as risk analysis")
        return sections
