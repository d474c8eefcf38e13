"""
Splits a parsed results page into top-level named blocks.
"""

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .models import RawBlock
from .report_shape import ReportShape, DEFAULT_SHAPE, node_text
from .title_normalizer import TitleNormalizer, DEFAULT_TITLE_NORMALIZER

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"
RISK_TITLE_MARKER = "risk analysis"
RISK_ID_MARKER = "risk-analysis"

_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def slugify(title: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to '-', trim hyphens."""
    return _NON_ALNUM.sub('-', (title or "").lower()).strip('-')


def is_risk_analysis(title: str, block_id: str) -> bool:
    return RISK_TITLE_MARKER in (title or "").lower() or RISK_ID_MARKER in (block_id or "")


class SectionSegmenter:
    """Finds the named blocks inside the results container."""

    def __init__(
        self,
        shape: ReportShape = DEFAULT_SHAPE,
        title_normalizer: Optional[TitleNormalizer] = None
    ):
        self.shape = shape
        self.title_normalizer = title_normalizer or DEFAULT_TITLE_NORMALIZER

    def segment(self, document: BeautifulSoup) -> List[RawBlock]:
        """
        Segment a document into raw blocks in document order.

        Args:
            document: Parsed results page

        Returns:
            List of RawBlock (empty when the results container is absent)
        """
        container = document.select_one(self.shape.container)
        if container is None:
            logger.warning(
                f"[WARN] Results container '{self.shape.container}' not found "
                f"(report shape {self.shape.version})"
            )
            return []

        blocks = []
        for node in container.select(self.shape.block):
            blocks.append(self._to_block(node))

        logger.debug(f"[DEBUG] Segmented {len(blocks)} block(s)")
        return blocks

    def _to_block(self, node: Tag) -> RawBlock:
        heading = node.select_one(self.shape.block_heading)
        raw_title = node_text(heading) or UNTITLED
        title = self.title_normalizer.normalize(raw_title)

        landmark = node.select_one(self.shape.landmark)
        explicit_id = landmark.get('id') if landmark is not None else None
        if isinstance(explicit_id, list):
            explicit_id = " ".join(explicit_id)
        block_id = explicit_id or slugify(title)

        return RawBlock(
            title=title,
            id=block_id,
            node=node,
            is_risk_analysis=is_risk_analysis(title, block_id)
        )
