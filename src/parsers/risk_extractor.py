"""
Risk/recommendation extraction for the risk-analysis block.

Layout of the block (see ReportShape for the selectors):

    theme grid
      theme node (id = theme identifier, h3 = display name)
      risk panel  -> content -> risk modules   (prose + citation list)
      advice panel -> content -> advice modules (prose)

Themes are grouped under their taxonomy category in first-seen order.
A broken grid or module is logged and skipped; its siblings still count.
"""

import logging
from typing import Dict, List, Optional, Tuple

from bs4 import Tag

from .html_rewrites import rewrite_fragment
from .models import RawBlock, RiskCategory, ThemeEntry, RiskItem, RecommendationItem
from .report_shape import ReportShape, DEFAULT_SHAPE, node_text
from .taxonomy import Taxonomy, DEFAULT_TAXONOMY

logger = logging.getLogger(__name__)


class RiskExtractor:
    """Builds RiskCategory lists from a risk-analysis block."""

    def __init__(
        self,
        taxonomy: Optional[Taxonomy] = None,
        shape: ReportShape = DEFAULT_SHAPE
    ):
        self.taxonomy = taxonomy or DEFAULT_TAXONOMY
        self.shape = shape

    def extract(self, block: RawBlock) -> List[RiskCategory]:
        """
        Extract categorized themes from a risk-analysis block.

        Args:
            block: Block classified as risk analysis

        Returns:
            Categories in first-seen order (possibly empty)
        """
        grids = block.node.select(self.shape.theme_grid)
        if not grids:
            logger.warning(
                f"[WARN] No theme grids in risk block '{block.id}' "
                f"(report shape {self.shape.version})"
            )
            return []

        categories: Dict[str, RiskCategory] = {}
        for index, grid in enumerate(grids):
            try:
                category_title, theme = self._extract_theme(grid)
            except Exception as e:
                logger.warning(f"[WARN] Skipping theme grid #{index} in '{block.id}': {e}")
                continue

            if category_title not in categories:
                categories[category_title] = RiskCategory(category_title=category_title)
            categories[category_title].themes.append(theme)

        logger.info(
            f"[INFO] Extracted {sum(len(c.themes) for c in categories.values())} theme(s) "
            f"in {len(categories)} categor{'y' if len(categories) == 1 else 'ies'}"
        )
        return list(categories.values())

    def _extract_theme(self, grid: Tag) -> Tuple[str, ThemeEntry]:
        theme_node = grid.select_one(self.shape.theme_node)
        theme_id = ""
        theme_name = ""
        if theme_node is not None:
            theme_id = theme_node.get('id') or ""
            theme_name = node_text(theme_node.select_one(self.shape.theme_heading))
        # unhumanized id is shown as-is when the heading is missing
        theme_name = theme_name or theme_id

        category_title = self.taxonomy.category_for(theme_id)

        risks = []
        for module in self._modules(grid, theme_id, self.shape.risk_panel, self.shape.risk_module):
            try:
                item = self._risk_item(module, theme_name)
            except Exception as e:
                logger.warning(f"[WARN] Skipping risk module in '{theme_id}': {e}")
                continue
            if item is not None:
                risks.append(item)

        recommendations = []
        for module in self._modules(grid, theme_id, self.shape.advice_panel, self.shape.advice_module):
            try:
                item = self._recommendation_item(module)
            except Exception as e:
                logger.warning(f"[WARN] Skipping advice module in '{theme_id}': {e}")
                continue
            if item is not None:
                recommendations.append(item)

        theme = ThemeEntry(
            theme_name=theme_name,
            risks=risks,
            recommendations=recommendations,
            risk_count=len(risks),
            recommendation_count=len(recommendations)
        )
        return category_title, theme

    def _modules(self, grid: Tag, theme_id: str, panel_selector: str, module_selector: str) -> List[Tag]:
        """
        Cards of one panel. An empty content wrapper is a theme without
        cards; a missing panel or wrapper, or a wrapper whose elements
        match no card selector, is markup drift and is logged.
        """
        panel = grid.select_one(panel_selector)
        if panel is None:
            self._warn_drift(f"no panel '{panel_selector}' in theme '{theme_id}'")
            return []
        content = panel.select_one(self.shape.panel_content)
        if content is None:
            self._warn_drift(f"no '{self.shape.panel_content}' in panel '{panel_selector}' of theme '{theme_id}'")
            return []
        modules = content.select(module_selector)
        if not modules and content.find(True) is not None:
            self._warn_drift(f"no '{module_selector}' cards among the elements of theme '{theme_id}'")
        return modules

    def _warn_drift(self, message: str):
        logger.warning(f"[WARN] {message} (report shape {self.shape.version})")

    def _prose_lines(self, module: Tag) -> List[str]:
        prose = module.select_one(self.shape.prose)
        if prose is None:
            self._warn_drift(f"card without '{self.shape.prose}'")
            return []
        lines = []
        for element in prose.select(self.shape.prose_lines):
            text = node_text(element)
            if text:
                lines.append(text)
        return lines

    def _risk_item(self, module: Tag, theme_name: str) -> Optional[RiskItem]:
        lines = self._prose_lines(module)
        if not lines:
            return None

        sources = []
        for link in module.select(self.shape.source_links):
            text = node_text(link)
            if text:
                sources.append(text)

        return RiskItem(
            risk_title=theme_name,
            risk_description="\n".join(lines),
            sources=sources,
            raw_html=rewrite_fragment(str(module))
        )

    def _recommendation_item(self, module: Tag) -> Optional[RecommendationItem]:
        lines = self._prose_lines(module)
        if not lines:
            return None
        return RecommendationItem(
            recommendation_text="\n".join(lines),
            raw_html=rewrite_fragment(str(module))
        )
