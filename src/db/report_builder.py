"""
Builds report sections from the embedded store.

This path bypasses scraping and lands in the same ReportSection /
RiskCategory model as the HTML parser, so the renderers need no branch.
"""

import logging
from html import escape
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from ..parsers.html_rewrites import fill_badge_placeholders, rewrite_fragment
from ..parsers.models import (
    ReportSection, RiskCategory, ThemeEntry, RiskItem, RecommendationItem, SectionType,
)
from .report_store import ReportStore, ApplicabilityIds

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown Category"
UNKNOWN_THEME = "Unknown Theme"


def _row_text(row: Dict[str, Any]) -> str:
    text = (row.get('content') or '').strip()
    if text:
        return text
    content_html = row.get('content_html') or ''
    if not content_html:
        return ''
    return BeautifulSoup(content_html, 'lxml').get_text('\n').strip()


def _source_lines(row: Dict[str, Any]) -> List[str]:
    return [line.strip() for line in (row.get('source') or '').splitlines() if line.strip()]


class StoreReportBuilder:
    """Turns store rows for a country/industry pair into report sections."""

    def __init__(self, store: ReportStore):
        self.store = store

    def _raw_html(self, row: Dict[str, Any], country: str, industry: str) -> Optional[str]:
        content_html = row.get('content_html')
        if not content_html:
            return None
        filled = fill_badge_placeholders(content_html, row.get('classification') or '', country, industry)
        return rewrite_fragment(filled)

    def build_categories(
        self,
        risk_rows: List[Dict[str, Any]],
        advice_rows: List[Dict[str, Any]],
        country: str,
        industry: str
    ) -> List[RiskCategory]:
        """
        Group risk and advice rows by issue (category) and sub-issue (theme).

        Args:
            risk_rows: Rows from the risks table
            advice_rows: Rows from the advice table
            country: Country name (fills country badges)
            industry: Industry name (fills industry badges)

        Returns:
            Categories in first-seen order
        """
        categories: Dict[str, RiskCategory] = {}
        themes: Dict[tuple, Dict[str, list]] = {}

        def theme_slot(row):
            category_title = row.get('issue_name') or UNKNOWN_CATEGORY
            theme_name = row.get('sub_issue_name') or UNKNOWN_THEME
            if category_title not in categories:
                categories[category_title] = RiskCategory(category_title=category_title)
            key = (category_title, theme_name)
            if key not in themes:
                themes[key] = {'risks': [], 'recommendations': []}
            return key

        for row in risk_rows:
            key = theme_slot(row)
            text = _row_text(row)
            if not text:
                continue
            themes[key]['risks'].append(RiskItem(
                risk_title=key[1],
                risk_description=text,
                sources=_source_lines(row),
                raw_html=self._raw_html(row, country, industry)
            ))

        for row in advice_rows:
            key = theme_slot(row)
            text = _row_text(row)
            if not text:
                continue
            themes[key]['recommendations'].append(RecommendationItem(
                recommendation_text=text,
                raw_html=self._raw_html(row, country, industry)
            ))

        for (category_title, theme_name), items in themes.items():
            categories[category_title].themes.append(ThemeEntry(
                theme_name=theme_name,
                risks=items['risks'],
                recommendations=items['recommendations'],
            ))

        return list(categories.values())

    def _considerations_html(self, rows: List[Dict[str, Any]], country: str, industry: str) -> str:
        cards = []
        for row in rows:
            body = row.get('content_html') or escape(row.get('content') or '')
            if not body.strip():
                continue
            body = fill_badge_placeholders(body, row.get('classification') or '', country, industry)
            cards.append(f'<div class="consideration-card">{rewrite_fragment(body)}</div>')
        return "".join(cards)

    def _organizations_html(self, rows: List[Dict[str, Any]]) -> str:
        cards = []
        for row in rows:
            name = escape(row.get('name') or '')
            intro = row.get('intro_html') or escape(row.get('intro') or '')
            if not name and not intro:
                continue
            link = row.get('link')
            heading = f'<a href="{escape(link, quote=True)}">{name}</a>' if link else name
            cards.append(f'<div class="organization-card"><h3>{heading}</h3>{intro}</div>')
        return "".join(cards)

    def build_sections(
        self,
        country: str,
        industry: str,
        ids: Optional[ApplicabilityIds] = None
    ) -> List[ReportSection]:
        """
        Build the database-backed sections for a country/industry pair.

        Args:
            country: Country name as stored
            industry: Industry name as stored
            ids: Already resolved ids (resolved from the store when omitted)

        Returns:
            Sections; the risk-analysis section is always present
        """
        logger.info(f"[INFO] Building report from store: {country}/{industry}")
        if ids is None:
            ids = self.store.resolve(country, industry)

        sections = []

        considerations = self.store.fetch_by_ids('considerations', ids.consideration_ids)
        html = self._considerations_html(considerations, country, industry)
        if html:
            sections.append(ReportSection(
                id='important-to-consider',
                title='Important to consider',
                type=SectionType.TEXT,
                html=html
            ))

        categories = self.build_categories(
            self.store.get_risks_by_ids(ids.risk_ids),
            self.store.get_advice_by_ids(ids.advice_ids),
            country,
            industry
        )
        sections.append(ReportSection(
            id='risk-analysis',
            title='Risk analysis',
            type=SectionType.RISK,
            categories=categories
        ))

        for table, table_ids, section_id, title in (
            ('organizations', ids.organization_ids,
             'relevant-organizations', 'Relevant organizations'),
            ('initiatives', ids.initiative_ids,
             'esg-labels-supply-chain-initiatives-guidelines',
             'ESG labels, supply chain initiatives & guidelines'),
        ):
            rows = self.store.fetch_by_ids(table, table_ids)
            html = self._organizations_html(rows)
            if html:
                sections.append(ReportSection(id=section_id, title=title, type=SectionType.TEXT, html=html))

        logger.info(f"[OK] Built {len(sections)} sections from store")
        return sections
