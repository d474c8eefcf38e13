"""
Rewrites legacy section titles to current product terminology.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional

LEGACY_TITLES: Mapping[str, str] = MappingProxyType({
    'Important to know': 'Important to consider',
    'CSR labels, supply chain initiatives & guidelines': 'ESG labels, supply chain initiatives & guidelines',
    'CSR organizations': 'Relevant organizations',
    'About MVO Nederland': 'About MSC HK',
})

ACRONYM_PATTERN = re.compile(r'\bCSR\b')


class TitleNormalizer:
    """Exact-match title table with a generic CSR -> ESG fallback."""

    def __init__(self, title_map: Optional[Mapping[str, str]] = None):
        self._title_map = MappingProxyType(dict(LEGACY_TITLES if title_map is None else title_map))

    def normalize(self, raw_title: str) -> str:
        if not raw_title:
            return raw_title or ""
        if raw_title in self._title_map:
            return self._title_map[raw_title]
        return ACRONYM_PATTERN.sub('ESG', raw_title)


DEFAULT_TITLE_NORMALIZER = TitleNormalizer()


def normalize_title(raw_title: str) -> str:
    """Normalize a title with the default legacy title table."""
    return DEFAULT_TITLE_NORMALIZER.normalize(raw_title)
