"""
Theme -> ESG category taxonomy.
"""

from types import MappingProxyType
from typing import Mapping, Optional

FAIR_BUSINESS_PRACTICES = "Fair business practices"
HUMAN_RIGHTS_ETHICS = "Human rights & ethics"
ENVIRONMENT = "Environment"
LABOUR_RIGHTS = "Labour rights"
UNCATEGORIZED = "Uncategorized"

THEME_CATEGORIES: Mapping[str, str] = MappingProxyType({
    'theme-taxation': FAIR_BUSINESS_PRACTICES,
    'theme-corruption': FAIR_BUSINESS_PRACTICES,
    'theme-market-distortion-competition': FAIR_BUSINESS_PRACTICES,

    'theme-government-influence': HUMAN_RIGHTS_ETHICS,
    'theme-conflicts-security': HUMAN_RIGHTS_ETHICS,
    'theme-land-use-property-rights': HUMAN_RIGHTS_ETHICS,
    'theme-community-impact': HUMAN_RIGHTS_ETHICS,
    'theme-animal-welfare': HUMAN_RIGHTS_ETHICS,
    'theme-consumer-interests-product-safety': HUMAN_RIGHTS_ETHICS,

    'theme-biodiversity-deforestation': ENVIRONMENT,
    'theme-climate-energy': ENVIRONMENT,
    'theme-water-use-water-availability': ENVIRONMENT,
    'theme-air-pollution': ENVIRONMENT,
    'theme-soil-groundwater-contamination': ENVIRONMENT,
    'theme-environment-waste-general': ENVIRONMENT,

    'theme-freedom-of-association': LABOUR_RIGHTS,
    'theme-labour-conditions-contracts-working-hours': LABOUR_RIGHTS,
    'theme-forced-labour-human-trafficking': LABOUR_RIGHTS,
    'theme-child-labour': LABOUR_RIGHTS,
    'theme-discrimination-gender': LABOUR_RIGHTS,
    'theme-wage-remuneration': LABOUR_RIGHTS,
    'theme-health-safety-at-work': LABOUR_RIGHTS,
})


class Taxonomy:
    """Read-only theme id -> category lookup with a fallback category."""

    def __init__(
        self,
        mapping: Optional[Mapping[str, str]] = None,
        fallback: str = UNCATEGORIZED
    ):
        self._mapping = MappingProxyType(dict(THEME_CATEGORIES if mapping is None else mapping))
        self.fallback = fallback

    def category_for(self, theme_id: Optional[str]) -> str:
        """Return the category title for a theme id; unknown ids use the fallback."""
        if not theme_id:
            return self.fallback
        return self._mapping.get(theme_id, self.fallback)

    def __contains__(self, theme_id: str) -> bool:
        return theme_id in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)


DEFAULT_TAXONOMY = Taxonomy()
