"""
Unit tests for TitleNormalizer and taxonomy lookups.
"""

import pytest
from src.parsers.title_normalizer import TitleNormalizer, normalize_title
from src.parsers.taxonomy import Taxonomy, DEFAULT_TAXONOMY, UNCATEGORIZED, ENVIRONMENT, LABOUR_RIGHTS


class TestTitleNormalizer:
    """Test suite for legacy title rewriting."""

    @pytest.mark.parametrize("raw, expected", [
        ("CSR organizations", "Relevant organizations"),
        ("Important to know", "Important to consider"),
        ("About MVO Nederland", "About MSC HK"),
        ("CSR labels, supply chain initiatives & guidelines",
         "ESG labels, supply chain initiatives & guidelines"),
        ("Random CSR text", "Random ESG text"),
        ("No acronym here", "No acronym here"),
    ])
    def test_default_table(self, raw, expected):
        """Exact matches win; otherwise CSR becomes ESG."""
        assert normalize_title(raw) == expected

    def test_acronym_needs_word_boundary(self):
        """CSR inside a longer word is left alone."""
        assert normalize_title("CSRD reporting") == "CSRD reporting"
        assert normalize_title("csr lowercase") == "csr lowercase"

    def test_every_occurrence_replaced(self):
        assert normalize_title("CSR and CSR") == "ESG and ESG"

    def test_empty_title(self):
        assert normalize_title("") == ""

    def test_custom_table(self):
        """An injected table replaces the default one."""
        normalizer = TitleNormalizer({"Old": "New"})
        assert normalizer.normalize("Old") == "New"
        assert normalizer.normalize("Important to know") == "Important to know"


class TestTaxonomy:
    """Test suite for theme -> category lookup."""

    def test_known_themes(self):
        assert DEFAULT_TAXONOMY.category_for("theme-water-use-water-availability") == ENVIRONMENT
        assert DEFAULT_TAXONOMY.category_for("theme-child-labour") == LABOUR_RIGHTS
        assert DEFAULT_TAXONOMY.category_for("theme-taxation") == "Fair business practices"
        assert DEFAULT_TAXONOMY.category_for("theme-animal-welfare") == "Human rights & ethics"

    @pytest.mark.parametrize("theme_id", ["theme-unknown", "", None, "Theme-Child-Labour"])
    def test_unknown_themes_fall_back(self, theme_id):
        """Unknown or missing ids never raise and always map to Uncategorized."""
        assert DEFAULT_TAXONOMY.category_for(theme_id) == UNCATEGORIZED

    def test_default_table_size(self):
        assert len(DEFAULT_TAXONOMY) == 22

    def test_custom_taxonomy(self):
        taxonomy = Taxonomy({"theme-x": "X"}, fallback="Other")
        assert taxonomy.category_for("theme-x") == "X"
        assert taxonomy.category_for("theme-child-labour") == "Other"
        assert "theme-x" in taxonomy
