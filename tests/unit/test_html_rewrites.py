"""
Unit tests for raw-HTML class rewrites.
"""

from src.parsers.html_rewrites import rewrite_fragment, fill_badge_placeholders


class TestRewriteFragment:
    """Test suite for cosmetic class substitutions."""

    def test_badge_backgrounds(self):
        html = '<div class="px-2 bg-green"></div><div class="bg-beige-700"></div><div class="x bg-gray y"></div>'
        result = rewrite_fragment(html)
        assert 'class="px-2 bg-sky-600"' in result
        assert 'class="bg-cyan-600"' in result
        assert 'class="x bg-gray-500 y"' in result

    def test_accent_colours(self):
        html = '<h4 class="font-bold text-red">Risk</h4><a class="text-blue-700 underline">src</a>'
        result = rewrite_fragment(html)
        assert 'class="font-bold text-purple-900"' in result
        assert 'class="text-purple-900 underline"' in result

    def test_whole_tokens_only(self):
        """Longer utility tokens sharing a prefix are not touched."""
        html = '<div class="bg-gray-500 bg-green-200 text-red-600"></div>'
        assert rewrite_fragment(html) == html

    def test_badge_span_centered(self):
        html = '<span class="h-6 text-white">China</span>'
        assert rewrite_fragment(html) == '<span class="h-6 text-white flex items-center">China</span>'

    def test_idempotent(self):
        html = '<div class="bg-gray"><span class="h-6">x</span></div>'
        once = rewrite_fragment(html)
        assert rewrite_fragment(once) == once

    def test_empty(self):
        assert rewrite_fragment("") == ""


class TestFillBadgePlaceholders:
    """Test suite for TBD badge filling on stored content."""

    BADGE = (
        '<div class="flex items-center rounded-sm px-2 text-xs bg-green">'
        '<span class="font-semibold text-white uppercase">Country:</span>'
        '<span class="h-6 text-white">TBD</span></div>'
    )

    def test_country_badge(self):
        result = fill_badge_placeholders(self.BADGE, "country", "China", "Textiles")
        assert "China" in result
        assert "bg-sky-600" in result
        assert "TBD" not in result

    def test_industry_badge(self):
        result = fill_badge_placeholders(self.BADGE, "industry", "China", "Textiles")
        assert "Textiles" in result
        assert "bg-cyan-600" in result

    def test_general_badge(self):
        result = fill_badge_placeholders(self.BADGE, "", "China", "Textiles")
        assert "General" in result
        assert "bg-gray-500" in result

    def test_bare_value_span(self):
        html = '<span class="inline h-6 text-white">TBD</span>'
        result = fill_badge_placeholders(html, "country", "Côte d'Ivoire & co", "Textiles")
        assert result == '<span class="flex items-center h-6 text-white">Côte d&#x27;Ivoire &amp; co</span>'

    def test_no_placeholder(self):
        html = "<p>nothing to fill</p>"
        assert fill_badge_placeholders(html, "country", "China", "Textiles") == html
