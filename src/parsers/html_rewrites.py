"""
Cosmetic class-token rewrites for preserved HTML fragments.

The scraped markup encodes badge colours per classification (country /
industry / general) and uses a few accent colours that clash with our own
theme. Fragments kept as `rawHtml` are rewritten so they look the same on
every rendering surface. Extracted plain text is never touched.
"""

import re
from html import escape
from typing import Tuple


def _token(name: str) -> str:
    # whole class token only: bg-gray must not match inside bg-gray-500
    return r'(?<![\w-])' + re.escape(name) + r'(?![\w-])'


CLASS_SUBSTITUTIONS: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(_token('text-red')), 'text-purple-900'),
    (re.compile(_token('text-blue-700')), 'text-purple-900'),
    (re.compile(_token('bg-green')), 'bg-sky-600'),       # country badge
    (re.compile(_token('bg-beige-700')), 'bg-cyan-600'),  # industry/product badge
    (re.compile(_token('bg-gray')), 'bg-gray-500'),       # general badge
)

BADGE_SPAN_PATTERN = re.compile(r'<span class="([^"]*' + _token('h-6') + r'[^"]*)">')

BADGE_COLOURS = {
    'country': 'bg-sky-600',
    'industry': 'bg-cyan-600',
}
GENERAL_BADGE_COLOUR = 'bg-gray-500'

BADGE_BLOCK_PATTERN = re.compile(
    r'<div class="flex items-center rounded-sm px-2 text-xs[^"]*"[^>]*>\s*'
    r'<span class="[^"]*font-semibold[^"]*text-white[^"]*uppercase[^"]*"[^>]*>\s*([^<]*?)\s*:\s*</span>\s*'
    r'<span class="[^"]*h-6[^"]*text-white[^"]*"[^>]*>\s*TBD\s*</span>\s*</div>',
    re.IGNORECASE
)
BADGE_VALUE_PATTERN = re.compile(
    r'<span[^>]*class="[^"]*h-6[^"]*text-white[^"]*"[^>]*>\s*TBD\s*</span>',
    re.IGNORECASE
)


def _center_badge(match: re.Match) -> str:
    classes = match.group(1)
    tokens = classes.split()
    if 'flex' in tokens and 'items-center' in tokens:
        return match.group(0)
    return f'<span class="{classes} flex items-center">'


def rewrite_fragment(html: str) -> str:
    """Apply the fixed class-token substitutions to one HTML fragment."""
    if not html:
        return html
    for pattern, replacement in CLASS_SUBSTITUTIONS:
        html = pattern.sub(replacement, html)
    return BADGE_SPAN_PATTERN.sub(_center_badge, html)


def fill_badge_placeholders(html: str, classification: str, country_name: str, industry_name: str) -> str:
    """
    Replace "TBD" classification badges in stored content with the
    country/industry name they stand for.

    Args:
        html: Stored content HTML
        classification: 'country', 'industry' or anything else (general)
        country_name: Country of the report
        industry_name: Industry of the report

    Returns:
        HTML with badges filled in
    """
    if not html:
        return html

    if classification == 'country':
        value = country_name
    elif classification == 'industry':
        value = industry_name
    else:
        value = 'General'
    value = escape(value or '')
    colour = BADGE_COLOURS.get(classification, GENERAL_BADGE_COLOUR)

    html = BADGE_BLOCK_PATTERN.sub(
        lambda m: (
            f'<div class="flex items-center rounded-sm px-2 text-xs {colour}">'
            f'<span class="font-semibold text-white uppercase">{m.group(1)}:</span>'
            f'<span class="flex items-center h-6 text-white ml-1">{value}</span></div>'
        ),
        html
    )
    return BADGE_VALUE_PATTERN.sub(
        lambda m: f'<span class="flex items-center h-6 text-white">{value}</span>',
        html
    )
