"""
Expected markup of the scraped results page.

The scraped page is not under our control; every selector the segmenter
and extractor rely on lives here so a markup change is a one-place edit
and shows up in logs with the shape version.
"""

from dataclasses import dataclass

from bs4 import BeautifulSoup

DEFAULT_BACKEND = "lxml"
SUPPORTED_BACKENDS = ("lxml", "html.parser")


@dataclass(frozen=True)
class ReportShape:
    """CSS selectors describing one version of the results page."""
    version: str = "2024.1"
    container: str = "div.csr-risk-results"
    block: str = "div.mb-16.flex.w-full.flex-col"
    block_heading: str = "h2, h3"
    landmark: str = "article, section"
    theme_grid: str = 'div[x-data="{ riskOpen: false, adviceOpen: false }"]'
    theme_node: str = "div[id]"
    theme_heading: str = "h3"
    risk_panel: str = 'div[x-show="riskOpen"]'
    advice_panel: str = 'div[x-show="adviceOpen"]'
    panel_content: str = "div.risk"
    risk_module: str = "div.bg-white.p-4"
    advice_module: str = "div.bg-white.px-4.py-8"
    prose: str = "div.prose"
    prose_lines: str = "p, ol, ul, li"
    source_links: str = "ul li a"


DEFAULT_SHAPE = ReportShape()


def parse_document(html: str, backend: str = DEFAULT_BACKEND) -> BeautifulSoup:
    """
    Build a DOM for the raw scraped HTML.

    Args:
        html: Raw HTML string (may be empty)
        backend: BeautifulSoup tree builder ('lxml' or 'html.parser')

    Returns:
        Parsed document
    """
    if backend not in SUPPORTED_BACKENDS:
        raise ValueError(f"Unsupported parser backend: {backend}")
    return BeautifulSoup(html or "", backend)


def node_text(node) -> str:
    """Full text content of a node, stripped."""
    if node is None:
        return ""
    return node.get_text().strip()
