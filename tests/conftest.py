"""
Pytest configuration and shared fixtures.
"""

import pytest
import logging
import sqlite3


@pytest.fixture(autouse=True)
def setup_logging():
    """Configure logging for tests."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _risk_module(text, sources=(), badge_class="bg-green"):
    links = "".join(
        f'<li><a class="text-blue-700" href="https://example.org/{i}">{s}</a></li>'
        for i, s in enumerate(sources)
    )
    prose = f"<p>{text}</p>" if text else ""
    return (
        '<div class="bg-white p-4">'
        f'<div class="flex items-center rounded-sm px-2 text-xs {badge_class}">'
        '<span class="font-semibold text-white uppercase">Country:</span>'
        '<span class="h-6 text-white">China</span></div>'
        '<h4 class="font-bold text-red">Risk</h4>'
        f'<div class="prose">{prose}</div>'
        f'<ul class="sources">{links}</ul>'
        '</div>'
    )


def _advice_module(text, badge_class="bg-beige-700"):
    prose = f"<p>{text}</p>" if text else ""
    return (
        '<div class="bg-white px-4 py-8">'
        f'<div class="flex items-center rounded-sm px-2 text-xs {badge_class}">'
        '<span class="font-semibold text-white uppercase">Industry:</span>'
        '<span class="h-6 text-white">Textiles</span></div>'
        f'<div class="prose">{prose}</div>'
        '</div>'
    )


def _theme_grid(theme_id, heading=None, risks=(), advice=()):
    id_attr = f' id="{theme_id}"' if theme_id else ""
    heading_html = f"<h3>{heading}</h3>" if heading else ""
    risk_html = "".join(risks)
    advice_html = "".join(advice)
    return (
        '<div x-data="{ riskOpen: false, adviceOpen: false }" class="grid grid-cols-3">'
        f'<div class="theme"{id_attr}>{heading_html}</div>'
        f'<div x-show="riskOpen"><div class="risk">{risk_html}</div></div>'
        f'<div x-show="adviceOpen"><div class="risk">{advice_html}</div></div>'
        '</div>'
    )


def _block(title, body="", landmark_id=None, landmark="section"):
    id_attr = f' id="{landmark_id}"' if landmark_id else ""
    heading = f"<h2>{title}</h2>" if title is not None else ""
    return (
        '<div class="mb-16 flex w-full flex-col">'
        f'{heading}<{landmark}{id_attr}>{body}</{landmark}>'
        '</div>'
    )


def _report(*blocks):
    return (
        "<html><head><title>Results</title></head><body>"
        '<div class="csr-risk-results">' + "".join(blocks) + "</div>"
        "</body></html>"
    )


@pytest.fixture
def risk_module():
    """Builder for one risk card."""
    return _risk_module


@pytest.fixture
def advice_module():
    """Builder for one advice card."""
    return _advice_module


@pytest.fixture
def theme_grid():
    """Builder for one theme grid."""
    return _theme_grid


@pytest.fixture
def report_block():
    """Builder for one top-level block."""
    return _block


@pytest.fixture
def report_page():
    """Builder wrapping blocks in the results container."""
    return _report


@pytest.fixture
def sample_report_html():
    """A results page with text blocks and a two-category risk analysis."""
    grids = "".join([
        _theme_grid(
            "theme-water-use-water-availability", "Water use",
            risks=[_risk_module("Water scarcity in dyeing regions.", sources=["World Bank", "WRI"])],
            advice=[_advice_module("Reduce water intensity.")]
        ),
        _theme_grid(
            "theme-child-labour", "Child labour",
            risks=[
                _risk_module("Child labour in cotton picking."),
                _risk_module(""),
            ],
            advice=[]
        ),
        _theme_grid(
            "theme-climate-energy", "Climate & energy",
            risks=[], advice=[]
        ),
    ])
    return _report(
        _block("Introduction", "<p>About this report.</p>", landmark_id="introduction"),
        _block("Important to know", "<p>Consider local law.</p>"),
        _block("Risk analysis", grids, landmark_id="risk-analysis"),
        _block("CSR organizations", "<p>Local NGOs.</p>"),
        _block("CSR labels, supply chain initiatives &amp; guidelines", "<p>GOTS</p>", landmark="article"),
    )


BADGE_HTML = (
    '<div class="flex items-center rounded-sm px-2 text-xs bg-green">'
    '<span class="font-semibold text-white uppercase">Country:</span>'
    '<span class="h-6 text-white">TBD</span></div>'
    '<p>Wastewater discharge.</p>'
)

SCHEMA = """
CREATE TABLE issues (id TEXT PRIMARY KEY, issue_name TEXT);
CREATE TABLE sub_issues (id TEXT PRIMARY KEY, sub_issue_name TEXT);
CREATE TABLE applicability_grouped (
    country_name TEXT, industry_name TEXT,
    risk_ids TEXT, advice_ids TEXT, consideration_ids TEXT,
    organization_ids TEXT, initiative_ids TEXT
);
CREATE TABLE risks (
    id TEXT PRIMARY KEY, issue_id TEXT, sub_issue_id TEXT, content TEXT,
    classification TEXT, source TEXT, content_html TEXT
);
CREATE TABLE advice (
    id TEXT PRIMARY KEY, issue_id TEXT, sub_issue_id TEXT, content TEXT,
    classification TEXT, source TEXT, content_html TEXT
);
CREATE TABLE considerations (id TEXT PRIMARY KEY, content TEXT, classification TEXT, content_html TEXT);
CREATE TABLE organizations (
    id TEXT PRIMARY KEY, name TEXT, intro TEXT, logo TEXT, link TEXT,
    classification TEXT, intro_html TEXT
);
CREATE TABLE initiatives (
    id TEXT PRIMARY KEY, name TEXT, intro TEXT, logo TEXT, link TEXT,
    classification TEXT, intro_html TEXT
);
"""


@pytest.fixture
def database_path(tmp_path):
    """A small report database on disk (two applicability rows)."""
    path = tmp_path / "esg_database.db"
    conn = sqlite3.connect(str(path))
    conn.executescript(SCHEMA)
    conn.executemany("INSERT INTO issues VALUES (?, ?)", [
        ("i1", "Environment"),
        ("i2", "Labour rights"),
    ])
    conn.executemany("INSERT INTO sub_issues VALUES (?, ?)", [
        ("s1", "Water use"),
        ("s2", "Child labour"),
    ])
    conn.execute(
        "INSERT INTO applicability_grouped VALUES (?, ?, ?, ?, ?, ?, ?)",
        ("China", "Textiles", "r1, r2,r3,r4,", "a1", "c1,c2", "o1", "")
    )
    conn.execute(
        "INSERT INTO applicability_grouped VALUES (?, ?, ?, ?, ?, ?, ?)",
        ("Chile", "Mining", "", None, "", "", "")
    )
    conn.executemany("INSERT INTO risks VALUES (?, ?, ?, ?, ?, ?, ?)", [
        ("r1", "i1", "s1", "Water scarcity.", "country", "World Bank\n\nWRI\n", BADGE_HTML),
        ("r2", "i2", "s2", "", "industry", None, "<p>Child labour in <b>ginning</b>.</p>"),
        ("r3", "i1", "s1", "", "", None, ""),
        ("r4", None, None, "Orphan risk.", None, None, None),
    ])
    conn.execute(
        "INSERT INTO advice VALUES (?, ?, ?, ?, ?, ?, ?)",
        ("a1", "i1", "s1", "Recycle process water.", "industry", None, None)
    )
    conn.executemany("INSERT INTO considerations VALUES (?, ?, ?, ?)", [
        ("c1", "Check local law.", "country", None),
        ("c2", "", None, ""),
    ])
    conn.execute(
        "INSERT INTO organizations VALUES (?, ?, ?, ?, ?, ?, ?)",
        ("o1", "Fair Wear & Co", "Multi-stakeholder initiative.", None, "https://example.org/?a=1&b=2", None, None)
    )
    conn.commit()
    conn.close()
    return path
