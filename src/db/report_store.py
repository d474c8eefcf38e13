"""
Embedded SQLite store for country/industry report content.

`applicability_grouped` maps a (country, industry) pair to comma-separated
id lists; the content tables hold the rows those ids point at.
"""

import logging
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

ID_COLUMNS = (
    'risk_ids',
    'advice_ids',
    'consideration_ids',
    'organization_ids',
    'initiative_ids',
)

_ISSUE_JOIN = """
    SELECT
        t.id,
        t.issue_id,
        t.sub_issue_id,
        t.content,
        t.classification,
        t.source,
        t.content_html,
        i.issue_name,
        s.sub_issue_name
    FROM {table} t
    LEFT JOIN issues i ON t.issue_id = i.id
    LEFT JOIN sub_issues s ON t.sub_issue_id = s.id
    WHERE t.id IN ({placeholders})
"""

TABLE_QUERIES: Dict[str, str] = {
    'risks': _ISSUE_JOIN.replace('{table}', 'risks'),
    'advice': _ISSUE_JOIN.replace('{table}', 'advice'),
    'considerations': (
        "SELECT id, content, classification, content_html "
        "FROM considerations WHERE id IN ({placeholders})"
    ),
    'organizations': (
        "SELECT id, name, intro, logo, link, classification, intro_html "
        "FROM organizations WHERE id IN ({placeholders})"
    ),
    'initiatives': (
        "SELECT id, name, intro, logo, link, classification, intro_html "
        "FROM initiatives WHERE id IN ({placeholders})"
    ),
}


def split_ids(raw: Any) -> List[str]:
    """Split a comma-separated id list, dropping blanks."""
    if raw is None:
        return []
    return [part.strip() for part in str(raw).split(',') if part.strip()]


@dataclass
class ApplicabilityIds:
    """Content ids applicable to one country/industry pair."""
    risk_ids: List[str] = field(default_factory=list)
    advice_ids: List[str] = field(default_factory=list)
    consideration_ids: List[str] = field(default_factory=list)
    organization_ids: List[str] = field(default_factory=list)
    initiative_ids: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not any(getattr(self, column) for column in ID_COLUMNS)


class ReportStore:
    """
    Read-only access to the embedded report database.

    Usage:
        with ReportStore("data/esg_database.db") as store:
            ids = store.resolve("China", "Textiles")
            risks = store.fetch_by_ids("risks", ids.risk_ids)
    """

    def __init__(self, database_path: Union[str, Path]):
        """
        Open the database.

        Args:
            database_path: Path to the SQLite file
        """
        self.database_path = Path(database_path)
        self.conn = None
        self._connect()

        logger.info(f"[OK] ReportStore initialized: {self.database_path}")

    def _connect(self):
        """Open the SQLite connection."""
        if not self.database_path.exists():
            raise FileNotFoundError(f"Report database not found: {self.database_path}")
        try:
            # FastAPI runs sync endpoints in a threadpool
            self.conn = sqlite3.connect(str(self.database_path), check_same_thread=False)
            self.conn.row_factory = sqlite3.Row
        except sqlite3.Error as e:
            logger.error(f"[ERROR] Failed to open report database: {e}")
            raise

    def resolve(self, country_name: str, industry_name: str) -> ApplicabilityIds:
        """
        Look up the content ids for a country/industry pair.

        Args:
            country_name: Country name as stored
            industry_name: Industry name as stored

        Returns:
            ApplicabilityIds (all empty when the pair is unknown)
        """
        query = f"""
            SELECT {', '.join(ID_COLUMNS)}
            FROM applicability_grouped
            WHERE country_name = ? AND industry_name = ?
        """
        try:
            row = self.conn.execute(query, (country_name, industry_name)).fetchone()
        except sqlite3.Error as e:
            logger.error(f"[ERROR] Failed to resolve {country_name}/{industry_name}: {e}")
            return ApplicabilityIds()

        if row is None:
            logger.warning(f"[WARN] No applicability row for {country_name}/{industry_name}")
            return ApplicabilityIds()

        return ApplicabilityIds(**{column: split_ids(row[column]) for column in ID_COLUMNS})

    def fetch_by_ids(self, table: str, ids: List[str]) -> List[Dict[str, Any]]:
        """
        Fetch content rows by id.

        Args:
            table: One of risks, advice, considerations, organizations, initiatives
            ids: Row ids

        Returns:
            Rows as dictionaries (in database order)
        """
        if table not in TABLE_QUERIES:
            raise ValueError(f"Unknown report table: {table}")
        if not ids:
            return []

        placeholders = ','.join('?' for _ in ids)
        query = TABLE_QUERIES[table].format(placeholders=placeholders)
        try:
            rows = self.conn.execute(query, list(ids)).fetchall()
        except sqlite3.Error as e:
            logger.error(f"[ERROR] Failed to fetch {table}: {e}")
            return []

        logger.debug(f"[DEBUG] Fetched {len(rows)} {table} row(s)")
        return [dict(row) for row in rows]

    def get_risks_by_ids(self, ids: List[str]) -> List[Dict[str, Any]]:
        return self.fetch_by_ids('risks', ids)

    def get_advice_by_ids(self, ids: List[str]) -> List[Dict[str, Any]]:
        return self.fetch_by_ids('advice', ids)

    def close(self):
        """Close the connection."""
        if self.conn:
            self.conn.close()
            self.conn = None
            logger.info("[INFO] ReportStore connection closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
