"""
Report service configuration.
"""

import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_SOURCE_URL = (
    "https://www.mvorisicochecker.nl/en/csr-risk-check/results"
    "?industry={industry_id}&country={country_id}"
)
DEFAULT_INVITE_CODES = "FREE2025,TESTVIP,MSCFV"


def _split_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(',') if item.strip()]


def _split_codes(raw: str) -> List[str]:
    return [c.lower() for c in _split_list(raw)]


@dataclass
class ReportConfig:
    """Configuration for report parsing, scraping and the API."""

    # Parsing
    parser_backend: str = "lxml"

    # Scraping
    source_url_template: str = DEFAULT_SOURCE_URL
    request_timeout: float = 10.0

    # Embedded database
    database_path: str = "data/esg_database.db"

    # Payment gate
    invite_codes: List[str] = field(default_factory=lambda: _split_codes(DEFAULT_INVITE_CODES))

    # API
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Output
    output_dir: str = "output"

    @property
    def cors_allow_credentials(self) -> bool:
        # browsers reject credentials with a wildcard origin
        return bool(self.cors_origins) and "*" not in self.cors_origins

    @classmethod
    def from_env(cls) -> 'ReportConfig':
        """Load configuration from environment variables."""
        return cls(
            parser_backend=os.getenv('REPORT_PARSER_BACKEND', 'lxml'),
            source_url_template=os.getenv('REPORT_SOURCE_URL', DEFAULT_SOURCE_URL),
            request_timeout=float(os.getenv('REPORT_REQUEST_TIMEOUT', '10')),
            database_path=os.getenv('REPORT_DATABASE_PATH', 'data/esg_database.db'),
            invite_codes=_split_codes(os.getenv('PAY_INVITE_CODES', DEFAULT_INVITE_CODES)),
            cors_origins=_split_list(os.getenv('REPORT_CORS_ORIGINS', '*')),
            output_dir=os.getenv('REPORT_OUTPUT_DIR', 'output'),
        )
