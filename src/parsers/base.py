"""
Base classes for report parsers.

Every parser ends in the same JSON payload: `document_type`, `source_file`,
a `sections` list in the renderer wire format, and a `metadata` block.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Any, Optional
from enum import Enum
from dataclasses import dataclass
import logging


class DocumentType(Enum):
    """Where a report payload came from."""
    HTML_REPORT = "html_report"
    DATABASE_REPORT = "database_report"


@dataclass
class ParseResult:
    """Outcome of parsing one saved report."""

    success: bool
    document_type: DocumentType
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.data is None:
            self.data = {}
        if self.metadata is None:
            self.metadata = {}

    @property
    def section_count(self) -> int:
        return len(self.data.get("sections", []))


class BaseParser(ABC):
    """Abstract base class for report parsers."""

    def __init__(self, parser_version: str = "1.0.0"):
        self.parser_version = parser_version
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def can_parse(self, file_path: Path) -> bool:
        """True if the file looks like a report this parser reads."""
        pass

    @abstractmethod
    def parse(self, file_path: Path) -> ParseResult:
        """
        Parse a saved report.

        Args:
            file_path: Path to the saved report

        Returns:
            ParseResult whose data is the report payload, or an error
        """
        pass

    @abstractmethod
    def get_document_type(self) -> DocumentType:
        pass

    def validate_output(self, data: Dict[str, Any]) -> bool:
        """
        Check the payload envelope shared by every parser.

        Subclasses extend this with checks on the sections themselves.

        Args:
            data: Report payload

        Returns:
            True if the envelope is well formed
        """
        if data.get("document_type") != self.get_document_type().value:
            self.logger.warning(f"[WARN] Unexpected document type: {data.get('document_type')}")
            return False

        sections = data.get("sections")
        if not isinstance(sections, list):
            self.logger.warning("[WARN] Payload has no sections list")
            return False

        total = data.get("metadata", {}).get("total_sections")
        if total is not None and total != len(sections):
            self.logger.warning(f"[WARN] total_sections {total} != {len(sections)} sections")
            return False

        return True
