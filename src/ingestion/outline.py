"""Loaders for pre-parsed document outlines.

PDF structure extraction happens outside this package. An extractor only
has to turn a SourceDocument into an ordered list of Sections.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

import chardet
from pydantic import ValidationError

from src.models.document import SourceDocument
from src.models.section import Section

logger = logging.getLogger(__name__)

# Suffix of the outline file written next to a source document
OUTLINE_SUFFIX = ".outline.json"

SAMPLE_OUTLINE: tuple[Section, ...] = (
    Section(level="H1", text="Executive Summary", page=1, content="High-level overview of the document contents..."),
    Section(level="H2", text="Introduction", page=2, content="Introduction and background information..."),
    Section(level="H2", text="Methodology", page=4, content="Research methodology and approach..."),
    Section(level="H1", text="Key Findings", page=6, content="Main results and discoveries..."),
    Section(level="H2", text="Data Analysis", page=7, content="Detailed data analysis and interpretation..."),
    Section(level="H2", text="Market Trends", page=9, content="Current market trends and patterns..."),
    Section(level="H1", text="Recommendations", page=11, content="Strategic recommendations based on findings..."),
    Section(level="H2", text="Implementation Plan", page=12, content="Step-by-step implementation strategy..."),
    Section(level="H1", text="Conclusion", page=14, content="Summary and final thoughts..."),
)


class OutlineExtractor(Protocol):
    """Anything that can produce an outline for a source document."""

    def extract(self, document: SourceDocument) -> list[Section]:
        ...


class SampleOutlineExtractor:
    """Returns the same fixed report-style outline for every document."""

    def extract(self, document: SourceDocument) -> list[Section]:
        logger.debug("Using sample outline for %s", document.filename)
        return [section.model_copy() for section in SAMPLE_OUTLINE]


class JsonOutlineExtractor:
    """Reads outlines produced by an external extractor from JSON files.

    A document whose path ends in ``.json`` is read directly. Any other
    document is expected to have a sidecar file named
    ``<stem>.outline.json`` in the same directory.

    The file holds either a list of section objects or an object with an
    ``outline`` key containing that list.
    """

    def extract(self, document: SourceDocument) -> list[Section]:
        """Load the outline for a document.

        Args:
            document: The source document.

        Returns:
            Sections in document order.

        Raises:
            FileNotFoundError: If the outline file does not exist.
            ValueError: If the document has no path or the file is malformed.
        """
        if not document.path:
            raise ValueError(f"Document has no path: {document.filename}")

        outline_path = self.outline_path(document.path)
        if not outline_path.exists():
            raise FileNotFoundError(f"Outline not found: {outline_path}")

        raw = self._read_text(outline_path)
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid outline JSON in {outline_path}: {exc}") from exc

        if isinstance(data, dict):
            data = data.get("outline")
        if not isinstance(data, list):
            raise ValueError(f"Outline in {outline_path} must be a list of sections")

        try:
            sections = [Section.model_validate(entry) for entry in data]
        except ValidationError as exc:
            raise ValueError(f"Invalid section in {outline_path}: {exc}") from exc

        logger.debug("Loaded %d sections from %s", len(sections), outline_path)
        return sections

    @staticmethod
    def outline_path(file_path: str | Path) -> Path:
        """Locate the outline file for a source document path."""
        path = Path(file_path)
        if path.suffix.lower() == ".json":
            return path
        return path.with_suffix(OUTLINE_SUFFIX)

    def _read_text(self, file_path: Path) -> str:
        """Read a text file, trying UTF-8 before chardet detection.

        Args:
            file_path: Path to the text file.

        Returns:
            The file content as a string.

        Raises:
            ValueError: If the detected encoding cannot decode the file.
        """
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            pass

        raw_bytes = file_path.read_bytes()
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence") or 0

        if confidence < 0.7:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                file_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ValueError(
                f"Cannot decode {file_path} as {encoding}: {exc}"
            ) from exc
