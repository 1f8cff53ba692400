"""Data models for the document intelligence service."""

from src.models.analysis import (
    AnalysisMetadata,
    DocumentIntelligenceResult,
    ExtractedSection,
    Insight,
    InsightKind,
    SubsectionExcerpt,
)
from src.models.document import DocumentMetadata, ProcessedDocument, SourceDocument
from src.models.section import RankedSection, Section

__all__ = [
    "AnalysisMetadata",
    "DocumentIntelligenceResult",
    "DocumentMetadata",
    "ExtractedSection",
    "Insight",
    "InsightKind",
    "ProcessedDocument",
    "RankedSection",
    "Section",
    "SourceDocument",
    "SubsectionExcerpt",
]
