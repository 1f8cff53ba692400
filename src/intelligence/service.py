"""Per-document orchestration of the intelligence pipeline."""

import logging
import math
import re
from datetime import datetime, timezone

from src.config import AppConfig
from src.ingestion.outline import JsonOutlineExtractor, OutlineExtractor
from src.intelligence.ranker import RelevanceRanker
from src.intelligence.synthesizer import InsightSynthesizer
from src.models.analysis import (
    AnalysisMetadata,
    DocumentIntelligenceResult,
    ExtractedSection,
)
from src.models.document import DocumentMetadata, ProcessedDocument, SourceDocument
from src.models.section import Section

logger = logging.getLogger(__name__)

# Rough size of one PDF page on disk
BYTES_PER_PAGE = 51200
WORDS_PER_PAGE = 250
WORDS_PER_MINUTE = 200


def estimate_page_count(file_size: int) -> int:
    """Estimate a page count from file size in bytes (at least 1)."""
    return max(1, math.floor(file_size / BYTES_PER_PAGE + 0.5))


def estimate_reading_time(file_size: int) -> int:
    """Estimate reading time in minutes from file size in bytes (at least 1)."""
    words = estimate_page_count(file_size) * WORDS_PER_PAGE
    return max(1, math.floor(words / WORDS_PER_MINUTE + 0.5))


def derive_title(filename: str) -> str:
    """Turn a filename like "annual_report-2024.pdf" into a display title."""
    stem = re.sub(r"\.pdf$", "", filename, flags=re.IGNORECASE)
    return re.sub(r"[_-]", " ", stem)


class DocumentIntelligenceService:
    """Runs keyword extraction, ranking and synthesis for documents.

    The service holds only configuration and collaborators; every call is
    independent, so one instance can be shared freely.

    Args:
        config: AppConfig with ranking, synthesis and default settings.
        extractor: Source of document outlines. Defaults to reading
                   pre-parsed JSON outlines from disk.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        extractor: OutlineExtractor | None = None,
    ) -> None:
        self._config = config or AppConfig()
        self._extractor = extractor or JsonOutlineExtractor()
        self._ranker = RelevanceRanker(self._config.ranking)
        self._synthesizer = InsightSynthesizer(self._config.synthesis)

    def process_documents(
        self,
        documents: list[SourceDocument],
        persona: str = "",
        job_to_be_done: str = "",
    ) -> list[ProcessedDocument]:
        """Process documents one after another.

        A document that fails is logged and left out; the rest of the batch
        still runs. Results keep the input order of the documents that
        succeeded.

        Args:
            documents: Documents in the order they were supplied.
            persona: Persona description, may be empty.
            job_to_be_done: Task description, may be empty.

        Returns:
            One ProcessedDocument per successfully processed input.
        """
        results: list[ProcessedDocument] = []

        for document in documents:
            try:
                results.append(
                    self.process_document(document, persona, job_to_be_done)
                )
            except Exception:
                logger.exception("Failed to process document: %s", document.filename)

        logger.info("Processed %d of %d documents", len(results), len(documents))
        return results

    def process_document(
        self,
        document: SourceDocument,
        persona: str = "",
        job_to_be_done: str = "",
    ) -> ProcessedDocument:
        """Extract, estimate and analyze a single document.

        Raises:
            Whatever the outline extractor raises for this document.
        """
        logger.info("Processing %s", document.filename)

        outline = self._extractor.extract(document)
        metadata = DocumentMetadata(
            pages=estimate_page_count(document.size),
            language=self._config.defaults.language,
            estimated_reading_time=estimate_reading_time(document.size),
            file_size=document.size,
        )
        intelligence = self.analyze(
            outline, persona, job_to_be_done, filename=document.filename
        )

        return ProcessedDocument(
            title=derive_title(document.filename),
            outline=outline,
            metadata=metadata,
            intelligence=intelligence,
            source_path=document.path,
        )

    def analyze(
        self,
        outline: list[Section],
        persona: str = "",
        job_to_be_done: str = "",
        filename: str = "document.pdf",
    ) -> DocumentIntelligenceResult:
        """Run the persona-driven pipeline over one outline.

        Empty persona or job values are replaced by the configured defaults
        before keywords are extracted, so the defaults take part in scoring.

        Args:
            outline: Sections in document order. Passed through unchanged.
            persona: Persona description.
            job_to_be_done: Task description.
            filename: Name reported in the metadata and extracted sections.

        Returns:
            The complete analysis result.
        """
        persona = persona or self._config.defaults.persona
        job_to_be_done = job_to_be_done or self._config.defaults.job_to_be_done

        keywords = self._ranker.keywords(persona, job_to_be_done)
        ranked = self._ranker.rank_by_keywords(outline, keywords)
        top_sections = ranked[: self._config.ranking.top_sections]

        return DocumentIntelligenceResult(
            metadata=AnalysisMetadata(
                input_documents=[filename],
                persona=persona,
                job_to_be_done=job_to_be_done,
                processing_timestamp=datetime.now(timezone.utc).isoformat(),
            ),
            extracted_sections=[
                ExtractedSection(
                    document=filename,
                    section_title=section.text,
                    importance_rank=section.importance_rank,
                    page_number=section.page,
                )
                for section in top_sections
            ],
            subsection_analysis=self._synthesizer.excerpt(top_sections, keywords),
            document_outline=outline,
            insights=self._synthesizer.synthesize_insights(top_sections),
        )
