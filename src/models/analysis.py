"""Analysis result data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.models.section import Section


class InsightKind(str, Enum):
    """Closed set of insight categories, chosen by rank position."""

    KEY_FINDING = "key_finding"
    RELEVANT_SECTION = "relevant_section"
    ACTION_ITEM = "action_item"


class SubsectionExcerpt(BaseModel):
    """A single sentence lifted from a top-ranked section."""

    model_config = ConfigDict(populate_by_name=True)

    # Grouping label (the section title), exported as "document"
    section_title: str = Field(alias="document")
    refined_text: str
    page_number: int
    relevance_score: float = Field(ge=0.5, lt=1.0)


class Insight(BaseModel):
    """A short synthesized summary surfaced to the reader."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    text: str
    importance: int = Field(ge=1, le=5)
    kind: InsightKind = Field(alias="type")


class ExtractedSection(BaseModel):
    """A ranked section reduced to its display fields."""

    document: str
    section_title: str
    importance_rank: int
    page_number: int


class AnalysisMetadata(BaseModel):
    """Envelope describing how an analysis was produced."""

    input_documents: list[str] = Field(default_factory=list)
    persona: str
    job_to_be_done: str
    processing_timestamp: str


class DocumentIntelligenceResult(BaseModel):
    """Complete persona-driven analysis of one document."""

    metadata: AnalysisMetadata
    extracted_sections: list[ExtractedSection] = Field(default_factory=list)
    subsection_analysis: list[SubsectionExcerpt] = Field(default_factory=list)
    document_outline: list[Section] = Field(default_factory=list)
    insights: list[Insight] = Field(default_factory=list)
