"""Outline section data models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Section(BaseModel):
    """One heading entry in a document outline.

    Produced by an outline extractor and treated as read-only afterwards.
    ``level`` is a label such as "H1" or "H2"; it is only compared
    verbatim and never parsed into a numeric depth.
    """

    level: str
    text: str = Field(min_length=1)  # heading title
    page: int = Field(ge=1)  # 1-based page the heading starts on
    content: str | None = None  # body text under the heading, if known


class RankedSection(Section):
    """A section copy annotated by the relevance ranker."""

    importance_rank: int = Field(ge=1)
    relevance_score: float = Field(ge=0.0)

    @property
    def original_position(self) -> int:
        """1-based position of the section in the outline it was ranked from."""
        return self.importance_rank
