"""Source and processed document data models."""

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from src.models.analysis import DocumentIntelligenceResult
from src.models.section import Section


class SourceDocument(BaseModel):
    """An uploaded file handed to the service for analysis."""

    filename: str
    path: str | None = None
    size: int = Field(default=0, ge=0)  # bytes

    @classmethod
    def from_path(cls, file_path: str | Path) -> "SourceDocument":
        """Describe a file on disk.

        Raises:
            FileNotFoundError: If file_path does not exist.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return cls(filename=path.name, path=str(path), size=path.stat().st_size)


class DocumentMetadata(BaseModel):
    """Estimated properties of a source document."""

    pages: int
    language: str = "English"
    estimated_reading_time: int  # minutes
    file_size: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ProcessedDocument(BaseModel):
    """A source document together with its outline and analysis."""

    title: str
    outline: list[Section] = Field(default_factory=list)
    metadata: DocumentMetadata
    intelligence: DocumentIntelligenceResult
    source_path: str | None = None
