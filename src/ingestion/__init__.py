"""Document ingestion: loading pre-parsed outlines."""

from src.ingestion.outline import (
    JsonOutlineExtractor,
    OutlineExtractor,
    SampleOutlineExtractor,
)

__all__ = ["JsonOutlineExtractor", "OutlineExtractor", "SampleOutlineExtractor"]
