"""Persona-driven ranking and insight synthesis."""

from src.intelligence.keywords import extract_keywords
from src.intelligence.ranker import RelevanceRanker
from src.intelligence.service import DocumentIntelligenceService
from src.intelligence.synthesizer import InsightSynthesizer

__all__ = [
    "DocumentIntelligenceService",
    "InsightSynthesizer",
    "RelevanceRanker",
    "extract_keywords",
]
