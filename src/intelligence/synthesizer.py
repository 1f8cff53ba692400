"""Excerpt and insight synthesis from top-ranked sections."""

import logging
import re

from src.config import SynthesisConfig
from src.intelligence.keywords import count_occurrences
from src.models.analysis import Insight, InsightKind, SubsectionExcerpt
from src.models.section import RankedSection

logger = logging.getLogger(__name__)

# One or more sentence terminators in a row
SENTENCE_BOUNDARY = re.compile(r"[.!?]+")

FALLBACK_INSIGHT_TEXT = "Important information relevant to your role."

# Insight kind by rank index: 0-1 findings, 2-3 relevant sections, 4 action item
INSIGHT_KINDS: tuple[InsightKind, ...] = (
    InsightKind.KEY_FINDING,
    InsightKind.KEY_FINDING,
    InsightKind.RELEVANT_SECTION,
    InsightKind.RELEVANT_SECTION,
    InsightKind.ACTION_ITEM,
)


def split_sentences(text: str, min_length: int = 10) -> list[str]:
    """Split text on sentence terminators and drop short fragments.

    Args:
        text: Body text of a section.
        min_length: Fragments whose trimmed length is at or below this
            are discarded.

    Returns:
        Trimmed sentences in their original order, without terminators.
    """
    fragments = (part.strip() for part in SENTENCE_BOUNDARY.split(text))
    return [fragment for fragment in fragments if len(fragment) > min_length]


def excerpt_score(sentence: str, keywords: frozenset[str]) -> float:
    """Score a sentence in [0.5, 1.0) from its keyword hits.

    Uses the same literal-occurrence count as section ranking, squashed
    as ``0.5 + 0.5 * hits / (hits + 1)``. A sentence without hits scores 0.5.
    """
    hits = count_occurrences(sentence.lower(), keywords)
    return 0.5 + 0.5 * hits / (hits + 1)


class InsightSynthesizer:
    """Derives excerpts and insight records from ranked sections.

    Args:
        config: SynthesisConfig with section and sentence limits.
    """

    def __init__(self, config: SynthesisConfig | None = None) -> None:
        self._config = config or SynthesisConfig()

    def excerpt(
        self,
        sections: list[RankedSection],
        keywords: frozenset[str] = frozenset(),
    ) -> list[SubsectionExcerpt]:
        """Pull the leading sentences out of the top sections.

        Only the first ``excerpt_sections`` sections are considered. Sections
        without content, or whose content has no qualifying sentence,
        contribute nothing.

        Args:
            sections: Sections in ranked order.
            keywords: Query terms used to score each sentence.

        Returns:
            At most ``excerpt_sections * sentences_per_section`` excerpts.
        """
        excerpts: list[SubsectionExcerpt] = []

        for section in sections[: self._config.excerpt_sections]:
            if not section.content:
                continue

            sentences = split_sentences(
                section.content, min_length=self._config.min_sentence_length
            )
            for sentence in sentences[: self._config.sentences_per_section]:
                excerpts.append(
                    SubsectionExcerpt(
                        section_title=section.text,
                        refined_text=sentence,
                        page_number=section.page,
                        relevance_score=excerpt_score(sentence, keywords),
                    )
                )

        logger.debug("Produced %d excerpts", len(excerpts))
        return excerpts

    def synthesize_insights(self, sections: list[RankedSection]) -> list[Insight]:
        """Build one insight per top section, most important first.

        Args:
            sections: Sections in ranked order.

        Returns:
            Up to ``insight_sections`` insights; never padded.
        """
        limit = min(self._config.insight_sections, len(INSIGHT_KINDS))
        insights: list[Insight] = []

        for index, section in enumerate(sections[:limit]):
            preview = (section.content or "")[: self._config.content_preview_chars]
            insights.append(
                Insight(
                    page=section.page,
                    text=f"Key insight from {section.text}: {preview or FALLBACK_INSIGHT_TEXT}",
                    importance=len(INSIGHT_KINDS) - index,
                    kind=INSIGHT_KINDS[index],
                )
            )

        return insights
