"""Persona-driven relevance ranking of outline sections."""

import logging

from src.config import RankingConfig
from src.intelligence.keywords import count_occurrences, extract_keywords
from src.models.section import RankedSection, Section

logger = logging.getLogger(__name__)

# Fields a section carries before ranking
BASE_FIELDS = set(Section.model_fields)


class RelevanceRanker:
    """Scores outline sections against persona/job keywords and sorts them.

    Scoring:
    1. Base score: total literal occurrences of the query terms in the
       lower-cased heading title plus body text.
    2. Multiplicative boosts, compounding: level "H1", a title mentioning
       "summary", and a title mentioning "conclusion".

    Each returned section carries ``importance_rank``, its 1-based position
    in the input outline, and ``relevance_score``. The output is sorted by
    descending score; equal scores keep their input order.

    Args:
        config: RankingConfig with keyword length threshold and boost factors.
    """

    def __init__(self, config: RankingConfig | None = None) -> None:
        self._config = config or RankingConfig()

    def keywords(self, persona: str, job_to_be_done: str) -> frozenset[str]:
        """Extract query terms using the configured length threshold."""
        return extract_keywords(
            persona, job_to_be_done, min_length=self._config.min_keyword_length
        )

    def rank(
        self, sections: list[Section], persona: str, job_to_be_done: str
    ) -> list[RankedSection]:
        """Rank sections by relevance to a persona and job.

        Args:
            sections: Outline sections in document order. Not modified.
            persona: Persona description.
            job_to_be_done: Task description.

        Returns:
            New RankedSection objects, one per input section, sorted by
            descending relevance score.
        """
        return self.rank_by_keywords(sections, self.keywords(persona, job_to_be_done))

    def rank_by_keywords(
        self, sections: list[Section], keywords: frozenset[str]
    ) -> list[RankedSection]:
        """Rank sections against an already extracted set of query terms.

        Sections that were ranked before are re-ranked from their base
        fields; earlier ranks and scores are discarded.
        """
        if not sections:
            return []

        scored = [
            RankedSection(
                **section.model_dump(include=BASE_FIELDS),
                importance_rank=index,
                relevance_score=self.score_section(section, keywords),
            )
            for index, section in enumerate(sections, start=1)
        ]

        # sorted() is stable, reverse=True keeps ties in input order
        ranked = sorted(scored, key=lambda s: s.relevance_score, reverse=True)

        logger.debug(
            "Ranked %d sections against %d keywords", len(ranked), len(keywords)
        )
        return ranked

    def score_section(self, section: Section, keywords: frozenset[str]) -> float:
        """Compute the boosted relevance score for a single section.

        Args:
            section: The section to score.
            keywords: Lowercase query terms.

        Returns:
            A non-negative, unbounded score.
        """
        scoring_text = f"{section.text} {section.content or ''}".lower()
        score = float(count_occurrences(scoring_text, keywords))

        title = section.text.lower()
        if section.level == "H1":
            score *= self._config.h1_boost
        if "summary" in title:
            score *= self._config.summary_boost
        if "conclusion" in title:
            score *= self._config.conclusion_boost

        return score
