"""Query term extraction from persona and job descriptions."""

import logging

logger = logging.getLogger(__name__)

# Tokens at or below this length are treated as stop-word-like noise
DEFAULT_MIN_KEYWORD_LENGTH = 3


def extract_keywords(
    persona: str,
    job_to_be_done: str,
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
) -> frozenset[str]:
    """Build the query term set for a persona and job.

    The two strings are joined with a space, lower-cased and split on
    whitespace runs. Tokens longer than ``min_length`` characters are kept.
    No stemming and no stop-word list are applied.

    Args:
        persona: Free-text description of the reader's role.
        job_to_be_done: Free-text description of the reader's task.
        min_length: Tokens must be strictly longer than this.

    Returns:
        Deduplicated lowercase terms. Empty when both inputs are empty.
    """
    text = f"{persona} {job_to_be_done}".lower()
    keywords = frozenset(word for word in text.split() if len(word) > min_length)
    logger.debug("Extracted %d keywords: %s", len(keywords), sorted(keywords))
    return keywords


def count_occurrences(text: str, keywords: frozenset[str]) -> int:
    """Count non-overlapping literal occurrences of every keyword in text.

    Matching is plain substring containment, so "plan" is counted inside
    "planning". ``text`` is expected to be lower-cased already.
    """
    return sum(text.count(keyword) for keyword in keywords)
