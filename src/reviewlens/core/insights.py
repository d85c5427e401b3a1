"""Pros/cons snippet extraction."""

import logging
import re
from typing import List, Optional, Sequence

from .models import KeyInsights, SentimentLabel, SentimentResult
from .constants import InsightConstants, POSITIVE_PATTERNS, NEGATIVE_PATTERNS

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT = re.compile(InsightConstants.SENTENCE_DELIMITERS)


def _snippet(review: str, pattern: str) -> Optional[str]:
    """First sentence fragment containing `pattern`, truncated; None if too short."""
    fragment = next(
        (s for s in _SENTENCE_SPLIT.split(review) if pattern in s.lower()),
        None,
    )
    if fragment is None or len(fragment.strip()) <= InsightConstants.MIN_FRAGMENT_LENGTH:
        return None
    limit = InsightConstants.MAX_FRAGMENT_LENGTH
    # Suffix is decided on the untrimmed fragment
    suffix = "..." if len(fragment) > limit else ""
    return fragment.strip()[:limit] + suffix


def _collect(reviews: Sequence[str], patterns: Sequence[str], cap: int) -> List[str]:
    found: List[str] = []
    for review in reviews:
        lowered = review.lower()
        for pattern in patterns:
            if pattern not in lowered or len(found) >= cap:
                continue
            snippet = _snippet(review, pattern)
            if snippet and snippet not in found:
                found.append(snippet)
    return found


def extract(reviews: Sequence[str], results: Sequence[SentimentResult]) -> KeyInsights:
    """
    Extract short pros/cons snippets from reviews.

    Positive-labelled reviews are scanned for positive patterns and
    negative-labelled reviews for negative ones. For each hit the first
    sentence fragment containing the pattern becomes a candidate. Empty
    results are replaced by generic fallback text.
    """
    if len(reviews) != len(results):
        raise ValueError(f"Got {len(reviews)} reviews but {len(results)} sentiment results")

    positive_reviews = [r for r, s in zip(reviews, results) if s.label is SentimentLabel.POSITIVE]
    negative_reviews = [r for r, s in zip(reviews, results) if s.label is SentimentLabel.NEGATIVE]

    pros = _collect(positive_reviews, POSITIVE_PATTERNS, InsightConstants.MAX_PRO_CANDIDATES)
    cons = _collect(negative_reviews, NEGATIVE_PATTERNS, InsightConstants.MAX_CON_CANDIDATES)

    if not pros:
        logger.debug("No positive snippets found, using generic pros")
        pros = list(InsightConstants.FALLBACK_PROS)
    if not cons:
        logger.debug("No negative snippets found, using generic cons")
        cons = list(InsightConstants.FALLBACK_CONS)

    return KeyInsights(
        pros=pros[:InsightConstants.MAX_PROS],
        cons=cons[:InsightConstants.MAX_CONS],
    )
