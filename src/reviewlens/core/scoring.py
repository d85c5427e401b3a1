"""Sentiment distribution and overall score aggregation."""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, Sequence

from .models import SentimentResult, sentiment_band

logger = logging.getLogger(__name__)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves upward (12.5 -> 13)."""
    return int(math.floor(x + 0.5))


def round_one_decimal(x: float) -> float:
    """Round to one decimal place, halves away from zero on the exact binary value."""
    return float(Decimal(x).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def polarity_score(result: SentimentResult) -> float:
    """Confidence-adjusted score in [0, 1]: high means positive."""
    return result.score if result.is_positive else 1.0 - result.score


def _check_pairing(reviews: Sequence[str], results: Sequence[SentimentResult]) -> None:
    if len(reviews) != len(results):
        raise ValueError(f"Got {len(reviews)} reviews but {len(results)} sentiment results")


def aggregate(reviews: Sequence[str], results: Sequence[SentimentResult]) -> Dict[str, Any]:
    """
    Compute overall score and the three-way percentage distribution.

    Positive results add their confidence to the accumulated score, negative
    results add `1 - confidence`. The mean is mapped onto a 0-5 scale.
    Neutral is the remainder of 100 after rounding, floored at 0, so the three
    percentages always sum to 100.

    Raises:
        ValueError: if there are no reviews, or reviews and results differ in length.
    """
    _check_pairing(reviews, results)
    total = len(reviews)
    if total == 0:
        raise ValueError("Cannot aggregate an empty review list")

    pos_count = 0
    neg_count = 0
    accumulated = 0.0
    for result in results:
        if result.is_positive:
            pos_count += 1
        else:
            neg_count += 1
        accumulated += polarity_score(result)

    positive = round_half_up(pos_count / total * 100)
    negative = round_half_up(neg_count / total * 100)
    if positive + negative > 100:
        # both halves rounded up (e.g. 12.5 / 87.5)
        negative = 100 - positive
    neutral = max(0, 100 - positive - negative)
    overall = round_one_decimal(accumulated / total * 5)

    logger.debug(f"Distribution: {positive}% pos / {neutral}% neu / {negative}% neg, overall {overall}")
    return {
        "overall": overall,
        "positive": positive,
        "neutral": neutral,
        "negative": negative,
    }
