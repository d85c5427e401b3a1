"""Tests for pros/cons extraction."""

from reviewlens.core.constants import InsightConstants
from reviewlens.core.insights import extract
from reviewlens.core.models import SentimentLabel, SentimentResult

POSITIVE = SentimentResult(SentimentLabel.POSITIVE, 0.95)
NEGATIVE = SentimentResult(SentimentLabel.NEGATIVE, 0.9)


def test_extracts_matching_sentence_fragments():
    """Test snippet extraction on the two-review example."""
    reviews = [
        "This product is absolutely amazing! Excellent build quality.",
        "Terrible customer service, arrived damaged.",
    ]
    insights = extract(reviews, [POSITIVE, NEGATIVE])

    # pattern order within a review: "excellent" is checked before "amazing"
    assert insights.pros == ["Excellent build quality", "This product is absolutely amazing"]
    assert insights.cons == ["Terrible customer service, arrived damaged"]


def test_patterns_only_match_reviews_of_same_polarity():
    """Test that patterns only match reviews of their polarity."""
    reviews = ["Excellent packaging but terrible product overall."]
    insights = extract(reviews, [NEGATIVE])
    assert insights.pros == list(InsightConstants.FALLBACK_PROS)
    assert insights.cons == ["Excellent packaging but terrible product overall"]


def test_short_fragments_are_skipped():
    """Test that fragments of 10 characters or fewer are skipped."""
    # "Love it" is only 7 characters
    insights = extract(["Love it! Works."], [POSITIVE])
    assert insights.pros == list(InsightConstants.FALLBACK_PROS)


def test_long_fragments_are_truncated():
    """Test truncation to 50 characters with a suffix."""
    review = "The battery life on this thing is great and lasts for days and days without charging"
    insights = extract([review], [POSITIVE])
    assert insights.pros == [review[:50] + "..."]
    assert len(insights.pros[0]) == 53


def test_duplicate_fragments_are_suppressed():
    """Test that duplicate snippets are kept once."""
    reviews = ["Great and excellent product overall", "Great and excellent product overall"]
    insights = extract(reviews, [POSITIVE, POSITIVE])
    assert insights.pros == ["Great and excellent product overall"]


def test_limits_and_fallbacks():
    """Test the pros/cons caps."""
    pros_reviews = [f"Review number {i} was excellent in every way" for i in range(10)]
    cons_reviews = [f"Review number {i} was terrible in every way" for i in range(10)]
    results = [POSITIVE] * 10 + [NEGATIVE] * 10
    insights = extract(pros_reviews + cons_reviews, results)
    assert len(insights.pros) == InsightConstants.MAX_PROS
    assert len(insights.cons) == InsightConstants.MAX_CONS
    assert insights.pros[0] == "Review number 0 was excellent in every way"


def test_no_reviews_gives_fallbacks():
    """Test fallback text when nothing is found."""
    insights = extract([], [])
    assert insights.pros == list(InsightConstants.FALLBACK_PROS)
    assert insights.cons == list(InsightConstants.FALLBACK_CONS)
