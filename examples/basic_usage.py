"""Basic usage examples for ReviewLens."""

import json

from reviewlens import ReviewAnalyzer, InitializationFailed, get_sample_reviews
from reviewlens.core.config import Settings
from reviewlens.utils.data_prep import prepare_reviews


def example_sample_reviews():
    """Example: analyze the built-in sample reviews with VADER."""
    print("🔍 Analyzing sample reviews")

    config = Settings(classifier_backend="vader")
    analyzer = ReviewAnalyzer(config=config)

    try:
        analyzer.initialize()
    except InitializationFailed as e:
        print(f"⚠️ Sentiment model unavailable, results will be placeholders: {e}")

    reviews = prepare_reviews(get_sample_reviews(), config)
    result = analyzer.analyze_reviews(reviews)

    print(f"📊 {result.total_reviews} reviews, overall {result.overall}/5")
    print(f"👍 {result.positive}%  😐 {result.neutral}%  👎 {result.negative}%")
    for topic in result.topic_breakdown:
        print(f"  {topic.topic}: {topic.sentiment}% ({topic.mentions} mentions)")


def example_custom_reviews():
    """Example: analyze caller-supplied reviews and dump JSON."""
    print("\n🔍 Analyzing custom reviews")

    raw = [
        "  Fast delivery and the packaging was perfect.  ",
        "ok",
        "The support staff never answered my emails. Worst experience ever.",
    ]
    analyzer = ReviewAnalyzer(config=Settings(classifier_backend="vader"))
    result = analyzer.analyze_reviews(prepare_reviews(raw))
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    example_sample_reviews()
    example_custom_reviews()
