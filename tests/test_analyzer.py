"""End-to-end tests for ReviewAnalyzer."""

import json
from unittest.mock import Mock

import pytest
from reviewlens.core.constants import SAMPLE_REVIEWS
from reviewlens.core.errors import InitializationFailed
from reviewlens.services.analyzer import ReviewAnalyzer, default_analysis, get_sample_reviews
from reviewlens.services.batching import BatchScheduler
from reviewlens.services.classifier import ClassifierMode, SentimentClassifier

EXAMPLE_REVIEWS = [
    "This product is absolutely amazing! Excellent build quality.",
    "Terrible customer service, arrived damaged.",
]


def _sample_predict(text):
    """Deterministic stub: the last three sample reviews are negative."""
    negative = SAMPLE_REVIEWS[-3:]
    if text in negative:
        return [{"label": "NEGATIVE", "score": 0.85}]
    return [{"label": "POSITIVE", "score": 0.9}]


def _assert_is_fallback(result):
    assert result.overall == 4.2
    assert (result.positive, result.neutral, result.negative) == (68, 22, 10)
    assert result.total_reviews == 0
    assert result.key_insights.pros == ["Analyzing reviews...", "NLP model loading..."]
    assert result.key_insights.cons == ["Please wait for analysis..."]
    assert len(result.topic_breakdown) == 1
    assert result.topic_breakdown[0].topic == "Overall"
    assert result.topic_breakdown[0].sentiment == 75
    assert result.topic_breakdown[0].mentions == 0
    assert result.topic_breakdown[0].keywords == []


class TestReviewAnalyzer:
    """Analysis orchestration and degrade-to-default policy."""

    def test_example_reviews(self, make_classifier, table_predictor, fast_settings):
        """Test the two-review example: even split and Quality/Customer Service topics."""
        predict = table_predictor({
            EXAMPLE_REVIEWS[0]: ("POSITIVE", 0.95),
            EXAMPLE_REVIEWS[1]: ("NEGATIVE", 0.9),
        })
        analyzer = ReviewAnalyzer(classifier=make_classifier(predict), config=fast_settings)
        result = analyzer.analyze_reviews(EXAMPLE_REVIEWS)

        assert (result.positive, result.negative, result.neutral) == (50, 50, 0)
        assert result.total_reviews == 2
        mentions = {t.topic: t.mentions for t in result.topic_breakdown}
        assert mentions["Quality"] == 1
        assert mentions["Customer Service"] == 1
        assert 0.0 <= result.overall <= 5.0

    def test_sample_reviews(self, make_classifier, fast_settings):
        """Test invariants of a full analysis of the sample reviews."""
        analyzer = ReviewAnalyzer(classifier=make_classifier(_sample_predict), config=fast_settings)
        reviews = get_sample_reviews()
        result = analyzer.analyze_reviews(reviews)

        assert result.total_reviews == 12
        assert result.positive + result.neutral + result.negative == 100
        assert result.positive == 75
        assert result.negative == 25
        assert 1 <= len(result.key_insights.pros) <= 4
        assert 1 <= len(result.key_insights.cons) <= 3
        assert len(result.topic_breakdown) <= 5
        mentions = [t.mentions for t in result.topic_breakdown]
        assert mentions == sorted(mentions, reverse=True)

    def test_empty_input_returns_fallback_without_loading(self, fast_settings):
        """Test that empty input returns the fallback without loading the model."""
        loader = Mock(return_value=_sample_predict)
        classifier = SentimentClassifier(modes=[ClassifierMode("stub", loader)], config=fast_settings)
        analyzer = ReviewAnalyzer(classifier=classifier, config=fast_settings)

        _assert_is_fallback(analyzer.analyze_reviews([]))
        loader.assert_not_called()

    def test_initialization_failure_returns_fallback(self, fast_settings):
        """Test that a model that cannot load degrades to the fallback."""
        def broken_loader():
            raise RuntimeError("model unavailable")

        classifier = SentimentClassifier(modes=[ClassifierMode("cpu", broken_loader)], config=fast_settings)
        analyzer = ReviewAnalyzer(classifier=classifier, config=fast_settings)
        _assert_is_fallback(analyzer.analyze_reviews(EXAMPLE_REVIEWS))

    def test_classification_failure_returns_fallback(self, make_classifier, fast_settings):
        """Test that a failed classification degrades to the fallback."""
        def flaky(text):
            if "Terrible" in text:
                raise RuntimeError("inference crashed")
            return {"label": "POSITIVE", "score": 0.9}

        analyzer = ReviewAnalyzer(classifier=make_classifier(flaky), config=fast_settings)
        _assert_is_fallback(analyzer.analyze_reviews(EXAMPLE_REVIEWS))

    def test_direct_initialize_propagates(self, fast_settings):
        """Test that initialize() raises InitializationFailed to its caller."""
        def broken_loader():
            raise RuntimeError("model unavailable")

        classifier = SentimentClassifier(modes=[ClassifierMode("cpu", broken_loader)], config=fast_settings)
        analyzer = ReviewAnalyzer(classifier=classifier, config=fast_settings)
        with pytest.raises(InitializationFailed):
            analyzer.initialize()

    def test_repeated_analysis_is_identical(self, make_classifier, fast_settings):
        """Test that the same input and classifier give identical results."""
        analyzer = ReviewAnalyzer(classifier=make_classifier(_sample_predict), config=fast_settings)
        first = analyzer.analyze_reviews(get_sample_reviews())
        second = analyzer.analyze_reviews(get_sample_reviews())
        assert first == second
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_to_dict_shape(self, make_classifier, fast_settings):
        """Test the JSON keys of the serialized result."""
        analyzer = ReviewAnalyzer(classifier=make_classifier(_sample_predict), config=fast_settings)
        data = analyzer.analyze_reviews(get_sample_reviews()).to_dict()
        assert set(data) == {"overall", "positive", "neutral", "negative", "totalReviews", "keyInsights", "topicBreakdown"}
        assert set(data["keyInsights"]) == {"pros", "cons"}
        assert set(data["topicBreakdown"][0]) == {"topic", "sentiment", "mentions", "keywords"}
        json.dumps(data)


def test_default_analysis_is_fresh_each_call():
    """Test that mutating one fallback result does not leak into the next."""
    first = default_analysis()
    first.key_insights.pros.append("mutated")
    _assert_is_fallback(default_analysis())


def test_sample_reviews():
    """Test the twelve demo reviews."""
    reviews = get_sample_reviews()
    assert len(reviews) == 12
    assert reviews[0].startswith("This product is absolutely amazing!")
    assert all(len(r) > 10 for r in reviews)


class TestAnalyzerWiring:
    """Classifier and scheduler wiring."""

    def test_scheduler_classifier_is_reused(self, make_classifier, fast_settings):
        """Test that a scheduler alone supplies the classifier the analyzer initializes."""
        classifier = make_classifier(_sample_predict)
        scheduler = BatchScheduler(classifier, fast_settings)
        analyzer = ReviewAnalyzer(scheduler=scheduler, config=fast_settings)

        assert analyzer.classifier is classifier
        assert analyzer.analyze_reviews(get_sample_reviews()).total_reviews == 12

    def test_mismatched_scheduler_rejected(self, make_classifier, fast_settings):
        """Test that a scheduler around a different classifier is refused."""
        scheduler = BatchScheduler(make_classifier(_sample_predict), fast_settings)
        with pytest.raises(ValueError):
            ReviewAnalyzer(classifier=make_classifier(_sample_predict), scheduler=scheduler, config=fast_settings)
