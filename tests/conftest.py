"""Shared fixtures: fast settings and a deterministic stub classifier."""

import pytest

from reviewlens.core.config import Settings
from reviewlens.services.classifier import ClassifierMode, SentimentClassifier


@pytest.fixture
def fast_settings():
    """Settings with no pauses or retry waits."""
    return Settings(batch_delay=0.0, load_retries=1, load_retry_delay=0.0, topics_file=None)


@pytest.fixture
def make_classifier(fast_settings):
    """Build a SentimentClassifier around a plain `text -> dict` predictor."""

    def factory(predict, config=None):
        return SentimentClassifier(
            modes=[ClassifierMode("stub", lambda: predict)],
            config=config or fast_settings,
        )

    return factory


@pytest.fixture
def table_predictor():
    """Predictor that looks reviews up in a {text: (label, score)} table."""

    def factory(table):
        def predict(text):
            label, score = table[text]
            return [{"label": label, "score": score}]
        return predict

    return factory
