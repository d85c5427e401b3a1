"""Services for ReviewLens."""

from .classifier import SentimentClassifier, ClassifierMode
from .batching import BatchScheduler
from .analyzer import ReviewAnalyzer

__all__ = [
    "SentimentClassifier",
    "ClassifierMode",
    "BatchScheduler",
    "ReviewAnalyzer",
]
