"""ReviewLens - review sentiment aggregation engine."""

__version__ = "1.0.0"
__author__ = "ReviewLens Team"

from .core.models import *
from .core.config import settings
from .core.errors import (
    ReviewLensError,
    InitializationFailed,
    ClassifierUnavailable,
    BatchClassificationFailed,
)
from .services.analyzer import ReviewAnalyzer, default_analysis, get_sample_reviews
from .services.classifier import SentimentClassifier, ClassifierMode

__all__ = [
    "settings",
    "ReviewAnalyzer",
    "SentimentClassifier",
    "ClassifierMode",
    "default_analysis",
    "get_sample_reviews",
    "AnalysisResult",
    "KeyInsights",
    "TopicSentiment",
    "SentimentResult",
    "SentimentLabel",
    "ReadinessState",
    "ReviewLensError",
    "InitializationFailed",
    "ClassifierUnavailable",
    "BatchClassificationFailed",
]
