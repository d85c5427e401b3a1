"""Core modules for ReviewLens."""

from .models import *
from .config import settings
from .scoring import aggregate
from .insights import extract
from .topics import classify_topics, load_topic_table

__all__ = [
    "settings",
    "SentimentLabel",
    "SentimentResult",
    "TopicSentiment",
    "KeyInsights",
    "AnalysisResult",
    "ReadinessState",
    "aggregate",
    "extract",
    "classify_topics",
    "load_topic_table",
]
