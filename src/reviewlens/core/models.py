"""Data models for ReviewLens."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Dict, Any

from .constants import TopicConstants


class SentimentLabel(str, Enum):
    """Polarity labels produced by the sentiment classifier."""
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


class ReadinessState(str, Enum):
    """Lifecycle of the classifier adapter."""
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class SentimentResult:
    """Classifier output for a single review."""
    label: SentimentLabel
    score: float  # confidence in `label`, 0..1

    @property
    def is_positive(self) -> bool:
        return self.label is SentimentLabel.POSITIVE


def sentiment_band(sentiment: float) -> str:
    """Map a 0-100 sentiment onto the positive/neutral/negative badge bands."""
    if sentiment >= TopicConstants.POSITIVE_BAND_MIN:
        return "positive"
    if sentiment <= TopicConstants.NEGATIVE_BAND_MAX:
        return "negative"
    return "neutral"


@dataclass
class TopicSentiment:
    """Aggregated sentiment for one topic."""
    topic: str
    sentiment: int  # 0..100
    mentions: int
    keywords: List[str] = field(default_factory=list)

    @property
    def band(self) -> str:
        return sentiment_band(self.sentiment)


@dataclass
class KeyInsights:
    """Short pros/cons snippets extracted from reviews."""
    pros: List[str]
    cons: List[str]


@dataclass
class AnalysisResult:
    """Structured sentiment summary for a batch of reviews."""
    overall: float
    positive: int
    neutral: int
    negative: int
    total_reviews: int
    key_insights: KeyInsights
    topic_breakdown: List[TopicSentiment]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable form with the presentation layer's key names."""
        return {
            "overall": self.overall,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
            "totalReviews": self.total_reviews,
            "keyInsights": asdict(self.key_insights),
            "topicBreakdown": [asdict(t) for t in self.topic_breakdown],
        }
