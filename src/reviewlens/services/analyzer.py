"""Review analysis entry point."""

import logging
from typing import List, Optional, Sequence

from ..core.config import Settings, settings as default_settings
from ..core.constants import FallbackConstants, SAMPLE_REVIEWS
from ..core.errors import ReviewLensError
from ..core.insights import extract
from ..core.models import AnalysisResult, KeyInsights, TopicSentiment
from ..core.scoring import aggregate
from ..core.topics import TopicTable, classify_topics, load_topic_table
from .batching import BatchScheduler
from .classifier import SentimentClassifier

logger = logging.getLogger(__name__)


def default_analysis() -> AnalysisResult:
    """Placeholder result for empty input or a failed analysis."""
    return AnalysisResult(
        overall=FallbackConstants.OVERALL,
        positive=FallbackConstants.POSITIVE,
        neutral=FallbackConstants.NEUTRAL,
        negative=FallbackConstants.NEGATIVE,
        total_reviews=0,
        key_insights=KeyInsights(
            pros=list(FallbackConstants.PROS),
            cons=list(FallbackConstants.CONS),
        ),
        topic_breakdown=[
            TopicSentiment(
                topic=FallbackConstants.TOPIC,
                sentiment=FallbackConstants.TOPIC_SENTIMENT,
                mentions=0,
                keywords=[],
            )
        ],
    )


def get_sample_reviews() -> List[str]:
    """The 12 demo reviews."""
    return list(SAMPLE_REVIEWS)


class ReviewAnalyzer:
    """Turns a list of raw reviews into an AnalysisResult."""

    def __init__(
        self,
        classifier: Optional[SentimentClassifier] = None,
        scheduler: Optional[BatchScheduler] = None,
        topic_table: Optional[TopicTable] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config or default_settings
        if classifier is None and scheduler is not None:
            classifier = scheduler.classifier
        self.classifier = classifier or SentimentClassifier(config=self.config)
        if scheduler is not None and scheduler.classifier is not self.classifier:
            raise ValueError("Scheduler must wrap the same classifier the analyzer initializes")
        self.scheduler = scheduler or BatchScheduler(self.classifier, self.config)
        self.topic_table = topic_table if topic_table is not None else load_topic_table(self.config.topics_file)

    def initialize(self) -> None:
        """Load the classifier. Raises InitializationFailed."""
        self.classifier.initialize()

    def analyze_reviews(self, reviews: Sequence[str]) -> AnalysisResult:
        """
        Analyze reviews end to end.

        Never raises engine errors: empty input and any initialization or
        classification failure both return `default_analysis()`.
        """
        if not reviews:
            return default_analysis()

        reviews = list(reviews)
        try:
            self.classifier.initialize()
            logger.info(f"Analyzing {len(reviews)} reviews...")
            results = self.scheduler.classify_all(reviews)
        except ReviewLensError as e:
            logger.error(f"Error analyzing reviews, returning default analysis: {e}")
            return default_analysis()

        distribution = aggregate(reviews, results)
        return AnalysisResult(
            overall=distribution["overall"],
            positive=distribution["positive"],
            neutral=distribution["neutral"],
            negative=distribution["negative"],
            total_reviews=len(reviews),
            key_insights=extract(reviews, results),
            topic_breakdown=classify_topics(reviews, results, self.topic_table),
        )
