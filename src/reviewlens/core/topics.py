"""Keyword-based topic detection and per-topic sentiment."""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import yaml

from .models import SentimentResult, TopicSentiment
from .constants import TOPIC_KEYWORDS, TopicConstants
from .scoring import polarity_score, round_half_up

logger = logging.getLogger(__name__)

TopicTable = Mapping[str, Tuple[str, ...]]


def load_topic_table(path: Optional[str] = None) -> TopicTable:
    """
    Load a topic -> keywords table from YAML.

    Falls back to the built-in table when no path is given or the file is
    missing or malformed. Keywords are lowercased; file order is kept.
    """
    if not path:
        return TOPIC_KEYWORDS

    topics_file = Path(path)
    if not topics_file.exists():
        logger.warning(f"Topics file {topics_file} not found, using defaults")
        return TOPIC_KEYWORDS

    try:
        with open(topics_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load topics from {topics_file}: {e}. Using defaults.")
        return TOPIC_KEYWORDS

    if not isinstance(data, dict) or not data:
        logger.warning(f"Topics file {topics_file} is not a topic mapping, using defaults")
        return TOPIC_KEYWORDS

    table: Dict[str, Tuple[str, ...]] = {}
    for topic, keywords in data.items():
        if not isinstance(keywords, list):
            logger.warning(f"Skipping topic '{topic}': keywords must be a list")
            continue
        table[str(topic)] = tuple(str(k).lower() for k in keywords)
    return MappingProxyType(table) if table else TOPIC_KEYWORDS


def classify_topics(
    reviews: Sequence[str],
    results: Sequence[SentimentResult],
    topic_table: TopicTable = TOPIC_KEYWORDS,
) -> List[TopicSentiment]:
    """Per-topic sentiment for the most-mentioned topics."""
    if len(reviews) != len(results):
        raise ValueError(f"Got {len(reviews)} reviews but {len(results)} sentiment results")

    scores: Dict[str, List[float]] = {topic: [] for topic in topic_table}
    matched: Dict[str, List[str]] = {topic: [] for topic in topic_table}

    for review, result in zip(reviews, results):
        sentiment_score = polarity_score(result) * 100
        lowered = review.lower()
        for topic, keywords in topic_table.items():
            hits = [k for k in keywords if k in lowered]
            if hits:
                scores[topic].append(sentiment_score)
                matched[topic].extend(hits)

    breakdown = []
    for topic in topic_table:
        topic_scores = scores[topic]
        if not topic_scores:
            continue
        breakdown.append(TopicSentiment(
            topic=topic,
            sentiment=round_half_up(sum(topic_scores) / len(topic_scores)),
            mentions=len(topic_scores),
            keywords=list(dict.fromkeys(matched[topic]))[:TopicConstants.MAX_KEYWORDS_PER_TOPIC],
        ))

    # sort is stable: ties keep table order
    breakdown.sort(key=lambda t: -t.mentions)
    return breakdown[:TopicConstants.MAX_TOPICS]
