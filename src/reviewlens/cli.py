"""Command-line interface for ReviewLens."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .core.config import settings
from .core.constants import FileConstants
from .core.errors import InitializationFailed
from .core.models import AnalysisResult
from .services.analyzer import ReviewAnalyzer, get_sample_reviews
from .utils.data_prep import export_to_json, prepare_reviews

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _config_for(args):
    if getattr(args, "backend", None):
        return settings.model_copy(update={"classifier_backend": args.backend})
    return settings


def read_reviews(path: str) -> List[str]:
    """Read reviews from a JSON list or a text file with one review per line."""
    text = Path(path).read_text(encoding="utf-8")
    if path.endswith(".json"):
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a JSON list of reviews")
        return [str(item) for item in data]
    return text.splitlines()


def print_summary(result: AnalysisResult) -> None:
    print(f"\nReviews analyzed: {result.total_reviews}")
    print(f"Overall rating: {result.overall:.1f}/5")
    print(f"Positive {result.positive}% | Neutral {result.neutral}% | Negative {result.negative}%")

    print("\nPros:")
    for pro in result.key_insights.pros:
        print(f"  + {pro}")
    print("Cons:")
    for con in result.key_insights.cons:
        print(f"  - {con}")

    print("\nTopics:")
    for topic in result.topic_breakdown:
        keywords = ", ".join(topic.keywords)
        print(f"  {topic.topic}: {topic.sentiment}% ({topic.band}, {topic.mentions} mentions) [{keywords}]")


def cmd_analyze(args):
    """Analyze command."""
    if args.sample or not args.input_file:
        raw_reviews = get_sample_reviews()
    else:
        raw_reviews = read_reviews(args.input_file)

    config = _config_for(args)
    reviews = prepare_reviews(raw_reviews, config)
    print(f"Analyzing {len(reviews)} reviews...")

    analyzer = ReviewAnalyzer(config=config)
    result = analyzer.analyze_reviews(reviews)

    if args.out:
        export_to_json(result, args.out)
        print(f"Results exported to {args.out}")

    print_summary(result)


def cmd_sample(args):
    """Sample command."""
    for i, review in enumerate(get_sample_reviews(), 1):
        print(f"{i:2d}. {review}")


def cmd_init(args):
    """Init command: load the classifier and report the mode used."""
    analyzer = ReviewAnalyzer(config=_config_for(args))
    try:
        analyzer.initialize()
    except InitializationFailed as e:
        print(f"Sentiment model unavailable, analysis will run in degraded mode: {e}")
        sys.exit(1)
    print(f"Sentiment classifier ready ({analyzer.classifier.mode})")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="ReviewLens - Review Sentiment Analysis")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze reviews')
    analyze_parser.add_argument('--in', dest='input_file', help='Reviews file (.json list or one review per line)')
    analyze_parser.add_argument('--sample', action='store_true', help='Analyze the built-in sample reviews')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--backend', choices=['transformers', 'vader'], help='Sentiment classifier backend')

    # Sample command
    subparsers.add_parser('sample', help='Print the sample reviews')

    # Init command
    init_parser = subparsers.add_parser('init', help='Load the sentiment classifier')
    init_parser.add_argument('--backend', choices=['transformers', 'vader'], help='Sentiment classifier backend')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'sample':
            cmd_sample(args)
        elif args.command == 'init':
            cmd_init(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except (OSError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)
