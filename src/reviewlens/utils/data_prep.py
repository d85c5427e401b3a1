"""Review preparation and result export."""

import datetime
import json
from typing import Iterable, List, Optional

from ..core.config import Settings, settings as default_settings
from ..core.models import AnalysisResult


def prepare_reviews(raw_reviews: Iterable[str], config: Optional[Settings] = None) -> List[str]:
    """Trim reviews, drop short ones and cap the count."""
    config = config or default_settings
    prepared = []
    for review in raw_reviews:
        text = (review or "").strip()
        if len(text) > config.min_review_length:
            prepared.append(text)
    return prepared[:config.max_reviews]


def export_to_json(result: AnalysisResult, filename: str) -> None:
    """Export an analysis result to a JSON file."""
    data = result.to_dict()
    data["metadata"] = {"export_timestamp": datetime.datetime.now().isoformat()}

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
