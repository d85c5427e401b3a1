"""Batched, paced fan-out of per-review classification."""

import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout, as_completed
from typing import Callable, List, Optional, Sequence

from ..core.config import Settings, settings as default_settings
from ..core.errors import BatchClassificationFailed
from ..core.models import SentimentResult
from .classifier import SentimentClassifier

logger = logging.getLogger(__name__)


class BatchScheduler:
    """Classifies reviews in fixed-size concurrent batches with a pause between them."""

    def __init__(
        self,
        classifier: SentimentClassifier,
        config: Optional[Settings] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.classifier = classifier
        self.config = config or default_settings
        self.batch_size = max(1, self.config.batch_size)
        self.batch_delay = self.config.batch_delay
        self._sleep = sleep

    def batch_count(self, n: int) -> int:
        return math.ceil(n / self.batch_size) if n > 0 else 0

    def _run_batch(self, batch: Sequence[str], offset: int, results: List[Optional[SentimentResult]]) -> None:
        timeout = self.config.classify_timeout
        executor = ThreadPoolExecutor(max_workers=min(self.batch_size, len(batch)))
        try:
            future_to_index = {
                executor.submit(self.classifier.classify, review): offset + i
                for i, review in enumerate(batch)
            }
            try:
                for future in as_completed(future_to_index, timeout=timeout):
                    index = future_to_index[future]
                    try:
                        results[index] = future.result()
                    except Exception as e:
                        logger.error(f"Classification failed for review {index}: {e}")
                        raise BatchClassificationFailed(
                            f"Classification failed for review {index}", index=index
                        ) from e
            except FutureTimeout as e:
                pending = sorted(i for f, i in future_to_index.items() if not f.done())
                index = pending[0] if pending else None
                logger.error(f"Classification timed out after {timeout}s for reviews {pending}")
                raise BatchClassificationFailed(
                    f"Classification timed out after {timeout}s", index=index
                ) from e
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def classify_all(self, reviews: Sequence[str]) -> List[SentimentResult]:
        """
        Classify every review, one result per review in input order.

        Raises:
            BatchClassificationFailed: if any single classification fails;
                no partial results are returned.
        """
        if not reviews:
            return []

        results: List[Optional[SentimentResult]] = [None] * len(reviews)
        total_batches = self.batch_count(len(reviews))

        for batch_no, start in enumerate(range(0, len(reviews), self.batch_size), 1):
            batch = reviews[start:start + self.batch_size]
            logger.debug(f"Classifying batch {batch_no}/{total_batches} ({len(batch)} reviews)")
            self._run_batch(batch, start, results)

            if start + self.batch_size < len(reviews):
                self._sleep(self.batch_delay)

        return list(results)
