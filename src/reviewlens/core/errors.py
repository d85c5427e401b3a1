"""Exceptions raised by the review analysis engine."""

from typing import Dict, Optional


class ReviewLensError(Exception):
    """Base class for engine errors."""


class InitializationFailed(ReviewLensError):
    """Every execution mode failed to load the sentiment classifier."""

    def __init__(self, message: str, errors: Optional[Dict[str, BaseException]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class ClassifierUnavailable(ReviewLensError):
    """Classification requested before readiness, or the inference call failed."""


class BatchClassificationFailed(ReviewLensError):
    """A single classification inside a batch failed; the whole batch is discarded."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index
