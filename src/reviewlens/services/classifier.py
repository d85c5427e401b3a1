"""Sentiment classifier adapter.

Wraps a text-classification backend behind `classify(text) -> SentimentResult`
and owns its readiness state. Loading tries each execution mode in order
(e.g. GPU, then CPU) and the first that loads wins.
"""

import logging
import threading
from dataclasses import dataclass
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, List, Optional

from tenacity import Retrying, stop_after_attempt, wait_exponential

from ..core.config import Settings, settings as default_settings
from ..core.errors import ClassifierUnavailable, InitializationFailed
from ..core.models import ReadinessState, SentimentLabel, SentimentResult

logger = logging.getLogger(__name__)

# Loaded backend: text -> {"label": ..., "score": ...} or a list of those
Predictor = Callable[[str], Any]

# Generic Hugging Face class ids; named labels are matched by prefix (POS*/NEG*)
_LABEL_IDS = {
    "LABEL_1": SentimentLabel.POSITIVE,
    "LABEL_0": SentimentLabel.NEGATIVE,
}


@dataclass(frozen=True)
class ClassifierMode:
    """A named way of loading the backend."""
    name: str
    loader: Callable[[], Predictor]


def transformers_modes(config: Settings) -> List[ClassifierMode]:
    """Hugging Face pipeline on the preferred device, then on CPU."""

    def load(device: str) -> Predictor:
        from transformers import pipeline
        sentiment = pipeline("sentiment-analysis", model=config.model_name, device=device)

        def predict(text: str) -> Any:
            return sentiment(text[:config.max_text_chars])

        return predict

    modes = []
    if config.preferred_device and config.preferred_device != "cpu":
        modes.append(ClassifierMode(config.preferred_device, lambda: load(config.preferred_device)))
    modes.append(ClassifierMode("cpu", lambda: load("cpu")))
    return modes


def vader_modes(config: Settings) -> List[ClassifierMode]:
    """Lexicon-based VADER analyzer mapped onto POSITIVE/NEGATIVE."""

    def load() -> Predictor:
        from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer
        analyzer = SentimentIntensityAnalyzer()

        def predict(text: str) -> Dict[str, Any]:
            compound = analyzer.polarity_scores(text)["compound"]
            label = "POSITIVE" if compound >= 0 else "NEGATIVE"
            return {"label": label, "score": 0.5 + abs(compound) / 2}

        return predict

    return [ClassifierMode("vader", load)]


def default_modes(config: Settings) -> List[ClassifierMode]:
    backend = config.classifier_backend.lower()
    if backend == "vader":
        return vader_modes(config)
    if backend != "transformers":
        logger.warning(f"Unknown classifier backend '{config.classifier_backend}', using transformers")
    return transformers_modes(config)


def _parse_label(name: str) -> Optional[SentimentLabel]:
    name = name.strip().upper()
    if name in _LABEL_IDS:
        return _LABEL_IDS[name]
    if name.startswith("POS"):
        return SentimentLabel.POSITIVE
    if name.startswith("NEG"):
        return SentimentLabel.NEGATIVE
    return None


def normalize_output(raw: Any) -> SentimentResult:
    """Turn a backend prediction into a SentimentResult."""
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if not raw:
            raise ValueError("Classifier returned no prediction")
        raw = raw[0]
    if not isinstance(raw, Mapping):
        raise ValueError(f"Unexpected classifier output: {raw!r}")

    label = _parse_label(str(raw.get("label", "")))
    if label is None:
        raise ValueError(f"Unsupported sentiment label '{raw.get('label')}'")
    score = max(0.0, min(1.0, float(raw.get("score", 0.0))))
    return SentimentResult(label=label, score=score)


class SentimentClassifier:
    """Owned classifier resource with an explicit readiness state machine."""

    def __init__(self, modes: Optional[Sequence[ClassifierMode]] = None, config: Optional[Settings] = None):
        self.config = config or default_settings
        self.modes = list(modes) if modes is not None else default_modes(self.config)
        self._predictor: Optional[Predictor] = None
        self._state = ReadinessState.UNINITIALIZED
        self._mode: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> ReadinessState:
        return self._state

    @property
    def mode(self) -> Optional[str]:
        """Name of the execution mode that loaded, if any."""
        return self._mode

    def ready(self) -> bool:
        return self._state is ReadinessState.READY

    def _load_mode(self, mode: ClassifierMode) -> Predictor:
        retrying = Retrying(
            stop=stop_after_attempt(max(1, self.config.load_retries)),
            wait=wait_exponential(multiplier=self.config.load_retry_delay, max=10),
            reraise=True,
        )
        return retrying(mode.loader)

    def initialize(self) -> None:
        """
        Load the backend, trying each mode in order.

        Idempotent: a no-op once ready. Concurrent callers wait on the
        in-flight load instead of starting their own.

        Raises:
            InitializationFailed: if every mode fails to load.
        """
        if self.ready():
            return

        with self._lock:
            if self.ready():
                return
            self._state = ReadinessState.INITIALIZING
            logger.info("Initializing sentiment classifier...")

            errors: Dict[str, BaseException] = {}
            for i, mode in enumerate(self.modes):
                try:
                    predictor = self._load_mode(mode)
                except Exception as e:
                    errors[mode.name] = e
                    if i + 1 < len(self.modes):
                        logger.warning(f"Classifier mode '{mode.name}' unavailable ({e}), falling back to '{self.modes[i + 1].name}'")
                    continue

                self._predictor = predictor
                self._mode = mode.name
                self._state = ReadinessState.READY
                logger.info(f"Sentiment classifier initialized ({mode.name})")
                return

            self._state = ReadinessState.FAILED
            logger.error(f"Failed to initialize sentiment classifier: {errors}")
            last_error = list(errors.values())[-1] if errors else None
            raise InitializationFailed(
                f"No classifier mode could be loaded (tried: {', '.join(errors) or 'none'})",
                errors,
            ) from last_error

    def classify(self, text: str) -> SentimentResult:
        """
        Classify a single text.

        Raises:
            ClassifierUnavailable: if not initialized, or the backend call fails.
        """
        if not self.ready() or self._predictor is None:
            raise ClassifierUnavailable(f"Classifier is not ready (state: {self._state.value})")

        try:
            raw = self._predictor(text)
            return normalize_output(raw)
        except Exception as e:
            logger.error(f"Error analyzing sentiment: {e}")
            raise ClassifierUnavailable(f"Sentiment classification failed: {e}") from e
