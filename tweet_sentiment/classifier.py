"""
Sentiment Engine - Naive Bayes Classifier.

Multinomial Naive Bayes over unigram (and optional bigram) tokens
with Laplace/Lidstone smoothing.

Training rebuilds the whole model and publishes it as one immutable
state object, so predictions running during a retrain read either the
previous model or the new one, never a half-built vocabulary.
"""

import logging
import math
import re
import threading
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Union

from .exceptions import EmptyDatasetError, SnapshotError, UntrainedModelError
from .lexicon import STOPWORDS
from .models import (
    LABELS,
    ClassStatistics,
    ModelParameters,
    SentimentLabel,
    SentimentResult,
    TrainingExample,
    argmax_label,
    normalize_label,
)
from .normalizer import coerce_text


logger = logging.getLogger(__name__)


SNAPSHOT_SCHEMA_VERSION = 1

# Returned for empty / whitespace-only input
EMPTY_TEXT_SCORES = {
    SentimentLabel.POSITIVE.value: 0.33,
    SentimentLabel.NEGATIVE.value: 0.33,
    SentimentLabel.NEUTRAL.value: 0.34,
}

_APOSTROPHES = re.compile(r"['’]")
_PUNCTUATION = re.compile(r"[^\w\s]")

ExampleInput = Union[TrainingExample, Mapping[str, Any]]


def empty_text_result(reason: str = "Empty text") -> SentimentResult:
    return SentimentResult(
        label=SentimentLabel.NEUTRAL,
        confidence=0.0,
        scores=dict(EMPTY_TEXT_SCORES),
        reasoning=[reason],
    )


def to_training_example(item: ExampleInput) -> TrainingExample:
    if isinstance(item, TrainingExample):
        return item
    return TrainingExample.from_dict(dict(item))


@dataclass(frozen=True)
class ModelState:
    """Everything a prediction needs. Never mutated after construction."""
    parameters: ModelParameters
    vocabulary: dict[str, int]
    class_statistics: dict[SentimentLabel, ClassStatistics]
    total_documents: int
    trained_at: datetime

    def log_prior(self, label: SentimentLabel) -> float:
        count = self.class_statistics[label].document_count
        if count == 0:
            return -math.inf
        return math.log(count / self.total_documents)


class NaiveBayesClassifier:
    """
    Three-way Naive Bayes text classifier.

    ============================================================
    USAGE
    ============================================================
    ```python
    classifier = NaiveBayesClassifier(ModelParameters(enable_bigrams=True))
    classifier.train([
        TrainingExample("love it", SentimentLabel.POSITIVE),
        TrainingExample("hate it", SentimentLabel.NEGATIVE),
    ])

    result = classifier.predict("I love this")
    print(result.label, result.confidence)
    ```

    ============================================================
    """

    def __init__(
        self,
        parameters: Optional[ModelParameters] = None,
        max_workers: int = 4,
    ) -> None:
        self._parameters = parameters or ModelParameters()
        self._max_workers = max(1, max_workers)
        # Swapped whole by train(); predict() reads it once, so readers take no lock
        self._state: Optional[ModelState] = None
        self._train_lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def parameters(self) -> ModelParameters:
        return self._parameters

    @property
    def is_trained(self) -> bool:
        return self._state is not None

    @property
    def vocabulary_size(self) -> int:
        state = self._state
        return len(state.vocabulary) if state else 0

    # -------------------------------------------------------------------------
    # Tokenization
    # -------------------------------------------------------------------------

    def tokenize(self, text: Any) -> list[str]:
        """Lowercase, strip punctuation, split, filter, add bigrams."""
        return tokenize(coerce_text(text), self._parameters)

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def train(self, examples: Iterable[ExampleInput]) -> None:
        """
        Rebuild the model from scratch.

        Raises:
            EmptyDatasetError: no examples, or none with non-empty text
        """
        items = list(examples or [])
        if not items:
            raise EmptyDatasetError(received=0)

        prepared = []
        for item in items:
            example = to_training_example(item)
            if not coerce_text(example.text).strip():
                continue
            prepared.append(example)

        if not prepared:
            raise EmptyDatasetError(
                "Training data contains no usable examples",
                received=len(items),
            )

        with self._train_lock:
            state = self._build_state(prepared)
            self._state = state

        logger.info(
            f"Naive Bayes trained: {state.total_documents} examples "
            f"({len(items) - len(prepared)} skipped), vocabulary={len(state.vocabulary)}, "
            + ", ".join(
                f"{label.value}={stats.document_count}"
                for label, stats in state.class_statistics.items()
            )
        )

    def _build_state(self, examples: list[TrainingExample]) -> ModelState:
        params = self._parameters
        document_counts: Counter = Counter()
        class_tokens: dict[SentimentLabel, Counter] = {label: Counter() for label in LABELS}
        frequencies: Counter = Counter()

        for example in examples:
            label = normalize_label(example.label)
            tokens = tokenize(coerce_text(example.text), params)
            document_counts[label] += 1
            class_tokens[label].update(tokens)
            frequencies.update(tokens)

        ranked = sorted(
            (token for token, count in frequencies.items() if count >= params.min_word_frequency),
            key=lambda token: (-frequencies[token], token),
        )[: params.max_vocabulary_size]
        vocabulary = {token: index for index, token in enumerate(ranked)}

        statistics = {}
        for label in LABELS:
            counts = {
                token: count
                for token, count in class_tokens[label].items()
                if token in vocabulary
            }
            statistics[label] = ClassStatistics(
                document_count=document_counts[label],
                total_token_count=sum(counts.values()),
                token_counts=counts,
            )

        return ModelState(
            parameters=params,
            vocabulary=vocabulary,
            class_statistics=statistics,
            total_documents=len(examples),
            trained_at=datetime.utcnow(),
        )

    # -------------------------------------------------------------------------
    # Prediction
    # -------------------------------------------------------------------------

    def predict(self, text: Any) -> SentimentResult:
        """
        Predict a label distribution for one text.

        Raises:
            UntrainedModelError: train() has never succeeded
        """
        state = self._state
        if state is None:
            raise UntrainedModelError()

        raw = coerce_text(text)
        if not raw.strip():
            return empty_text_result()

        tokens = [t for t in tokenize(raw, state.parameters) if t in state.vocabulary]
        log_probs = self._log_probabilities(state, tokens)

        max_log = max(log_probs.values())
        exps = {label: math.exp(value - max_log) for label, value in log_probs.items()}
        total = sum(exps.values())
        scores = {label.value: exps[label] / total for label in LABELS}

        label = argmax_label(scores)
        reasoning = [f"{len(tokens)} in-vocabulary tokens"]
        if not tokens:
            reasoning.append("No known tokens, using class priors")

        return SentimentResult(
            label=label,
            confidence=scores[label.value],
            scores=scores,
            reasoning=reasoning,
        )

    def _log_probabilities(self, state: ModelState, tokens: list[str]) -> dict[SentimentLabel, float]:
        alpha = state.parameters.smoothing_factor
        vocab_size = len(state.vocabulary)
        log_probs = {}
        for label in LABELS:
            stats = state.class_statistics[label]
            value = state.log_prior(label)
            if value != -math.inf:
                denominator = stats.total_token_count + alpha * vocab_size
                for token in tokens:
                    value += math.log((stats.token_counts.get(token, 0) + alpha) / denominator)
            log_probs[label] = value
        return log_probs

    def predict_batch(self, texts: Iterable[Any]) -> list[SentimentResult]:
        """Predict many texts in parallel; output order matches input order."""
        items = list(texts)
        if not items:
            return []
        if self._state is None:
            raise UntrainedModelError()
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            return list(executor.map(self.predict, items))

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> dict[str, Any]:
        """Versioned, JSON-compatible dump of vocabulary, statistics and parameters."""
        state = self._state
        if state is None:
            raise UntrainedModelError("Cannot snapshot an untrained model", component="persistence")

        ordered = sorted(state.vocabulary.items(), key=lambda item: item[1])
        return {
            "schema_version": SNAPSHOT_SCHEMA_VERSION,
            "parameters": state.parameters.to_dict(),
            "vocabulary": [token for token, _ in ordered],
            "class_statistics": {
                label.value: stats.to_dict()
                for label, stats in state.class_statistics.items()
            },
            "total_documents": state.total_documents,
            "trained_at": state.trained_at.isoformat(),
        }

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any], max_workers: int = 4) -> "NaiveBayesClassifier":
        """Restore a trained classifier from to_snapshot() output."""
        version = data.get("schema_version")
        if version != SNAPSHOT_SCHEMA_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot schema version: {version!r}",
                schema_version=version,
            )

        try:
            parameters = ModelParameters.from_dict(data["parameters"])
            vocabulary = {token: index for index, token in enumerate(data["vocabulary"])}
            statistics = {
                label: ClassStatistics.from_dict(data["class_statistics"][label.value])
                for label in LABELS
            }
            total_documents = int(data["total_documents"])
            trained_at = datetime.fromisoformat(data["trained_at"])
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotError(
                f"Malformed snapshot: {e}",
                schema_version=version,
            ) from e

        if total_documents <= 0:
            raise SnapshotError("Snapshot has no training documents", schema_version=version)

        classifier = cls(parameters, max_workers=max_workers)
        classifier._state = ModelState(
            parameters=parameters,
            vocabulary=vocabulary,
            class_statistics=statistics,
            total_documents=total_documents,
            trained_at=trained_at,
        )
        return classifier

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_stats(self) -> dict[str, Any]:
        state = self._state
        if state is None:
            return {
                "is_trained": False,
                "vocabulary_size": 0,
                "parameters": self._parameters.to_dict(),
            }
        return {
            "is_trained": True,
            "vocabulary_size": len(state.vocabulary),
            "total_documents": state.total_documents,
            "class_distribution": {
                label.value: stats.document_count
                for label, stats in state.class_statistics.items()
            },
            "class_priors": {
                label.value: stats.document_count / state.total_documents
                for label, stats in state.class_statistics.items()
            },
            "parameters": state.parameters.to_dict(),
            "trained_at": state.trained_at.isoformat(),
        }


def tokenize(text: str, parameters: ModelParameters) -> list[str]:
    cleaned = _APOSTROPHES.sub("", text.lower())
    cleaned = _PUNCTUATION.sub(" ", cleaned)

    tokens = [
        token for token in cleaned.split()
        if len(token) >= parameters.min_word_length
    ]
    if parameters.remove_stopwords:
        tokens = [token for token in tokens if token not in STOPWORDS]

    if parameters.enable_bigrams:
        tokens = tokens + [f"{a}_{b}" for a, b in zip(tokens, tokens[1:])]
    return tokens
