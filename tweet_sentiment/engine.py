"""
Sentiment Engine - Public Facade.

============================================================
PIPELINE
============================================================
raw text
  -> TextNormalizer.preprocess
  -> RuleBasedScorer + NaiveBayesClassifier (normalized text)
  -> HybridCombiner (merge policy + heuristic decision layer)
  -> ComplexCaseHandler (raw text, combined result as base)
  -> HybridSentimentResult

The engine is constructed explicitly and owns its collaborators.
There is no module-level instance.

============================================================
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from . import persistence
from .classifier import EMPTY_TEXT_SCORES, ExampleInput, NaiveBayesClassifier, to_training_example
from .combiner import HybridCombiner
from .complex_cases import ComplexCaseHandler
from .config import EngineConfig
from .models import AnalysisMethod, HybridSentimentResult, SentimentLabel
from .normalizer import TextNormalizer, coerce_text
from .rule_based import RuleBasedScorer


logger = logging.getLogger(__name__)


class SentimentEngine:
    """
    Hybrid tweet sentiment engine.

    ============================================================
    USAGE
    ============================================================
    ```python
    engine = SentimentEngine.from_config(EngineConfig.from_env())
    engine.train([
        {"text": "I love this phone", "label": "positive"},
        {"text": "Worst service ever", "label": "negative"},
        {"text": "The store opens at 9", "label": "neutral"},
    ])

    result = engine.analyze("This product is fire, no cap 🔥")
    print(result.label, result.confidence, result.method)

    engine.save_model("models/sentiment.json")
    ```

    ============================================================
    """

    def __init__(
        self,
        classifier: Optional[NaiveBayesClassifier] = None,
        normalizer: Optional[TextNormalizer] = None,
        combiner: Optional[HybridCombiner] = None,
        complex_handler: Optional[ComplexCaseHandler] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.classifier = classifier or NaiveBayesClassifier(
            self.config.model,
            max_workers=self.config.batch_workers,
        )
        self.normalizer = normalizer or TextNormalizer()
        self.combiner = combiner or HybridCombiner(
            classifier=self.classifier,
            scorer=RuleBasedScorer(),
            config=self.config.combiner,
            heuristic_config=self.config.heuristics,
        )
        self.complex_handler = complex_handler or ComplexCaseHandler(
            classifier=self.classifier,
            normalizer=self.normalizer,
            config=self.config.complex_cases,
        )

        self._lock = threading.Lock()
        self._stats = {
            "total_analyzed": 0,
            "empty_inputs": 0,
            "fallbacks": 0,
            "label_counts": {label.value: 0 for label in SentimentLabel},
        }

    @classmethod
    def from_config(cls, config: EngineConfig) -> "SentimentEngine":
        """Build a fully wired engine; raises ConfigurationError on invalid tunables."""
        config.require_valid()
        return cls(config=config)

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def train(self, examples: Iterable[ExampleInput]) -> dict[str, Any]:
        """
        Train the Naive Bayes model on labelled examples.

        Accepts TrainingExample objects or {"text", "label"} mappings.

        Raises:
            EmptyDatasetError: no usable examples
        """
        self.classifier.train([to_training_example(item) for item in examples or []])
        return self.classifier.get_stats()

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def analyze(self, text: Any) -> HybridSentimentResult:
        raw = coerce_text(text)
        if not raw.strip():
            result = HybridSentimentResult(
                label=SentimentLabel.NEUTRAL,
                confidence=0.0,
                scores=dict(EMPTY_TEXT_SCORES),
                reasoning=["Empty text"],
                method=AnalysisMethod.HYBRID,
            )
            self._record(result, empty=True)
            return result

        preprocessed = self.normalizer.preprocess(raw)
        combined = self.combiner.analyze(raw, preprocessed.normalized_text)
        enhanced = self.complex_handler.analyze_complex_case(
            raw, base=combined, classifier_result=combined.nb_result
        )

        reasoning = list(combined.reasoning)
        reasoning.extend(r for r in enhanced.reasoning if r not in reasoning)

        result = HybridSentimentResult(
            label=enhanced.label,
            confidence=enhanced.confidence,
            scores=dict(enhanced.scores),
            reasoning=reasoning,
            method=combined.method,
            hybrid_score=combined.hybrid_score,
            complexity_score=enhanced.complexity_score,
            features=preprocessed.features,
            complex_features=enhanced.features,
            fallback_used=enhanced.fallback_used,
            emotions=dict(combined.rule_result.emotions) if combined.rule_result else {},
            normalized_text=preprocessed.normalized_text,
            feature_vector=self.normalizer.extract_features(raw, preprocessed),
        )

        logger.debug(
            f"Analyzed {raw[:50]!r}: {result.label.value} ({result.confidence:.3f}) "
            f"via {result.method.value}, complexity={result.complexity_score:.2f}"
        )
        self._record(result)
        return result

    def analyze_batch(self, texts: Iterable[Any]) -> list[HybridSentimentResult]:
        """Analyze many texts in parallel; output order matches input order."""
        items = list(texts)
        if not items:
            return []
        with ThreadPoolExecutor(max_workers=self.config.batch_workers) as executor:
            return list(executor.map(self.analyze, items))

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save_model(self, path: Union[str, Path], metadata: Optional[dict[str, Any]] = None) -> Path:
        return persistence.save_snapshot(self.classifier, path, metadata)

    def load_model(self, path: Union[str, Path]) -> None:
        """Replace the classifier with one restored from a snapshot file."""
        classifier = persistence.load_snapshot(path, max_workers=self.config.batch_workers)
        with self._lock:
            self.classifier = classifier
            self.combiner.classifier = classifier
            self.complex_handler.classifier = classifier

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            engine_stats = {
                "total_analyzed": self._stats["total_analyzed"],
                "empty_inputs": self._stats["empty_inputs"],
                "fallbacks": self._stats["fallbacks"],
                "label_counts": dict(self._stats["label_counts"]),
            }
        return {
            "engine": engine_stats,
            "classifier": self.classifier.get_stats(),
            "combiner": self.combiner.get_stats(),
            "complex_cases": self.complex_handler.get_stats(),
            "config": self.config.to_dict(),
        }

    def _record(self, result: HybridSentimentResult, empty: bool = False) -> None:
        with self._lock:
            self._stats["total_analyzed"] += 1
            self._stats["label_counts"][result.label.value] += 1
            if empty:
                self._stats["empty_inputs"] += 1
            if result.fallback_used:
                self._stats["fallbacks"] += 1
