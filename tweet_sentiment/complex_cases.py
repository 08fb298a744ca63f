"""
Sentiment Engine - Complex Case Handler.

Detects hard-case signals in the raw text and re-scores a base
prediction accordingly.

DESIGN PRINCIPLES:
1. Reads the RAW text (quotes, ellipses, apostrophes intact)
2. Corrections run in a fixed priority order after sarcasm
3. NEVER raise - any internal fault returns a degraded result
   with complexity_score = 1.0 and fallback_used = True
"""

import logging
import threading
from typing import Any, Optional

from . import lexicon
from .classifier import NaiveBayesClassifier, empty_text_result
from .config import ComplexCaseConfig
from .models import (
    ComplexFeatures,
    CulturalContext,
    EnhancedPrediction,
    SentimentLabel,
    SentimentResult,
    TemporalContext,
    align_scores,
    uniform_scores,
)
from .normalizer import NormalizedText, TextNormalizer, coerce_text


logger = logging.getLogger(__name__)


class ComplexCaseHandler:
    """
    Sarcasm, double negation, temporal displacement, slang, typo,
    contradictory-signal and cultural-slang corrections.

    ============================================================
    USAGE
    ============================================================
    ```python
    handler = ComplexCaseHandler(classifier)

    prediction = handler.analyze_complex_case(
        "This is 'great'... another update that breaks everything",
        base=combined,
        classifier_result=combined.nb_result,
    )
    print(prediction.label, prediction.complexity_score)
    ```

    ============================================================
    """

    def __init__(
        self,
        classifier: Optional[NaiveBayesClassifier] = None,
        normalizer: Optional[TextNormalizer] = None,
        config: Optional[ComplexCaseConfig] = None,
    ) -> None:
        self.classifier = classifier
        self.normalizer = normalizer or TextNormalizer()
        self.config = config or ComplexCaseConfig()

        self._lock = threading.Lock()
        self._stats = {
            "total_analyzed": 0,
            "complex_cases_detected": 0,
            "fallbacks": 0,
            "complexity_sum": 0.0,
        }

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def analyze_complex_case(
        self,
        text: Any,
        base: Optional[SentimentResult] = None,
        classifier_result: Optional[SentimentResult] = None,
    ) -> EnhancedPrediction:
        """
        Re-score `base` (or the classifier's own prediction) for hard cases.

        Label and confidence start from `base`. The label-conditioned
        corrections (sarcasm inversion, double negation, temporal flip)
        test `classifier_result` when given, else the base label.

        Never raises.
        """
        try:
            raw = coerce_text(text)
            if not raw.strip():
                empty = empty_text_result()
                prediction = EnhancedPrediction(
                    label=empty.label,
                    confidence=empty.confidence,
                    scores=empty.scores,
                    reasoning=list(empty.reasoning),
                )
                self._record(prediction)
                return prediction

            preprocessed = self.normalizer.preprocess(raw)
            features = self.extract_features(raw, preprocessed)
            if base is None:
                base = self.classifier.predict(preprocessed.normalized_text)
            reference = (classifier_result or base).label

            prediction = self._apply_corrections(base, features, reference)
            prediction.reasoning = self._reasoning(features, prediction)

            logger.debug(
                f"Complex case analyzed: {raw[:50]!r} -> {prediction.label.value} "
                f"({prediction.confidence:.3f}), complexity={prediction.complexity_score:.2f}"
            )
            self._record(prediction)
            return prediction

        except Exception as e:
            logger.error(f"Error analyzing complex case: {e}")
            prediction = self._fallback(text, base)
            self._record(prediction)
            return prediction

    def extract_features(
        self,
        text: str,
        preprocessed: Optional[NormalizedText] = None,
    ) -> ComplexFeatures:
        """Collect every hard-case signal from the raw text."""
        preprocessed = preprocessed or self.normalizer.preprocess(text)
        return ComplexFeatures(
            sarcasm_score=self.sarcasm_score(text),
            has_quoted_positives=bool(lexicon.SARCASM_QUOTED_POSITIVE.search(text)),
            has_contradictions=bool(lexicon.SARCASM_CONTRADICTION.search(text)),
            has_slang=preprocessed.features.has_slang,
            has_typos=self.detect_typos(text),
            normalized_confidence=self.normalized_confidence(text),
            temporal_context=self.detect_temporal_context(text),
            double_negation=self.detect_double_negation(text),
            cultural_context=self.detect_cultural_context(text),
            emotional_intensity=preprocessed.features.intensifier_count,
            contradictory_signals=self.detect_contradictory_signals(text, preprocessed),
            detected_language=self.detect_language(text),
            is_mixed_language=self.detect_mixed_language(text),
        )

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            total = self._stats["total_analyzed"]
            return {
                "total_analyzed": total,
                "complex_cases_detected": self._stats["complex_cases_detected"],
                "fallbacks": self._stats["fallbacks"],
                "average_complexity": self._stats["complexity_sum"] / total if total else 0.0,
                "fallback_rate": self._stats["fallbacks"] / total if total else 0.0,
            }

    # -------------------------------------------------------------------------
    # Detectors
    # -------------------------------------------------------------------------

    def sarcasm_score(self, text: str) -> int:
        """Additive 0-10 sarcasm score."""
        cfg = self.config
        weighted = (
            (lexicon.SARCASM_QUOTED_POSITIVE, cfg.quoted_positive_weight),
            (lexicon.SARCASM_CONTRADICTION, cfg.contradiction_weight),
            (lexicon.SARCASM_TEMPORAL_DISPLACEMENT, cfg.temporal_displacement_weight),
            (lexicon.SARCASM_IRONIC_PHRASES, cfg.ironic_phrase_weight),
            (lexicon.SARCASM_SUSPICIOUS_ELLIPSIS, cfg.suspicious_ellipsis_weight),
            (lexicon.SARCASM_FAKE_ENTHUSIASM, cfg.fake_enthusiasm_weight),
            (lexicon.SARCASM_ELONGATION, cfg.elongation_weight),
            (lexicon.SARCASM_EXCLAIMED_CRITIQUE, cfg.exclaimed_critique_weight),
        )
        score = sum(weight for pattern, weight in weighted if pattern.search(text))
        return min(cfg.max_sarcasm_score, score)

    def detect_typos(self, text: str) -> bool:
        """Repeated-character and consonant-cluster heuristics, no dictionary."""
        return any(pattern.search(text) for pattern in lexicon.TYPO_PATTERNS)

    def normalized_confidence(self, text: str) -> float:
        confidence = 1.0
        if len(text) < 10:
            confidence -= 0.2
        if len(text) > 200:
            confidence -= 0.1
        special = sum(1 for c in text if not c.isalnum() and not c.isspace())
        if special > len(text) * 0.3:
            confidence -= 0.2
        return max(0.1, confidence)

    def detect_temporal_context(self, text: str) -> Optional[TemporalContext]:
        if lexicon.TEMPORAL_PAST.search(text):
            return TemporalContext.PAST
        if lexicon.TEMPORAL_FUTURE.search(text):
            return TemporalContext.FUTURE
        if lexicon.TEMPORAL_PRESENT.search(text):
            return TemporalContext.PRESENT
        return None

    def detect_double_negation(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in lexicon.DOUBLE_NEGATION_PATTERNS)

    def detect_cultural_context(self, text: str) -> Optional[CulturalContext]:
        if any(pattern.search(text) for pattern in lexicon.CULTURAL_SLANG.values()):
            return CulturalContext.SLANG
        if lexicon.FORMAL_WORDS.search(text):
            return CulturalContext.FORMAL
        if lexicon.INFORMAL_WORDS.search(text):
            return CulturalContext.INFORMAL
        return None

    def detect_contradictory_signals(self, text: str, preprocessed: NormalizedText) -> bool:
        """Positive emoji with negative words, or negative emoji with positive words."""
        emoji = preprocessed.features.emoji_sentiment
        if emoji == SentimentLabel.POSITIVE:
            return bool(lexicon.CONTRADICTION_NEGATIVE_WORDS.search(text))
        if emoji == SentimentLabel.NEGATIVE:
            return bool(lexicon.CONTRADICTION_POSITIVE_WORDS.search(text))
        return False

    def detect_language(self, text: str) -> str:
        for language, pattern in lexicon.LANGUAGE_HINTS.items():
            if pattern.search(text):
                return language
        return "en"

    def detect_mixed_language(self, text: str) -> bool:
        detected = sum(1 for pattern in lexicon.MIXED_LANGUAGE_MARKERS if pattern.search(text))
        return detected > 1

    # -------------------------------------------------------------------------
    # Corrections
    # -------------------------------------------------------------------------

    def _apply_corrections(
        self,
        base: SentimentResult,
        features: ComplexFeatures,
        reference: Optional[SentimentLabel] = None,
    ) -> EnhancedPrediction:
        cfg = self.config
        reference = reference or base.label
        label = base.label
        confidence = base.confidence
        complexity = 0.0

        # 1. Sarcasm
        if features.sarcasm_score > 0:
            complexity += min(cfg.sarcasm_complexity_cap, features.sarcasm_score * cfg.sarcasm_complexity_step)
            strong = (
                features.sarcasm_score >= cfg.strong_sarcasm_threshold
                or features.has_quoted_positives
            )
            if strong:
                if reference == SentimentLabel.POSITIVE:
                    label = SentimentLabel.NEGATIVE
                    confidence = min(
                        cfg.sarcasm_confidence_cap,
                        cfg.sarcasm_base_confidence + features.sarcasm_score * cfg.sarcasm_confidence_step,
                    )
            else:
                confidence = max(cfg.moderate_sarcasm_floor, confidence - cfg.moderate_sarcasm_penalty)
                if confidence < cfg.neutral_reassign_below:
                    label = SentimentLabel.NEUTRAL

        # 2. Double negation
        if features.double_negation:
            complexity += cfg.double_negation_complexity
            if reference == SentimentLabel.NEGATIVE:
                label = SentimentLabel.POSITIVE
                confidence = min(cfg.double_negation_cap, confidence + cfg.double_negation_boost)

        # 3. Temporal displacement
        if features.temporal_context == TemporalContext.PAST and features.has_contradictions:
            complexity += cfg.temporal_complexity
            if reference == SentimentLabel.POSITIVE:
                label = SentimentLabel.NEGATIVE
                confidence = min(cfg.temporal_cap, confidence + cfg.temporal_boost)

        # 4. Slang / typos
        if features.has_slang or features.has_typos:
            complexity += cfg.slang_typo_complexity
            confidence = max(cfg.slang_typo_floor, confidence - cfg.slang_typo_penalty)

        # 5. Contradictory signals
        if features.contradictory_signals:
            complexity += cfg.contradictory_complexity
            if confidence < cfg.neutral_reassign_below:
                label = SentimentLabel.NEUTRAL
                confidence = cfg.contradictory_confidence

        # 6. Well-formed cultural slang
        if features.cultural_context == CulturalContext.SLANG and not features.has_typos:
            confidence = min(cfg.cultural_cap, confidence + cfg.cultural_boost)

        if features.any_fired:
            complexity = max(cfg.complexity_floor, complexity)
        complexity = max(0.0, min(1.0, complexity))

        if label == base.label and confidence == base.confidence:
            scores = dict(base.scores)
        else:
            scores = align_scores(label, confidence, base.scores)

        return EnhancedPrediction(
            label=label,
            confidence=confidence,
            scores=scores,
            complexity_score=complexity,
            features=features,
        )

    def _reasoning(self, features: ComplexFeatures, prediction: EnhancedPrediction) -> list[str]:
        reasoning = []
        if features.sarcasm_score > 2:
            reasoning.append(f"Sarcasm detected (score: {features.sarcasm_score})")
        elif features.sarcasm_score > 0:
            reasoning.append(f"Mild sarcasm cues (score: {features.sarcasm_score})")
        if features.double_negation:
            reasoning.append("Double negation detected, inverting sentiment")
        if features.has_quoted_positives:
            reasoning.append("Positive words in quotes, possible sarcasm")
        if features.temporal_context and features.has_contradictions:
            reasoning.append(f"Temporal context {features.temporal_context.value} with contradictions")
        if features.has_slang:
            reasoning.append("Modern slang detected, adjusting interpretation")
        if features.has_typos:
            reasoning.append("Typos detected, reducing confidence")
        if features.contradictory_signals:
            reasoning.append("Contradictory signals, leaning neutral")
        if features.cultural_context:
            reasoning.append(f"Cultural context: {features.cultural_context.value}")
        if features.is_mixed_language:
            reasoning.append(f"Mixed language text (primary: {features.detected_language})")
        reasoning.append(f"Case complexity: {prediction.complexity_score * 100:.1f}%")
        return reasoning

    # -------------------------------------------------------------------------
    # Fallback
    # -------------------------------------------------------------------------

    def _fallback(self, text: Any, base: Optional[SentimentResult]) -> EnhancedPrediction:
        """Classifier prediction, else the supplied base, else neutral."""
        source: Optional[SentimentResult] = None
        if self.classifier is not None and self.classifier.is_trained:
            try:
                source = self.classifier.predict(coerce_text(text))
            except Exception as e:
                logger.error(f"Fallback prediction failed: {e}")
        if source is None:
            source = base

        if source is None:
            label, confidence, scores = SentimentLabel.NEUTRAL, 0.0, uniform_scores()
            scores = align_scores(label, confidence, scores)
        else:
            label, confidence, scores = source.label, source.confidence, dict(source.scores)

        return EnhancedPrediction(
            label=label,
            confidence=confidence,
            scores=scores,
            reasoning=["Complex analysis failed, using basic prediction"],
            complexity_score=1.0,
            features=ComplexFeatures(),
            fallback_used=True,
        )

    def _record(self, prediction: EnhancedPrediction) -> None:
        with self._lock:
            self._stats["total_analyzed"] += 1
            self._stats["complexity_sum"] += prediction.complexity_score
            if prediction.complexity_score > 0:
                self._stats["complex_cases_detected"] += 1
            if prediction.fallback_used:
                self._stats["fallbacks"] += 1
