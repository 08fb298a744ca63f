"""
Sentiment Engine - Hybrid Combiner.

============================================================
MERGE POLICY
============================================================
- Both opinions agree: report the higher confidence, method
  "hybrid", hybrid score = mean confidence
- Disagree:
  - Naive Bayes wins when c_nb > 0.7 and c_nb > 1.2 * c_rb
  - rule-based wins when c_rb > 0.8 and c_rb > 1.2 * c_nb
  - otherwise blend 0.4 * c_rb + 0.6 * c_nb with the label of the
    more confident source, method "hybrid"
- Naive Bayes unavailable (untrained): rule-based only, logged

Class scores are blended with the same weights and the heuristic
decision layer runs as the final stage.

============================================================
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Optional

from .classifier import NaiveBayesClassifier
from .config import CombinerConfig, HeuristicConfig
from .exceptions import UntrainedModelError
from .heuristics import HeuristicDecision, decide_with_heuristics
from .models import (
    LABELS,
    AnalysisMethod,
    SentimentLabel,
    SentimentResult,
    align_scores,
    normalize_scores,
)
from .rule_based import RuleBasedResult, RuleBasedScorer


logger = logging.getLogger(__name__)


@dataclass
class CombinedResult(SentimentResult):
    """Merged opinion after the heuristic pass."""
    method: AnalysisMethod = AnalysisMethod.HYBRID
    hybrid_score: float = 0.0
    rule_result: Optional[RuleBasedResult] = None
    nb_result: Optional[SentimentResult] = None
    heuristics: Optional[HeuristicDecision] = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "method": self.method.value,
            "hybrid_score": self.hybrid_score,
            "rule_result": self.rule_result.to_dict() if self.rule_result else None,
            "nb_result": self.nb_result.to_dict() if self.nb_result else None,
            "heuristics": self.heuristics.to_dict() if self.heuristics else None,
        })
        return data


@dataclass
class _Merge:
    label: SentimentLabel
    confidence: float
    method: AnalysisMethod
    hybrid_score: float
    reason: str
    outcome: str
    scores: dict[str, float] = field(default_factory=dict)


class HybridCombiner:
    """
    Merges the rule-based and Naive Bayes opinions into one decision.

    Never raises on an untrained classifier: it degrades to the
    rule-based opinion and logs a warning.
    """

    def __init__(
        self,
        classifier: Optional[NaiveBayesClassifier] = None,
        scorer: Optional[RuleBasedScorer] = None,
        config: Optional[CombinerConfig] = None,
        heuristic_config: Optional[HeuristicConfig] = None,
    ) -> None:
        self.classifier = classifier
        self.scorer = scorer or RuleBasedScorer()
        self.config = config or CombinerConfig()
        self.heuristic_config = heuristic_config or HeuristicConfig()

        self._lock = threading.Lock()
        self._stats = {
            "total_combined": 0,
            "rule_based_only": 0,
            "agreements": 0,
            "naive_bayes_wins": 0,
            "rule_based_wins": 0,
            "blends": 0,
            "heuristic_relabels": 0,
        }

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def analyze(self, text: str, normalized_text: Optional[str] = None) -> CombinedResult:
        """
        Gather both opinions and combine them.

        Both sources read `normalized_text` when given; the heuristic
        pass always reads the raw `text` (emoji, '!').
        """
        source = text if normalized_text is None else normalized_text
        rule_result = self.scorer.score(source)
        nb_result = self._predict_nb(source)
        return self.combine(rule_result, nb_result, text)

    def combine(
        self,
        rule_result: SentimentResult,
        nb_result: Optional[SentimentResult],
        text: str,
    ) -> CombinedResult:
        merge = self._merge(rule_result, nb_result)
        decision = decide_with_heuristics(text, merge.scores, self.heuristic_config)

        reasoning = [merge.reason]
        if decision.label == merge.label:
            confidence = merge.confidence
        else:
            confidence = decision.confidence
            reasoning.append(
                f"Heuristics relabelled {merge.label.value} -> {decision.label.value}"
            )
        reasoning.extend(decision.adjustments)

        self._record(merge.outcome, relabelled=decision.label != merge.label)

        logger.debug(
            f"Combined {merge.method.value}: {decision.label.value} "
            f"({confidence:.3f}), hybrid_score={merge.hybrid_score:.3f}"
        )

        return CombinedResult(
            label=decision.label,
            confidence=confidence,
            scores=decision.scores,
            reasoning=reasoning,
            method=merge.method,
            hybrid_score=merge.hybrid_score,
            rule_result=rule_result if isinstance(rule_result, RuleBasedResult) else None,
            nb_result=nb_result,
            heuristics=decision,
        )

    def get_stats(self) -> dict[str, int]:
        with self._lock:
            return dict(self._stats)

    # -------------------------------------------------------------------------
    # Merge policy
    # -------------------------------------------------------------------------

    def _predict_nb(self, text: str) -> Optional[SentimentResult]:
        if self.classifier is None:
            logger.warning("No Naive Bayes classifier configured, using rule-based only")
            return None
        try:
            return self.classifier.predict(text)
        except UntrainedModelError as e:
            logger.warning(f"Naive Bayes unavailable, using rule-based only: {e.message}")
            return None

    def _merge(self, rule: SentimentResult, nb: Optional[SentimentResult]) -> _Merge:
        cfg = self.config

        if nb is None:
            return _Merge(
                label=rule.label,
                confidence=rule.confidence,
                method=AnalysisMethod.RULE_BASED,
                hybrid_score=rule.confidence,
                reason="Naive Bayes unavailable, rule-based only",
                outcome="rule_based_only",
                scores=align_scores(rule.label, rule.confidence, rule.scores),
            )

        blended = normalize_scores({
            label.value: cfg.rule_weight * rule.scores.get(label.value, 0.0)
            + cfg.nb_weight * nb.scores.get(label.value, 0.0)
            for label in LABELS
        })
        c_rb = rule.confidence
        c_nb = nb.confidence

        if rule.label == nb.label:
            merge = _Merge(
                label=rule.label,
                confidence=max(c_rb, c_nb),
                method=AnalysisMethod.HYBRID,
                hybrid_score=(c_rb + c_nb) / 2,
                reason=f"Both sources agree on {rule.label.value}",
                outcome="agreements",
            )
        elif c_nb > cfg.nb_min_confidence and c_nb > c_rb * cfg.dominance_ratio:
            merge = _Merge(
                label=nb.label,
                confidence=c_nb,
                method=AnalysisMethod.NAIVE_BAYES,
                hybrid_score=c_nb,
                reason=f"Naive Bayes dominates ({c_nb:.2f} vs {c_rb:.2f})",
                outcome="naive_bayes_wins",
            )
        elif c_rb > cfg.rule_min_confidence and c_rb > c_nb * cfg.dominance_ratio:
            merge = _Merge(
                label=rule.label,
                confidence=c_rb,
                method=AnalysisMethod.RULE_BASED,
                hybrid_score=c_rb,
                reason=f"Rule-based dominates ({c_rb:.2f} vs {c_nb:.2f})",
                outcome="rule_based_wins",
            )
        else:
            weighted = cfg.rule_weight * c_rb + cfg.nb_weight * c_nb
            merge = _Merge(
                label=nb.label if c_nb > c_rb else rule.label,
                confidence=weighted,
                method=AnalysisMethod.HYBRID,
                hybrid_score=weighted,
                reason=f"Ambiguous disagreement, weighted blend {weighted:.2f}",
                outcome="blends",
            )

        merge.scores = align_scores(merge.label, merge.confidence, blended)
        return merge

    def _record(self, outcome: str, relabelled: bool) -> None:
        with self._lock:
            self._stats["total_combined"] += 1
            self._stats[outcome] += 1
            if relabelled:
                self._stats["heuristic_relabels"] += 1
