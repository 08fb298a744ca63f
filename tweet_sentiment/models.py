"""
Sentiment Data Models - Labels, parameters and result structures.

Every result produced by the engine keeps two invariants:
- scores over the three labels sum to 1.0
- the reported label is the arg-max of those scores
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class SentimentLabel(str, Enum):
    """Three-way sentiment label."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class AnalysisMethod(str, Enum):
    """Which opinion produced the final hybrid decision."""
    RULE_BASED = "rule-based"
    NAIVE_BAYES = "naive-bayes"
    HYBRID = "hybrid"


class TemporalContext(str, Enum):
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"


class CulturalContext(str, Enum):
    FORMAL = "formal"
    INFORMAL = "informal"
    SLANG = "slang"


class MentionContext(str, Enum):
    COMPLAINT = "complaint"
    PRAISE = "praise"
    NEUTRAL = "neutral"


# Arg-max tie-break order
LABELS: tuple[SentimentLabel, ...] = (
    SentimentLabel.POSITIVE,
    SentimentLabel.NEGATIVE,
    SentimentLabel.NEUTRAL,
)

# Smallest share a relabelled winner may hold; anything above 1/3 keeps
# the winner strictly ahead of an even split of the remainder.
MIN_WINNING_SHARE = 0.34

SCORE_TOLERANCE = 1e-6


def normalize_label(value: Any) -> SentimentLabel:
    """
    Map any label spelling onto the three-way label.

    very_positive / pos -> positive, very_negative / neg -> negative,
    everything else -> neutral.
    """
    if isinstance(value, SentimentLabel):
        return value
    normalized = str(value or "").lower().strip()
    if "very_positive" in normalized or normalized in ("positive", "pos"):
        return SentimentLabel.POSITIVE
    if "very_negative" in normalized or normalized in ("negative", "neg"):
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def argmax_label(scores: dict[str, float]) -> SentimentLabel:
    """Highest-scoring label; ties resolve in LABELS order."""
    best = LABELS[0]
    for label in LABELS[1:]:
        if scores.get(label.value, 0.0) > scores.get(best.value, 0.0):
            best = label
    return best


def normalize_scores(scores: dict[str, float]) -> dict[str, float]:
    """Clamp negatives to zero and rescale to sum to 1."""
    clean = {label.value: max(0.0, float(scores.get(label.value, 0.0))) for label in LABELS}
    total = sum(clean.values())
    if total <= 0:
        return uniform_scores()
    return {key: value / total for key, value in clean.items()}


def uniform_scores() -> dict[str, float]:
    return {label.value: 1.0 / len(LABELS) for label in LABELS}


def align_scores(
    label: SentimentLabel,
    confidence: float,
    base: Optional[dict[str, float]] = None,
) -> dict[str, float]:
    """
    Build a distribution whose arg-max is `label`.

    The winner receives max(confidence, MIN_WINNING_SHARE); the remainder
    is split between the other two labels in proportion to `base`, or
    evenly when the proportional split would overtake the winner.
    """
    share = min(1.0, max(float(confidence), MIN_WINNING_SHARE))
    rest = 1.0 - share
    others = [other for other in LABELS if other != label]

    weights = {other.value: max(0.0, (base or {}).get(other.value, 0.0)) for other in others}
    total = sum(weights.values())
    if total > 0:
        split = {key: rest * weight / total for key, weight in weights.items()}
    else:
        split = {other.value: rest / 2 for other in others}

    if max(split.values()) >= share:
        split = {other.value: rest / 2 for other in others}

    scores = {label.value: share}
    scores.update(split)
    return {item.value: scores[item.value] for item in LABELS}


@dataclass(frozen=True)
class TrainingExample:
    """Labelled text used only during train()."""
    text: str
    label: SentimentLabel
    language: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrainingExample":
        return cls(
            text=str(data.get("text") or ""),
            label=normalize_label(data.get("label", data.get("sentiment"))),
            language=data.get("language"),
        )


@dataclass
class ModelParameters:
    """
    Naive Bayes configuration.

    smoothing_factor is the Laplace/Lidstone constant added to every token
    count; max_vocabulary_size drops the lowest-frequency tokens;
    enable_bigrams adds adjacent-token pair features; remove_stopwords
    drops the multilingual function words before counting.
    """
    smoothing_factor: float = 1.0
    min_word_length: int = 2
    max_vocabulary_size: int = 10000
    enable_bigrams: bool = False
    min_word_frequency: int = 1
    remove_stopwords: bool = False

    def validate(self) -> list[str]:
        errors = []
        if self.smoothing_factor <= 0:
            errors.append("smoothing_factor must be positive")
        if self.min_word_length < 1:
            errors.append("min_word_length must be at least 1")
        if self.max_vocabulary_size < 1:
            errors.append("max_vocabulary_size must be at least 1")
        if self.min_word_frequency < 1:
            errors.append("min_word_frequency must be at least 1")
        return errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "smoothing_factor": self.smoothing_factor,
            "min_word_length": self.min_word_length,
            "max_vocabulary_size": self.max_vocabulary_size,
            "enable_bigrams": self.enable_bigrams,
            "min_word_frequency": self.min_word_frequency,
            "remove_stopwords": self.remove_stopwords,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModelParameters":
        return cls(
            smoothing_factor=float(data.get("smoothing_factor", 1.0)),
            min_word_length=int(data.get("min_word_length", 2)),
            max_vocabulary_size=int(data.get("max_vocabulary_size", 10000)),
            enable_bigrams=bool(data.get("enable_bigrams", False)),
            min_word_frequency=int(data.get("min_word_frequency", 1)),
            remove_stopwords=bool(data.get("remove_stopwords", False)),
        )


@dataclass
class ClassStatistics:
    """Per-label counts owned by the classifier."""
    document_count: int = 0
    total_token_count: int = 0
    token_counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "document_count": self.document_count,
            "total_token_count": self.total_token_count,
            "token_counts": dict(self.token_counts),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClassStatistics":
        return cls(
            document_count=int(data["document_count"]),
            total_token_count=int(data["total_token_count"]),
            token_counts={str(k): int(v) for k, v in data["token_counts"].items()},
        )


@dataclass
class FeatureBundle:
    """Signals collected by the normalizer for a single text."""
    has_slang: bool = False
    emoji_sentiment: Optional[SentimentLabel] = None
    intensifier_count: int = 0
    mention_context: Optional[MentionContext] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_slang": self.has_slang,
            "emoji_sentiment": self.emoji_sentiment.value if self.emoji_sentiment else None,
            "intensifier_count": self.intensifier_count,
            "mention_context": self.mention_context.value if self.mention_context else None,
        }


@dataclass
class ComplexFeatures:
    """Hard-case signals extracted from the raw text."""
    sarcasm_score: int = 0
    has_quoted_positives: bool = False
    has_contradictions: bool = False
    has_slang: bool = False
    has_typos: bool = False
    normalized_confidence: float = 0.5
    temporal_context: Optional[TemporalContext] = None
    double_negation: bool = False
    cultural_context: Optional[CulturalContext] = None
    emotional_intensity: int = 0
    contradictory_signals: bool = False
    detected_language: str = "en"
    is_mixed_language: bool = False

    @property
    def any_fired(self) -> bool:
        return (
            self.sarcasm_score > 0
            or self.has_quoted_positives
            or self.has_contradictions
            or self.has_slang
            or self.has_typos
            or self.double_negation
            or self.contradictory_signals
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sarcasm_score": self.sarcasm_score,
            "has_quoted_positives": self.has_quoted_positives,
            "has_contradictions": self.has_contradictions,
            "has_slang": self.has_slang,
            "has_typos": self.has_typos,
            "normalized_confidence": self.normalized_confidence,
            "temporal_context": self.temporal_context.value if self.temporal_context else None,
            "double_negation": self.double_negation,
            "cultural_context": self.cultural_context.value if self.cultural_context else None,
            "emotional_intensity": self.emotional_intensity,
            "contradictory_signals": self.contradictory_signals,
            "detected_language": self.detected_language,
            "is_mixed_language": self.is_mixed_language,
        }


@dataclass
class SentimentResult:
    """Label, confidence and class distribution for one text."""
    label: SentimentLabel
    confidence: float
    scores: dict[str, float]
    reasoning: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Clamp confidence to [0, 1]."""
        if not 0.0 <= self.confidence <= 1.0:
            self.confidence = max(0.0, min(1.0, self.confidence))

    @property
    def is_consistent(self) -> bool:
        """True when the score invariants hold."""
        total = sum(self.scores.get(label.value, 0.0) for label in LABELS)
        return (
            abs(total - 1.0) <= SCORE_TOLERANCE
            and argmax_label(self.scores) == self.label
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label.value,
            "confidence": self.confidence,
            "scores": dict(self.scores),
            "reasoning": list(self.reasoning),
        }


@dataclass
class EnhancedPrediction(SentimentResult):
    """Complex-case output: a corrected prediction plus its diagnostics."""
    complexity_score: float = 0.0
    features: ComplexFeatures = field(default_factory=ComplexFeatures)
    fallback_used: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "complexity_score": self.complexity_score,
            "features": self.features.to_dict(),
            "fallback_used": self.fallback_used,
        })
        return data


@dataclass
class HybridSentimentResult(SentimentResult):
    """Final engine output returned by analyze()."""
    method: AnalysisMethod = AnalysisMethod.HYBRID
    hybrid_score: float = 0.0
    complexity_score: float = 0.0
    features: FeatureBundle = field(default_factory=FeatureBundle)
    complex_features: Optional[ComplexFeatures] = None
    fallback_used: bool = False
    emotions: dict[str, float] = field(default_factory=dict)
    normalized_text: str = ""
    feature_vector: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "method": self.method.value,
            "hybrid_score": self.hybrid_score,
            "complexity_score": self.complexity_score,
            "features": self.features.to_dict(),
            "complex_features": self.complex_features.to_dict() if self.complex_features else None,
            "fallback_used": self.fallback_used,
            "emotions": dict(self.emotions),
            "feature_vector": dict(self.feature_vector),
        })
        return data
