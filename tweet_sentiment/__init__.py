"""
Tweet Sentiment Engine - Hybrid three-way sentiment for short social text.

Classifies tweets as positive / negative / neutral by combining a
Naive Bayes classifier with a multilingual rule-based scorer, a
heuristic decision layer and complex-case corrections (slang, emoji,
sarcasm, double negation, temporal displacement, cultural slang).

Usage:
    from tweet_sentiment import EngineConfig, SentimentEngine

    engine = SentimentEngine.from_config(EngineConfig.from_env())
    engine.train([
        {"text": "I love this phone", "label": "positive"},
        {"text": "Worst service ever", "label": "negative"},
        {"text": "The store opens at 9", "label": "neutral"},
    ])

    result = engine.analyze("This is 'great'... another update that breaks everything")
    print(f"Label: {result.label.value}")
    print(f"Confidence: {result.confidence:.2f}")
    print(f"Complexity: {result.complexity_score:.2f}")

Output Schema:
- label: positive | negative | neutral (always the arg-max of scores)
- scores: distribution over the three labels, sums to 1.0
- method: rule-based | naive-bayes | hybrid
- complexity_score: 0.0 (plain text) to 1.0 (hard case or fallback)
"""

from .classifier import NaiveBayesClassifier, tokenize
from .combiner import CombinedResult, HybridCombiner
from .complex_cases import ComplexCaseHandler
from .config import (
    CombinerConfig,
    ComplexCaseConfig,
    EngineConfig,
    HeuristicConfig,
)
from .engine import SentimentEngine
from .evaluation import (
    MetricsComparison,
    SentimentMetrics,
    balance_classes,
    calculate_metrics,
    compare_metrics,
    remove_duplicate_examples,
)
from .exceptions import (
    ConfigurationError,
    EmptyDatasetError,
    SentimentEngineError,
    SnapshotError,
    UntrainedModelError,
)
from .heuristics import HeuristicDecision, decide_with_heuristics
from .models import (
    AnalysisMethod,
    ClassStatistics,
    ComplexFeatures,
    CulturalContext,
    EnhancedPrediction,
    FeatureBundle,
    HybridSentimentResult,
    MentionContext,
    ModelParameters,
    SentimentLabel,
    SentimentResult,
    TemporalContext,
    TrainingExample,
    normalize_label,
)
from .normalizer import NormalizedText, TextNormalizer, preprocess
from .persistence import load_snapshot, save_snapshot
from .rule_based import RuleBasedResult, RuleBasedScorer


__all__ = [
    # Engine
    "SentimentEngine",

    # Components
    "NaiveBayesClassifier",
    "TextNormalizer",
    "RuleBasedScorer",
    "HybridCombiner",
    "ComplexCaseHandler",
    "decide_with_heuristics",
    "preprocess",
    "tokenize",

    # Configuration
    "EngineConfig",
    "HeuristicConfig",
    "CombinerConfig",
    "ComplexCaseConfig",

    # Persistence
    "save_snapshot",
    "load_snapshot",

    # Evaluation
    "SentimentMetrics",
    "MetricsComparison",
    "calculate_metrics",
    "compare_metrics",
    "remove_duplicate_examples",
    "balance_classes",

    # Models
    "SentimentLabel",
    "AnalysisMethod",
    "TemporalContext",
    "CulturalContext",
    "MentionContext",
    "TrainingExample",
    "ModelParameters",
    "ClassStatistics",
    "FeatureBundle",
    "ComplexFeatures",
    "SentimentResult",
    "EnhancedPrediction",
    "HybridSentimentResult",
    "CombinedResult",
    "RuleBasedResult",
    "HeuristicDecision",
    "NormalizedText",
    "normalize_label",

    # Exceptions
    "SentimentEngineError",
    "EmptyDatasetError",
    "UntrainedModelError",
    "SnapshotError",
    "ConfigurationError",
]


# Version
__version__ = "1.0.0"
