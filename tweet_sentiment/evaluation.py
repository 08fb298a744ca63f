"""
Sentiment Engine - Evaluation Utilities.

Accuracy, macro precision/recall/F1, confusion matrix and run
comparison for three-way sentiment predictions, plus the two
training-set hygiene helpers (deduplication, class balancing).

Macro averages run over the classes that were both predicted and
present in the ground truth; a class with no support on either side
has no defined precision or recall and is left out of the average.
"""

import random
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence, TypeVar

from .models import LABELS, SentimentLabel, normalize_label


T = TypeVar("T")


@dataclass
class ClassMetrics:
    precision: float = 0.0
    recall: float = 0.0
    f1: float = 0.0
    tp: int = 0
    fp: int = 0
    fn: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
            "tp": self.tp,
            "fp": self.fp,
            "fn": self.fn,
        }


@dataclass
class SentimentMetrics:
    """Aggregate evaluation of one prediction run."""
    accuracy: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    f1_score: float = 0.0
    avg_processing_time: float = 0.0
    sample_count: int = 0
    detailed_metrics: dict[str, ClassMetrics] = field(default_factory=dict)
    confusion_matrix: list[list[int]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "accuracy": self.accuracy,
            "precision": self.precision,
            "recall": self.recall,
            "f1_score": self.f1_score,
            "avg_processing_time": self.avg_processing_time,
            "sample_count": self.sample_count,
            "detailed_metrics": {k: v.to_dict() for k, v in self.detailed_metrics.items()},
            "confusion_matrix": [list(row) for row in self.confusion_matrix],
        }


@dataclass
class MetricsComparison:
    """Percentage-point deltas between two runs."""
    accuracy_improvement: float
    f1_improvement: float
    precision_improvement: float
    recall_improvement: float
    is_significant_improvement: bool
    summary: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "accuracy_improvement": self.accuracy_improvement,
            "f1_improvement": self.f1_improvement,
            "precision_improvement": self.precision_improvement,
            "recall_improvement": self.recall_improvement,
            "is_significant_improvement": self.is_significant_improvement,
            "summary": self.summary,
        }


def confusion_matrix(predicted: Sequence[Any], actual: Sequence[Any]) -> list[list[int]]:
    """Rows are actual labels, columns predicted, both in LABELS order."""
    index = {label: i for i, label in enumerate(LABELS)}
    matrix = [[0] * len(LABELS) for _ in LABELS]
    for pred, true in zip(predicted, actual):
        matrix[index[normalize_label(true)]][index[normalize_label(pred)]] += 1
    return matrix


def calculate_metrics(
    predicted: Sequence[Any],
    actual: Sequence[Any],
    times: Optional[Sequence[float]] = None,
) -> SentimentMetrics:
    """
    Score predicted labels against the ground truth.

    Labels may be SentimentLabel members or any spelling accepted by
    normalize_label. `times` are per-text processing times in ms.

    Raises:
        ValueError: predicted and actual differ in length
    """
    if len(predicted) != len(actual):
        raise ValueError("predicted and actual must have the same length")

    avg_time = sum(times) / len(times) if times else 0.0
    if not predicted:
        return SentimentMetrics(avg_processing_time=avg_time)

    preds = [normalize_label(p) for p in predicted]
    trues = [normalize_label(a) for a in actual]
    correct = sum(1 for p, a in zip(preds, trues) if p == a)

    detailed = {}
    valid = []
    for label in LABELS:
        tp = sum(1 for p, a in zip(preds, trues) if p == label and a == label)
        fp = sum(1 for p, a in zip(preds, trues) if p == label and a != label)
        fn = sum(1 for p, a in zip(preds, trues) if p != label and a == label)

        metrics = ClassMetrics(tp=tp, fp=fp, fn=fn)
        if tp + fp > 0 and tp + fn > 0:
            metrics.precision = tp / (tp + fp)
            metrics.recall = tp / (tp + fn)
            if metrics.precision + metrics.recall > 0:
                metrics.f1 = (
                    2 * metrics.precision * metrics.recall
                    / (metrics.precision + metrics.recall)
                )
            valid.append(metrics)
        detailed[label.value] = metrics

    count = len(valid)
    return SentimentMetrics(
        accuracy=correct / len(preds),
        precision=sum(m.precision for m in valid) / count if count else 0.0,
        recall=sum(m.recall for m in valid) / count if count else 0.0,
        f1_score=sum(m.f1 for m in valid) / count if count else 0.0,
        avg_processing_time=avg_time,
        sample_count=len(preds),
        detailed_metrics=detailed,
        confusion_matrix=confusion_matrix(preds, trues),
    )


def compare_metrics(
    original: SentimentMetrics,
    improved: SentimentMetrics,
    significance_threshold: float = 2.0,
) -> MetricsComparison:
    """Deltas in percentage points; significant when accuracy gains more than the threshold."""
    accuracy = (improved.accuracy - original.accuracy) * 100
    significant = accuracy > significance_threshold

    if significant:
        summary = "Significant improvement: the new model clearly outperforms the original"
    elif accuracy > 0:
        summary = "Moderate improvement: the new model shows minor gains"
    else:
        summary = "No improvement: the new model does not outperform the original"

    return MetricsComparison(
        accuracy_improvement=accuracy,
        f1_improvement=(improved.f1_score - original.f1_score) * 100,
        precision_improvement=(improved.precision - original.precision) * 100,
        recall_improvement=(improved.recall - original.recall) * 100,
        is_significant_improvement=significant,
        summary=summary,
    )


def _text_of(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("text") or "")
    return str(getattr(item, "text", "") or "")


def _label_of(item: Any) -> SentimentLabel:
    if isinstance(item, dict):
        return normalize_label(item.get("label", item.get("sentiment")))
    return normalize_label(getattr(item, "label", None))


def remove_duplicate_examples(examples: Iterable[T]) -> list[T]:
    """Keep the first example of each case- and whitespace-insensitive text."""
    seen = set()
    unique = []
    for item in examples:
        key = _text_of(item).lower().strip()
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def balance_classes(
    examples: Iterable[T],
    target_size: Optional[int] = None,
    seed: Optional[int] = None,
) -> list[T]:
    """
    Downsample every present class to the smallest class size (or
    `target_size` if smaller), then shuffle. Pass `seed` for a
    reproducible result.
    """
    by_class: dict[SentimentLabel, list[T]] = defaultdict(list)
    for item in examples:
        by_class[_label_of(item)].append(item)
    if not by_class:
        return []

    size = min(len(items) for items in by_class.values())
    if target_size is not None:
        size = min(size, max(0, target_size))

    rng = random.Random(seed)
    balanced: list[T] = []
    for label in LABELS:
        items = list(by_class.get(label, []))
        rng.shuffle(items)
        balanced.extend(items[:size])

    rng.shuffle(balanced)
    return balanced


def generate_report(metrics: SentimentMetrics, model_name: str, dataset_size: int) -> str:
    lines = [
        f"PERFORMANCE REPORT - {model_name.upper()}",
        "=" * 50,
        "",
        "OVERALL:",
        f"   Accuracy: {metrics.accuracy * 100:.2f}%",
        f"   Precision: {metrics.precision * 100:.2f}%",
        f"   Recall: {metrics.recall * 100:.2f}%",
        f"   F1-Score: {metrics.f1_score * 100:.2f}%",
        f"   Average time: {metrics.avg_processing_time:.2f}ms",
        f"   Dataset size: {dataset_size} examples",
        "",
        "PER CLASS:",
    ]
    for label, detail in metrics.detailed_metrics.items():
        lines.extend([
            f"   {label.upper()}:",
            f"     Precision: {detail.precision * 100:.1f}%",
            f"     Recall: {detail.recall * 100:.1f}%",
            f"     F1-Score: {detail.f1 * 100:.1f}%",
            f"     TP: {detail.tp}, FP: {detail.fp}, FN: {detail.fn}",
        ])
    return "\n".join(lines)
