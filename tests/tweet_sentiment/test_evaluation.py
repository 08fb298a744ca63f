"""Tests for evaluation metrics and dataset helpers."""

from collections import Counter

import pytest

from tweet_sentiment.evaluation import (
    SentimentMetrics,
    balance_classes,
    calculate_metrics,
    compare_metrics,
    generate_report,
    remove_duplicate_examples,
)
from tweet_sentiment.models import SentimentLabel, TrainingExample


class TestCalculateMetrics:
    """Tests for calculate_metrics."""

    def test_known_values(self):
        """Test accuracy, per-class counts and macro averages."""
        metrics = calculate_metrics(
            ["positive", "negative", "neutral", "positive"],
            ["positive", "negative", "positive", "positive"],
            times=[1.0, 2.0, 3.0, 4.0],
        )

        assert metrics.accuracy == pytest.approx(0.75)
        assert metrics.detailed_metrics["positive"].tp == 2
        assert metrics.detailed_metrics["positive"].fn == 1
        assert metrics.detailed_metrics["neutral"].fp == 1
        # neutral never occurs in the ground truth, so it is left out of the macro average
        assert metrics.precision == pytest.approx(1.0)
        assert metrics.recall == pytest.approx((2 / 3 + 1) / 2)
        assert metrics.f1_score == pytest.approx((0.8 + 1) / 2)
        assert metrics.avg_processing_time == pytest.approx(2.5)
        assert metrics.confusion_matrix == [[2, 0, 1], [0, 1, 0], [0, 0, 0]]

    def test_accepts_enum_and_aliases(self):
        """Test labels may be enum members or alias spellings."""
        metrics = calculate_metrics(
            [SentimentLabel.POSITIVE, "neg"],
            ["very_positive", SentimentLabel.NEGATIVE],
        )

        assert metrics.accuracy == 1.0
        assert metrics.sample_count == 2

    def test_length_mismatch(self):
        """Test differing lengths raise ValueError."""
        with pytest.raises(ValueError):
            calculate_metrics(["positive"], [])

    def test_empty(self):
        """Test empty input yields zero metrics."""
        metrics = calculate_metrics([], [])

        assert metrics.accuracy == 0.0
        assert metrics.sample_count == 0


class TestCompareMetrics:
    """Tests for compare_metrics."""

    def test_significant(self):
        """Test a gain above the threshold is significant."""
        comparison = compare_metrics(SentimentMetrics(accuracy=0.70), SentimentMetrics(accuracy=0.75))

        assert comparison.accuracy_improvement == pytest.approx(5.0)
        assert comparison.is_significant_improvement is True

    def test_moderate(self):
        """Test a small gain is not significant."""
        comparison = compare_metrics(SentimentMetrics(accuracy=0.70), SentimentMetrics(accuracy=0.71))

        assert comparison.is_significant_improvement is False
        assert comparison.summary.startswith("Moderate")

    def test_no_improvement(self):
        """Test a regression is reported as no improvement."""
        comparison = compare_metrics(SentimentMetrics(accuracy=0.8), SentimentMetrics(accuracy=0.7))

        assert comparison.accuracy_improvement < 0
        assert comparison.summary.startswith("No improvement")


class TestDatasetHelpers:
    """Tests for deduplication and class balancing."""

    def test_remove_duplicates(self):
        """Test duplicates are matched case- and whitespace-insensitively."""
        examples = [
            {"text": "Great phone", "label": "positive"},
            {"text": "  great PHONE ", "label": "positive"},
            TrainingExample("Bad phone", SentimentLabel.NEGATIVE),
            TrainingExample("bad phone", SentimentLabel.NEGATIVE),
        ]

        unique = remove_duplicate_examples(examples)

        assert unique == [examples[0], examples[2]]

    def test_balance_classes(self):
        """Test every class is cut to the smallest class size."""
        examples = (
            [{"text": f"pos {i}", "sentiment": "positive"} for i in range(6)]
            + [{"text": f"neg {i}", "sentiment": "negative"} for i in range(3)]
            + [{"text": f"neu {i}", "sentiment": "neutral"} for i in range(4)]
        )

        balanced = balance_classes(examples, seed=7)

        counts = Counter(item["sentiment"] for item in balanced)
        assert counts == {"positive": 3, "negative": 3, "neutral": 3}
        assert balance_classes(examples, seed=7) == balanced

    def test_balance_target_size(self):
        """Test target_size caps the per-class size."""
        examples = [TrainingExample(f"t{i}", label) for i in range(5) for label in SentimentLabel]

        balanced = balance_classes(examples, target_size=2, seed=1)

        assert len(balanced) == 6

    def test_balance_empty(self):
        """Test an empty dataset stays empty."""
        assert balance_classes([]) == []

    def test_report(self):
        """Test the text report lists overall and per-class numbers."""
        metrics = calculate_metrics(["positive", "negative"], ["positive", "positive"])

        report = generate_report(metrics, "naive bayes", dataset_size=2)

        assert "PERFORMANCE REPORT - NAIVE BAYES" in report
        assert "Accuracy: 50.00%" in report
        assert "POSITIVE:" in report
