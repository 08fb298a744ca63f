"""
Tests for the sentiment data models.

Covers label normalization, the arg-max tie order and the
score-alignment helper every relabelling stage relies on.
"""

import pytest

from tweet_sentiment.models import (
    LABELS,
    MIN_WINNING_SHARE,
    ModelParameters,
    SentimentLabel,
    SentimentResult,
    TrainingExample,
    align_scores,
    argmax_label,
    normalize_label,
    normalize_scores,
)


# ============================================================
# LABEL TESTS
# ============================================================

class TestNormalizeLabel:
    """Tests for label spelling normalization."""

    @pytest.mark.parametrize("value,expected", [
        ("positive", SentimentLabel.POSITIVE),
        ("very_positive", SentimentLabel.POSITIVE),
        ("POS", SentimentLabel.POSITIVE),
        ("negative", SentimentLabel.NEGATIVE),
        ("very_negative", SentimentLabel.NEGATIVE),
        (" neg ", SentimentLabel.NEGATIVE),
        ("neutral", SentimentLabel.NEUTRAL),
        ("mixed", SentimentLabel.NEUTRAL),
        (None, SentimentLabel.NEUTRAL),
    ])
    def test_spellings(self, value, expected):
        """Test every supported spelling maps onto the three-way label."""
        assert normalize_label(value) == expected

    def test_enum_passthrough(self):
        """Test enum members are returned unchanged."""
        assert normalize_label(SentimentLabel.NEGATIVE) is SentimentLabel.NEGATIVE


class TestArgmax:
    """Tests for arg-max with tie-breaking."""

    def test_clear_winner(self):
        """Test the highest score wins."""
        assert argmax_label({"positive": 0.2, "negative": 0.5, "neutral": 0.3}) == SentimentLabel.NEGATIVE

    def test_ties_follow_label_order(self):
        """Test ties resolve positive, then negative, then neutral."""
        assert argmax_label({"positive": 0.4, "negative": 0.4, "neutral": 0.2}) == SentimentLabel.POSITIVE
        assert argmax_label({"positive": 0.2, "negative": 0.4, "neutral": 0.4}) == SentimentLabel.NEGATIVE
        assert LABELS[0] == SentimentLabel.POSITIVE


# ============================================================
# SCORE TESTS
# ============================================================

class TestAlignScores:
    """Tests for building a distribution around a chosen label."""

    @pytest.mark.parametrize("label", list(SentimentLabel))
    @pytest.mark.parametrize("confidence", [0.0, 0.2, 0.34, 0.5, 0.85, 1.0])
    def test_label_is_strict_argmax(self, label, confidence):
        """Test the chosen label is the arg-max and scores sum to one."""
        scores = align_scores(label, confidence, {"positive": 0.7, "negative": 0.2, "neutral": 0.1})

        assert sum(scores.values()) == pytest.approx(1.0)
        assert argmax_label(scores) == label
        others = [scores[o.value] for o in LABELS if o != label]
        assert all(scores[label.value] > value for value in others)

    def test_winner_takes_confidence(self):
        """Test the winning share equals the confidence when it is large enough."""
        scores = align_scores(SentimentLabel.NEGATIVE, 0.85, {"positive": 0.6, "negative": 0.1, "neutral": 0.3})

        assert scores["negative"] == pytest.approx(0.85)
        assert scores["positive"] == pytest.approx(0.15 * 0.6 / 0.9)
        assert scores["neutral"] == pytest.approx(0.15 * 0.3 / 0.9)

    def test_low_confidence_uses_minimum_share(self):
        """Test a low confidence still yields a winning share."""
        scores = align_scores(SentimentLabel.NEUTRAL, 0.1)

        assert scores["neutral"] == pytest.approx(MIN_WINNING_SHARE)
        assert scores["positive"] == pytest.approx(scores["negative"])

    def test_normalize_scores(self):
        """Test negative entries are clamped and the rest rescaled."""
        scores = normalize_scores({"positive": 2.0, "negative": -1.0, "neutral": 2.0})

        assert scores == {"positive": 0.5, "negative": 0.0, "neutral": 0.5}

    def test_normalize_zero_scores(self):
        """Test an all-zero input becomes uniform."""
        scores = normalize_scores({})

        assert all(value == pytest.approx(1 / 3) for value in scores.values())


# ============================================================
# RESULT / PARAMETER TESTS
# ============================================================

class TestResultTypes:
    """Tests for result and parameter dataclasses."""

    def test_confidence_is_clamped(self):
        """Test out-of-range confidence is clamped to [0, 1]."""
        result = SentimentResult(SentimentLabel.POSITIVE, 1.4, {"positive": 1.0, "negative": 0.0, "neutral": 0.0})

        assert result.confidence == 1.0
        assert result.is_consistent

    def test_inconsistent_result_detected(self):
        """Test a label that is not the arg-max is reported inconsistent."""
        result = SentimentResult(SentimentLabel.NEUTRAL, 0.5, {"positive": 0.6, "negative": 0.2, "neutral": 0.2})

        assert not result.is_consistent

    def test_training_example_from_dict(self):
        """Test both 'label' and 'sentiment' keys are accepted."""
        first = TrainingExample.from_dict({"text": "great", "label": "very_positive"})
        second = TrainingExample.from_dict({"text": "bad", "sentiment": "neg", "language": "en"})

        assert first.label == SentimentLabel.POSITIVE
        assert second.label == SentimentLabel.NEGATIVE
        assert second.language == "en"

    def test_model_parameters_validation(self):
        """Test invalid parameters are reported."""
        errors = ModelParameters(smoothing_factor=0, max_vocabulary_size=0).validate()

        assert len(errors) == 2
        assert ModelParameters().validate() == []

    def test_model_parameters_round_trip(self):
        """Test parameters survive to_dict/from_dict."""
        params = ModelParameters(smoothing_factor=0.5, enable_bigrams=True, remove_stopwords=True)

        assert ModelParameters.from_dict(params.to_dict()) == params
