"""
Tests for the Complex Case Handler.

============================================================
PURPOSE
============================================================
1. Sarcasm detection and inversion
2. Double negation, temporal displacement
3. Slang / typo / contradictory-signal / cultural corrections
4. Never raises: degraded fallback results

============================================================
"""

import pytest

from tweet_sentiment.complex_cases import ComplexCaseHandler
from tweet_sentiment.models import CulturalContext, SentimentLabel, TemporalContext


@pytest.fixture
def handler():
    """Handler without a classifier; tests always supply the base."""
    return ComplexCaseHandler()


class ExplodingNormalizer:
    """Normalizer stand-in that fails on every call."""

    def preprocess(self, text):
        raise RuntimeError("normalizer exploded")


# ============================================================
# SARCASM TESTS
# ============================================================

class TestSarcasm:
    """Tests for sarcasm scoring and correction."""

    SARCASTIC = "This is 'great'... another update that breaks everything"

    def test_sarcasm_score(self, handler):
        """Test quoted positive (+4) and suspicious ellipsis (+3)."""
        assert handler.sarcasm_score(self.SARCASTIC) == 7

    def test_strong_sarcasm_inverts_positive(self, handler, make_result):
        """Test strong sarcasm turns a positive base negative."""
        base = make_result("positive", 0.7, (0.7, 0.1, 0.2))

        prediction = handler.analyze_complex_case(self.SARCASTIC, base=base)

        assert prediction.label == SentimentLabel.NEGATIVE
        assert prediction.confidence == pytest.approx(0.85)
        assert prediction.complexity_score == pytest.approx(0.6)
        assert prediction.features.has_quoted_positives is True
        assert prediction.is_consistent
        assert any("Sarcasm detected" in r for r in prediction.reasoning)

    def test_strong_sarcasm_keeps_neutral(self, handler, make_result):
        """Test strong sarcasm only inverts praise; a neutral base stays neutral."""
        base = make_result("neutral", 0.5, (0.25, 0.25, 0.5))

        prediction = handler.analyze_complex_case("Oh great, another Monday meeting", base=base)

        assert prediction.features.sarcasm_score >= 3
        assert prediction.label == SentimentLabel.NEUTRAL
        assert prediction.is_consistent

    def test_strong_sarcasm_follows_classifier_label(self, handler, make_result):
        """Test the inversion gate reads the classifier's label when one is given."""
        base = make_result("neutral", 0.4, (0.3, 0.3, 0.4))
        classifier_result = make_result("positive", 0.53, (0.53, 0.26, 0.21))

        prediction = handler.analyze_complex_case(
            self.SARCASTIC, base=base, classifier_result=classifier_result
        )

        assert prediction.label == SentimentLabel.NEGATIVE
        assert prediction.confidence == pytest.approx(0.85)
        assert prediction.is_consistent

    def test_classifier_label_blocks_inversion(self, handler, make_result):
        """Test a positive base is left alone when the classifier did not read praise."""
        base = make_result("positive", 0.7, (0.7, 0.1, 0.2))
        classifier_result = make_result("neutral", 0.5, (0.25, 0.25, 0.5))

        prediction = handler.analyze_complex_case(
            self.SARCASTIC, base=base, classifier_result=classifier_result
        )

        assert prediction.label == SentimentLabel.POSITIVE
        assert prediction.confidence == pytest.approx(0.7)

    def test_negative_base_unchanged(self, handler, make_result):
        """Test sarcasm leaves a negative base negative."""
        base = make_result("negative", 0.8, (0.1, 0.8, 0.1))

        prediction = handler.analyze_complex_case(self.SARCASTIC, base=base)

        assert prediction.label == SentimentLabel.NEGATIVE
        assert prediction.confidence == pytest.approx(0.8)
        assert prediction.scores == base.scores

    def test_moderate_sarcasm_softens(self, handler, make_result):
        """Test a weak cue lowers confidence and reassigns to neutral."""
        base = make_result("positive", 0.7, (0.7, 0.1, 0.2))

        prediction = handler.analyze_complex_case("sooo nice", base=base)

        assert prediction.features.sarcasm_score == 2
        assert prediction.features.has_typos is True
        assert prediction.label == SentimentLabel.NEUTRAL
        assert prediction.confidence == pytest.approx(0.4)
        assert prediction.complexity_score == pytest.approx(0.4)

    def test_score_capped(self, handler):
        """Test the additive score never exceeds 10."""
        text = "Oh great, 'amazing' how it was good but now it crashes... just perfect!!! but slooow"

        assert handler.sarcasm_score(text) == 10


# ============================================================
# OTHER CORRECTION TESTS
# ============================================================

class TestCorrections:
    """Tests for the remaining corrections."""

    def test_double_negation(self, handler, make_result):
        """Test double negation turns a negative base positive."""
        base = make_result("negative", 0.6, (0.2, 0.6, 0.2))

        prediction = handler.analyze_complex_case("I can't say I'm not impressed", base=base)

        assert prediction.features.double_negation is True
        assert prediction.label == SentimentLabel.POSITIVE
        assert prediction.confidence == pytest.approx(0.75)
        assert prediction.complexity_score == pytest.approx(0.3)
        assert prediction.is_consistent

    def test_double_negation_keeps_positive(self, handler, make_result):
        """Test a positive base is not touched by double negation."""
        base = make_result("positive", 0.6, (0.6, 0.2, 0.2))

        prediction = handler.analyze_complex_case("I can't say I'm not impressed", base=base)

        assert prediction.label == SentimentLabel.POSITIVE
        assert prediction.confidence == pytest.approx(0.6)

    def test_temporal_displacement(self, handler, make_result):
        """Test past praise contradicted now reads negative."""
        base = make_result("positive", 0.7, (0.7, 0.1, 0.2))

        prediction = handler.analyze_complex_case("The app was great but now it crashes", base=base)

        assert prediction.features.temporal_context == TemporalContext.PAST
        assert prediction.features.has_contradictions is True
        assert prediction.label == SentimentLabel.NEGATIVE

    def test_slang_with_cultural_boost(self, handler, make_result):
        """Test slang costs 0.1 and well-formed cultural slang adds it back."""
        base = make_result("positive", 0.8, (0.8, 0.1, 0.1))

        prediction = handler.analyze_complex_case("This product is fire, no cap", base=base)

        assert prediction.features.has_slang is True
        assert prediction.features.cultural_context == CulturalContext.SLANG
        assert prediction.label == SentimentLabel.POSITIVE
        assert prediction.confidence == pytest.approx(0.8)
        assert prediction.complexity_score == pytest.approx(0.2)

    def test_contradictory_signals(self, handler, make_result):
        """Test a positive emoji with negative words goes neutral at 0.5."""
        base = make_result("positive", 0.55, (0.55, 0.25, 0.2))

        prediction = handler.analyze_complex_case("I hate this 🔥", base=base)

        assert prediction.features.contradictory_signals is True
        assert prediction.label == SentimentLabel.NEUTRAL
        assert prediction.confidence == pytest.approx(0.5)
        assert prediction.is_consistent

    def test_plain_text_untouched(self, handler, make_result):
        """Test text without hard-case signals keeps the base."""
        base = make_result("positive", 0.7, (0.7, 0.1, 0.2))

        prediction = handler.analyze_complex_case("I love this phone", base=base)

        assert prediction.label == SentimentLabel.POSITIVE
        assert prediction.confidence == pytest.approx(0.7)
        assert prediction.complexity_score == 0.0
        assert prediction.fallback_used is False


# ============================================================
# DETECTOR TESTS
# ============================================================

class TestDetectors:
    """Tests for the individual detectors."""

    def test_language(self, handler):
        """Test function-word language hints."""
        assert handler.detect_language("el servicio es muy bueno") == "es"
        assert handler.detect_language("the service is good") == "en"

    def test_mixed_language(self, handler):
        """Test code-switching needs markers from two languages."""
        assert handler.detect_mixed_language("the food was great pero muy caro") is True
        assert handler.detect_mixed_language("the food was great") is False

    def test_temporal_context(self, handler):
        """Test past beats future beats present."""
        assert handler.detect_temporal_context("it was fine") == TemporalContext.PAST
        assert handler.detect_temporal_context("it will be fine") == TemporalContext.FUTURE
        assert handler.detect_temporal_context("it is fine") == TemporalContext.PRESENT
        assert handler.detect_temporal_context("fine") is None

    def test_normalized_confidence(self, handler):
        """Test short and symbol-heavy texts lower the confidence."""
        assert handler.normalized_confidence("a normal sentence here") == 1.0
        assert handler.normalized_confidence("ok") == pytest.approx(0.8)
        assert handler.normalized_confidence("!!!") == pytest.approx(0.6)

    def test_typos(self, handler):
        """Test repeated letters and known misspellings."""
        assert handler.detect_typos("teh best") is True
        assert handler.detect_typos("the best") is False


# ============================================================
# DEGRADATION TESTS
# ============================================================

class TestDegradation:
    """Tests for empty input and internal faults."""

    def test_empty_text(self, handler):
        """Test empty input is neutral at zero confidence."""
        prediction = handler.analyze_complex_case("")

        assert prediction.label == SentimentLabel.NEUTRAL
        assert prediction.confidence == 0.0
        assert prediction.fallback_used is False

    def test_fault_returns_base(self, make_result):
        """Test an internal fault falls back to the supplied base."""
        handler = ComplexCaseHandler(normalizer=ExplodingNormalizer())
        base = make_result("negative", 0.65, (0.2, 0.65, 0.15))

        prediction = handler.analyze_complex_case("anything", base=base)

        assert prediction.fallback_used is True
        assert prediction.complexity_score == 1.0
        assert prediction.label == SentimentLabel.NEGATIVE
        assert prediction.confidence == pytest.approx(0.65)

    def test_fault_uses_classifier(self, trained_classifier, make_result):
        """Test the classifier's own prediction is preferred on fault."""
        handler = ComplexCaseHandler(classifier=trained_classifier, normalizer=ExplodingNormalizer())
        base = make_result("neutral", 0.5, (0.25, 0.25, 0.5))

        prediction = handler.analyze_complex_case("love it", base=base)

        assert prediction.fallback_used is True
        assert prediction.label == SentimentLabel.POSITIVE

    def test_fault_without_anything_is_neutral(self):
        """Test no base and no classifier still returns a result."""
        handler = ComplexCaseHandler()

        prediction = handler.analyze_complex_case("some text")

        assert prediction.fallback_used is True
        assert prediction.label == SentimentLabel.NEUTRAL
        assert prediction.is_consistent

    def test_stats(self, handler, make_result):
        """Test analysis counters."""
        base = make_result("positive", 0.7, (0.7, 0.1, 0.2))
        handler.analyze_complex_case("I love this phone", base=base)
        handler.analyze_complex_case("I can't say I'm not impressed", base=base)

        stats = handler.get_stats()
        assert stats["total_analyzed"] == 2
        assert stats["complex_cases_detected"] == 1
        assert stats["fallback_rate"] == 0.0
