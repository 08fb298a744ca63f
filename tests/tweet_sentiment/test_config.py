"""
Tests for engine configuration.

Covers defaults, environment variables (with .env files), YAML files
and validation.
"""

import os

import pytest

from tweet_sentiment.config import (
    CombinerConfig,
    ComplexCaseConfig,
    EngineConfig,
    HeuristicConfig,
)
from tweet_sentiment.exceptions import ConfigurationError


ENV_VARS = (
    "NEUTRAL_DELTA", "POS_BIAS", "NEG_BIAS", "EMOJI_WEIGHT", "EXCLAMATION_WEIGHT",
    "NEGATION_INVERT", "NB_SMOOTHING_FACTOR", "NB_MIN_WORD_LENGTH",
    "NB_MAX_VOCABULARY_SIZE", "NB_ENABLE_BIGRAMS", "NB_MIN_WORD_FREQUENCY",
    "HYBRID_NB_MIN_CONFIDENCE", "HYBRID_RULE_MIN_CONFIDENCE",
    "HYBRID_DOMINANCE_RATIO", "HYBRID_RULE_WEIGHT", "SENTIMENT_BATCH_WORKERS",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove engine variables before and after the test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ENV_VARS:
        os.environ.pop(name, None)


# ============================================================
# DEFAULTS
# ============================================================

class TestDefaults:
    """Tests for default values."""

    def test_heuristic_defaults(self):
        """Test the documented heuristic tunables."""
        config = HeuristicConfig()

        assert config.neutral_delta == 0.07
        assert config.pos_bias == 0.1
        assert config.neg_bias == 0.1
        assert config.emoji_weight == 0.2
        assert config.exclamation_weight == 0.05
        assert config.negation_invert is True

    def test_combiner_defaults(self):
        """Test the merge policy thresholds."""
        config = CombinerConfig()

        assert config.nb_min_confidence == 0.7
        assert config.rule_min_confidence == 0.8
        assert config.dominance_ratio == 1.2
        assert config.nb_weight == pytest.approx(0.6)

    def test_defaults_are_valid(self):
        """Test the default configuration validates cleanly."""
        assert EngineConfig().validate() == []


# ============================================================
# ENVIRONMENT
# ============================================================

class TestFromEnv:
    """Tests for environment loading."""

    def test_env_overrides(self, clean_env, monkeypatch, tmp_path):
        """Test variables override defaults."""
        monkeypatch.setenv("NEUTRAL_DELTA", "0.1")
        monkeypatch.setenv("NEGATION_INVERT", "false")
        monkeypatch.setenv("HYBRID_RULE_WEIGHT", "0.5")
        monkeypatch.setenv("NB_ENABLE_BIGRAMS", "true")
        monkeypatch.setenv("NB_MAX_VOCABULARY_SIZE", "500")
        monkeypatch.setenv("SENTIMENT_BATCH_WORKERS", "8")

        config = EngineConfig.from_env(dotenv_path=tmp_path / "missing.env")

        assert config.heuristics.neutral_delta == 0.1
        assert config.heuristics.negation_invert is False
        assert config.combiner.rule_weight == 0.5
        assert config.model.enable_bigrams is True
        assert config.model.max_vocabulary_size == 500
        assert config.batch_workers == 8

    def test_invalid_value_falls_back(self, clean_env, monkeypatch, tmp_path):
        """Test an unparsable value keeps the default."""
        monkeypatch.setenv("POS_BIAS", "lots")
        monkeypatch.setenv("NB_MIN_WORD_LENGTH", "two")

        config = EngineConfig.from_env(dotenv_path=tmp_path / "missing.env")

        assert config.heuristics.pos_bias == 0.1
        assert config.model.min_word_length == 2

    def test_dotenv_file(self, clean_env, tmp_path):
        """Test values are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("EMOJI_WEIGHT=0.35\nHYBRID_DOMINANCE_RATIO=1.5\n", encoding="utf-8")

        config = EngineConfig.from_env(dotenv_path=env_file)

        assert config.heuristics.emoji_weight == 0.35
        assert config.combiner.dominance_ratio == 1.5


# ============================================================
# YAML
# ============================================================

class TestFromYaml:
    """Tests for YAML loading."""

    def test_sections(self, tmp_path):
        """Test every section is overlaid onto the defaults."""
        path = tmp_path / "engine.yaml"
        path.write_text(
            "heuristics:\n"
            "  neutral_delta: 0.05\n"
            "  negation_invert: false\n"
            "combiner:\n"
            "  rule_weight: 0.3\n"
            "complex_cases:\n"
            "  sarcasm_confidence_cap: 0.9\n"
            "model:\n"
            "  smoothing_factor: 0.5\n"
            "  enable_bigrams: true\n"
            "batch_workers: 2\n",
            encoding="utf-8",
        )

        config = EngineConfig.from_yaml(path)

        assert config.heuristics.neutral_delta == 0.05
        assert config.heuristics.negation_invert is False
        assert config.heuristics.pos_bias == 0.1
        assert config.combiner.rule_weight == 0.3
        assert config.complex_cases.sarcasm_confidence_cap == 0.9
        assert config.model.smoothing_factor == 0.5
        assert config.model.enable_bigrams is True
        assert config.batch_workers == 2

    def test_int_value_for_float_field(self, tmp_path):
        """Test YAML integers are cast to the field type."""
        path = tmp_path / "engine.yaml"
        path.write_text("combiner:\n  dominance_ratio: 2\n", encoding="utf-8")

        config = EngineConfig.from_yaml(path)

        assert config.combiner.dominance_ratio == 2.0
        assert isinstance(config.combiner.dominance_ratio, float)

    def test_unknown_keys_ignored(self, tmp_path):
        """Test unknown keys and derived properties are skipped."""
        path = tmp_path / "engine.yaml"
        path.write_text("combiner:\n  nb_weight: 0.9\n  colour: blue\n", encoding="utf-8")

        config = EngineConfig.from_yaml(path)

        assert config.combiner.nb_weight == pytest.approx(0.6)
        assert not hasattr(config.combiner, "colour")

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing file degrades to defaults."""
        config = EngineConfig.from_yaml(tmp_path / "nope.yaml")

        assert config.to_dict() == EngineConfig().to_dict()

    def test_non_mapping_rejected(self, tmp_path):
        """Test a YAML list raises ConfigurationError."""
        path = tmp_path / "engine.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            EngineConfig.from_yaml(path)


# ============================================================
# VALIDATION
# ============================================================

class TestValidation:
    """Tests for validate / require_valid."""

    def test_invalid_values_reported(self):
        """Test each sub-config reports its own errors."""
        config = EngineConfig(
            heuristics=HeuristicConfig(pos_bias=-1),
            combiner=CombinerConfig(dominance_ratio=0.5),
            complex_cases=ComplexCaseConfig(temporal_cap=1.5),
        )

        errors = config.validate()

        assert "heuristics: pos_bias must be non-negative" in errors
        assert "combiner: dominance_ratio must be at least 1" in errors
        assert "complex_cases: temporal_cap must be 0-1" in errors

    def test_require_valid_raises(self):
        """Test require_valid raises with the error list attached."""
        with pytest.raises(ConfigurationError) as exc_info:
            EngineConfig(combiner=CombinerConfig(rule_weight=2)).require_valid()

        assert exc_info.value.errors == ["combiner: rule_weight must be 0-1"]

    def test_require_valid_returns_self(self):
        """Test a valid config is returned unchanged."""
        config = EngineConfig()

        assert config.require_valid() is config
