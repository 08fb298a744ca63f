"""
Sentiment Engine - Configuration.

============================================================
CONFIGURABLE TUNABLES
============================================================

Every tuned threshold of the engine lives here as a named
constant. None of them has a documented derivation; they are
preserved verbatim and flagged for future calibration.

Configuration can be loaded from:
- Default values
- Environment variables (a .env file is honoured)
- YAML config file

The engine receives an EngineConfig at construction time and
never reads the environment on its own.

============================================================
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Union

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .models import ModelParameters


logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using {default}")
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =============================================================
# HEURISTIC DECISION LAYER
# =============================================================


@dataclass
class HeuristicConfig:
    """
    Tunables of the post-hoc heuristic decision pass.

    - neutral_delta:      margin neutral needs to win outright
    - pos_bias/neg_bias:  de-neutralization bias (half of each is applied)
    - emoji_weight:       bump for matching emoji (neutral emoji get half)
    - exclamation_weight: bump per '!' onto the leader, capped at x3
    - negation_invert:    enable the negation-aware nudge
    """
    neutral_delta: float = 0.07
    pos_bias: float = 0.1
    neg_bias: float = 0.1
    emoji_weight: float = 0.2
    exclamation_weight: float = 0.05
    negation_invert: bool = True

    # Fixed step sizes, not read from the environment
    lexicon_weight: float = 0.12
    negation_window: float = 0.25
    directional_margin: float = 0.03
    max_exclamations: int = 3

    @classmethod
    def from_env(cls) -> "HeuristicConfig":
        """
        Load from environment variables.

        NEUTRAL_DELTA, POS_BIAS, NEG_BIAS, EMOJI_WEIGHT,
        EXCLAMATION_WEIGHT, NEGATION_INVERT
        """
        defaults = cls()
        return cls(
            neutral_delta=_env_float("NEUTRAL_DELTA", defaults.neutral_delta),
            pos_bias=_env_float("POS_BIAS", defaults.pos_bias),
            neg_bias=_env_float("NEG_BIAS", defaults.neg_bias),
            emoji_weight=_env_float("EMOJI_WEIGHT", defaults.emoji_weight),
            exclamation_weight=_env_float("EXCLAMATION_WEIGHT", defaults.exclamation_weight),
            negation_invert=_env_bool("NEGATION_INVERT", defaults.negation_invert),
        )

    def validate(self) -> list[str]:
        errors = []
        for name in ("neutral_delta", "pos_bias", "neg_bias", "emoji_weight", "exclamation_weight"):
            if getattr(self, name) < 0:
                errors.append(f"{name} must be non-negative")
        if self.neutral_delta > 1:
            errors.append("neutral_delta must be at most 1")
        return errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "neutral_delta": self.neutral_delta,
            "pos_bias": self.pos_bias,
            "neg_bias": self.neg_bias,
            "emoji_weight": self.emoji_weight,
            "exclamation_weight": self.exclamation_weight,
            "negation_invert": self.negation_invert,
        }


# =============================================================
# HYBRID COMBINER
# =============================================================


@dataclass
class CombinerConfig:
    """Merge policy thresholds between rule-based and Naive Bayes opinions."""
    nb_min_confidence: float = 0.7
    rule_min_confidence: float = 0.8
    dominance_ratio: float = 1.2  # winner must beat the other by 20% relative
    rule_weight: float = 0.4      # NB gets the remainder in ambiguous blends

    @property
    def nb_weight(self) -> float:
        return 1.0 - self.rule_weight

    @classmethod
    def from_env(cls) -> "CombinerConfig":
        defaults = cls()
        return cls(
            nb_min_confidence=_env_float("HYBRID_NB_MIN_CONFIDENCE", defaults.nb_min_confidence),
            rule_min_confidence=_env_float("HYBRID_RULE_MIN_CONFIDENCE", defaults.rule_min_confidence),
            dominance_ratio=_env_float("HYBRID_DOMINANCE_RATIO", defaults.dominance_ratio),
            rule_weight=_env_float("HYBRID_RULE_WEIGHT", defaults.rule_weight),
        )

    def validate(self) -> list[str]:
        errors = []
        if not 0 <= self.nb_min_confidence <= 1:
            errors.append("nb_min_confidence must be 0-1")
        if not 0 <= self.rule_min_confidence <= 1:
            errors.append("rule_min_confidence must be 0-1")
        if self.dominance_ratio < 1:
            errors.append("dominance_ratio must be at least 1")
        if not 0 <= self.rule_weight <= 1:
            errors.append("rule_weight must be 0-1")
        return errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "nb_min_confidence": self.nb_min_confidence,
            "rule_min_confidence": self.rule_min_confidence,
            "dominance_ratio": self.dominance_ratio,
            "rule_weight": self.rule_weight,
        }


# =============================================================
# COMPLEX CASE HANDLER
# =============================================================


@dataclass
class ComplexCaseConfig:
    """Sarcasm weights, correction steps and complexity increments."""
    # Sarcasm pattern weights
    quoted_positive_weight: int = 4
    contradiction_weight: int = 5
    temporal_displacement_weight: int = 3
    ironic_phrase_weight: int = 4
    suspicious_ellipsis_weight: int = 3
    fake_enthusiasm_weight: int = 3
    elongation_weight: int = 2
    exclaimed_critique_weight: int = 4
    max_sarcasm_score: int = 10

    # Sarcasm thresholds
    strong_sarcasm_threshold: int = 3
    sarcasm_base_confidence: float = 0.6
    sarcasm_confidence_step: float = 0.05
    sarcasm_confidence_cap: float = 0.85
    moderate_sarcasm_penalty: float = 0.2
    moderate_sarcasm_floor: float = 0.4
    neutral_reassign_below: float = 0.6

    # Other corrections
    double_negation_boost: float = 0.15
    double_negation_cap: float = 0.75
    temporal_boost: float = 0.15
    temporal_cap: float = 0.7
    slang_typo_penalty: float = 0.1
    slang_typo_floor: float = 0.3
    contradictory_confidence: float = 0.5
    cultural_boost: float = 0.1
    cultural_cap: float = 0.9

    # Complexity increments
    sarcasm_complexity_step: float = 0.1
    sarcasm_complexity_cap: float = 0.6
    double_negation_complexity: float = 0.3
    temporal_complexity: float = 0.3
    slang_typo_complexity: float = 0.2
    contradictory_complexity: float = 0.4
    complexity_floor: float = 0.1

    def validate(self) -> list[str]:
        errors = []
        for name in (
            "sarcasm_confidence_cap", "moderate_sarcasm_floor", "double_negation_cap",
            "temporal_cap", "slang_typo_floor", "contradictory_confidence", "cultural_cap",
        ):
            if not 0 <= getattr(self, name) <= 1:
                errors.append(f"{name} must be 0-1")
        if self.max_sarcasm_score < 1:
            errors.append("max_sarcasm_score must be at least 1")
        return errors


# =============================================================
# MAIN CONFIGURATION
# =============================================================


@dataclass
class EngineConfig:
    """
    Main configuration for the sentiment engine.

    Combines all sub-configurations.
    """
    heuristics: HeuristicConfig = field(default_factory=HeuristicConfig)
    combiner: CombinerConfig = field(default_factory=CombinerConfig)
    complex_cases: ComplexCaseConfig = field(default_factory=ComplexCaseConfig)
    model: ModelParameters = field(default_factory=ModelParameters)

    batch_workers: int = 4

    @classmethod
    def from_env(cls, dotenv_path: Optional[Union[str, Path]] = None) -> "EngineConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - NEUTRAL_DELTA, POS_BIAS, NEG_BIAS, EMOJI_WEIGHT,
          EXCLAMATION_WEIGHT, NEGATION_INVERT
        - NB_SMOOTHING_FACTOR, NB_MIN_WORD_LENGTH, NB_MAX_VOCABULARY_SIZE,
          NB_ENABLE_BIGRAMS, NB_MIN_WORD_FREQUENCY
        - HYBRID_NB_MIN_CONFIDENCE, HYBRID_RULE_MIN_CONFIDENCE,
          HYBRID_DOMINANCE_RATIO, HYBRID_RULE_WEIGHT
        - SENTIMENT_BATCH_WORKERS
        """
        load_dotenv(dotenv_path)

        model_defaults = ModelParameters()
        return cls(
            heuristics=HeuristicConfig.from_env(),
            combiner=CombinerConfig.from_env(),
            complex_cases=ComplexCaseConfig(),
            model=ModelParameters(
                smoothing_factor=_env_float("NB_SMOOTHING_FACTOR", model_defaults.smoothing_factor),
                min_word_length=_env_int("NB_MIN_WORD_LENGTH", model_defaults.min_word_length),
                max_vocabulary_size=_env_int("NB_MAX_VOCABULARY_SIZE", model_defaults.max_vocabulary_size),
                enable_bigrams=_env_bool("NB_ENABLE_BIGRAMS", model_defaults.enable_bigrams),
                min_word_frequency=_env_int("NB_MIN_WORD_FREQUENCY", model_defaults.min_word_frequency),
            ),
            batch_workers=_env_int("SENTIMENT_BATCH_WORKERS", 4),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "EngineConfig":
        """
        Load configuration from a YAML file.

        Top-level sections: heuristics, combiner, complex_cases, model,
        plus a scalar batch_workers. Unknown keys are ignored.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load YAML config from {path}: {e}")
            return cls()

        if not isinstance(data, dict):
            raise ConfigurationError(f"YAML config {path} must be a mapping")

        config = cls()
        config.heuristics = _apply(HeuristicConfig(), data.get("heuristics"))
        config.combiner = _apply(CombinerConfig(), data.get("combiner"))
        config.complex_cases = _apply(ComplexCaseConfig(), data.get("complex_cases"))
        if "model" in data:
            config.model = ModelParameters.from_dict(data["model"] or {})
        if "batch_workers" in data:
            config.batch_workers = int(data["batch_workers"])
        return config

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        errors.extend(f"heuristics: {e}" for e in self.heuristics.validate())
        errors.extend(f"combiner: {e}" for e in self.combiner.validate())
        errors.extend(f"complex_cases: {e}" for e in self.complex_cases.validate())
        errors.extend(f"model: {e}" for e in self.model.validate())
        if self.batch_workers < 1:
            errors.append("batch_workers must be at least 1")
        return errors

    def require_valid(self) -> "EngineConfig":
        errors = self.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid engine configuration: {'; '.join(errors)}",
                errors=errors,
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "heuristics": self.heuristics.to_dict(),
            "combiner": self.combiner.to_dict(),
            "model": self.model.to_dict(),
            "batch_workers": self.batch_workers,
        }


def _apply(target: Any, values: Optional[dict[str, Any]]) -> Any:
    """Overlay known keys of a YAML section onto a config dataclass."""
    if not values:
        return target
    for key, value in values.items():
        if not hasattr(target, key) or isinstance(getattr(type(target), key, None), property):
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        current = getattr(target, key)
        caster: Callable[[Any], Any] = type(current)
        setattr(target, key, caster(value))
    return target
