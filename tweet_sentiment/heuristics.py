"""
Sentiment Engine - Heuristic Decision Layer.

Post-processes three class scores to reduce spurious "neutral"
verdicts and reinforce strong surface signals.

Steps, in order:
1. Negation nudge when positive and negative are close
2. Emoji nudge (neutral emoji add half weight)
3. Exclamation nudge onto the current positive/negative leader
4. Multilingual lexicon nudge
5. De-neutralization when neutral leads
6. Renormalize
7. Neutral-zone override: a narrow neutral win yields to a
   directional label; its score is swapped with neutral's so the
   reported label stays the arg-max
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from . import lexicon
from .config import HeuristicConfig
from .models import LABELS, SentimentLabel, argmax_label


logger = logging.getLogger(__name__)


_EPSILON = 1e-9

POS = SentimentLabel.POSITIVE.value
NEG = SentimentLabel.NEGATIVE.value
NEU = SentimentLabel.NEUTRAL.value


@dataclass
class HeuristicDecision:
    label: SentimentLabel
    confidence: float
    scores: dict[str, float]
    adjustments: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label.value,
            "confidence": self.confidence,
            "scores": dict(self.scores),
            "adjustments": list(self.adjustments),
        }


def decide_with_heuristics(
    text: str,
    scores: dict[str, float],
    config: Optional[HeuristicConfig] = None,
) -> HeuristicDecision:
    """Apply the heuristic nudges to `scores` and pick the final label."""
    config = config or HeuristicConfig()
    text = text or ""
    lowered = text.lower()
    adjustments = []

    positive = float(scores.get(POS, 0.0))
    negative = float(scores.get(NEG, 0.0))
    neutral = float(scores.get(NEU, 0.0))

    # 1. Negation
    if config.negation_invert and lexicon.HEURISTIC_NEGATION.search(lowered):
        if positive > negative and positive - negative < config.negation_window:
            negative += 0.08
            positive -= 0.05
            neutral += 0.02
            adjustments.append("negation: shifted weight from positive to negative")
        if negative > positive and negative - positive < config.negation_window:
            neutral += 0.04
            adjustments.append("negation: neutral bump")

    # 2. Emoji
    if any(e in text for e in lexicon.POSITIVE_EMOJIS):
        positive += config.emoji_weight
        adjustments.append("positive emoji")
    if any(e in text for e in lexicon.NEGATIVE_EMOJIS):
        negative += config.emoji_weight
        adjustments.append("negative emoji")
    if any(e in text for e in lexicon.NEUTRAL_EMOJIS):
        neutral += config.emoji_weight * 0.5
        adjustments.append("neutral emoji")

    # 3. Exclamation
    exclamations = text.count("!")
    if exclamations:
        bump = config.exclamation_weight * min(config.max_exclamations, exclamations)
        if positive >= negative and positive >= neutral:
            positive += bump
            adjustments.append(f"exclamation x{exclamations} reinforced positive")
        elif negative >= positive and negative >= neutral:
            negative += bump
            adjustments.append(f"exclamation x{exclamations} reinforced negative")

    # 4. Lexicon
    if any(word in lowered for word in lexicon.HEURISTIC_POSITIVE_WORDS):
        positive += config.lexicon_weight
        adjustments.append("positive lexicon")
    if any(word in lowered for word in lexicon.HEURISTIC_NEGATIVE_WORDS):
        negative += config.lexicon_weight
        adjustments.append("negative lexicon")

    # 5. De-neutralization
    if neutral > positive and neutral > negative:
        positive += config.pos_bias * 0.5
        negative += config.neg_bias * 0.5
        adjustments.append("de-neutralized")

    # 6. Renormalize
    positive = max(positive, 0.0)
    negative = max(negative, 0.0)
    neutral = max(neutral, 0.0)
    total = positive + negative + neutral
    if total <= _EPSILON:
        adjusted = {POS: 1 / 3, NEG: 1 / 3, NEU: 1 / 3}
    else:
        adjusted = {POS: positive / total, NEG: negative / total, NEU: neutral / total}

    # 7. Neutral zone
    label = argmax_label(adjusted)
    if label == SentimentLabel.NEUTRAL:
        runner_up = max(adjusted[POS], adjusted[NEG])
        gap = adjusted[NEU] - runner_up
        if gap < config.neutral_delta:
            margin = adjusted[POS] - adjusted[NEG]
            if margin > config.directional_margin:
                label = SentimentLabel.POSITIVE
            elif -margin > config.directional_margin:
                label = SentimentLabel.NEGATIVE
            if label != SentimentLabel.NEUTRAL:
                adjusted[label.value], adjusted[NEU] = adjusted[NEU], adjusted[label.value]
                adjustments.append(f"neutral zone override to {label.value} (gap {gap:.3f})")

    return HeuristicDecision(
        label=label,
        confidence=adjusted[label.value],
        scores={item.value: adjusted[item.value] for item in LABELS},
        adjustments=adjustments,
    )
