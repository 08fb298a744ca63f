"""
Sentiment Engine - Rule-Based Scorer.

Lexicon scorer used as the combiner's independent second opinion.

For every sentiment word:
- intensifier within the 3 preceding words multiplies it
  (x2.0 strong, x1.5 medium, x1.2 weak, x1.3 other)
- negator within the 4 preceding words flips it partially (x -0.75)
- later words weigh more: 1 + 0.3 * position / length

The averaged score is scaled by a length factor and mapped onto
positive / negative / neutral with a +/-0.2 dead zone.
"""

import logging
import math
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any

from . import lexicon
from .models import SentimentLabel, SentimentResult, align_scores
from .normalizer import coerce_text


logger = logging.getLogger(__name__)


# Score thresholds (very_positive / very_negative collapse into the base label)
POSITIVE_THRESHOLD = 0.2
NEGATIVE_THRESHOLD = -0.2

INTENSIFIER_WINDOW = 3
NEGATOR_WINDOW = 4
NEGATION_FACTOR = -0.75
POSITION_WEIGHT = 0.3

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.95

_URL_PATTERN = re.compile(r"https?://\S+")
_APOSTROPHES = re.compile(r"['’]")
_WORD_PATTERN = re.compile(r"\w+")


def fold(text: str) -> str:
    """Lowercase and strip accents so lexicon lookups ignore diacritics."""
    decomposed = unicodedata.normalize("NFKD", text.lower())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _fold_all(words) -> frozenset:
    return frozenset(fold(word) for word in words)


POSITIVE_WORDS = _fold_all(lexicon.RULE_POSITIVE_WORDS)
NEGATIVE_WORDS = _fold_all(lexicon.RULE_NEGATIVE_WORDS)
STRONG_INTENSIFIERS = _fold_all(lexicon.STRONG_INTENSIFIERS)
MEDIUM_INTENSIFIERS = _fold_all(lexicon.MEDIUM_INTENSIFIERS)
WEAK_INTENSIFIERS = _fold_all(lexicon.WEAK_INTENSIFIERS)
INTENSIFIERS = _fold_all(lexicon.RULE_INTENSIFIERS)
# Apostrophes are stripped before lookup, so "don't" arrives as "dont"
NEGATORS = _fold_all(lexicon.RULE_NEGATORS) | frozenset({
    "dont", "wont", "cant", "shouldnt", "wouldnt", "couldnt", "mustnt", "havent",
    "hasnt", "hadnt", "isnt", "arent", "wasnt", "werent", "doesnt", "didnt",
})
EMOTION_KEYWORDS = {
    emotion: tuple(fold(word) for word in words)
    for emotion, words in lexicon.EMOTION_KEYWORDS.items()
}


@dataclass
class RuleBasedResult(SentimentResult):
    """Lexicon opinion: label/confidence/scores plus raw polarity and emotions."""
    score: float = 0.0
    magnitude: float = 0.0
    sentiment_word_count: int = 0
    emotions: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "score": self.score,
            "magnitude": self.magnitude,
            "sentiment_word_count": self.sentiment_word_count,
            "emotions": dict(self.emotions),
        })
        return data


def score_to_label(score: float) -> SentimentLabel:
    if score >= POSITIVE_THRESHOLD:
        return SentimentLabel.POSITIVE
    if score <= NEGATIVE_THRESHOLD:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


class RuleBasedScorer:
    """Multilingual (EN/ES/DE/FR) lexicon scorer. Stateless and thread-safe."""

    def score(self, text: Any) -> RuleBasedResult:
        raw = coerce_text(text)
        words = self._words(raw)
        if not words:
            return RuleBasedResult(
                label=SentimentLabel.NEUTRAL,
                confidence=0.0,
                scores=align_scores(SentimentLabel.NEUTRAL, 0.0),
                reasoning=["No scorable words"],
                emotions={emotion: 0.0 for emotion in EMOTION_KEYWORDS},
            )

        total = 0.0
        magnitude = 0.0
        hits = 0
        for position, word in enumerate(words):
            if word in POSITIVE_WORDS:
                base = 1.0
            elif word in NEGATIVE_WORDS:
                base = -1.0
            else:
                continue

            value = base * self._intensity(words, position)
            if self._is_negated(words, position):
                value *= NEGATION_FACTOR
            value *= 1 + (position / len(words)) * POSITION_WEIGHT

            total += value
            magnitude += abs(value)
            hits += 1

        normalized_score = 0.0
        normalized_magnitude = 0.0
        if hits:
            length_factor = min(1.0, math.log(len(words) + 1) / math.log(20))
            normalized_score = max(-1.0, min(1.0, (total / hits) * length_factor))
            normalized_magnitude = (magnitude / hits) * length_factor

        density = hits / len(words)
        length_weight = min(1.0, len(words) / 10)
        confidence = min(MAX_CONFIDENCE, max(
            MIN_CONFIDENCE,
            density * 0.4 + length_weight * 0.3 + min(1.0, normalized_magnitude) * 0.3,
        ))

        label = score_to_label(normalized_score)
        polarity = {
            SentimentLabel.POSITIVE.value: max(normalized_score, 0.0),
            SentimentLabel.NEGATIVE.value: max(-normalized_score, 0.0),
            SentimentLabel.NEUTRAL.value: 1.0 - abs(normalized_score),
        }

        return RuleBasedResult(
            label=label,
            confidence=confidence,
            scores=align_scores(label, confidence, polarity),
            reasoning=[f"{hits} sentiment words, score {normalized_score:.2f}"],
            score=normalized_score,
            magnitude=normalized_magnitude,
            sentiment_word_count=hits,
            emotions=self.analyze_emotions(raw, normalized_score),
        )

    def analyze_emotions(self, text: Any, sentiment_score: float = 0.0) -> dict[str, float]:
        """
        Per-emotion sub-scores in [0, 1].

        Whole-word keyword hits count 1.0 and substring-only hits 0.5
        towards a density that is tripled and capped; the overall
        polarity then tops up joy, or sadness and anger.
        """
        folded = fold(coerce_text(text))
        words = _WORD_PATTERN.findall(folded)
        word_total = max(len(words), 1)

        emotions = {}
        for emotion, keywords in EMOTION_KEYWORDS.items():
            weighted = 0.0
            for keyword in keywords:
                exact = len(re.findall(rf"\b{re.escape(keyword)}\b", folded))
                partial = folded.count(keyword) - exact
                weighted += exact + 0.5 * max(partial, 0)
            emotions[emotion] = min(1.0, (weighted / word_total) * 3)

        if sentiment_score > 0.3:
            emotions["joy"] += sentiment_score * 0.4
        elif sentiment_score < -0.3:
            emotions["sadness"] += abs(sentiment_score) * 0.3
            emotions["anger"] += abs(sentiment_score) * 0.2

        return {key: min(1.0, max(0.0, value)) for key, value in emotions.items()}

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _words(self, text: str) -> list[str]:
        cleaned = _URL_PATTERN.sub(" link ", fold(text))
        cleaned = _APOSTROPHES.sub("", cleaned)
        return _WORD_PATTERN.findall(cleaned)

    def _intensity(self, words: list[str], position: int) -> float:
        for j in range(position - 1, max(0, position - INTENSIFIER_WINDOW) - 1, -1):
            word = words[j]
            if word not in INTENSIFIERS:
                continue
            if word in STRONG_INTENSIFIERS:
                return 2.0
            if word in MEDIUM_INTENSIFIERS:
                return 1.5
            if word in WEAK_INTENSIFIERS:
                return 1.2
            return 1.3
        return 1.0

    def _is_negated(self, words: list[str], position: int) -> bool:
        start = max(0, position - NEGATOR_WINDOW)
        return any(words[j] in NEGATORS for j in range(start, position))
