"""
Sentiment Engine - Text Normalizer.

============================================================
RESPONSIBILITY
============================================================
Rewrites raw social-media text into canonical sentiment-bearing
tokens and collects a small feature bundle along the way.

- Mentions become context tokens (complaint / praise / neutral)
- Hashtags become words or mapped phrases
- Slang idioms and terms become standard sentiment words
- Emoji are scored, intensifiers counted

Pure and deterministic. Malformed input is treated as plain text.

============================================================
PIPELINE (order matters)
============================================================
1. Lowercase
2. Replace @mentions with a context token
3. Map #hashtags
4. Phrase-level slang idioms
5. Single-term slang
6. Emoji sentiment (on the raw text)
7. Count intensifiers
8. Collapse runs of 3+ repeated characters
9. Expand contractions

============================================================
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from . import lexicon
from .models import FeatureBundle, MentionContext, SentimentLabel


# ============================================================
# RESULT TYPES
# ============================================================


@dataclass
class NormalizedText:
    """Result of preprocessing."""

    normalized_text: str
    features: FeatureBundle = field(default_factory=FeatureBundle)


def coerce_text(text: Any) -> str:
    """Turn None / bytes / other objects into a plain string."""
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    if not isinstance(text, str):
        return str(text)
    return text


# ============================================================
# TEXT NORMALIZER
# ============================================================


class TextNormalizer:
    """
    Normalizes tweets for classification.

    ============================================================
    USAGE
    ============================================================
    ```python
    normalizer = TextNormalizer()

    result = normalizer.preprocess("This product is fire, no cap 🔥")
    print(result.normalized_text)
    print(result.features.has_slang)
    ```

    ============================================================
    """

    MENTION_PATTERN = re.compile(r"@(\w+)")
    HASHTAG_PATTERN = re.compile(r"#(\w+)")
    REPEAT_PATTERN = re.compile(r"(.)\1{2,}")

    INTENSIFIER_PATTERNS = tuple(
        re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)
        for word in lexicon.INTENSIFIER_WORDS
    )

    CONTRACTION_PATTERNS = tuple(
        (re.compile(rf"\b{re.escape(contraction)}\b", re.IGNORECASE), expansion)
        for contraction, expansion in lexicon.CONTRACTIONS.items()
    )

    def preprocess(self, text: Any) -> NormalizedText:
        """Run the full pipeline on one text."""
        raw = coerce_text(text)
        normalized = raw.lower()

        normalized, mention_context = self._replace_mentions(normalized)
        normalized = self._replace_hashtags(normalized)
        normalized, phrase_slang = self._apply_phrase_slang(normalized)
        normalized, term_slang = self._apply_term_slang(normalized)
        emoji_sentiment = self._score_emoji(raw)
        intensifier_count = self._count_intensifiers(normalized)
        normalized = self.REPEAT_PATTERN.sub(r"\1", normalized)
        normalized = self._expand_contractions(normalized)

        return NormalizedText(
            normalized_text=normalized.strip(),
            features=FeatureBundle(
                has_slang=phrase_slang or term_slang,
                emoji_sentiment=emoji_sentiment,
                intensifier_count=intensifier_count,
                mention_context=mention_context,
            ),
        )

    def extract_features(
        self,
        text: Any,
        preprocessed: Optional[NormalizedText] = None,
    ) -> dict[str, float]:
        """
        Numeric feature vector for downstream classifiers.

        Binary flags from the feature bundle plus length and
        punctuation ratios computed on the raw text.
        """
        raw = coerce_text(text)
        features = (preprocessed or self.preprocess(raw)).features
        length = max(len(raw), 1)

        return {
            "has_slang": 1.0 if features.has_slang else 0.0,
            "has_positive_emoji": 1.0 if features.emoji_sentiment == SentimentLabel.POSITIVE else 0.0,
            "has_negative_emoji": 1.0 if features.emoji_sentiment == SentimentLabel.NEGATIVE else 0.0,
            "has_complaint": 1.0 if features.mention_context == MentionContext.COMPLAINT else 0.0,
            "has_praise": 1.0 if features.mention_context == MentionContext.PRAISE else 0.0,
            "intensifier_count": float(features.intensifier_count),
            "text_length": float(len(raw)),
            "word_count": float(len(raw.split())),
            "exclamation_ratio": raw.count("!") / length,
            "question_ratio": raw.count("?") / length,
            "uppercase_ratio": sum(1 for c in raw if "A" <= c <= "Z") / length,
        }

    # -------------------------------------------------------------------------
    # Pipeline steps
    # -------------------------------------------------------------------------

    def _replace_mentions(self, text: str) -> tuple[str, Optional[MentionContext]]:
        if not self.MENTION_PATTERN.search(text):
            return text, None

        # Substring scan over the whole text, not word-bounded
        has_complaint = any(word in text for word in lexicon.COMPLAINT_WORDS)
        has_praise = any(word in text for word in lexicon.PRAISE_WORDS)

        if has_complaint and not has_praise:
            context, token = MentionContext.COMPLAINT, lexicon.MENTION_COMPLAINT
        elif has_praise and not has_complaint:
            context, token = MentionContext.PRAISE, lexicon.MENTION_PRAISE
        else:
            context, token = MentionContext.NEUTRAL, lexicon.MENTION_NEUTRAL

        return self.MENTION_PATTERN.sub(token, text), context

    def _replace_hashtags(self, text: str) -> str:
        def replace(match: re.Match) -> str:
            tag = match.group(1)
            return lexicon.HASHTAG_PHRASES.get(tag.lower(), tag)

        return self.HASHTAG_PATTERN.sub(replace, text)

    def _apply_phrase_slang(self, text: str) -> tuple[str, bool]:
        found = False
        for phrase in lexicon.PHRASE_PATTERNS:
            if not phrase.pattern.search(text):
                continue
            found = True
            if phrase.sentiment == "positive":
                text = phrase.pattern.sub(lexicon.IDIOM_POSITIVE_PHRASE, text)
            elif phrase.sentiment == "negative":
                text = phrase.pattern.sub(lexicon.IDIOM_NEGATIVE_PHRASE, text)
        return text, found

    def _apply_term_slang(self, text: str) -> tuple[str, bool]:
        found = False
        for entry, pattern in lexicon.SLANG_PATTERNS:
            if not pattern.search(text):
                continue
            found = True
            strong = entry.weight > lexicon.STRONG_SLANG_WEIGHT
            if entry.sentiment == "positive":
                replacement = lexicon.STRONG_POSITIVE_PHRASE if strong else lexicon.MILD_POSITIVE_PHRASE
            elif entry.sentiment == "negative":
                replacement = lexicon.STRONG_NEGATIVE_PHRASE if strong else lexicon.MILD_NEGATIVE_PHRASE
            else:
                continue
            text = pattern.sub(replacement, text)
        return text, found

    def _score_emoji(self, raw: str) -> Optional[SentimentLabel]:
        positive = 0.0
        negative = 0.0
        for entry in lexicon.EMOJI_WEIGHTS:
            count = raw.count(entry.emoji)
            if not count:
                continue
            if entry.sentiment == "positive":
                positive += count * entry.weight
            elif entry.sentiment == "negative":
                negative += count * entry.weight

        if positive > negative:
            return SentimentLabel.POSITIVE
        if negative > positive:
            return SentimentLabel.NEGATIVE
        if positive > 0:
            return SentimentLabel.NEUTRAL
        return None

    def _count_intensifiers(self, text: str) -> int:
        return sum(len(pattern.findall(text)) for pattern in self.INTENSIFIER_PATTERNS)

    def _expand_contractions(self, text: str) -> str:
        for pattern, expansion in self.CONTRACTION_PATTERNS:
            text = pattern.sub(expansion, text)
        return text


_default_normalizer = TextNormalizer()


def preprocess(text: Any) -> NormalizedText:
    """Module-level shortcut for TextNormalizer().preprocess(text)."""
    return _default_normalizer.preprocess(text)
