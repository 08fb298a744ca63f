"""Shared fixtures for the tweet sentiment tests."""

import pytest

from tweet_sentiment import (
    NaiveBayesClassifier,
    SentimentEngine,
    SentimentLabel,
    SentimentResult,
    TrainingExample,
)


# ============================================================
# TRAINING DATA
# ============================================================

POSITIVE_TEXTS = [
    "I love this phone",
    "great service and friendly staff",
    "amazing experience, love it",
    "excellent quality, very happy",
]

NEGATIVE_TEXTS = [
    "I hate this phone",
    "terrible service and rude staff",
    "awful experience, hate it",
    "worst quality, very angry",
]

NEUTRAL_TEXTS = [
    "the store opens at nine",
    "the package arrives on monday",
    "the meeting is at noon",
    "the train leaves at five",
]


@pytest.fixture
def training_examples():
    """Balanced three-class training set."""
    return (
        [TrainingExample(text, SentimentLabel.POSITIVE) for text in POSITIVE_TEXTS]
        + [TrainingExample(text, SentimentLabel.NEGATIVE) for text in NEGATIVE_TEXTS]
        + [TrainingExample(text, SentimentLabel.NEUTRAL) for text in NEUTRAL_TEXTS]
    )


@pytest.fixture
def training_dicts():
    """Same training set as plain mappings, the way HTTP callers send it."""
    return (
        [{"text": text, "label": "positive"} for text in POSITIVE_TEXTS]
        + [{"text": text, "label": "negative"} for text in NEGATIVE_TEXTS]
        + [{"text": text, "sentiment": "neutral"} for text in NEUTRAL_TEXTS]
    )


# ============================================================
# COMPONENTS
# ============================================================

@pytest.fixture
def trained_classifier(training_examples):
    """Naive Bayes classifier trained on the fixture set."""
    classifier = NaiveBayesClassifier()
    classifier.train(training_examples)
    return classifier


@pytest.fixture
def engine(training_examples):
    """Trained engine with default configuration."""
    engine = SentimentEngine()
    engine.train(training_examples)
    return engine


@pytest.fixture
def untrained_engine():
    """Engine that has never been trained (cold start)."""
    return SentimentEngine()


@pytest.fixture
def sample_texts():
    """Mixed tweets used for invariant and ordering checks."""
    return [
        "I love this amazing phone",
        "Worst customer service ever, never again",
        "The store opens at nine",
        "This product is fire, no cap 🔥",
        "This is 'great'... another update that breaks everything",
        "I can't say I'm not impressed",
        "@airline lost my bag again #neveragain",
        "El servicio es excelente, muy rápido",
        "Das ist wirklich schlecht",
        "meh",
        "soooo good!!!",
        "I hate this 🔥",
    ]


@pytest.fixture
def make_result():
    """Factory for SentimentResult from a label string and a (pos, neg, neu) triple."""
    def build(label, confidence, scores):
        positive, negative, neutral = scores
        return SentimentResult(
            label=SentimentLabel(label),
            confidence=confidence,
            scores={"positive": positive, "negative": negative, "neutral": neutral},
        )
    return build
