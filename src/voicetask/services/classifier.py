"""Bag-of-words priority classifier.

A naive Bayes model trained once from a small fixed corpus. It is only the
last-resort signal for priority when none of the keyword rules match, so it
is deliberately tiny and deterministic.

Text that shares no stem with the training vocabulary is not classified:
`classify` returns None instead of the label with the largest prior, so the
priority falls back to medium.
"""

import logging
from functools import lru_cache

from nltk.classify import NaiveBayesClassifier
from nltk.stem.porter import PorterStemmer
from nltk.tokenize import RegexpTokenizer

logger = logging.getLogger(__name__)

PRIORITY_TRAINING_DATA: tuple[tuple[str, str], ...] = (
    ("urgent task", "high"),
    ("high priority", "high"),
    ("critical issue", "critical"),
    ("urgent matter", "high"),
    ("important", "high"),
    ("low priority", "low"),
    ("not urgent", "low"),
    ("whenever you have time", "low"),
    ("medium priority", "medium"),
    ("normal priority", "medium"),
    ("priority high", "high"),
    ("priority low", "low"),
    ("priority medium", "medium"),
    ("critical bug", "critical"),
    ("urgent fix", "high"),
)


class TextClassifier:
    """Classifies short text into one of the labels seen during training.

    Tokens are lower-cased and Porter-stemmed. Text sharing no stem with the
    training vocabulary has nothing to classify on and yields None rather
    than the label with the largest prior.
    """

    def __init__(self, training_data: tuple[tuple[str, str], ...] = PRIORITY_TRAINING_DATA):
        if not training_data:
            raise ValueError("Classifier needs at least one training example")

        self._tokenizer = RegexpTokenizer(r"\w+")
        self._stemmer = PorterStemmer()
        self._vocabulary: set[str] = set()

        labeled = []
        for text, label in training_data:
            features = self.features(text)
            self._vocabulary.update(features)
            labeled.append((features, label))

        self._model = NaiveBayesClassifier.train(labeled)
        self.labels = tuple(sorted(self._model.labels()))

    def tokenize(self, text: str) -> list[str]:
        return [self._stemmer.stem(token) for token in self._tokenizer.tokenize(text.lower())]

    def features(self, text: str) -> dict[str, bool]:
        return {token: True for token in self.tokenize(text)}

    def classify(self, text: str) -> str | None:
        known = {name: value for name, value in self.features(text).items() if name in self._vocabulary}
        if not known:
            return None
        return self._model.classify(known)


@lru_cache(maxsize=1)
def get_priority_classifier() -> TextClassifier:
    """Get the shared priority classifier, training it on first use."""
    logger.debug(f"Training priority classifier on {len(PRIORITY_TRAINING_DATA)} examples")
    return TextClassifier(PRIORITY_TRAINING_DATA)
