"""Priority classification for voice commands.

Rules are checked in order and the first match wins:

1. critical / urgent / asap                      -> critical
2. high priority / priority high / important     -> high
3. low priority / not urgent / whenever          -> low
4. medium / normal / regular priority            -> medium
5. bare "high", "low", "medium" keywords
6. naive Bayes fallback, then medium

Rule 1 runs before rule 3, so "not urgent" is reported as critical.
"""

import logging

from voicetask.schemas import TaskPriority
from voicetask.services.classifier import TextClassifier, get_priority_classifier

logger = logging.getLogger(__name__)

PRIORITY_RULES: tuple[tuple[tuple[str, ...], TaskPriority], ...] = (
    (("critical", "urgent", "asap"), TaskPriority.CRITICAL),
    (("high priority", "high-priority", "priority high", "important"), TaskPriority.HIGH),
    (
        (
            "low priority",
            "low-priority",
            "priority low",
            "not urgent",
            "whenever",
            "not important",
        ),
        TaskPriority.LOW,
    ),
    (
        ("medium priority", "normal priority", "priority medium", "regular priority"),
        TaskPriority.MEDIUM,
    ),
    (("high",), TaskPriority.HIGH),
    (("low",), TaskPriority.LOW),
    (("medium",), TaskPriority.MEDIUM),
)


def extract_priority(text: str, classifier: TextClassifier | None = None) -> TaskPriority:
    """Classify the priority of a lower-cased transcript."""
    for phrases, priority in PRIORITY_RULES:
        if any(phrase in text for phrase in phrases):
            return priority

    return _classify_fallback(text, classifier)


def _classify_fallback(text: str, classifier: TextClassifier | None) -> TaskPriority:
    try:
        model = classifier or get_priority_classifier()
        label = model.classify(text)
        if not label:
            return TaskPriority.MEDIUM
        return TaskPriority(label)
    except Exception as e:
        logger.warning(f"Priority classifier failed, using medium: {e}")
        return TaskPriority.MEDIUM
