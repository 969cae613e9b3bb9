"""Tests for priority classification."""

from voicetask.schemas import TaskPriority
from voicetask.services.priority import extract_priority


class BrokenClassifier:
    def classify(self, text):
        raise RuntimeError("model unavailable")


class StubClassifier:
    def __init__(self, label):
        self.label = label

    def classify(self, text):
        return self.label


class TestKeywordRules:
    def test_critical_keywords(self):
        assert extract_priority("fix login page bug critical urgent") == TaskPriority.CRITICAL
        assert extract_priority("send it asap") == TaskPriority.CRITICAL
        assert extract_priority("this is urgent") == TaskPriority.CRITICAL

    def test_not_urgent_still_matches_urgent_first(self):
        assert extract_priority("not urgent, clean the garage") == TaskPriority.CRITICAL

    def test_high_phrases(self):
        assert extract_priority("high priority review") == TaskPriority.HIGH
        assert extract_priority("a high-priority review") == TaskPriority.HIGH
        assert extract_priority("priority high please") == TaskPriority.HIGH
        assert extract_priority("important call with bank") == TaskPriority.HIGH

    def test_not_important_matches_important_first(self):
        assert extract_priority("not important") == TaskPriority.HIGH

    def test_low_phrases(self):
        assert extract_priority("update documentation low priority whenever") == TaskPriority.LOW
        assert extract_priority("clean desk whenever") == TaskPriority.LOW
        assert extract_priority("priority low, sort emails") == TaskPriority.LOW

    def test_medium_phrases(self):
        assert extract_priority("normal priority") == TaskPriority.MEDIUM
        assert extract_priority("regular priority review") == TaskPriority.MEDIUM
        assert extract_priority("medium priority") == TaskPriority.MEDIUM

    def test_phrase_rules_before_bare_keywords(self):
        # "low priority" is rule 3, checked before the bare "high" keyword
        assert extract_priority("low priority, high effort") == TaskPriority.LOW

    def test_bare_keywords(self):
        assert extract_priority("take the high road") == TaskPriority.HIGH
        assert extract_priority("keep it low key") == TaskPriority.LOW
        assert extract_priority("medium sized box") == TaskPriority.MEDIUM

    def test_bare_keywords_match_inside_words(self):
        assert extract_priority("follow up with the vendor") == TaskPriority.LOW


class TestClassifierFallback:
    def test_fallback_uses_trained_model(self):
        assert extract_priority("there is a bug") == TaskPriority.CRITICAL
        assert extract_priority("call mom when you have time") == TaskPriority.LOW

    def test_unknown_words_default_to_medium(self):
        assert extract_priority("email client about project updates") == TaskPriority.MEDIUM

    def test_classifier_error_defaults_to_medium(self):
        assert extract_priority("buy bread", BrokenClassifier()) == TaskPriority.MEDIUM

    def test_empty_label_defaults_to_medium(self):
        assert extract_priority("buy bread", StubClassifier("")) == TaskPriority.MEDIUM
        assert extract_priority("buy bread", StubClassifier(None)) == TaskPriority.MEDIUM

    def test_unknown_label_defaults_to_medium(self):
        assert extract_priority("buy bread", StubClassifier("someday")) == TaskPriority.MEDIUM

    def test_injected_classifier_is_used(self):
        assert extract_priority("buy bread", StubClassifier("high")) == TaskPriority.HIGH

    def test_keyword_rules_skip_classifier(self):
        assert extract_priority("asap", BrokenClassifier()) == TaskPriority.CRITICAL
