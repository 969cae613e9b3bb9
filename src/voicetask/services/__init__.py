"""Voice command interpreter services.

Imports are lazy so that importing the package does not pull in NLTK
until an extractor is actually used.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS: dict[str, tuple[str, str]] = {
    # Orchestrator
    "EmptyInputError": ("voicetask.services.parser", "EmptyInputError"),
    "SAMPLE_TRANSCRIPTS": ("voicetask.services.parser", "SAMPLE_TRANSCRIPTS"),
    "VoiceCommandParser": ("voicetask.services.parser", "VoiceCommandParser"),
    "get_voice_parser": ("voicetask.services.parser", "get_voice_parser"),
    "parse_transcript": ("voicetask.services.parser", "parse_transcript"),
    "reset_voice_parser": ("voicetask.services.parser", "reset_voice_parser"),
    "run_samples": ("voicetask.services.parser", "run_samples"),
    # Extractors
    "extract_description": ("voicetask.services.parser", "extract_description"),
    "extract_status": ("voicetask.services.parser", "extract_status"),
    "extract_title": ("voicetask.services.parser", "extract_title"),
    "should_auto_create": ("voicetask.services.parser", "should_auto_create"),
    "extract_priority": ("voicetask.services.priority", "extract_priority"),
    # Due dates
    "DueDateResolver": ("voicetask.services.due_dates", "DueDateResolver"),
    "extract_due_date": ("voicetask.services.due_dates", "extract_due_date"),
    "get_due_date_resolver": ("voicetask.services.due_dates", "get_due_date_resolver"),
    "reset_due_date_resolver": ("voicetask.services.due_dates", "reset_due_date_resolver"),
    # Classifier
    "TextClassifier": ("voicetask.services.classifier", "TextClassifier"),
    "get_priority_classifier": ("voicetask.services.classifier", "get_priority_classifier"),
}

__all__ = list(_EXPORTS.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = _EXPORTS[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_EXPORTS.keys()))
