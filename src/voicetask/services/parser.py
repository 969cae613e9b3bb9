"""Voice command interpreter.

Turns one raw speech-to-text transcript into a ParsedCommand: title,
description, priority, status, optional due date and the auto-create flag.
Each field comes from its own extractor working on the lower-cased text;
the description is computed after the title because it removes the title
from the text first.

Phrase removal is plain substring or whole-word regex replacement, so a
removal can cut into neighbouring words ("hi" is removed from "high").
"""

import logging
import re
from datetime import datetime

from voicetask.schemas import DEFAULT_TITLE, ParsedCommand, TaskStatus
from voicetask.sentry import add_breadcrumb
from voicetask.services.classifier import TextClassifier
from voicetask.services.due_dates import DueDateResolver
from voicetask.services.phrases import (
    AUTO_CREATE_PHRASES,
    COMMAND_PHRASES,
    DATE_PHRASES,
    DESCRIPTION_COMMANDS,
    DESCRIPTION_NOISE_WORDS,
    DONE_PHRASES,
    DONE_SUFFIXES,
    FILLER_PHRASES,
    IN_PROGRESS_PHRASES,
    PRIORITY_WORDS,
    STATUS_WORDS,
    TASK_INTENT_PHRASES,
    TIME_OF_DAY_WORDS,
    TODO_PHRASES,
    TRAILING_COMMANDS,
)
from voicetask.services.priority import extract_priority

logger = logging.getLogger(__name__)

BOUNDARY_PUNCTUATION = re.compile(r"^[,\s.:!-]+|[,\s.:!-]+$")

SAMPLE_TRANSCRIPTS: tuple[str, ...] = (
    "Create a high priority task to review the pull request for the authentication module by tomorrow evening",
    "Remind me to send the project proposal to the client by next Wednesday, it's high priority",
    "Fix login page bug critical urgent",
    "Update documentation low priority whenever",
    "Meeting with team tomorrow morning create this",
    "Submit report by Friday done",
    "Code review for PR #123 medium priority in progress",
    "Prepare presentation for next week important",
    "Debug payment gateway issue high priority today create this",
    "Email client about project updates",
)


class EmptyInputError(ValueError):
    """Raised when a transcript is empty or only whitespace."""

    pass


def _remove_first(text: str, phrases: tuple[str, ...]) -> str:
    for phrase in phrases:
        if phrase in text:
            text = text.replace(phrase, "", 1).strip()
    return text


def _remove_words(text: str, words: tuple[str, ...]) -> str:
    for word in words:
        text = re.sub(rf"\b{re.escape(word)}\b", "", text, flags=re.IGNORECASE).strip()
    return text


def _clean(text: str) -> str:
    text = re.sub(r"\s+", " ", text).strip()
    return BOUNDARY_PUNCTUATION.sub("", text)


def extract_title(text: str) -> str:
    """Isolate the task subject by stripping command, status, priority and date phrases."""
    title = _remove_first(text.lower(), COMMAND_PHRASES)
    title = _remove_words(title, STATUS_WORDS)
    title = _remove_words(title, PRIORITY_WORDS)

    for command in TRAILING_COMMANDS:
        if title.endswith(command):
            title = title[: -len(command)].strip()

    title = _remove_words(title, DATE_PHRASES)
    title = _remove_words(title, TIME_OF_DAY_WORDS)
    title = _clean(title)

    if not title:
        return DEFAULT_TITLE
    return " ".join(word[:1].upper() + word[1:] for word in title.split(" "))


def extract_status(text: str) -> TaskStatus:
    """Detect whether the speaker reported the task as done or in progress."""
    if text.endswith(DONE_SUFFIXES) or any(phrase in text for phrase in DONE_PHRASES):
        return TaskStatus.DONE

    if any(phrase in text for phrase in IN_PROGRESS_PHRASES):
        return TaskStatus.IN_PROGRESS

    if any(phrase in text for phrase in TODO_PHRASES):
        return TaskStatus.TODO

    return TaskStatus.TODO


def is_filler_phrase(text: str) -> bool:
    return any(text == phrase or text.startswith(f"{phrase} ") for phrase in FILLER_PHRASES)


def extract_description(text: str, title: str) -> str:
    """Return whatever is left once the title and control phrases are removed.

    Returns an empty string when nothing meaningful remains, when only a
    filler word such as "task" survives, or when the leftover would just
    repeat the title.
    """
    description = text.lower()
    title_lower = title.lower()

    if title_lower in description:
        description = description.replace(title_lower, "", 1).strip()

    description = _remove_first(description, TASK_INTENT_PHRASES)
    description = _remove_first(description, DESCRIPTION_COMMANDS)
    description = _remove_words(description, DESCRIPTION_NOISE_WORDS)
    description = _clean(description)

    if not description or is_filler_phrase(description) or description == title_lower:
        return ""

    sentences = description.split(". ")
    return ". ".join(sentence[:1].upper() + sentence[1:] for sentence in sentences)


def should_auto_create(text: str) -> bool:
    """Check whether the transcript asks for the task to be saved right away."""
    return any(
        text.endswith(phrase) or f" {phrase}" in text or f"{phrase} " in text
        for phrase in AUTO_CREATE_PHRASES
    )


class VoiceCommandParser:
    """Parses voice transcripts into task fields.

    Args:
        timezone: IANA timezone for resolving relative dates.
            Defaults to settings.user_timezone.
        classifier: Priority fallback classifier. Defaults to the shared
            model trained on the built-in corpus.
    """

    def __init__(
        self,
        timezone: str | None = None,
        classifier: TextClassifier | None = None,
    ):
        self.due_dates = DueDateResolver(timezone)
        self.classifier = classifier

    def parse(self, transcript: str, now: datetime | None = None) -> ParsedCommand:
        """Parse one transcript.

        Args:
            transcript: Raw speech-to-text output
            now: Reference instant for relative dates. Defaults to the
                current time in the parser's timezone.

        Returns:
            ParsedCommand with every field populated

        Raises:
            EmptyInputError: If the transcript is empty or whitespace
        """
        if not transcript or not transcript.strip():
            raise EmptyInputError("No text provided")

        logger.debug(f"Parsing voice input: {transcript!r}")
        text_lower = transcript.lower()

        title = extract_title(text_lower)
        priority = extract_priority(text_lower, self.classifier)
        status = extract_status(text_lower)
        due_date = self.due_dates.resolve(text_lower, now)
        description = extract_description(text_lower, title)
        auto_create = should_auto_create(text_lower)

        result = ParsedCommand(
            transcript=transcript,
            title=title,
            description=description,
            priority=priority,
            status=status,
            due_date=due_date,
            auto_create=auto_create,
        )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Parsed result: {result.to_dict()}")
        add_breadcrumb(
            message="Parsed voice command",
            category="parser",
            data={
                "priority": priority.value,
                "status": status.value,
                "has_due_date": due_date is not None,
                "auto_create": auto_create,
            },
        )
        return result

    def run_samples(self, now: datetime | None = None) -> list[tuple[str, ParsedCommand]]:
        """Parse the built-in sample transcripts, returning (input, parsed) pairs."""
        return [(phrase, self.parse(phrase, now)) for phrase in SAMPLE_TRANSCRIPTS]


# Module-level singleton
_voice_parser: VoiceCommandParser | None = None


def get_voice_parser() -> VoiceCommandParser:
    """Get the singleton VoiceCommandParser instance."""
    global _voice_parser
    if _voice_parser is None:
        _voice_parser = VoiceCommandParser()
    return _voice_parser


def reset_voice_parser() -> None:
    """Reset the singleton (useful for testing)."""
    global _voice_parser
    _voice_parser = None


def parse_transcript(transcript: str, now: datetime | None = None) -> ParsedCommand:
    """Convenience function to parse a transcript with the shared parser."""
    return get_voice_parser().parse(transcript, now)


def run_samples(now: datetime | None = None) -> list[tuple[str, ParsedCommand]]:
    """Run the sample transcripts through the shared parser."""
    return get_voice_parser().run_samples(now)
