"""Fixed phrase tables used by the voice command extractors.

Order matters: every extractor walks its tables front to back and later
entries see the text left over by earlier ones. All entries are lower-case.
"""

# Weekday lookup, Sunday=0 ... Saturday=6. Iteration order is Monday first.
WEEKDAYS: dict[str, int] = {
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
    "sunday": 0,
}

# Title: removed once each, anywhere in the text (plain substring)
COMMAND_PHRASES: tuple[str, ...] = (
    "create a",
    "add a",
    "make a",
    "remind me to",
    "i need to",
    "please",
    "can you",
    "hey",
    "hi",
    "hello",
    "create this",
    "add this",
    "save this",
    "make this",
    "task to",
    "task for",
    "reminder to",
    "reminder for",
)

STATUS_WORDS: tuple[str, ...] = (
    "done",
    "completed",
    "finished",
    "todo",
    "in progress",
    "working on",
)

PRIORITY_WORDS: tuple[str, ...] = (
    "urgent",
    "critical",
    "important",
    "high",
    "low",
    "medium",
    "priority",
)

# Title: only stripped when the remaining text ends with them
TRAILING_COMMANDS: tuple[str, ...] = (
    "create this",
    "add this",
    "save this",
    "make this",
    "done",
    "complete",
)

DATE_PHRASES: tuple[str, ...] = (
    "tomorrow",
    "today",
    "next week",
    "next month",
    "this week",
    "this month",
    "by friday",
    "by monday",
    "by tuesday",
    "by wednesday",
    "by thursday",
    "by saturday",
    "by sunday",
    "due by",
    "due on",
    "by tomorrow",
    "by today",
    "in 2 days",
    "in 3 days",
    "in a week",
    "in one week",
    "in two weeks",
    "in three weeks",
    "end of day",
    "end of week",
    "eod",
    "eow",
)

TIME_OF_DAY_WORDS: tuple[str, ...] = (
    "morning",
    "afternoon",
    "evening",
    "night",
    "noon",
    "midnight",
    "today",
    "tomorrow",
)

# Description: removed once each (plain substring)
TASK_INTENT_PHRASES: tuple[str, ...] = (
    "create a",
    "add a",
    "make a",
    "remind me to",
    "please",
    "can you",
    "i need to",
    "i have to",
    "i should",
    "we need to",
    "we have to",
)

DESCRIPTION_COMMANDS: tuple[str, ...] = (
    "create this",
    "add this",
    "save this",
    "make this",
)

# Description: removed as whole words
DESCRIPTION_NOISE_WORDS: tuple[str, ...] = (
    "urgent",
    "critical",
    "important",
    "asap",
    "high",
    "low",
    "medium",
    "priority",
    "priorities",
    "tomorrow",
    "today",
    "next week",
    "next month",
    "this week",
    "this month",
    "by",
    "due",
    "on",
    "at",
    "morning",
    "afternoon",
    "evening",
    "night",
    "done",
    "completed",
    "finished",
    "todo",
    "to do",
    "in progress",
)

# Filler left over once everything meaningful is stripped
FILLER_PHRASES: tuple[str, ...] = (
    "task",
    "reminder",
    "thing",
    "item",
    "work",
    "job",
    "project",
)

AUTO_CREATE_PHRASES: tuple[str, ...] = (
    "create this",
    "add this",
    "save this",
    "make this",
    "done",
    "complete this",
    "finish this",
    "add now",
    "create now",
    "save now",
)

# Status detection
DONE_SUFFIXES: tuple[str, ...] = (" done", " completed", " finished")
DONE_PHRASES: tuple[str, ...] = (
    "mark as done",
    "mark done",
    "is done",
    "already done",
    "task done",
)
IN_PROGRESS_PHRASES: tuple[str, ...] = (
    "in progress",
    "working on",
    "currently doing",
    "started",
    "working",
)
TODO_PHRASES: tuple[str, ...] = ("todo", "to do", "need to", "have to", "should")
