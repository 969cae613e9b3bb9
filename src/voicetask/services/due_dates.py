"""Due date resolution for voice commands.

Maps relative date and time phrases ("tomorrow", "by Friday", "end of week",
"this evening") to an absolute timestamp. The first matching rule wins and
every result carries an explicit time of day:

- plain day references default to 18:00
- end of day is 23:59
- morning / afternoon / evening / night are 09:00 / 14:00 / 18:00 / 21:00

Resolution happens in local wall-clock time of the configured timezone. A
naive reference instant gives a naive result; an aware one gives a result
localized to the resolver's timezone.
"""

import calendar
import logging
from datetime import datetime, timedelta

import pytz

from voicetask.config import settings
from voicetask.services.phrases import WEEKDAYS

logger = logging.getLogger(__name__)

DEFAULT_DUE_HOUR = 18

FRIDAY = WEEKDAYS["friday"]

# Ordered: the first period found in the text decides the hour
TIME_OF_DAY_HOURS: dict[str, int] = {
    "morning": 9,
    "afternoon": 14,
    "evening": 18,
    "night": 21,
}

# Phrases resolving to "now + N days" at the default hour
RELATIVE_DAY_PHRASES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("in 2 days", "in two days"), 2),
    (("in 3 days", "in three days"), 3),
    (("in a week", "in one week"), 7),
)


def js_weekday(value: datetime) -> int:
    """Day of week with Sunday=0 ... Saturday=6."""
    return (value.weekday() + 1) % 7


def add_month(value: datetime) -> datetime:
    """Same day next calendar month, clamped to the last day of that month."""
    if value.month == 12:
        year, month = value.year + 1, 1
    else:
        year, month = value.year, value.month + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


class DueDateResolver:
    """Resolves relative date phrases against a reference instant."""

    def __init__(self, timezone: str | None = None):
        tz_name = timezone or settings.user_timezone
        try:
            self.timezone = pytz.timezone(tz_name)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone {tz_name!r}, falling back to UTC")
            self.timezone = pytz.UTC

    def now(self) -> datetime:
        """Current time in the resolver's timezone."""
        return datetime.now(self.timezone)

    def resolve(self, text: str, now: datetime | None = None) -> datetime | None:
        """Resolve the due date mentioned in lower-cased text.

        Args:
            text: Lower-cased transcript
            now: Reference instant. Defaults to the current time.

        Returns:
            Absolute timestamp, or None if no temporal phrase matched
        """
        if now is None:
            now = self.now()

        if now.tzinfo is None:
            return self._resolve_local(text, now)

        local = now.astimezone(self.timezone).replace(tzinfo=None)
        resolved = self._resolve_local(text, local)
        if resolved is None:
            return None
        return self.timezone.localize(resolved)

    def _resolve_local(self, text: str, now: datetime) -> datetime | None:
        # "tomorrow morning" etc. would otherwise be shadowed by plain "tomorrow"
        for period, hour in TIME_OF_DAY_HOURS.items():
            if f"tomorrow {period}" in text:
                return self._at(now, hour, days=1)

        if "tomorrow" in text:
            return self._at(now, DEFAULT_DUE_HOUR, days=1)

        if "today" in text:
            return self._at(now, DEFAULT_DUE_HOUR)

        if "next week" in text:
            return self._at(now, DEFAULT_DUE_HOUR, days=7)

        if "next month" in text:
            return self._at(add_month(now), DEFAULT_DUE_HOUR)

        for phrases, days in RELATIVE_DAY_PHRASES:
            if any(phrase in text for phrase in phrases):
                return self._at(now, DEFAULT_DUE_HOUR, days=days)

        if "end of day" in text or "eod" in text:
            return self._at(now, 23, minute=59)

        if "end of week" in text or "eow" in text:
            days_until_friday = FRIDAY - js_weekday(now)
            if days_until_friday < 0:
                days_until_friday += 7
            return self._at(now, DEFAULT_DUE_HOUR, days=days_until_friday)

        weekday_date = self._resolve_weekday(text, now)
        if weekday_date is not None:
            return weekday_date

        for period, hour in TIME_OF_DAY_HOURS.items():
            if period in text:
                return self._at(now, hour)

        return None

    def _resolve_weekday(self, text: str, now: datetime) -> datetime | None:
        current = js_weekday(now)

        for day_name, day_number in WEEKDAYS.items():
            if any(f"{prefix} {day_name}" in text for prefix in ("next", "by", "on")):
                days_to_add = day_number - current
                if days_to_add <= 0:
                    days_to_add += 7
                return self._at(now, DEFAULT_DUE_HOUR, days=days_to_add)

            # "this friday" on a Friday means today
            if f"this {day_name}" in text:
                days_to_add = day_number - current
                if days_to_add < 0:
                    days_to_add += 7
                return self._at(now, DEFAULT_DUE_HOUR, days=days_to_add)

        return None

    @staticmethod
    def _at(base: datetime, hour: int, minute: int = 0, days: int = 0) -> datetime:
        date = base + timedelta(days=days)
        return date.replace(hour=hour, minute=minute, second=0, microsecond=0)


# Module-level singleton
_resolver: DueDateResolver | None = None


def get_due_date_resolver(timezone: str | None = None) -> DueDateResolver:
    """Get the singleton DueDateResolver instance.

    Args:
        timezone: Optional timezone to use. Only used on first call.
    """
    global _resolver
    if _resolver is None:
        _resolver = DueDateResolver(timezone)
    return _resolver


def reset_due_date_resolver() -> None:
    """Reset the singleton (useful for testing)."""
    global _resolver
    _resolver = None


def extract_due_date(text: str, now: datetime | None = None) -> datetime | None:
    """Resolve the due date in lower-cased text using the shared resolver."""
    return get_due_date_resolver().resolve(text, now)
