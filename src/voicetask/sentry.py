"""Sentry error tracking integration for the voice task interpreter.

This module provides Sentry SDK initialization and context helpers. Every
helper is a no-op until init_sentry() has run with a DSN, so library callers
never need to check.

Usage:
    # Early in application startup
    from voicetask.sentry import init_sentry
    init_sentry()

    # Capture exceptions manually
    from voicetask.sentry import capture_exception
    try:
        risky_operation()
    except Exception as e:
        capture_exception(e)
        raise
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, cast

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

if TYPE_CHECKING:
    from sentry_sdk._types import Event, Hint

logger = logging.getLogger(__name__)

# Exceptions that describe bad user input rather than a bug
IGNORED_EXCEPTIONS = frozenset(["EmptyInputError"])

SENSITIVE_KEYS = frozenset(
    [
        "token",
        "api_key",
        "apikey",
        "secret",
        "password",
        "authorization",
        "bearer",
        "sentry_dsn",
        "transcript",
    ]
)

# Module state
_initialized = False


def init_sentry(
    dsn: str | None = None,
    environment: str = "production",
    release: str | None = None,
    traces_sample_rate: float = 0.0,
    debug: bool = False,
) -> bool:
    """Initialize Sentry SDK for error tracking.

    Args:
        dsn: Sentry DSN. If None, reads from SENTRY_DSN env var.
             Empty/None DSN disables Sentry (safe for development).
        environment: Environment name (production, staging, development).
        release: Release version. If None, auto-detected from package version.
        traces_sample_rate: Sample rate for performance tracing (0.0-1.0).
        debug: Enable Sentry debug mode for troubleshooting.

    Returns:
        True if Sentry was initialized, False if skipped.
    """
    global _initialized

    if _initialized:
        logger.debug("Sentry already initialized")
        return True

    if dsn is None:
        dsn = os.environ.get("SENTRY_DSN", "")

    # Empty DSN disables Sentry (expected in development)
    if not dsn:
        logger.info("No SENTRY_DSN configured, error tracking disabled")
        return False

    if release is None:
        try:
            from importlib.metadata import PackageNotFoundError, version

            release = f"voice-task@{version('voice-task')}"
        except PackageNotFoundError:
            release = "voice-task@dev"

    logging_integration = LoggingIntegration(
        level=logging.INFO,  # Capture INFO and above as breadcrumbs
        event_level=logging.ERROR,  # Send ERROR and above to Sentry
    )

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        traces_sample_rate=traces_sample_rate,
        debug=debug,
        integrations=[logging_integration],
        send_default_pii=False,
        attach_stacktrace=True,
        before_send=_before_send,
    )

    _initialized = True
    logger.info(f"Sentry initialized: environment={environment}, release={release}")
    return True


def _before_send(event: Event, hint: Hint) -> Event | None:
    """Drop user-input errors and scrub sensitive data before sending."""
    if "exc_info" in hint:
        exc_type, _, _ = hint["exc_info"]
        if exc_type.__name__ in IGNORED_EXCEPTIONS:
            return None

    if "request" in event:
        _scrub_dict(cast(dict[str, Any], event["request"]))

    if "extra" in event:
        _scrub_dict(cast(dict[str, Any], event["extra"]))

    if "breadcrumbs" in event:
        breadcrumbs = cast(dict[str, Any], event["breadcrumbs"])
        if "values" in breadcrumbs:
            for breadcrumb in breadcrumbs["values"]:
                if "data" in breadcrumb:
                    _scrub_dict(breadcrumb["data"])

    return event


def _scrub_dict(data: dict[str, Any]) -> None:
    """Scrub sensitive keys from a dictionary in-place."""
    for key in list(data.keys()):
        if key.lower() in SENSITIVE_KEYS:
            data[key] = "[REDACTED]"
        elif isinstance(data[key], dict):
            _scrub_dict(data[key])


def set_tag(key: str, value: str) -> None:
    """Set a tag on the current Sentry scope."""
    if not _initialized:
        return

    sentry_sdk.set_tag(key, value)


def add_breadcrumb(
    message: str,
    category: str = "default",
    level: str = "info",
    data: dict[str, Any] | None = None,
) -> None:
    """Add a breadcrumb to help debug issues.

    Args:
        message: Breadcrumb message.
        category: Category for grouping (e.g., "parser", "cli").
        level: Log level (debug, info, warning, error, critical).
        data: Additional data to attach.
    """
    if not _initialized:
        return

    sentry_sdk.add_breadcrumb(
        message=message,
        category=category,
        level=level,
        data=data or {},
    )


def capture_exception(exception: BaseException | None = None) -> str | None:
    """Capture an exception and send to Sentry.

    Returns:
        Event ID if captured, None otherwise.
    """
    if not _initialized:
        return None

    return sentry_sdk.capture_exception(exception)


def flush(timeout: float = 2.0) -> None:
    """Flush pending Sentry events before shutdown."""
    if not _initialized:
        return

    sentry_sdk.flush(timeout=timeout)
