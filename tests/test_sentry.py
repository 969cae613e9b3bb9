"""Tests for Sentry error tracking integration.

Every helper must be a safe no-op until init_sentry() runs with a DSN.
"""

from unittest.mock import patch

import voicetask.sentry
from voicetask.sentry import (
    _before_send,
    _scrub_dict,
    add_breadcrumb,
    capture_exception,
    flush,
    init_sentry,
    set_tag,
)
from voicetask.services.parser import EmptyInputError


# ============================================================
# Test Initialization
# ============================================================


class TestSentryInit:
    """Test Sentry initialization."""

    def setup_method(self) -> None:
        voicetask.sentry._initialized = False

    def teardown_method(self) -> None:
        voicetask.sentry._initialized = False

    def test_disabled_before_init(self) -> None:
        """Sentry should be disabled before initialization."""
        assert voicetask.sentry._initialized is False

    def test_init_without_dsn_returns_false(self) -> None:
        """init_sentry with an empty DSN should stay disabled."""
        assert init_sentry(dsn="") is False
        assert voicetask.sentry._initialized is False

    def test_init_with_none_dsn_reads_environment(self) -> None:
        """init_sentry(None) falls back to SENTRY_DSN, empty means disabled."""
        with patch.dict("os.environ", {"SENTRY_DSN": ""}, clear=False):
            assert init_sentry(dsn=None) is False

    def test_init_with_dsn(self) -> None:
        """init_sentry with a DSN should initialize the SDK once."""
        with patch("voicetask.sentry.sentry_sdk") as mock_sdk:
            assert init_sentry(dsn="https://key@sentry.example/1", release="voice-task@test")
            assert voicetask.sentry._initialized is True
            mock_sdk.init.assert_called_once()
            kwargs = mock_sdk.init.call_args.kwargs
            assert kwargs["send_default_pii"] is False
            assert kwargs["before_send"] is _before_send

            # Second call is a no-op
            assert init_sentry(dsn="https://key@sentry.example/1") is True
            mock_sdk.init.assert_called_once()

    def test_helpers_forward_when_initialized(self) -> None:
        """Helpers should call through to the SDK once initialized."""
        with patch("voicetask.sentry.sentry_sdk") as mock_sdk:
            init_sentry(dsn="https://key@sentry.example/1", release="voice-task@test")
            add_breadcrumb("parsed", category="parser", data={"priority": "high"})
            set_tag("component", "parser")
            flush(timeout=1.0)

            mock_sdk.add_breadcrumb.assert_called_once_with(
                message="parsed", category="parser", level="info", data={"priority": "high"}
            )
            mock_sdk.set_tag.assert_called_once_with("component", "parser")
            mock_sdk.flush.assert_called_once_with(timeout=1.0)


# ============================================================
# Test Data Scrubbing
# ============================================================


class TestDataScrubbing:
    """Test sensitive data scrubbing."""

    def test_scrub_token(self) -> None:
        data = {"token": "secret123", "name": "test"}
        _scrub_dict(data)
        assert data["token"] == "[REDACTED]"
        assert data["name"] == "test"

    def test_scrub_transcript(self) -> None:
        """Transcripts may contain personal details and are never sent."""
        data = {"transcript": "call my doctor about the results", "priority": "high"}
        _scrub_dict(data)
        assert data["transcript"] == "[REDACTED]"
        assert data["priority"] == "high"

    def test_scrub_nested_dicts(self) -> None:
        data = {"outer": {"api_key": "secret", "value": "ok"}, "password": "hunter2"}
        _scrub_dict(data)
        assert data["outer"]["api_key"] == "[REDACTED]"
        assert data["outer"]["value"] == "ok"
        assert data["password"] == "[REDACTED]"

    def test_scrub_case_insensitive(self) -> None:
        data = {"SENTRY_DSN": "https://xxx@sentry.io/123"}
        _scrub_dict(data)
        assert data["SENTRY_DSN"] == "[REDACTED]"


# ============================================================
# Test Before Send Filter
# ============================================================


class TestBeforeSend:
    """Test the before_send filter callback."""

    def test_filters_empty_input(self) -> None:
        """Empty transcripts are user error, not a bug."""
        event: dict = {"exception": {}}
        error = EmptyInputError("No text provided")
        hint = {"exc_info": (EmptyInputError, error, None)}
        assert _before_send(event, hint) is None

    def test_passes_other_exceptions(self) -> None:
        event: dict = {"exception": {}}
        hint = {"exc_info": (RuntimeError, RuntimeError("error"), None)}
        assert _before_send(event, hint) is event

    def test_scrubs_extra_data(self) -> None:
        event = {"extra": {"transcript": "secret plans"}}
        result = _before_send(event, {})
        assert result is not None
        assert result["extra"]["transcript"] == "[REDACTED]"

    def test_scrubs_breadcrumb_data(self) -> None:
        event = {
            "breadcrumbs": {
                "values": [
                    {"data": {"api_key": "secret", "msg": "ok"}},
                    {"data": {"password": "hunter2"}},
                ]
            }
        }
        result = _before_send(event, {})
        assert result is not None
        assert result["breadcrumbs"]["values"][0]["data"]["api_key"] == "[REDACTED]"
        assert result["breadcrumbs"]["values"][0]["data"]["msg"] == "ok"
        assert result["breadcrumbs"]["values"][1]["data"]["password"] == "[REDACTED]"


# ============================================================
# Test Graceful Degradation
# ============================================================


class TestNotInitialized:
    """Helpers are no-ops before initialization."""

    def setup_method(self) -> None:
        voicetask.sentry._initialized = False

    def test_add_breadcrumb(self) -> None:
        add_breadcrumb("test message", category="test")

    def test_set_tag(self) -> None:
        set_tag("key", "value")

    def test_capture_exception(self) -> None:
        assert capture_exception(Exception("test")) is None

    def test_flush(self) -> None:
        flush(timeout=0.1)
