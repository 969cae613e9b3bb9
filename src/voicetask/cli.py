import argparse
import json
import logging
import sys
from datetime import datetime

from voicetask.config import settings
from voicetask.sentry import capture_exception, init_sentry, set_tag
from voicetask.sentry import flush as sentry_flush


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid ISO timestamp: {value}")


def parse_command(text: str, now: datetime | None = None) -> int:
    """Parse one transcript and print the JSON record."""
    from voicetask.services.parser import EmptyInputError, parse_transcript

    try:
        result = parse_transcript(text, now)
    except EmptyInputError as e:
        print(f"Error: {e}")
        return 2

    print(result.to_json(indent=2))
    return 0


def run_samples_command(now: datetime | None = None) -> int:
    """Run the built-in sample transcripts and print (input, parsed) pairs."""
    from voicetask.services.parser import run_samples

    results = [{"input": phrase, "parsed": parsed.to_dict()} for phrase, parsed in run_samples(now)]
    print(json.dumps(results, indent=2))
    return 0


def check_config() -> int:
    print("Voice Task Configuration Check\n")

    checks = [
        ("User timezone", settings.user_timezone),
        ("Log level", settings.log_level),
        ("Sentry DSN", "OK" if settings.has_sentry else "MISSING (error tracking disabled)"),
        ("Sentry environment", settings.sentry_environment),
    ]

    for name, value in checks:
        print(f"  {name}: {value}")

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Voice command task interpreter")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a voice transcript")
    parse_parser.add_argument("text", nargs="*", help="Transcript text")
    parse_parser.add_argument("--now", type=_parse_now, help="Reference time (ISO 8601)")

    samples_parser = subparsers.add_parser("samples", help="Parse the built-in sample transcripts")
    samples_parser.add_argument("--now", type=_parse_now, help="Reference time (ISO 8601)")

    subparsers.add_parser("check", help="Check configuration")

    args = parser.parse_args(argv)

    setup_logging()

    # Initialize Sentry for error tracking (disabled if no DSN configured)
    init_sentry(
        dsn=settings.sentry_dsn if settings.has_sentry else None,
        environment=settings.sentry_environment,
    )
    set_tag("command", args.command or "help")

    try:
        if args.command == "parse":
            return parse_command(" ".join(args.text), args.now)
        elif args.command == "samples":
            return run_samples_command(args.now)
        elif args.command == "check":
            return check_config()
        else:
            parser.print_help()
            return 1
    except Exception as e:
        capture_exception(e)
        raise
    finally:
        # Flush any pending Sentry events before exit
        sentry_flush(timeout=2.0)


if __name__ == "__main__":
    sys.exit(main())
