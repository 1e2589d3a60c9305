"""career-guidance command line.

Usage
-----
    career-guidance score APTITUDE responses.json
    career-guidance score PERSONALITY responses.json --narrative service_output.txt
    career-guidance wellness checkins.json --period 14 --as-of 2026-03-01

Input files hold a JSON array, or an object with a ``responses`` /
``checkins`` key wrapping the array. Results are printed to stdout as JSON;
logs go to stderr.
"""
import argparse
import json
import sys
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any, List, Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from career_guidance.config import get_settings
from career_guidance.logging_config import configure_logging
from career_guidance.models.assessment import AssessmentResponse
from career_guidance.models.wellness import WellnessCheckin
from career_guidance.narrative.outcome import parse_narrative
from career_guidance.services.assessment_service import AssessmentService
from career_guidance.services.wellness_service import WellnessService
from career_guidance.wellness.analytics import current_streak

log = structlog.get_logger("career_guidance.cli")

_RESPONSES = TypeAdapter(List[AssessmentResponse])
_CHECKINS = TypeAdapter(List[WellnessCheckin])


class InputError(Exception):
    """Raised for unreadable or malformed input files."""


def _load_records(path: Path, key: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise InputError(f"File not found: {path}") from None
    except OSError as exc:
        raise InputError(f"Cannot read {path}: {exc}") from None
    except json.JSONDecodeError as exc:
        raise InputError(f"{path} is not valid JSON: {exc}") from None

    if isinstance(data, dict) and key in data:
        data = data[key]
    if not isinstance(data, list):
        raise InputError(f"{path} must hold an array or an object with a '{key}' array")
    return data


def _emit(payload: dict) -> None:
    json.dump(payload, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def cmd_score(args: argparse.Namespace) -> int:
    try:
        responses = _RESPONSES.validate_python(_load_records(args.responses, "responses"))
    except ValidationError as exc:
        raise InputError(f"Invalid responses: {exc}") from None

    outcome = None
    if args.narrative is not None:
        try:
            raw = args.narrative.read_bytes()
        except OSError as exc:
            raise InputError(f"Cannot read {args.narrative}: {exc}") from None
        outcome = parse_narrative(raw)

    result = AssessmentService().submit(args.assessment_type, responses, outcome)
    _emit(result.to_dict())
    return 0


def cmd_wellness(args: argparse.Namespace) -> int:
    try:
        checkins = _CHECKINS.validate_python(_load_records(args.checkins, "checkins"))
    except ValidationError as exc:
        raise InputError(f"Invalid check-ins: {exc}") from None

    today = args.as_of or date.today()
    now = datetime.combine(today, time.max, tzinfo=timezone.utc)
    report = WellnessService().analytics(checkins, period=args.period, now=now)
    _emit({
        "analytics": report.to_dict(),
        "currentStreak": current_streak(checkins, today),
    })
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="career-guidance",
        description=f"{settings.app_name}: score career assessments and aggregate wellness check-ins",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.app_version}")
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score an assessment submission")
    score.add_argument("assessment_type", help="APTITUDE, INTEREST, PERSONALITY, SKILL, CAREER_VALUES or LEARNING_STYLE")
    score.add_argument("responses", type=Path, help="JSON file of {question, answer} pairs")
    score.add_argument(
        "--narrative",
        type=Path,
        default=None,
        help="Raw generative-service output to use instead of the fallback narrative",
    )
    score.set_defaults(func=cmd_score)

    wellness = sub.add_parser("wellness", help="Aggregate wellness check-ins")
    wellness.add_argument("checkins", type=Path, help="JSON file of check-ins")
    wellness.add_argument(
        "--period",
        type=int,
        default=settings.analytics_period_days,
        help=f"Window in days (default: {settings.analytics_period_days})",
    )
    wellness.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Treat this YYYY-MM-DD date as today (default: the current date)",
    )
    wellness.set_defaults(func=cmd_wellness)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (InputError, ValueError) as exc:
        log.error("cli_input_error", command=args.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
