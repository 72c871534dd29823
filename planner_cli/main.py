"""Training planner CLI — materialize templates and report load / readiness.

Usage:
    python -m planner_cli.main materialize --template program.json --profile me.json
    python -m planner_cli.main load --log workouts.json
    python -m planner_cli.main readiness --log readiness.json --as-of 2024-03-01 --days 14

Every command prints JSON to stdout. File paths fall back to the
ATHLETE_PROFILE, WORKOUT_LOG and READINESS_LOG environment variables.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from training_engine.errors import TrainingEngineError
from training_engine.generation.materializer import TemplateMaterializer
from training_engine.math import readiness, training_load
from training_engine.serialization import (
    load_points_to_list,
    parse_profile,
    parse_readiness_log,
    parse_workout_log,
    program_to_dict,
    readiness_series_to_list,
    readiness_summary_to_dict,
)
from training_engine.serialization.documents import parse_date

from planner_cli import config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _load_json(path: Path) -> Any:
    """Read a JSON document from disk."""
    with open(path) as f:
        return json.load(f)


def _require_path(value: str | None, fallback: Path | None, what: str, env_var: str) -> Path:
    if value:
        return Path(value)
    if fallback is not None:
        return fallback
    raise FileNotFoundError(f"No {what} given (pass a path or set {env_var})")


def _emit(payload: Any) -> None:
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")


def cmd_materialize(args: argparse.Namespace) -> int:
    document = _load_json(Path(args.template))
    profile = None
    profile_path = args.profile or config.ATHLETE_PROFILE_PATH
    if profile_path:
        profile = parse_profile(_load_json(Path(profile_path)))

    program = TemplateMaterializer().materialize(document, profile)
    for warning in program.warnings:
        logger.warning(
            "Week %d day %d: %s unresolved (%s)",
            warning.week,
            warning.day,
            warning.exercise_id,
            warning.reason,
        )
    _emit(program_to_dict(program))
    return EXIT_OK


def cmd_load(args: argparse.Namespace) -> int:
    path = _require_path(args.log, config.WORKOUT_LOG_PATH, "workout log", "WORKOUT_LOG")
    entries = parse_workout_log(_load_json(path))
    points = training_load.compute(entries)
    logger.info("Computed %d load points from %d sessions", len(points), len(entries))
    _emit(load_points_to_list(points))
    return EXIT_OK


def cmd_readiness(args: argparse.Namespace) -> int:
    path = _require_path(args.log, config.READINESS_LOG_PATH, "readiness log", "READINESS_LOG")
    entries = parse_readiness_log(_load_json(path))
    as_of = parse_date(args.as_of, "--as-of")
    series = readiness.aggregate(entries, args.days, as_of)
    _emit({
        "series": readiness_series_to_list(series),
        "summary": readiness_summary_to_dict(readiness.summarize(series)),
    })
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Strength and endurance training planner")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Logging level (default: PLANNER_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    materialize = sub.add_parser("materialize", help="Expand a template into a full program")
    materialize.add_argument("--template", required=True, help="Template JSON document")
    materialize.add_argument("--profile", help="Athlete profile JSON (default: ATHLETE_PROFILE)")
    materialize.set_defaults(func=cmd_materialize)

    load = sub.add_parser("load", help="ATL / CTL / ACR history from a workout log")
    load.add_argument("--log", help="Workout log JSON (default: WORKOUT_LOG)")
    load.set_defaults(func=cmd_load)

    ready = sub.add_parser("readiness", help="Readiness scores over a trailing window")
    ready.add_argument("--log", help="Readiness log JSON (default: READINESS_LOG)")
    ready.add_argument("--as-of", required=True, help="Last date of the window (YYYY-MM-DD)")
    ready.add_argument(
        "--days",
        type=int,
        default=config.READINESS_WINDOW_DAYS,
        help="Window length in days (default: READINESS_WINDOW_DAYS or 30)",
    )
    ready.set_defaults(func=cmd_readiness)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except TrainingEngineError as exc:
        logger.error("%s", exc.__class__.__name__)
        for issue in getattr(exc, "issues", ()):
            logger.error("  %s: %s", issue.path or "<document>", issue.message)
        if not getattr(exc, "issues", ()):
            logger.error("  %s", exc)
        return EXIT_INVALID
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not read input: %s", exc)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
