"""Environment-variable-based configuration for the planner CLI."""

from __future__ import annotations

import os
from pathlib import Path


def _optional_path(name: str) -> Path | None:
    value = os.environ.get(name, "")
    return Path(value).expanduser() if value else None


LOG_LEVEL: str = os.environ.get("PLANNER_LOG_LEVEL", "INFO").upper()
ATHLETE_PROFILE_PATH: Path | None = _optional_path("ATHLETE_PROFILE")
WORKOUT_LOG_PATH: Path | None = _optional_path("WORKOUT_LOG")
READINESS_LOG_PATH: Path | None = _optional_path("READINESS_LOG")
READINESS_WINDOW_DAYS: int = int(os.environ.get("READINESS_WINDOW_DAYS", "30"))
