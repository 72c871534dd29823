"""Athlete profile — equipment, body weight, PRs and benchmark results."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from typing import Mapping


@dataclass(frozen=True)
class PersonalRecord:
    """A 1RM (or best effort) for a lift, with the date it was set."""

    value: float
    recorded_on: date | None = None
    note: str = ""


@dataclass(frozen=True)
class BenchmarkValue:
    """A benchmark test result, e.g. max HR or aerobic threshold HR."""

    value: float
    recorded_on: date | None = None


@dataclass(frozen=True)
class AthleteProfile:
    """Immutable snapshot of the athlete supplied by the identity collaborator.

    Profiles are never deleted, only superseded: progression updates return
    a new profile via ``dataclasses.replace``.
    """

    available_equipment: frozenset[str] = field(default_factory=frozenset)
    body_weight: float | None = None
    personal_records: Mapping[str, PersonalRecord] = field(default_factory=dict)
    benchmarks: Mapping[str, BenchmarkValue] = field(default_factory=dict)
    name: str = ""

    def pr_value(self, pr_key: str | None) -> float | None:
        """Return the PR value for *pr_key*, or None if not recorded."""
        if pr_key is None:
            return None
        record = self.personal_records.get(pr_key)
        return record.value if record is not None else None

    def benchmark_value(self, key: str) -> float | None:
        """Return a benchmark value, or None if the test was never run."""
        bench = self.benchmarks.get(key)
        return bench.value if bench is not None else None


def apply_progression(
    profile: AthleteProfile,
    pr_key: str,
    new_value: float,
    on_date: date,
    note: str = "Auto-adjusted based on progression",
) -> AthleteProfile:
    """Supersede a PR with a progressed value.

    The PR only moves up: if the current value is already at or above
    *new_value* the original profile is returned unchanged.

    Args:
        profile: Current profile.
        pr_key: Personal record key (e.g. "backSquat").
        new_value: Suggested new working max.
        on_date: Date the progression is applied.
        note: Free-text audit note stored with the record.

    Returns:
        A new AthleteProfile, or *profile* itself when nothing changed.
    """
    current = profile.pr_value(pr_key)
    if current is not None and current >= new_value:
        return profile
    records = dict(profile.personal_records)
    records[pr_key] = PersonalRecord(value=new_value, recorded_on=on_date, note=note)
    return dataclasses.replace(profile, personal_records=records)
