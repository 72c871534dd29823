"""Template document validation.

Walks a plain JSON-like program document and reports every problem found,
each tagged with the dotted path of the offending field. Nothing stops at
the first error, so an author can fix a whole document in one pass.

Unknown progression models, exercise ids and HR zone ids are REFERENCE
issues; everything else is STRUCTURAL.
"""

from __future__ import annotations

from typing import Any, Container, Mapping

from training_engine.catalog import ExerciseCatalog
from training_engine.math.zones import parse_zone_id
from training_engine.models.enums import (
    DAYS_PER_WEEK,
    EXERCISE_SESSION_TYPES,
    MAX_INTENSITY_PERCENT,
    MAX_RPE,
    MIN_INTENSITY_PERCENT,
    MIN_RPE,
    IssueKind,
    MovementPattern,
    SessionType,
)
from training_engine.models.validation import ValidationIssue, ValidationResult

_SESSION_TYPE_IDS = {t.value for t in SessionType}
_PATTERN_IDS = {p.value for p in MovementPattern}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


class TemplateValidator:
    """Collects ValidationIssues for one document.

    Usage:
        result = TemplateValidator(catalog, registry).validate(document)
        if not result.valid:
            for issue in result.issues: ...
    """

    def __init__(self, catalog: ExerciseCatalog, model_ids: Container[str]) -> None:
        self.catalog = catalog
        self.model_ids = model_ids
        self._issues: list[ValidationIssue] = []

    def validate(self, document: Any) -> ValidationResult:
        self._issues = []
        if not isinstance(document, Mapping):
            self._error("", "document must be an object")
            return ValidationResult(tuple(self._issues))

        self._check_meta(document.get("meta"))
        catalog = self._check_custom_exercises(document.get("custom_exercises"))
        self._check_phases(document.get("phases"), catalog)
        return ValidationResult(tuple(self._issues))

    # -- helpers ---------------------------------------------------------

    def _error(self, path: str, message: str, kind: IssueKind = IssueKind.STRUCTURAL) -> None:
        self._issues.append(ValidationIssue(path=path, message=message, kind=kind))

    def _check_meta(self, meta: Any) -> None:
        if not isinstance(meta, Mapping):
            self._error("meta", "is required and must be an object")
            return
        for key in ("id", "name"):
            if not _is_text(meta.get(key)):
                self._error(f"meta.{key}", "is required")

    def _check_custom_exercises(self, customs: Any) -> ExerciseCatalog:
        """Validate declared custom exercises and return the catalog extended by them."""
        catalog = self.catalog
        if customs is None:
            return catalog
        if not isinstance(customs, list):
            self._error("custom_exercises", "must be a list")
            return catalog

        for i, custom in enumerate(customs):
            path = f"custom_exercises[{i}]"
            if not isinstance(custom, Mapping):
                self._error(path, "must be an object")
                continue
            ok = True
            if not _is_text(custom.get("name")):
                self._error(f"{path}.name", "is required")
                ok = False
            if custom.get("pattern") not in _PATTERN_IDS:
                self._error(f"{path}.pattern", f"must be one of {', '.join(sorted(_PATTERN_IDS))}")
                ok = False
            equipment = custom.get("equipment")
            if not isinstance(equipment, list) or not equipment or not all(_is_text(e) for e in equipment):
                self._error(f"{path}.equipment", "must be a non-empty list of equipment tags")
                ok = False
            muscles = custom.get("muscles", [])
            if not isinstance(muscles, list) or not all(_is_text(m) for m in muscles):
                self._error(f"{path}.muscles", "must be a list of muscle names")
                ok = False
            exercise_id = custom.get("id")
            if exercise_id is not None:
                if not _is_text(exercise_id):
                    self._error(f"{path}.id", "must be a non-empty string")
                    ok = False
                elif exercise_id in catalog:
                    self._error(f"{path}.id", f"duplicate exercise id {exercise_id!r}")
                    ok = False
            if ok:
                catalog, _ = catalog.add_custom(
                    name=custom["name"],
                    pattern=MovementPattern(custom["pattern"]),
                    equipment=equipment,
                    muscles=muscles,
                    exercise_id=exercise_id,
                )
        return catalog

    def _check_phases(self, phases: Any, catalog: ExerciseCatalog) -> None:
        if not isinstance(phases, list) or not phases:
            self._error("phases", "must be a non-empty list")
            return

        ranges: list[tuple[int, int, str]] = []
        seen_ids: set[str] = set()
        for i, phase in enumerate(phases):
            path = f"phases[{i}]"
            if not isinstance(phase, Mapping):
                self._error(path, "must be an object")
                continue

            phase_id = phase.get("id")
            if not _is_text(phase_id):
                self._error(f"{path}.id", "is required")
                phase_id = f"#{i}"
            elif phase_id in seen_ids:
                self._error(f"{path}.id", f"duplicate phase id {phase_id!r}")
            seen_ids.add(phase_id)

            if not _is_text(phase.get("name")):
                self._error(f"{path}.name", "is required")

            weeks = phase.get("weeks")
            if (
                not isinstance(weeks, (list, tuple))
                or len(weeks) != 2
                or not all(_is_int(w) for w in weeks)
            ):
                self._error(f"{path}.weeks", "must be [start, end] integers")
            elif not 1 <= weeks[0] <= weeks[1]:
                self._error(f"{path}.weeks", f"need 1 <= start <= end, got {list(weeks)}")
            else:
                ranges.append((weeks[0], weeks[1], phase_id))

            progression = phase.get("progression")
            if not _is_text(progression):
                self._error(f"{path}.progression", "is required")
            elif progression not in self.model_ids:
                self._error(
                    f"{path}.progression",
                    f"unknown progression model {progression!r}",
                    IssueKind.REFERENCE,
                )

            self._check_weekly_template(phase.get("weekly_template"), f"{path}.weekly_template", catalog)

        self._check_coverage(ranges)

    def _check_coverage(self, ranges: list[tuple[int, int, str]]) -> None:
        """Phases must tile weeks 1..N with no gap and no overlap."""
        if not ranges:
            return
        ordered = sorted(ranges)
        first_start, _, first_id = ordered[0]
        if first_start != 1:
            self._error("phases", f"phase {first_id!r} starts at week {first_start}; weeks must start at 1")

        covered_end, covered_by = ordered[0][1], ordered[0][2]
        for start, end, phase_id in ordered[1:]:
            if start <= covered_end:
                self._error(
                    "phases",
                    f"phase {phase_id!r} (weeks {start}-{end}) overlaps phase "
                    f"{covered_by!r} (through week {covered_end})",
                )
            elif start > covered_end + 1:
                self._error(
                    "phases",
                    f"gap between phase {covered_by!r} and phase {phase_id!r}: "
                    f"weeks {covered_end + 1}-{start - 1} are not covered",
                )
            if end > covered_end:
                covered_end, covered_by = end, phase_id

    def _check_weekly_template(self, template: Any, path: str, catalog: ExerciseCatalog) -> None:
        if not isinstance(template, list):
            self._error(path, "must be a list of 7 days")
            return
        if len(template) != DAYS_PER_WEEK:
            self._error(path, f"must have exactly {DAYS_PER_WEEK} days, got {len(template)}")

        days_seen: set[int] = set()
        for i, day in enumerate(template):
            day_path = f"{path}[{i}]"
            if not isinstance(day, Mapping):
                self._error(day_path, "must be an object")
                continue
            number = day.get("day")
            if not _is_int(number) or not 1 <= number <= DAYS_PER_WEEK:
                self._error(f"{day_path}.day", f"must be an integer 1-{DAYS_PER_WEEK}")
            elif number in days_seen:
                self._error(f"{day_path}.day", f"duplicate day {number}")
            else:
                days_seen.add(number)
            self._check_day(day, day_path, catalog)

    def _check_day(self, day: Mapping, path: str, catalog: ExerciseCatalog) -> None:
        day_type = day.get("type")
        if day_type not in _SESSION_TYPE_IDS:
            self._error(f"{path}.type", f"must be one of {', '.join(sorted(_SESSION_TYPE_IDS))}")
            return

        duration = day.get("duration")
        if duration is not None and (not _is_number(duration) or duration < 0):
            self._error(f"{path}.duration", "must be a non-negative number")

        session_type = SessionType(day_type)
        if session_type in EXERCISE_SESSION_TYPES:
            exercises = day.get("exercises")
            if not isinstance(exercises, list) or not exercises:
                self._error(f"{path}.exercises", "must list at least one exercise")
                return
            for i, slot in enumerate(exercises):
                self._check_slot(slot, f"{path}.exercises[{i}]", catalog)
        elif session_type == SessionType.CARDIO:
            zone = day.get("zone")
            if not _is_text(zone):
                self._error(f"{path}.zone", "is required for cardio days")
            elif parse_zone_id(zone) is None:
                self._error(f"{path}.zone", f"unknown HR zone {zone!r}", IssueKind.REFERENCE)

    def _check_slot(self, slot: Any, path: str, catalog: ExerciseCatalog) -> None:
        if not isinstance(slot, Mapping):
            self._error(path, "must be an object")
            return

        exercise_id = slot.get("exercise_id")
        if not _is_text(exercise_id):
            self._error(f"{path}.exercise_id", "is required")
        elif exercise_id not in catalog:
            self._error(f"{path}.exercise_id", f"unknown exercise {exercise_id!r}", IssueKind.REFERENCE)

        sets = slot.get("sets")
        if not _is_int(sets) or sets < 1:
            self._error(f"{path}.sets", "must be a positive integer")

        reps = slot.get("reps")
        if reps is not None and not (_is_int(reps) or isinstance(reps, str)):
            self._error(f"{path}.reps", "must be a string or integer")

        rpe = slot.get("rpe")
        if rpe is not None and (not _is_number(rpe) or not MIN_RPE <= rpe <= MAX_RPE):
            self._error(f"{path}.rpe", f"must be between {MIN_RPE:g} and {MAX_RPE:g}")

        intensity = slot.get("intensity")
        if intensity is not None and (
            not _is_number(intensity) or not MIN_INTENSITY_PERCENT <= intensity <= MAX_INTENSITY_PERCENT
        ):
            self._error(
                f"{path}.intensity",
                f"must be between {MIN_INTENSITY_PERCENT:g} and {MAX_INTENSITY_PERCENT:g}",
            )

        rest = slot.get("rest")
        if rest is not None and (not _is_int(rest) or rest < 0):
            self._error(f"{path}.rest", "must be a non-negative integer (seconds)")

        ceiling = slot.get("rep_ceiling")
        if ceiling is not None and (not _is_int(ceiling) or ceiling < 1):
            self._error(f"{path}.rep_ceiling", "must be a positive integer")


def validate_template(
    document: Any, catalog: ExerciseCatalog, model_ids: Container[str]
) -> ValidationResult:
    """Convenience wrapper around TemplateValidator."""
    return TemplateValidator(catalog, model_ids).validate(document)
