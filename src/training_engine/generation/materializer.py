"""TemplateMaterializer — validated template document -> executable Program.

Pipeline:
    1. validate the document (every issue, never just the first)
    2. parse it into a ProgramTemplate, extending the catalog with its
       custom exercises
    3. expand each phase with BlockPhaseGenerator and concatenate
    4. personalise for the athlete: equipment substitutions, working
       weights from PRs, and HR zones (max HR plus any tested AeT / AnT)
       with a target band for every cardio day
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping

from training_engine.catalog import ExerciseCatalog, default_catalog
from training_engine.errors import UnknownReferenceError, ValidationError
from training_engine.generation.block_phase import BlockPhaseGenerator
from training_engine.generation.validation import validate_template
from training_engine.math.loads import working_weight
from training_engine.math.zones import HeartRateZones, calculate_hr_zones
from training_engine.models.athlete_profile import AthleteProfile
from training_engine.models.enums import (
    BENCHMARK_AEROBIC_THRESHOLD_HR,
    BENCHMARK_ANAEROBIC_THRESHOLD_HR,
    BENCHMARK_MAX_HR,
)
from training_engine.models.program import (
    CardioDay,
    DailyPrescription,
    ExerciseDay,
    ExercisePrescription,
    Program,
    SubstitutionRecord,
    UnresolvedSubstitution,
)
from training_engine.models.validation import ValidationResult
from training_engine.progression.resolver import ProgressionModelResolver, default_resolver
from training_engine.serialization.documents import parse_template
from training_engine.substitution.resolver import ExerciseSubstitutionResolver

logger = logging.getLogger(__name__)


class TemplateMaterializer:
    """Validates template documents and materializes them into Programs.

    Usage:
        materializer = TemplateMaterializer()
        result = materializer.validate(document)
        program = materializer.materialize(document, profile)
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        resolver: ProgressionModelResolver | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.resolver = resolver if resolver is not None else default_resolver()
        self.generator = BlockPhaseGenerator(self.resolver)

    def validate(self, document: Any) -> ValidationResult:
        """Every structural and referential issue in *document*."""
        return validate_template(document, self.catalog, self.resolver.registry)

    def materialize(
        self, document: Mapping[str, Any], profile: AthleteProfile | None = None
    ) -> Program:
        """Build the full Program for *document*.

        Args:
            document: Template document (see generation.validation).
            profile: Athlete to personalise for. Without one, no exercise is
                substituted and no working weights or HR targets are set.

        Raises:
            ValidationError: Any structural issue; carries every issue found.
            UnknownReferenceError: Only referential issues (unknown model,
                exercise or HR zone ids); carries every issue found.
        """
        result = self.validate(document)
        if result.structural_issues:
            for issue in result.issues:
                logger.debug("Template issue at %s: %s", issue.path, issue.message)
            raise ValidationError(
                f"Template has {len(result.issues)} issue(s)", issues=result.issues
            )
        if result.reference_issues:
            raise UnknownReferenceError(
                f"Template references {len(result.reference_issues)} unknown id(s): "
                + "; ".join(f"{i.path}: {i.message}" for i in result.reference_issues),
                issues=result.reference_issues,
            )

        template, catalog = parse_template(document, self.catalog)
        calendar: list[DailyPrescription] = []
        for phase in template.phases:
            calendar.extend(self.generator.expand(phase))

        substitutions: list[SubstitutionRecord] = []
        warnings: list[UnresolvedSubstitution] = []
        hr_zones: HeartRateZones | None = None
        if profile is not None:
            personaliser = _Personaliser(catalog, profile)
            calendar = [personaliser.apply(entry) for entry in calendar]
            substitutions = personaliser.substitutions
            warnings = personaliser.warnings
            hr_zones = personaliser.zones

        program = Program(
            program_id=template.program_id,
            name=template.name,
            phases=template.phases,
            calendar=tuple(calendar),
            description=template.description,
            substitutions=tuple(substitutions),
            warnings=tuple(warnings),
            hr_zones=hr_zones,
        )
        logger.info(
            "Materialized %s: %d weeks, %d days, %d substitutions, %d unresolved",
            program.program_id,
            program.total_weeks,
            len(program.calendar),
            len(program.substitutions),
            len(program.warnings),
        )
        return program


class _Personaliser:
    """Applies one athlete's equipment, PRs and max HR to calendar days."""

    def __init__(self, catalog: ExerciseCatalog, profile: AthleteProfile) -> None:
        self.catalog = catalog
        self.profile = profile
        self.swaps = ExerciseSubstitutionResolver(catalog)
        max_hr = profile.benchmark_value(BENCHMARK_MAX_HR)
        self.zones = (
            calculate_hr_zones(
                max_hr,
                profile.benchmark_value(BENCHMARK_AEROBIC_THRESHOLD_HR),
                profile.benchmark_value(BENCHMARK_ANAEROBIC_THRESHOLD_HR),
            )
            if max_hr
            else None
        )
        self.substitutions: list[SubstitutionRecord] = []
        self.warnings: list[UnresolvedSubstitution] = []
        self._swap_cache: dict[str, str | None] = {}

    def apply(self, entry: DailyPrescription) -> DailyPrescription:
        session = entry.session
        if isinstance(session, ExerciseDay):
            session = dataclasses.replace(
                session,
                exercises=tuple(self._prescription(entry, p) for p in session.exercises),
            )
        elif isinstance(session, CardioDay) and self.zones is not None:
            band = self.zones.zone(session.hr_zone)
            session = dataclasses.replace(session, hr_target=(band.lower, band.upper))
        return dataclasses.replace(entry, session=session)

    def _substitute_id(self, exercise_id: str) -> str | None:
        if exercise_id not in self._swap_cache:
            best = self.swaps.best_swap(exercise_id, self.profile.available_equipment)
            self._swap_cache[exercise_id] = best.exercise_id if best is not None else None
            if best is None:
                logger.warning(
                    "No substitute for %s with equipment %s",
                    exercise_id,
                    sorted(self.profile.available_equipment),
                )
            else:
                logger.debug("Substituting %s -> %s", exercise_id, best.exercise_id)
        return self._swap_cache[exercise_id]

    def _prescription(
        self, entry: DailyPrescription, prescription: ExercisePrescription
    ) -> ExercisePrescription:
        exercise = self.catalog.get(prescription.exercise_id)
        if not exercise.is_fully_equipped(self.profile.available_equipment):
            substitute_id = self._substitute_id(exercise.exercise_id)
            if substitute_id is None:
                self.warnings.append(
                    UnresolvedSubstitution(
                        week=entry.week,
                        day=entry.day,
                        exercise_id=exercise.exercise_id,
                        reason="no exercise with this movement pattern fits the available equipment",
                    )
                )
                return dataclasses.replace(prescription, unresolved=True)
            self.substitutions.append(
                SubstitutionRecord(
                    week=entry.week,
                    day=entry.day,
                    original_exercise_id=exercise.exercise_id,
                    substitute_exercise_id=substitute_id,
                )
            )
            exercise = self.catalog.get(substitute_id)
            prescription = dataclasses.replace(
                prescription,
                exercise_id=substitute_id,
                substituted_from=prescription.exercise_id,
            )

        return dataclasses.replace(
            prescription,
            working_weight=working_weight(
                prescription.intensity_percent, self.profile.pr_value(exercise.pr_key)
            ),
        )
