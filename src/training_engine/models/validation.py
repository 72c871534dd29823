"""Template validation results."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_engine.models.enums import IssueKind


@dataclass(frozen=True)
class ValidationIssue:
    """A single offending field in a template document."""

    path: str  # e.g. "phases[1].weekly_template[3].exercises[0].exercise_id"
    message: str
    kind: IssueKind = IssueKind.STRUCTURAL


@dataclass(frozen=True)
class ValidationResult:
    """Every issue found in a document, never just the first one."""

    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return len(self.issues) == 0

    @property
    def structural_issues(self) -> tuple[ValidationIssue, ...]:
        return tuple(i for i in self.issues if i.kind == IssueKind.STRUCTURAL)

    @property
    def reference_issues(self) -> tuple[ValidationIssue, ...]:
        return tuple(i for i in self.issues if i.kind == IssueKind.REFERENCE)
