"""Custom exception hierarchy for the training engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from training_engine.models.validation import ValidationIssue


class TrainingEngineError(Exception):
    """Base exception for all training_engine errors."""


class ValidationError(TrainingEngineError):
    """Malformed or inconsistent template/profile input.

    Always carries every violated field, never just the first one.
    """

    def __init__(
        self,
        message: str,
        issues: tuple[ValidationIssue, ...] = (),
    ) -> None:
        super().__init__(message)
        self.issues = tuple(issues)

    def __str__(self) -> str:
        base = super().__str__()
        if not self.issues:
            return base
        details = "; ".join(f"{i.path}: {i.message}" for i in self.issues)
        return f"{base} ({details})"


class UnknownReferenceError(TrainingEngineError, KeyError):
    """Unknown progression model, exercise, or HR zone id. Fatal, never retried."""

    def __init__(
        self,
        message: str,
        issues: tuple[ValidationIssue, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.issues = tuple(issues)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message
