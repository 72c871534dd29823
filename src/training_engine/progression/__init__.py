"""Progression models: deterministic week-over-week load rules."""

from training_engine.progression.base import CycleStep, CyclicProgression, ProgressionModel
from training_engine.progression.registry import ProgressionModelRegistry
from training_engine.progression.resolver import (
    ProgressionModelResolver,
    default_resolver,
    resolve,
)

__all__ = [
    "CycleStep",
    "CyclicProgression",
    "ProgressionModel",
    "ProgressionModelRegistry",
    "ProgressionModelResolver",
    "default_resolver",
    "resolve",
]
