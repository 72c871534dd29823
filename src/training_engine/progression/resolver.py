"""ProgressionModelResolver — (model id, total weeks) -> per-week load parameters."""

from __future__ import annotations

import functools

from training_engine.models.progression import WeekParams
from training_engine.progression.base import ProgressionModel
from training_engine.progression.registry import ProgressionModelRegistry


class ProgressionModelResolver:
    """Looks up progression models by id and generates their week parameters.

    Usage:
        resolver = ProgressionModelResolver()
        weeks = resolver.resolve("linear", 8)
    """

    def __init__(self, registry: ProgressionModelRegistry | None = None) -> None:
        self.registry = registry or ProgressionModelRegistry()

        # Auto-discover models if using default registry
        if registry is None:
            self.registry.discover_models()

    def model(self, model_id: str) -> ProgressionModel:
        """Return the model for *model_id* (UnknownReferenceError if unknown)."""
        return self.registry.get(model_id)

    def resolve(self, model_id: str, total_weeks: int) -> tuple[WeekParams, ...]:
        """Generate exactly *total_weeks* WeekParams for *model_id*.

        Raises:
            UnknownReferenceError: Unknown model id. There is no fallback model.
            ValidationError: total_weeks is not a positive integer.
        """
        return self.model(model_id).generate(total_weeks)


@functools.lru_cache(maxsize=1)
def default_resolver() -> ProgressionModelResolver:
    """Process-wide resolver over the discovered built-in models."""
    return ProgressionModelResolver()


def resolve(model_id: str, total_weeks: int) -> tuple[WeekParams, ...]:
    """Convenience: resolve with the default resolver."""
    return default_resolver().resolve(model_id, total_weeks)
