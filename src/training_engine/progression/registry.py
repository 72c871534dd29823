"""Progression model registry with auto-discovery of ProgressionModel subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from training_engine.errors import UnknownReferenceError
from training_engine.progression.base import ProgressionModel

logger = logging.getLogger(__name__)


class ProgressionModelRegistry:
    """Discovers and manages all ProgressionModel implementations.

    Auto-discovers models by scanning the progression/models/ package for
    concrete subclasses of ProgressionModel that declare a ``model_id``.
    New models are added by dropping a .py file into that package.
    Instances with non-default parameters can be registered explicitly and
    replace the discovered default with the same id.
    """

    def __init__(self) -> None:
        self._models: dict[str, ProgressionModel] = {}

    def discover_models(self) -> None:
        """Scan the models package and register every ProgressionModel subclass."""
        import training_engine.progression.models as models_pkg

        self._scan_package(models_pkg.__name__, list(models_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        for _importer, module_name, _is_pkg in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, ProgressionModel)
                    and getattr(attr, "model_id", None)
                    and not getattr(attr, "__abstractmethods__", set())
                    and attr.model_id not in self._models
                ):
                    self.register(attr())
                    logger.debug("Discovered progression model %s", attr.model_id)

    def register(self, model: ProgressionModel) -> None:
        """Register a model instance by its model_id."""
        self._models[model.model_id] = model

    def find(self, model_id: str) -> ProgressionModel | None:
        """Retrieve a model by id, or None."""
        return self._models.get(model_id)

    def get(self, model_id: str) -> ProgressionModel:
        """Retrieve a model by id.

        Raises:
            UnknownReferenceError: If no model is registered under *model_id*.
        """
        model = self._models.get(model_id)
        if model is None:
            raise UnknownReferenceError(
                f"Unknown progression model {model_id!r}; "
                f"known models: {', '.join(sorted(self._models))}"
            )
        return model

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._models

    @property
    def model_ids(self) -> list[str]:
        """List all registered model IDs."""
        return list(self._models.keys())
