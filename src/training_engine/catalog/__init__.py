"""Exercise catalog — static reference data shared by generation and substitution."""

from training_engine.catalog.catalog import ExerciseCatalog, default_catalog

__all__ = ["ExerciseCatalog", "default_catalog"]
