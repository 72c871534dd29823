from training_engine.substitution.resolver import ExerciseSubstitutionResolver

__all__ = ["ExerciseSubstitutionResolver"]
