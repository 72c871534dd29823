"""Serialization module — documents in, JSON-ready dicts out."""

from training_engine.serialization.documents import (
    parse_profile,
    parse_readiness_log,
    parse_template,
    parse_workout_log,
)
from training_engine.serialization.program_json import (
    load_points_to_list,
    program_to_dict,
    program_to_json_string,
    readiness_series_to_list,
    readiness_summary_to_dict,
)

__all__ = [
    "load_points_to_list",
    "parse_profile",
    "parse_readiness_log",
    "parse_template",
    "parse_workout_log",
    "program_to_dict",
    "program_to_json_string",
    "readiness_series_to_list",
    "readiness_summary_to_dict",
]
