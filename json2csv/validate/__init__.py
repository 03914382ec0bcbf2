"""
Validation module - checks option consistency before any conversion work.
"""
from json2csv.validate.validator import (
    FIELD_NAMES_MISMATCH,
    ValidationError,
    validate_field_names,
)

__all__ = [
    "FIELD_NAMES_MISMATCH",
    "ValidationError",
    "validate_field_names",
]
