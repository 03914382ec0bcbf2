"""
Transform module - field path resolution against records.
"""
from json2csv.transform.resolver import MISSING, derive_fields, lookup, resolve_field

__all__ = [
    "MISSING",
    "derive_fields",
    "lookup",
    "resolve_field",
]
