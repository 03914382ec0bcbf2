"""
Validator - checks fields/fieldNames parity before a conversion starts.

Runs ahead of header derivation and encoding, so a failed check never leaves
partial output behind.
"""
from typing import Optional, Sequence


FIELD_NAMES_MISMATCH = (
    "fieldNames and fields should be of the same length, if fieldNames is provided."
)


class ValidationError(ValueError):
    """Raised when conversion options are inconsistent with each other."""

    pass


def validate_field_names(
    fields: Sequence[str], field_names: Optional[Sequence[str]]
) -> None:
    """
    Ensure header labels line up with the output columns.

    Args:
        fields: Effective field paths (explicit or derived from the first record)
        field_names: Optional header labels

    Raises:
        ValidationError: If field_names is given and its length differs
    """
    if field_names is None:
        return

    if len(field_names) != len(fields):
        raise ValidationError(FIELD_NAMES_MISMATCH)
